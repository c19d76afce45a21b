"""Reusable pydantic field types for record payloads.

Each entity declares its fields once (``FieldSpec``); ``build_schemas`` derives
the strict create model and the all-optional update model from the same
declarations so the two never drift apart.
"""
from __future__ import annotations
import re
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, create_model
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from prodtrack.constants.enums import CONCEPTS, canonicalize

DATE_ONLY = re.compile(r'^\d{4}-\d{2}-\d{2}$')
TIME_HHMM = r'^([01]\d|2[0-3]):[0-5]\d$'
MONTH_YEAR = r'^(0[1-9]|1[0-2])/\d{4}$'


class RecordSchema(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
        alias_generator=to_camel,
        str_strip_whitespace=True,
    )


def _enum_validator(concept: str):
    allowed = ', '.join(CONCEPTS[concept])

    def check(value: Any) -> str:
        code = canonicalize(concept, value)
        if code is None:
            raise PydanticCustomError(
                'unknown_enum_value',
                'Valor inválido. Valores aceitos: {allowed}',
                {'allowed': allowed},
            )
        return code
    return check


def EnumField(concept: str):
    return Annotated[str, BeforeValidator(_enum_validator(concept))]


def _number(value: Any) -> Any:
    # JSON numbers only: "10" and true are rejected instead of coerced
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError('number_type', 'Deve ser um número')
    return value


def _integer(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PydanticCustomError('int_type', 'Deve ser um número inteiro')
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_datetime(value: Any) -> datetime:
    """Accept ``YYYY-MM-DD`` (UTC midnight) or an ISO timestamp; always return aware UTC."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        raw = value.strip()
        try:
            if DATE_ONLY.match(raw):
                dt = datetime.strptime(raw, '%Y-%m-%d')
            else:
                dt = datetime.fromisoformat(raw.replace('Z', '+00:00'))
        except ValueError:
            raise PydanticCustomError('invalid_date', 'Data inválida')
    else:
        raise PydanticCustomError('invalid_date', 'Data inválida')
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _date(value: Any) -> datetime:
    return parse_datetime(value)


def NonNegative():
    return Annotated[float, BeforeValidator(_number), Field(ge=0, allow_inf_nan=False)]


def Positive():
    return Annotated[float, BeforeValidator(_number), Field(gt=0, allow_inf_nan=False)]


def PositiveInt():
    return Annotated[int, BeforeValidator(_integer), Field(gt=0)]


def Text(min_length: Optional[int] = None, max_length: Optional[int] = None, pattern: Optional[str] = None):
    return Annotated[str, Field(min_length=min_length, max_length=max_length, pattern=pattern)]


def OptionalText(max_length: int):
    return Annotated[Optional[Annotated[str, Field(max_length=max_length)]], BeforeValidator(_blank_to_none)]


DateField = Annotated[datetime, BeforeValidator(_date)]
Flag = StrictBool


class FieldSpec:
    """One payload field: its annotation, whether create requires it, extra Field kwargs."""

    def __init__(self, annotation, required: bool = True, **field_kwargs):
        self.annotation = annotation
        self.required = required
        self.field_kwargs = field_kwargs


def build_schemas(name: str, fields: Dict[str, FieldSpec],
                  base: Type[BaseModel] = RecordSchema) -> Tuple[Type[BaseModel], Type[BaseModel]]:
    create_fields = {}
    update_fields = {}
    for field_name, spec in fields.items():
        create_default = ... if spec.required else None
        create_fields[field_name] = (spec.annotation, Field(create_default, **spec.field_kwargs))
        # Defaults are not validated, so omitted fields stay None while an explicit null
        # is still checked against the annotation.
        update_fields[field_name] = (spec.annotation, Field(None, **spec.field_kwargs))
    create = create_model(f'{name}Create', __base__=base, **create_fields)
    update = create_model(f'{name}Update', __base__=base, **update_fields)
    return create, update


__all__ = [
    'RecordSchema', 'EnumField', 'NonNegative', 'Positive', 'PositiveInt', 'Text', 'OptionalText',
    'DateField', 'Flag', 'FieldSpec', 'build_schemas', 'parse_datetime', 'TIME_HHMM', 'MONTH_YEAR',
]
