"""Request validation helpers.

``validate_payload`` runs a pydantic schema and converts failures into a single
400 carrying one ``{field, code, message}`` entry per problem, so the client
sees every broken field at once instead of the first one.
"""
from __future__ import annotations
import re
from typing import Any, Dict, List, Type

from pydantic import BaseModel, ValidationError

from prodtrack.errors import InvalidIdentifier, ValidationFailed

ID_PATTERN = re.compile(r'^\d+$')

# pydantic error type -> wire code; anything else is upper-cased as-is
ERROR_CODES = {
    'missing': 'REQUIRED',
    'extra_forbidden': 'UNEXPECTED_FIELD',
    'unknown_enum_value': 'UNKNOWN_ENUM_VALUE',
}
ERROR_MESSAGES = {
    'missing': 'Campo obrigatório',
    'extra_forbidden': 'Campo não permitido',
}


def _field_name(loc) -> str:
    return '.'.join(str(part) for part in loc)


def format_errors(exc: ValidationError) -> List[Dict[str, str]]:
    details = []
    for err in exc.errors(include_url=False):
        kind = err['type']
        details.append({
            'field': _field_name(err['loc']),
            'code': ERROR_CODES.get(kind, kind.upper()),
            'message': ERROR_MESSAGES.get(kind, err['msg']),
        })
    return details


def validate_payload(schema: Type[BaseModel], payload: Any) -> Dict[str, Any]:
    """Validate ``payload`` and return only the supplied, non-null fields keyed by attribute name."""
    if not isinstance(payload, dict):
        raise ValidationFailed('Corpo da requisição deve ser um objeto JSON')
    try:
        model = schema.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailed(details=format_errors(e))
    data = model.model_dump(exclude_unset=True)
    return {k: v for k, v in data.items() if v is not None}


def parse_id(raw: Any) -> int:
    if not isinstance(raw, str) or not ID_PATTERN.match(raw):
        raise InvalidIdentifier(details=[{'field': 'id', 'code': 'INVALID_IDENTIFIER', 'message': 'ID deve ser um número'}])
    return int(raw)


__all__ = ['validate_payload', 'format_errors', 'parse_id', 'ERROR_CODES']
