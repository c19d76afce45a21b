"""Payload schemas for every tracked module (create + partial update)."""
from typing import Annotated, List

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field

from .common import (
    MONTH_YEAR, TIME_HHMM, DateField, EnumField, FieldSpec, Flag, NonNegative, OptionalText,
    Positive, PositiveInt, Text, build_schemas,
)

Name = Text(2, 100)
Sector = EnumField('sector')
Unit = EnumField('unit')
Amount = NonNegative()


def _upper(value: str) -> str:
    return value.upper()


class DailyProduction(BaseModel):
    model_config = ConfigDict(extra='forbid')
    programado: Amount
    realizado: Amount


EmployeeCreate, EmployeeUpdate = build_schemas('Employee', {
    'name': FieldSpec(Name),
    'sector': FieldSpec(Sector),
    'role': FieldSpec(OptionalText(100), required=False),
})

ProductCreate, ProductUpdate = build_schemas('Product', {
    'name': FieldSpec(Name),
    'sector': FieldSpec(Sector),
    'unit': FieldSpec(Unit),
    'yield_': FieldSpec(Positive(), required=False, alias='yield'),
    'unit_cost': FieldSpec(NonNegative(), required=False,
                           validation_alias=AliasChoices('unitCost', 'unit_cost')),
    'notes': FieldSpec(OptionalText(500), required=False),
})

SupplyCreate, SupplyUpdate = build_schemas('Supply', {
    'name': FieldSpec(Name),
    'sector': FieldSpec(Sector),
    'unit': FieldSpec(Unit),
    'unit_cost': FieldSpec(NonNegative(), validation_alias=AliasChoices('unitCost', 'unit_cost')),
    'notes': FieldSpec(OptionalText(500), required=False),
})

MachineCreate, MachineUpdate = build_schemas('Machine', {
    'name': FieldSpec(Name),
    'code': FieldSpec(Annotated[str, Field(min_length=2, max_length=50), AfterValidator(_upper)]),
    'sector': FieldSpec(Sector),
})

ProductionCreate, ProductionUpdate = build_schemas('Production', {
    'mes_ano': FieldSpec(Text(pattern=MONTH_YEAR)),
    'sector': FieldSpec(Sector),
    'produto': FieldSpec(Name),
    'meta_mes': FieldSpec(NonNegative()),
    'daily_production': FieldSpec(List[DailyProduction]),
    'total_programado': FieldSpec(NonNegative()),
    'total_realizado': FieldSpec(NonNegative()),
    'velocidade': FieldSpec(NonNegative()),
})

LossCreate, LossUpdate = build_schemas('Loss', {
    'date': FieldSpec(DateField),
    'sector': FieldSpec(Sector),
    'product': FieldSpec(Name),
    'loss_type': FieldSpec(EnumField('lossType')),
    'quantity': FieldSpec(Positive()),
    'unit': FieldSpec(Unit),
    'unit_cost': FieldSpec(NonNegative()),
    'total_cost': FieldSpec(NonNegative()),
})

ErrorCreate, ErrorUpdate = build_schemas('ProductionError', {
    'date': FieldSpec(DateField),
    'sector': FieldSpec(Sector),
    'product': FieldSpec(Name),
    'description': FieldSpec(Text(5, 500)),
    'action': FieldSpec(OptionalText(500), required=False),
    'category': FieldSpec(EnumField('category')),
    'cost': FieldSpec(NonNegative()),
    'wasted_qty': FieldSpec(NonNegative(), required=False),
})

MaintenanceCreate, MaintenanceUpdate = build_schemas('Maintenance', {
    'date': FieldSpec(DateField),
    'sector': FieldSpec(Sector),
    'machine': FieldSpec(Name),
    'requester': FieldSpec(Name),
    'technician': FieldSpec(OptionalText(100), required=False),
    'problem': FieldSpec(Text(5, 500)),
    'solution': FieldSpec(OptionalText(500), required=False),
    'start_time': FieldSpec(Text(pattern=TIME_HHMM)),
    'end_time': FieldSpec(Text(pattern=TIME_HHMM)),
    'duration_hours': FieldSpec(NonNegative()),
    'status': FieldSpec(EnumField('status')),
})

AbsenteeismCreate, AbsenteeismUpdate = build_schemas('Absenteeism', {
    'employee_name': FieldSpec(Name),
    'sector': FieldSpec(Sector),
    'date': FieldSpec(DateField),
    'absence_type': FieldSpec(EnumField('absenceType')),
    'days_absent': FieldSpec(PositiveInt()),
})

ObservationCreate, ObservationUpdate = build_schemas('ProductionObservation', {
    'date': FieldSpec(DateField),
    'sector': FieldSpec(Sector),
    'product': FieldSpec(Name),
    'observation_type': FieldSpec(Annotated[str, Field(min_length=2, max_length=100), AfterValidator(_upper)]),
    'description': FieldSpec(Annotated[str, Field(min_length=10, max_length=5000), AfterValidator(_upper)]),
    'had_impact': FieldSpec(Flag),
})

__all__ = [
    'EmployeeCreate', 'EmployeeUpdate', 'ProductCreate', 'ProductUpdate', 'SupplyCreate', 'SupplyUpdate', 'MachineCreate', 'MachineUpdate',
    'ProductionCreate', 'ProductionUpdate', 'LossCreate', 'LossUpdate', 'ErrorCreate', 'ErrorUpdate',
    'MaintenanceCreate', 'MaintenanceUpdate', 'AbsenteeismCreate', 'AbsenteeismUpdate',
    'ObservationCreate', 'ObservationUpdate', 'DailyProduction',
]
