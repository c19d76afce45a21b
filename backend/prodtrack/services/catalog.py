from __future__ import annotations
from typing import Any, Dict, Optional

from sqlalchemy import func, select

from prodtrack.db import get_db
from prodtrack.errors import Conflict, NotFound
from prodtrack.models.employee import Employee
from prodtrack.models.machine import Machine
from prodtrack.models.product import Product
from prodtrack.models.supply import Supply
from prodtrack.services.records import RecordService


class EmployeeService(RecordService):
    def stats(self) -> Dict[str, Any]:
        session = get_db()
        rows = session.execute(
            select(Employee.sector, func.count(Employee.id))
            .where(Employee.deleted_at.is_(None))
            .group_by(Employee.sector)
            .order_by(Employee.sector.asc())
        ).all()
        by_sector = {sector: count for sector, count in rows}
        return {'total': sum(by_sector.values()), 'bySector': by_sector}


class MachineService(RecordService):
    """Machines are addressed by a short code that must stay unique among active rows."""

    def _code_taken(self, code: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(Machine.id).where(Machine.code == code, Machine.deleted_at.is_(None))
        if exclude_id is not None:
            stmt = stmt.where(Machine.id != exclude_id)
        return get_db().execute(stmt).first() is not None

    def before_create(self, data):
        if self._code_taken(data['code']):
            raise Conflict(f"Código {data['code']} já está em uso")
        return data

    def before_update(self, record_id, data):
        if 'code' in data and self._code_taken(data['code'], exclude_id=record_id):
            raise Conflict(f"Código {data['code']} já está em uso")
        return data

    def get_by_code(self, code: str) -> Machine:
        row = get_db().scalar(
            select(Machine).where(Machine.code == code.strip().upper(), Machine.deleted_at.is_(None))
        )
        if row is None:
            raise NotFound('Máquina não encontrada')
        return row


employees = EmployeeService(
    Employee, 'employees',
    order_by=(Employee.sector.asc(), Employee.name.asc()),
    snapshot_fields=('name', 'sector', 'role'),
    not_found_message='Funcionário não encontrado',
)

products = RecordService(
    Product, 'products',
    order_by=(Product.sector.asc(), Product.name.asc()),
    snapshot_fields=('name', 'sector', 'unit'),
    not_found_message='Produto não encontrado',
)

supplies = RecordService(
    Supply, 'supplies',
    order_by=(Supply.sector.asc(), Supply.name.asc()),
    snapshot_fields=('name', 'sector', 'unit', 'unit_cost'),
    not_found_message='Insumo não encontrado',
)

machines = MachineService(
    Machine, 'machines',
    order_by=(Machine.sector.asc(), Machine.name.asc()),
    snapshot_fields=('name', 'code', 'sector'),
    not_found_message='Máquina não encontrada',
)

__all__ = ['EmployeeService', 'MachineService', 'employees', 'products', 'supplies', 'machines']
