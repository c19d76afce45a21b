from __future__ import annotations
from sqlalchemy import select

from prodtrack.db import get_db
from prodtrack.errors import NotFound
from prodtrack.models.absenteeism import Absenteeism
from prodtrack.models.loss import Loss
from prodtrack.models.maintenance import Maintenance
from prodtrack.models.product import Product
from prodtrack.models.production_error import ProductionError
from prodtrack.models.production_observation import ProductionObservation
from prodtrack.models.production_speed import ProductionSpeed
from prodtrack.services.records import RecordService


def _midday(dt):
    return dt.replace(hour=12, minute=0, second=0, microsecond=0)


class ObservationService(RecordService):
    """Observations must reference an active product registered in the same sector."""

    def _ensure_product(self, product: str, sector: str):
        found = get_db().execute(
            select(Product.id).where(
                Product.name == product,
                Product.sector == sector,
                Product.deleted_at.is_(None),
            )
        ).first()
        if found is None:
            raise NotFound(f'Produto "{product}" não encontrado no setor {sector}')

    def before_create(self, data):
        self._ensure_product(data['product'], data['sector'])
        data['date'] = _midday(data['date'])
        return data

    def before_update(self, record_id, data):
        if 'product' in data or 'sector' in data:
            existing = self.get_by_id(record_id)
            self._ensure_product(data.get('product', existing.product), data.get('sector', existing.sector))
        if 'date' in data:
            data['date'] = _midday(data['date'])
        return data


production = RecordService(
    ProductionSpeed, 'production',
    order_by=(ProductionSpeed.created_at.desc(), ProductionSpeed.sector.asc(), ProductionSpeed.produto.asc()),
    snapshot_fields=('mes_ano', 'sector', 'produto'),
    not_found_message='Registro de produção não encontrado',
)

losses = RecordService(
    Loss, 'losses',
    order_by=(Loss.date.desc(), Loss.sector.asc(), Loss.product.asc()),
    snapshot_fields=('date', 'sector', 'product', 'loss_type', 'quantity', 'total_cost'),
    not_found_message='Perda não encontrada',
)

errors = RecordService(
    ProductionError, 'errors',
    soft_delete=False,
    order_by=(ProductionError.date.desc(), ProductionError.sector.asc(), ProductionError.product.asc()),
    snapshot_fields=('date', 'sector', 'product', 'category', 'cost'),
    not_found_message='Erro não encontrado',
)

maintenance = RecordService(
    Maintenance, 'maintenance',
    order_by=(Maintenance.date.desc(), Maintenance.sector.asc(), Maintenance.machine.asc()),
    snapshot_fields=('date', 'sector', 'machine', 'problem', 'status'),
    not_found_message='Manutenção não encontrada',
)

absenteeism = RecordService(
    Absenteeism, 'absenteeism',
    order_by=(Absenteeism.date.desc(), Absenteeism.sector.asc(), Absenteeism.employee_name.asc()),
    snapshot_fields=('employee_name', 'date', 'absence_type', 'days_absent'),
    not_found_message='Registro de absenteísmo não encontrado',
)

observations = ObservationService(
    ProductionObservation, 'production-observations',
    order_by=(ProductionObservation.date.desc(), ProductionObservation.sector.asc(),
              ProductionObservation.product.asc()),
    snapshot_fields=('date', 'product', 'sector', 'observation_type', 'had_impact'),
    not_found_message='Observação não encontrada',
)

__all__ = ['ObservationService', 'production', 'losses', 'errors', 'maintenance', 'absenteeism', 'observations']
