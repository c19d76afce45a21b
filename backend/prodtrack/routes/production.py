from __future__ import annotations
from prodtrack.constants.permissions import PRODUCTION_RECORD
from prodtrack.routes.records import make_record_blueprint
from prodtrack.schemas.records import (
    AbsenteeismCreate, AbsenteeismUpdate, ErrorCreate, ErrorUpdate, LossCreate, LossUpdate,
    MaintenanceCreate, MaintenanceUpdate, ObservationCreate, ObservationUpdate,
    ProductionCreate, ProductionUpdate,
)
from prodtrack.services import production as svc

speed_bp = make_record_blueprint('production', svc.production, PRODUCTION_RECORD, ProductionCreate, ProductionUpdate, {
    'created': 'Registro de produção criado com sucesso',
    'updated': 'Registro de produção atualizado com sucesso',
    'deleted': 'Registro de produção removido com sucesso',
})

loss_bp = make_record_blueprint('losses', svc.losses, PRODUCTION_RECORD, LossCreate, LossUpdate, {
    'created': 'Perda registrada com sucesso',
    'updated': 'Perda atualizada com sucesso',
    'deleted': 'Perda removida com sucesso',
})

error_bp = make_record_blueprint('errors', svc.errors, PRODUCTION_RECORD, ErrorCreate, ErrorUpdate, {
    'created': 'Erro registrado com sucesso',
    'updated': 'Erro atualizado com sucesso',
    'deleted': 'Erro excluído com sucesso',
})

maint_bp = make_record_blueprint('maintenance', svc.maintenance, PRODUCTION_RECORD, MaintenanceCreate, MaintenanceUpdate, {
    'created': 'Manutenção registrada com sucesso',
    'updated': 'Manutenção atualizada com sucesso',
    'deleted': 'Manutenção removida com sucesso',
})

absent_bp = make_record_blueprint('absenteeism', svc.absenteeism, PRODUCTION_RECORD, AbsenteeismCreate, AbsenteeismUpdate, {
    'created': 'Absenteísmo registrado com sucesso',
    'updated': 'Absenteísmo atualizado com sucesso',
    'deleted': 'Absenteísmo removido com sucesso',
})

obs_bp = make_record_blueprint('production-observations', svc.observations, PRODUCTION_RECORD, ObservationCreate, ObservationUpdate, {
    'created': 'Observação registrada com sucesso',
    'updated': 'Observação atualizada com sucesso',
    'deleted': 'Observação removida com sucesso',
})

# url prefix -> blueprint, registered under /api by create_app
PRODUCTION_BLUEPRINTS = {
    'production': speed_bp,
    'losses': loss_bp,
    'errors': error_bp,
    'maintenance': maint_bp,
    'absenteeism': absent_bp,
    'production-observations': obs_bp,
}
