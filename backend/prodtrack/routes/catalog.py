from __future__ import annotations
from prodtrack.constants.permissions import CADASTRO, MODULE_ENTITY_CLASS
from prodtrack.decorators.auth import require_auth
from prodtrack.routes.records import make_record_blueprint
from prodtrack.schemas.records import (
    EmployeeCreate, EmployeeUpdate, MachineCreate, MachineUpdate, ProductCreate, ProductUpdate,
    SupplyCreate, SupplyUpdate,
)
from prodtrack.services.catalog import employees, machines, products, supplies

emp_bp = make_record_blueprint('employees', employees, CADASTRO, EmployeeCreate, EmployeeUpdate, {
    'created': 'Funcionário criado com sucesso',
    'updated': 'Funcionário atualizado com sucesso',
    'deleted': 'Funcionário removido com sucesso',
})

prod_bp = make_record_blueprint('products', products, CADASTRO, ProductCreate, ProductUpdate, {
    'created': 'Produto criado com sucesso',
    'updated': 'Produto atualizado com sucesso',
    'deleted': 'Produto removido com sucesso',
})

supply_bp = make_record_blueprint('supplies', supplies, CADASTRO, SupplyCreate, SupplyUpdate, {
    'created': 'Insumo criado com sucesso',
    'updated': 'Insumo atualizado com sucesso',
    'deleted': 'Insumo removido com sucesso',
})

mach_bp = make_record_blueprint('machines', machines, MODULE_ENTITY_CLASS['machines'], MachineCreate, MachineUpdate, {
    'created': 'Máquina criada com sucesso',
    'updated': 'Máquina atualizada com sucesso',
    'deleted': 'Máquina removida com sucesso',
})


@emp_bp.get('/stats')
@require_auth
def employee_stats():
    return {'success': True, 'data': employees.stats()}


@emp_bp.get('/sector/<sector>')
@require_auth
def employees_by_sector(sector):
    return {'success': True, 'data': [employees.to_json(e) for e in employees.list_by_sector(sector)]}


@prod_bp.get('/sector/<sector>')
@require_auth
def products_by_sector(sector):
    return {'success': True, 'data': [products.to_json(p) for p in products.list_by_sector(sector)]}


@supply_bp.get('/sector/<sector>')
@require_auth
def supplies_by_sector(sector):
    return {'success': True, 'data': [supplies.to_json(s) for s in supplies.list_by_sector(sector)]}


@mach_bp.get('/sector/<sector>')
@require_auth
def machines_by_sector(sector):
    return {'success': True, 'data': [machines.to_json(m) for m in machines.list_by_sector(sector)]}


@mach_bp.get('/code/<code>')
@require_auth
def machine_by_code(code):
    return {'success': True, 'data': machines.to_json(machines.get_by_code(code))}
