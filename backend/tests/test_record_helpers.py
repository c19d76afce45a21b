"""Reusable test helpers: seeded users, auth headers and valid payloads per module.

Imported by the module-level tests; pytest collects nothing from here.
"""
from __future__ import annotations
from typing import Dict
from flask_jwt_extended import create_access_token
from sqlalchemy import select
from prodtrack import get_db
from prodtrack.models.audit import AuditLog
from prodtrack.models.authz import User

DEFAULT_PASSWORD = 'Str0ng!Pass'

# ---------- Auth Helpers ---------- #

def ensure_user(email: str, role: str, name: str = None, password: str = DEFAULT_PASSWORD) -> User:
    session = get_db()
    u = session.scalar(select(User).where(User.email == email))
    if not u:
        u = User(name=name or email.split('@')[0], email=email, role=role, password_hash='')
        u.set_password(password)
        session.add(u); session.commit(); session.refresh(u)
    return u


def jwt_headers(user: User) -> Dict[str, str]:
    token = create_access_token(identity=str(user.id), additional_claims={'role': user.role, 'email': user.email})
    return {'Authorization': f'Bearer {token}'}

# ---------- Valid Payloads ---------- #

VALID_PAYLOADS = {
    'employees': {'name': 'Maria Souza', 'sector': 'Pães', 'role': 'Padeira'},
    'products': {'name': 'Pão Francês', 'sector': 'PAES', 'unit': 'KG', 'yield': 1.2, 'unitCost': 3.5},
    'supplies': {'name': 'Farinha de Trigo', 'sector': 'Pães', 'unit': 'KG', 'unitCost': 4.2},
    'machines': {'name': 'Forno Turbo', 'code': 'ft-01', 'sector': 'Pães'},
    'production': {
        'mesAno': '03/2024', 'sector': 'Confeitaria', 'produto': 'Bolo de Cenoura', 'metaMes': 1000,
        'dailyProduction': [{'programado': 50, 'realizado': 45}, {'programado': 50, 'realizado': 52}],
        'totalProgramado': 100, 'totalRealizado': 97, 'velocidade': 0.97,
    },
    'losses': {
        'date': '2024-03-10', 'sector': 'Salgado', 'product': 'Coxinha', 'lossType': 'Massa',
        'quantity': 10, 'unit': 'KG', 'unitCost': 2.5, 'totalCost': 25,
    },
    'errors': {
        'date': '2024-03-11', 'sector': 'Confeitaria', 'product': 'Torta de Limão',
        'description': 'Massa queimada no forno', 'category': 'Operacional', 'cost': 40,
    },
    'maintenance': {
        'date': '2024-03-12', 'sector': 'Manutenção', 'machine': 'Forno Turbo', 'requester': 'João Lima',
        'problem': 'Resistência queimada', 'startTime': '08:00', 'endTime': '10:30',
        'durationHours': 2.5, 'status': 'Em Aberto',
    },
    'absenteeism': {
        'employeeName': 'Carlos Dias', 'sector': 'Embaladora', 'date': '2024-03-13',
        'absenceType': 'Atestado', 'daysAbsent': 2,
    },
}


def payload(module: str, **overrides) -> dict:
    body = dict(VALID_PAYLOADS[module])
    body.update(overrides)
    return body


def create_record(client, module: str, headers, **overrides) -> dict:
    resp = client.post(f'/api/{module}', json=payload(module, **overrides), headers=headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()['data']


def audit_entries(app, **filters):
    with app.app_context():
        stmt = select(AuditLog).order_by(AuditLog.id.asc())
        for key, value in filters.items():
            stmt = stmt.where(getattr(AuditLog, key) == value)
        return get_db().scalars(stmt).all()


__all__ = ['ensure_user', 'jwt_headers', 'VALID_PAYLOADS', 'payload', 'create_record', 'audit_entries', 'DEFAULT_PASSWORD']
