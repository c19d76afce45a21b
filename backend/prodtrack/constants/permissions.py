"""Central role / entity-class / action definitions.

The policy is a declarative table: POLICY[entity_class][action] -> roles allowed.
Extend cautiously; never rename codes silently since they are embedded in issued tokens.
"""
from __future__ import annotations
from typing import Dict, FrozenSet, List

ROLE_ADMIN = 'ADMIN'
ROLE_SUPERVISOR = 'SUPERVISOR'
ROLE_LIDER_PRODUCAO = 'LIDER_PRODUCAO'
ROLE_ESPECTADOR = 'ESPECTADOR'
ALL_ROLES = (ROLE_ADMIN, ROLE_SUPERVISOR, ROLE_LIDER_PRODUCAO, ROLE_ESPECTADOR)
DEFAULT_ROLE = ROLE_ESPECTADOR

ACTION_READ = 'read'
ACTION_CREATE = 'create'
ACTION_EDIT = 'edit'
ACTION_DELETE = 'delete'
ALL_ACTIONS = (ACTION_READ, ACTION_CREATE, ACTION_EDIT, ACTION_DELETE)

# Entity classes group modules that share the same access rules
PRODUCTION_RECORD = 'PRODUCTION_RECORD'
CADASTRO = 'CADASTRO'
USERS = 'USERS'
AUDIT = 'AUDIT'

_EVERYONE = frozenset(ALL_ROLES)
_OPERATORS = frozenset({ROLE_ADMIN, ROLE_SUPERVISOR, ROLE_LIDER_PRODUCAO})
_MANAGERS = frozenset({ROLE_ADMIN, ROLE_SUPERVISOR})
_ADMINS = frozenset({ROLE_ADMIN})

POLICY: Dict[str, Dict[str, FrozenSet[str]]] = {
    PRODUCTION_RECORD: {
        ACTION_READ: _EVERYONE,
        ACTION_CREATE: _OPERATORS,
        ACTION_EDIT: _OPERATORS,
        ACTION_DELETE: _OPERATORS,
    },
    # Employee / product / supply registry: LIDER_PRODUCAO can read but not maintain it
    CADASTRO: {
        ACTION_READ: _EVERYONE,
        ACTION_CREATE: _MANAGERS,
        ACTION_EDIT: _MANAGERS,
        ACTION_DELETE: _MANAGERS,
    },
    # account administration; self-registration lives under /api/auth
    USERS: {
        ACTION_READ: _ADMINS,
        ACTION_DELETE: _ADMINS,
    },
    AUDIT: {
        ACTION_READ: _ADMINS,
    },
}

# module path segment -> entity class
MODULE_ENTITY_CLASS: Dict[str, str] = {
    'employees': CADASTRO,
    'products': CADASTRO,
    'supplies': CADASTRO,
    'machines': PRODUCTION_RECORD,
    'production': PRODUCTION_RECORD,
    'losses': PRODUCTION_RECORD,
    'errors': PRODUCTION_RECORD,
    'maintenance': PRODUCTION_RECORD,
    'absenteeism': PRODUCTION_RECORD,
    'production-observations': PRODUCTION_RECORD,
    'users': USERS,
    'audit-logs': AUDIT,
}

__all__ = [
    'ROLE_ADMIN', 'ROLE_SUPERVISOR', 'ROLE_LIDER_PRODUCAO', 'ROLE_ESPECTADOR', 'ALL_ROLES', 'DEFAULT_ROLE',
    'ACTION_READ', 'ACTION_CREATE', 'ACTION_EDIT', 'ACTION_DELETE', 'ALL_ACTIONS',
    'PRODUCTION_RECORD', 'CADASTRO', 'USERS', 'AUDIT', 'POLICY', 'MODULE_ENTITY_CLASS',
]
