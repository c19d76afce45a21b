from __future__ import annotations
import logging
from typing import Optional

from flask_jwt_extended import get_jwt, get_jwt_identity

from prodtrack.constants.permissions import POLICY
from prodtrack.errors import Forbidden

logger = logging.getLogger(__name__)


def is_allowed(role: Optional[str], entity_class: str, action: str) -> bool:
    if not role:
        return False
    return role in POLICY.get(entity_class, {}).get(action, frozenset())


def current_role() -> Optional[str]:
    return get_jwt().get('role')


def current_user_id() -> Optional[int]:
    """Numeric id of the verified token's subject (tokens carry it as a string)."""
    identity = get_jwt_identity()
    return int(identity) if identity is not None else None


def assert_allowed(entity_class: str, action: str):
    claims = get_jwt()
    role = claims.get('role')
    if not is_allowed(role, entity_class, action):
        logger.warning('Access denied: user=%s role=%s action=%s entity=%s',
                       claims.get('sub'), role, action, entity_class)
        raise Forbidden()


__all__ = ['is_allowed', 'current_role', 'current_user_id', 'assert_allowed']
