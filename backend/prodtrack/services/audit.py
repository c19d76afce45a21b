from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from flask import has_request_context, request
from sqlalchemy.exc import SQLAlchemyError

from prodtrack.db import get_db
from prodtrack.errors import AuditWriteFailed
from prodtrack.models.audit import AuditLog
from prodtrack.utils.serialization import json_value

logger = logging.getLogger(__name__)

CREATE_RECORD = 'CREATE_RECORD'
UPDATE_RECORD = 'UPDATE_RECORD'
DELETE_RECORD = 'DELETE_RECORD'
LOGIN = 'LOGIN'
LOGOUT = 'LOGOUT'
CREATE_USER = 'CREATE_USER'
DELETE_USER = 'DELETE_USER'


@dataclass(frozen=True)
class AuditContext:
    """Who performed a mutation and from where."""
    actor_id: Optional[int] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    @classmethod
    def from_request(cls, actor_id: Optional[int] = None) -> 'AuditContext':
        if not has_request_context():
            return cls(actor_id=actor_id)
        # remote_addr already reflects trusted proxy hops when ProxyFix is configured
        return cls(actor_id=actor_id, ip_address=request.remote_addr, user_agent=request.headers.get('User-Agent'))


def record(action: str, entity: Optional[str], entity_id: Optional[int],
           details: Optional[Dict[str, Any]], ctx: Optional[AuditContext] = None) -> AuditLog:
    """Append one audit entry in its own commit.

    Runs after the business mutation has been committed. A failure here rolls
    back only the audit row and surfaces as ``AuditWriteFailed``; the mutation
    itself stays persisted.
    """
    ctx = ctx or AuditContext()
    session = get_db()
    entry = AuditLog(
        actor_user_id=ctx.actor_id,
        action=action,
        entity=entity,
        entity_id=entity_id,
        details=json_value(details) if details else None,
        ip_address=ctx.ip_address,
        user_agent=ctx.user_agent,
    )
    try:
        session.add(entry)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception('Audit write failed: action=%s entity=%s id=%s', action, entity, entity_id)
        raise AuditWriteFailed()
    return entry


__all__ = [
    'AuditContext', 'record', 'CREATE_RECORD', 'UPDATE_RECORD', 'DELETE_RECORD', 'LOGIN', 'LOGOUT', 'CREATE_USER',
    'DELETE_USER',
]
