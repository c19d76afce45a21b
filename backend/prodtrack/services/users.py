"""Account administration: listing and removing user accounts."""
from __future__ import annotations
import logging
from typing import List, Tuple

from sqlalchemy import delete, func, select

from prodtrack.config.pagination import page_window
from prodtrack.db import get_db
from prodtrack.errors import NotFound, SelfDeletion
from prodtrack.models.authz import User
from prodtrack.services import audit
from prodtrack.services.audit import AuditContext

logger = logging.getLogger(__name__)


def list_users(page: int, limit: int) -> Tuple[List[User], int]:
    session = get_db()
    skip, take = page_window(page, limit)
    rows = session.scalars(
        select(User).order_by(User.name.asc(), User.id.asc()).offset(skip).limit(take)
    ).all()
    total = session.scalar(select(func.count()).select_from(User))
    return rows, total


def delete_user(user_id: int, ctx: AuditContext) -> None:
    if user_id == ctx.actor_id:
        raise SelfDeletion()
    session = get_db()
    user = session.get(User, user_id)
    if user is None:
        raise NotFound('Usuário não encontrado')
    details = {'email': user.email, 'name': user.name, 'role': user.role}
    result = session.execute(delete(User).where(User.id == user_id).execution_options(synchronize_session=False))
    if result.rowcount == 0:
        session.rollback()
        raise NotFound('Usuário não encontrado')
    session.commit()
    session.expunge(user)
    logger.info('User removed: id=%s by=%s', user_id, ctx.actor_id)
    audit.record(audit.DELETE_USER, 'users', user_id, details, ctx)


__all__ = ['list_users', 'delete_user']
