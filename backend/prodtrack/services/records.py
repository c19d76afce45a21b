"""Generic record lifecycle: paginated reads, create, conditional update, soft/hard delete.

One ``RecordService`` is configured per entity; modules with extra rules
subclass it and override ``before_create`` / ``before_update``. Every
successful mutation is committed first and then audited via
``services.audit.record``.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from prodtrack.config.pagination import page_window
from prodtrack.constants.enums import canonicalize
from prodtrack.db import get_db
from prodtrack.errors import Conflict, NotFound, ValidationFailed
from prodtrack.models.base import utcnow
from prodtrack.services import audit
from prodtrack.services.audit import AuditContext
from prodtrack.utils.serialization import record_json, snapshot

logger = logging.getLogger(__name__)


class RecordService:
    def __init__(self, model, entity: str, *, soft_delete: bool = True,
                 order_by: Sequence = (), snapshot_fields: Sequence[str] = (),
                 not_found_message: Optional[str] = None):
        self.model = model
        self.entity = entity
        self.soft_delete = soft_delete
        # id ascending always breaks remaining ties so pages are stable
        self.order_by = tuple(order_by) + (model.id.asc(),)
        self.snapshot_fields = tuple(snapshot_fields)
        self.not_found_message = not_found_message

    # --- reads -----------------------------------------------------------
    def _active(self, stmt):
        if self.soft_delete:
            return stmt.where(self.model.deleted_at.is_(None))
        return stmt

    def _not_found(self) -> NotFound:
        return NotFound(self.not_found_message)

    def list(self, page: int, limit: int) -> Tuple[List[Any], int]:
        session = get_db()
        skip, take = page_window(page, limit)
        rows = session.scalars(
            self._active(select(self.model)).order_by(*self.order_by).offset(skip).limit(take)
        ).all()
        total = session.scalar(self._active(select(func.count()).select_from(self.model)))
        return rows, total

    def get_by_id(self, record_id: int):
        session = get_db()
        row = session.scalar(self._active(select(self.model).where(self.model.id == record_id)))
        if row is None:
            raise self._not_found()
        return row

    def list_by_sector(self, sector: str) -> List[Any]:
        code = canonicalize('sector', sector)
        if code is None:
            raise ValidationFailed(details=[{'field': 'sector', 'code': 'UNKNOWN_ENUM_VALUE', 'message': 'Setor inválido'}])
        session = get_db()
        stmt = self._active(select(self.model).where(self.model.sector == code)).order_by(*self.order_by)
        return session.scalars(stmt).all()

    # --- hooks -----------------------------------------------------------
    def before_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    def before_update(self, record_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    # --- mutations -------------------------------------------------------
    def _commit(self):
        session = get_db()
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            logger.warning('Integrity violation on %s', self.entity)
            raise Conflict()
        except SQLAlchemyError:
            session.rollback()
            raise

    def create(self, data: Dict[str, Any], ctx: AuditContext):
        data = self.before_create(dict(data))
        session = get_db()
        obj = self.model(**data, created_by=ctx.actor_id, updated_by=ctx.actor_id)
        session.add(obj)
        self._commit()
        logger.info('%s created: id=%s by=%s', self.entity, obj.id, ctx.actor_id)
        audit.record(audit.CREATE_RECORD, self.entity, obj.id, record_json(obj), ctx)
        return obj

    def update(self, record_id: int, data: Dict[str, Any], ctx: AuditContext):
        existing = self.get_by_id(record_id)
        if not data:
            return existing
        data = self.before_update(record_id, dict(data))
        session = get_db()
        values = {getattr(self.model, key): value for key, value in data.items()}
        values[self.model.updated_by] = ctx.actor_id
        stmt = (
            self._active(update(self.model).where(self.model.id == record_id))
            .values(values)
            .execution_options(synchronize_session=False)
        )
        result = session.execute(stmt)
        if result.rowcount == 0:
            session.rollback()
            raise self._not_found()
        self._commit()
        obj = session.get(self.model, record_id, populate_existing=True)
        logger.info('%s updated: id=%s by=%s', self.entity, record_id, ctx.actor_id)
        audit.record(audit.UPDATE_RECORD, self.entity, record_id, {'changes': data}, ctx)
        return obj

    def remove(self, record_id: int, ctx: AuditContext) -> None:
        existing = self.get_by_id(record_id)
        details = snapshot(existing, self.snapshot_fields)
        session = get_db()
        if self.soft_delete:
            stmt = (
                update(self.model)
                .where(self.model.id == record_id, self.model.deleted_at.is_(None))
                .values({self.model.deleted_at: utcnow(), self.model.deleted_by: ctx.actor_id})
                .execution_options(synchronize_session=False)
            )
        else:
            stmt = delete(self.model).where(self.model.id == record_id).execution_options(synchronize_session=False)
        result = session.execute(stmt)
        if result.rowcount == 0:
            session.rollback()
            raise self._not_found()
        self._commit()
        logger.info('%s deleted (%s): id=%s by=%s', self.entity,
                    'soft' if self.soft_delete else 'hard', record_id, ctx.actor_id)
        audit.record(audit.DELETE_RECORD, self.entity, record_id, details, ctx)

    def to_json(self, obj) -> Dict[str, Any]:
        exclude = () if self.soft_delete else ('deleted_at', 'deleted_by')
        return record_json(obj, exclude=exclude)


__all__ = ['RecordService']
