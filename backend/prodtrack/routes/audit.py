from flask import Blueprint, request
from sqlalchemy import func, select

from prodtrack.config.pagination import page_window
from prodtrack.constants.permissions import ACTION_READ, AUDIT
from prodtrack.db import get_db
from prodtrack.decorators.auth import require_permission
from prodtrack.models.audit import AuditLog
from prodtrack.utils.listing import build_list_payload, request_pagination
from prodtrack.utils.serialization import iso

audit_bp = Blueprint('audit', __name__)


def _entry_json(e: AuditLog):
    return {
        'id': e.id,
        'actorUserId': e.actor_user_id,
        'action': e.action,
        'entity': e.entity,
        'entityId': e.entity_id,
        'details': e.details,
        'ipAddress': e.ip_address,
        'userAgent': e.user_agent,
        'createdAt': iso(e.created_at),
    }


@audit_bp.get('')
@require_permission(AUDIT, ACTION_READ)
def list_audit_logs():
    session = get_db()
    page, limit = request_pagination()
    filters = []
    if entity := request.args.get('entity'):
        filters.append(AuditLog.entity == entity)
    if action := request.args.get('action'):
        filters.append(AuditLog.action == action.upper())
    skip, take = page_window(page, limit)
    rows = session.scalars(
        select(AuditLog).where(*filters)
        .order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
        .offset(skip).limit(take)
    ).all()
    total = session.scalar(select(func.count()).select_from(AuditLog).where(*filters))
    return build_list_payload([_entry_json(r) for r in rows], page, limit, total)
