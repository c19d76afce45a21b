"""Blueprint factory for the uniform record routes.

Every module exposes the same five endpoints (list, get, create, update,
delete). Authorization runs inside the decorator, before the path id or the
body are looked at, so a denied caller never learns whether a payload was valid.
"""
from __future__ import annotations
from typing import Dict

from flask import Blueprint, request

from prodtrack.constants.permissions import ACTION_CREATE, ACTION_DELETE, ACTION_EDIT
from prodtrack.decorators.auth import require_auth, require_permission
from prodtrack.services.audit import AuditContext
from prodtrack.services.policy import current_user_id
from prodtrack.services.records import RecordService
from prodtrack.utils.listing import build_list_payload, request_pagination
from prodtrack.utils.validation import parse_id, validate_payload


def make_record_blueprint(name: str, service: RecordService, entity_class: str,
                          create_schema, update_schema, messages: Dict[str, str]) -> Blueprint:
    bp = Blueprint(name.replace('-', '_'), __name__)

    @bp.get('')
    @require_auth
    def list_records():
        page, limit = request_pagination()
        rows, total = service.list(page, limit)
        return build_list_payload([service.to_json(r) for r in rows], page, limit, total)

    @bp.get('/<record_id>')
    @require_auth
    def get_record(record_id):
        obj = service.get_by_id(parse_id(record_id))
        return {'success': True, 'data': service.to_json(obj)}

    @bp.post('')
    @require_permission(entity_class, ACTION_CREATE)
    def create_record():
        data = validate_payload(create_schema, request.get_json(silent=True))
        obj = service.create(data, AuditContext.from_request(current_user_id()))
        return {'success': True, 'data': service.to_json(obj), 'message': messages['created']}, 201

    @bp.put('/<record_id>')
    @require_permission(entity_class, ACTION_EDIT)
    def update_record(record_id):
        rid = parse_id(record_id)
        data = validate_payload(update_schema, request.get_json(silent=True))
        obj = service.update(rid, data, AuditContext.from_request(current_user_id()))
        return {'success': True, 'data': service.to_json(obj), 'message': messages['updated']}

    @bp.delete('/<record_id>')
    @require_permission(entity_class, ACTION_DELETE)
    def delete_record(record_id):
        service.remove(parse_id(record_id), AuditContext.from_request(current_user_id()))
        return {'success': True, 'data': None, 'message': messages['deleted']}

    return bp


__all__ = ['make_record_blueprint']
