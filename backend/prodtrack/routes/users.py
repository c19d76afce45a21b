from flask import Blueprint

from prodtrack.constants.permissions import ACTION_DELETE, ACTION_READ, USERS
from prodtrack.decorators.auth import require_permission
from prodtrack.services import users as user_service
from prodtrack.services.audit import AuditContext
from prodtrack.services.auth import user_json
from prodtrack.services.policy import current_user_id
from prodtrack.utils.listing import build_list_payload, request_pagination
from prodtrack.utils.validation import parse_id

users_bp = Blueprint('users', __name__)


@users_bp.get('')
@require_permission(USERS, ACTION_READ)
def list_users():
    page, limit = request_pagination()
    rows, total = user_service.list_users(page, limit)
    return build_list_payload([user_json(u) for u in rows], page, limit, total)


@users_bp.delete('/<user_id>')
@require_permission(USERS, ACTION_DELETE)
def delete_user(user_id):
    user_service.delete_user(parse_id(user_id), AuditContext.from_request(current_user_id()))
    return {'success': True, 'data': None, 'message': 'Usuário removido com sucesso.'}
