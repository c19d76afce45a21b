from flask import Blueprint, request
from flask_jwt_extended import get_jwt, jwt_required

from prodtrack.decorators.auth import require_auth
from prodtrack.schemas.auth import LoginRequest, RegisterRequest
from prodtrack.services import auth as auth_service
from prodtrack.services.audit import AuditContext
from prodtrack.services.policy import current_user_id
from prodtrack.utils.ratelimit import rate_limited
from prodtrack.utils.validation import validate_payload

auth_bp = Blueprint('auth', __name__)


@auth_bp.post('/register')
@rate_limited('register')
def register():
    data = validate_payload(RegisterRequest, request.get_json(silent=True))
    user = auth_service.register(data, AuditContext.from_request())
    return {'success': True, 'data': auth_service.user_json(user), 'message': 'Usuário registrado com sucesso'}, 201


@auth_bp.post('/login')
@rate_limited('login')
def login():
    data = validate_payload(LoginRequest, request.get_json(silent=True))
    result = auth_service.login(data['email'], data['password'], AuditContext.from_request())
    return {'success': True, 'data': result, 'message': 'Login realizado com sucesso'}


@auth_bp.post('/refresh')
@jwt_required(refresh=True, locations=['json'])
def refresh():
    return {'success': True, 'data': auth_service.refresh(current_user_id())}


@auth_bp.post('/logout')
@jwt_required(refresh=True, locations=['json'])
def logout():
    auth_service.logout(get_jwt(), AuditContext.from_request())
    return {'success': True, 'data': None, 'message': 'Logout realizado com sucesso'}


@auth_bp.get('/me')
@require_auth
def me():
    user = auth_service.current_user(current_user_id())
    return {'success': True, 'data': auth_service.user_json(user)}
