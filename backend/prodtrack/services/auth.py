"""Account registration, login with lockout, token refresh and logout."""
from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from flask_jwt_extended import create_access_token, create_refresh_token
from sqlalchemy import select

from prodtrack.constants.permissions import DEFAULT_ROLE
from prodtrack.db import get_db
from prodtrack.errors import AccountLocked, Conflict, NotFound, Unauthorized
from prodtrack.models.authz import TokenBlocklist, User
from prodtrack.models.base import utcnow
from prodtrack.services import audit
from prodtrack.services.audit import AuditContext
from prodtrack.utils.serialization import iso

logger = logging.getLogger(__name__)

REFRESH = 'refresh'
MAX_FAILED_ATTEMPTS = 5
LOCK_DURATION = timedelta(minutes=15)


def _mask(email: str) -> str:
    local, _, domain = email.partition('@')
    return f'{local[:3]}***@{domain}'


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def user_json(user: User) -> Dict[str, Any]:
    return {
        'id': user.id,
        'name': user.name,
        'email': user.email,
        'role': user.role,
        'isActive': user.is_active,
        'createdAt': iso(user.created_at),
    }


def issue_access_token(user: User) -> str:
    return create_access_token(identity=str(user.id), additional_claims={'role': user.role, 'email': user.email})


def register(data: Dict[str, Any], ctx: AuditContext) -> User:
    session = get_db()
    if session.scalar(select(User.id).where(User.email == data['email'])) is not None:
        raise Conflict('Email já cadastrado')
    user = User(name=data['name'], email=data['email'], role=DEFAULT_ROLE)
    user.set_password(data['password'])
    session.add(user)
    session.commit()
    logger.info('User registered: id=%s email=%s', user.id, _mask(user.email))
    audit.record(audit.CREATE_USER, 'users', user.id, {'email': user.email, 'role': user.role},
                 AuditContext(actor_id=user.id, ip_address=ctx.ip_address, user_agent=ctx.user_agent))
    return user


def login(email: str, password: str, ctx: AuditContext) -> Dict[str, Any]:
    session = get_db()
    user = session.scalar(select(User).where(User.email == email))
    if user is None or not user.is_active:
        logger.warning('Login attempt for unknown or inactive account: %s', _mask(email))
        raise Unauthorized('Email ou senha inválidos')

    now = utcnow()
    if user.locked_until and now < _aware(user.locked_until):
        logger.warning('Login attempt on locked account: id=%s', user.id)
        raise AccountLocked()

    if not user.verify_password(password):
        user.failed_login_attempts = (user.failed_login_attempts or 0) + 1
        locked = user.failed_login_attempts >= MAX_FAILED_ATTEMPTS
        if locked:
            user.locked_until = now + LOCK_DURATION
            logger.warning('Account locked after %s failed attempts: id=%s', user.failed_login_attempts, user.id)
        else:
            logger.warning('Invalid password: id=%s attempts=%s', user.id, user.failed_login_attempts)
        session.commit()
        if locked:
            raise AccountLocked()
        raise Unauthorized('Email ou senha inválidos')

    user.failed_login_attempts = 0
    user.locked_until = None
    session.commit()
    tokens = {
        'user': user_json(user),
        'accessToken': issue_access_token(user),
        'refreshToken': create_refresh_token(identity=str(user.id)),
    }
    logger.info('Login succeeded: id=%s', user.id)
    audit.record(audit.LOGIN, 'users', user.id, {'email': user.email},
                 AuditContext(actor_id=user.id, ip_address=ctx.ip_address, user_agent=ctx.user_agent))
    return tokens


def _active_user(user_id) -> User:
    user = get_db().get(User, int(user_id))
    if user is None or not user.is_active:
        raise Unauthorized('Usuário não encontrado ou inativo')
    return user


def is_token_revoked(jti: str) -> bool:
    return get_db().scalar(select(TokenBlocklist.id).where(TokenBlocklist.jti == jti)) is not None


def refresh(user_id: int) -> Dict[str, Any]:
    user = _active_user(user_id)
    return {'accessToken': issue_access_token(user)}


def logout(claims: Dict[str, Any], ctx: AuditContext) -> None:
    """Revoke the verified refresh token described by ``claims``."""
    session = get_db()
    session.add(TokenBlocklist(jti=claims['jti'], token_type=REFRESH, user_id=int(claims['sub']), created_at=utcnow()))
    session.commit()
    logger.info('Logout: id=%s', claims['sub'])
    audit.record(audit.LOGOUT, 'users', int(claims['sub']), None,
                 AuditContext(actor_id=int(claims['sub']), ip_address=ctx.ip_address, user_agent=ctx.user_agent))


def current_user(user_id) -> User:
    user = get_db().get(User, int(user_id)) if user_id is not None else None
    if user is None:
        raise NotFound('Usuário não encontrado')
    return user


__all__ = ['user_json', 'register', 'login', 'refresh', 'logout', 'current_user', 'is_token_revoked']
