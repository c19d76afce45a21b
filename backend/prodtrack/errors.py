"""Application error taxonomy.

Every error carries a stable machine-readable ``error_code`` plus a human
message. ``AppError`` subclasses werkzeug's ``HTTPException`` so it can be
raised anywhere inside a request and still flow through the same handler as
``abort()``.
"""
from __future__ import annotations
from typing import Any, Optional

from werkzeug.exceptions import HTTPException


class AppError(HTTPException):
    code = 500
    error_code = 'INTERNAL_ERROR'
    default_message = 'Erro interno do servidor'

    def __init__(self, message: Optional[str] = None, details: Any = None, error_code: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        if error_code:
            self.error_code = error_code
        super().__init__(description=self.message)

    def to_dict(self) -> dict:
        body = {'code': self.error_code, 'message': self.message}
        if self.details is not None:
            body['details'] = self.details
        return body


class ValidationFailed(AppError):
    code = 400
    error_code = 'VALIDATION_ERROR'
    default_message = 'Dados inválidos'


class InvalidIdentifier(ValidationFailed):
    error_code = 'INVALID_IDENTIFIER'
    default_message = 'ID deve ser um número'


class Unauthorized(AppError):
    code = 401
    error_code = 'UNAUTHORIZED'
    default_message = 'Autenticação necessária'


class Forbidden(AppError):
    code = 403
    error_code = 'FORBIDDEN'
    default_message = 'Acesso negado: permissões insuficientes'


class NotFound(AppError):
    code = 404
    error_code = 'NOT_FOUND'
    default_message = 'Registro não encontrado'


class AccountLocked(Forbidden):
    error_code = 'ACCOUNT_LOCKED'
    default_message = 'Conta temporariamente bloqueada por questões de segurança. Tente novamente mais tarde.'


class SelfDeletion(ValidationFailed):
    error_code = 'SELF_DELETION'
    default_message = 'Você não pode excluir sua própria conta.'


class Conflict(AppError):
    code = 409
    error_code = 'CONFLICT'
    default_message = 'Registro duplicado. Este valor já existe.'


class RateLimitExceeded(AppError):
    code = 429
    error_code = 'RATE_LIMIT_EXCEEDED'
    default_message = 'Muitas requisições. Tente novamente mais tarde.'


class InternalError(AppError):
    pass


class AuditWriteFailed(InternalError):
    error_code = 'AUDIT_WRITE_FAILED'
    default_message = 'Falha ao registrar auditoria'


# werkzeug status -> machine code for plain HTTPExceptions (abort(), routing 404/405)
HTTP_STATUS_CODES = {
    400: 'BAD_REQUEST',
    401: 'UNAUTHORIZED',
    403: 'FORBIDDEN',
    404: 'NOT_FOUND',
    405: 'METHOD_NOT_ALLOWED',
    409: 'CONFLICT',
    413: 'PAYLOAD_TOO_LARGE',
    415: 'UNSUPPORTED_MEDIA_TYPE',
    429: 'RATE_LIMIT_EXCEEDED',
}

__all__ = [
    'AppError', 'ValidationFailed', 'InvalidIdentifier', 'Unauthorized', 'Forbidden', 'AccountLocked', 'NotFound',
    'SelfDeletion', 'Conflict', 'RateLimitExceeded', 'InternalError', 'AuditWriteFailed', 'HTTP_STATUS_CODES',
]
