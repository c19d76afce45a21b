from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix
from typing import Optional, Dict, Any

from .config.logging_setup import configure_logging
from .config.settings import load_settings, validate_production_secrets
from .db import Database, get_db  # noqa: F401
from .errors import AppError, HTTP_STATUS_CODES, Unauthorized

jwt = JWTManager()

CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
CORS_HEADERS = ['Content-Type', 'Authorization']


def _unauthorized(message: str):
    return {'success': False, 'error': Unauthorized(message).to_dict()}, 401


@jwt.unauthorized_loader
def _missing_token(reason):
    return _unauthorized('Token não fornecido')


@jwt.invalid_token_loader
def _invalid_token(reason):
    return _unauthorized('Token inválido')


@jwt.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    return _unauthorized('Token expirado')


@jwt.revoked_token_loader
def _revoked_token(jwt_header, jwt_payload):
    return _unauthorized('Token revogado')


@jwt.token_in_blocklist_loader
def _token_in_blocklist(jwt_header, jwt_payload) -> bool:
    # only refresh tokens are ever revoked (logout)
    if jwt_payload.get('type') != 'refresh':
        return False
    from .services.auth import is_token_revoked
    return is_token_revoked(jwt_payload['jti'])


def create_app(config: Optional[Dict[str, Any]] = None, database: Optional[Database] = None):
    app = Flask(__name__)

    app.config.update(load_settings())
    if config:
        # allow tests or callers to override default config values
        app.config.update(config)
    validate_production_secrets(app.config)

    configure_logging(app.config['LOG_LEVEL'])

    if app.config['PROXY_FIX_X_FOR']:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=app.config['PROXY_FIX_X_FOR'], x_proto=1)

    db = database or Database(app.config['DATABASE_URL'])
    db.init_app(app)
    if app.config.get('AUTO_CREATE_TABLES', True):
        db.create_all()

    jwt.init_app(app)
    CORS(
        app,
        resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}},
        supports_credentials=True,
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        max_age=86400,
    )

    from .utils.ratelimit import init_rate_limiting
    init_rate_limiting(app)

    from .routes.auth import auth_bp
    from .routes.audit import audit_bp
    from .routes.catalog import emp_bp, prod_bp, mach_bp, supply_bp
    from .routes.production import PRODUCTION_BLUEPRINTS
    from .routes.users import users_bp
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(emp_bp, url_prefix='/api/employees')
    app.register_blueprint(prod_bp, url_prefix='/api/products')
    app.register_blueprint(mach_bp, url_prefix='/api/machines')
    app.register_blueprint(supply_bp, url_prefix='/api/supplies')
    for prefix, bp in PRODUCTION_BLUEPRINTS.items():
        app.register_blueprint(bp, url_prefix=f'/api/{prefix}')
    app.register_blueprint(audit_bp, url_prefix='/api/audit-logs')

    @app.route('/health')
    def health():
        return {'status': 'ok', 'environment': app.config['APP_ENV']}

    # Unified error handler producing the {success:false, error:{...}} envelope
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, AppError):
            if e.code >= 500:
                app.logger.error('%s: %s', e.error_code, e.message)
            return {'success': False, 'error': e.to_dict()}, e.code
        if isinstance(e, HTTPException):
            payload = {
                'success': False,
                'error': {
                    'code': HTTP_STATUS_CODES.get(e.code, 'HTTP_ERROR'),
                    'message': e.description,
                }
            }
            return payload, e.code
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'success': False,
            'error': {
                'code': 'INTERNAL_ERROR',
                'message': 'Erro interno do servidor',
            }
        }, 500

    return app


__all__ = ['create_app', 'get_db', 'jwt']
