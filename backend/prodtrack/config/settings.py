"""Environment-driven configuration.

Values come from the process environment (a local ``.env`` is loaded first) and
end up as plain keys in ``app.config``. ``create_app(config)`` may override any
of them, which is how the test suite swaps in an in-memory database.
"""
from __future__ import annotations
import os
from datetime import timedelta
from typing import Any, Dict, List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_JWT_SECRET = 'dev-secret'

# Substrings that must never appear in production secrets (copied from .env examples)
FORBIDDEN_SECRET_PATTERNS = (
    'dev-secret',
    'dev_jwt_secret',
    'sua_chave_secreta',
    'change_in_production',
    'example',
    'password123',
)


def _bool(raw, default: bool) -> bool:
    if raw is None:
        return default
    return str(raw).strip().lower() in ('1', 'true', 'yes', 'on')


def _int(raw, default: int) -> int:
    try:
        return int(raw) if raw not in (None, '') else default
    except ValueError:
        raise RuntimeError(f'Invalid integer configuration value: {raw!r}')


def parse_origins(raw: str) -> List[str]:
    return [o.strip().rstrip('/') for o in (raw or '').split(',') if o.strip()]


def load_settings() -> Dict[str, Any]:
    env = os.getenv('APP_ENV', 'development')
    issuer = os.getenv('JWT_ISSUER', 'prodtrack-api')
    audience = os.getenv('JWT_AUDIENCE', 'prodtrack-frontend')
    return {
        'APP_ENV': env,
        'DATABASE_URL': os.getenv('DATABASE_URL', 'sqlite:///dev.db'),
        'JWT_SECRET_KEY': os.getenv('JWT_SECRET_KEY', DEFAULT_JWT_SECRET),
        'JWT_ACCESS_TOKEN_EXPIRES': timedelta(minutes=_int(os.getenv('JWT_ACCESS_TOKEN_MINUTES'), 15)),
        'JWT_REFRESH_TOKEN_EXPIRES': timedelta(days=_int(os.getenv('JWT_REFRESH_TOKEN_DAYS'), 7)),
        'JWT_ENCODE_ISSUER': issuer,
        'JWT_DECODE_ISSUER': issuer,
        'JWT_ENCODE_AUDIENCE': audience,
        'JWT_DECODE_AUDIENCE': audience,
        'JWT_TOKEN_LOCATION': ['headers'],
        # refresh and logout read the refresh token from the JSON body
        'JWT_REFRESH_JSON_KEY': 'refreshToken',
        'CORS_ORIGINS': parse_origins(os.getenv('CORS_ORIGINS', 'http://localhost:3000')),
        'RATE_LIMIT_ENABLED': _bool(os.getenv('RATE_LIMIT_ENABLED'), True),
        'RATE_LIMIT_WINDOW_SECONDS': _int(os.getenv('RATE_LIMIT_WINDOW_SECONDS'), 900),
        'RATE_LIMIT_MAX_REQUESTS': _int(os.getenv('RATE_LIMIT_MAX_REQUESTS'), 100),
        'LOGIN_RATE_LIMIT_WINDOW_SECONDS': 15 * 60,
        'LOGIN_RATE_LIMIT_MAX_REQUESTS': 5,
        'REGISTER_RATE_LIMIT_WINDOW_SECONDS': 60 * 60,
        'REGISTER_RATE_LIMIT_MAX_REQUESTS': 3,
        # number of trusted reverse proxies in front of the app; 0 means use the socket peer
        'PROXY_FIX_X_FOR': _int(os.getenv('PROXY_FIX_X_FOR'), 0),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO').upper(),
    }


def validate_production_secrets(config) -> None:
    """Refuse to boot a production app that still carries example secrets."""
    if config.get('APP_ENV') != 'production':
        return
    secret = str(config.get('JWT_SECRET_KEY') or '')
    if len(secret) < 32:
        raise RuntimeError('JWT_SECRET_KEY must have at least 32 characters in production')
    lowered = secret.lower()
    for pattern in FORBIDDEN_SECRET_PATTERNS:
        if pattern in lowered:
            raise RuntimeError('JWT_SECRET_KEY contains a default/example value')


__all__ = ['load_settings', 'validate_production_secrets', 'parse_origins']
