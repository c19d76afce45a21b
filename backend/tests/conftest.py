import os, sys, pytest
# Ensure backend directory is on path so 'prodtrack' can be imported without installing
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from prodtrack import create_app
from prodtrack.db import get_database
from test_record_helpers import ensure_user, jwt_headers

TEST_CONFIG = {
    'APP_ENV': 'test',
    'DATABASE_URL': 'sqlite+pysqlite:///:memory:',
    'JWT_SECRET_KEY': 'test-only-signing-key-0123456789abcdef',
    'RATE_LIMIT_ENABLED': False,
    'CORS_ORIGINS': ['http://localhost:3000'],
    'LOG_LEVEL': 'WARNING',
}


@pytest.fixture()
def make_app():
    """Factory for apps with config overrides; each gets its own in-memory database."""
    created = []

    def _make(**overrides):
        cfg = dict(TEST_CONFIG)
        cfg.update(overrides)
        app = create_app(cfg)
        created.append(app)
        return app
    yield _make
    for app in created:
        get_database(app).shutdown()


@pytest.fixture()
def app_instance(make_app):
    return make_app()


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()


@pytest.fixture()
def headers_for(app_instance):
    """role -> Authorization header for a seeded user holding that role."""
    def _make(role: str):
        with app_instance.app_context():
            return jwt_headers(ensure_user(f'{role.lower()}@example.com', role))
    return _make


@pytest.fixture()
def admin_headers(headers_for):
    return headers_for('ADMIN')
