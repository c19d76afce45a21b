"""Persistence gateway: one explicitly constructed engine + scoped session per app.

``create_app`` builds a ``Database``, stores it in ``app.extensions`` and the
serve entry point calls ``shutdown()`` on SIGTERM/SIGINT. Sessions are removed
at the end of every app context so each request starts from a clean unit of work.
"""
from __future__ import annotations
import logging
from typing import Optional

from flask import Flask, current_app
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from prodtrack.models import Base

EXTENSION_KEY = 'prodtrack.db'

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, url: str, echo: bool = False):
        self.url = url
        if url.endswith(':memory:'):
            # Ensure a single shared in-memory SQLite database across all sessions
            self.engine: Engine = create_engine(
                url,
                echo=echo,
                future=True,
                connect_args={'check_same_thread': False},
                poolclass=StaticPool,
            )
        else:
            self.engine = create_engine(url, echo=echo, future=True)
        self.session = scoped_session(sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False))
        self._closed = False

    def init_app(self, app: Flask) -> 'Database':
        app.extensions[EXTENSION_KEY] = self

        @app.teardown_appcontext
        def _remove_session(exc: Optional[BaseException]):  # type: ignore
            self.session.remove()

        return self

    def create_all(self):
        Base.metadata.create_all(self.engine)

    def drop_all(self):
        Base.metadata.drop_all(self.engine)

    def shutdown(self):
        if self._closed:
            return
        self.session.remove()
        self.engine.dispose()
        self._closed = True
        logger.info('Database engine disposed')


def get_database(app: Optional[Flask] = None) -> Database:
    app = app or current_app
    return app.extensions[EXTENSION_KEY]


def get_db() -> Session:
    return get_database().session()


__all__ = ['Database', 'get_database', 'get_db']
