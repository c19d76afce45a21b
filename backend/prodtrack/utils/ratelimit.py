"""Fixed-window per-client rate limiting.

A global limiter guards every ``/api/`` request; the login and register
endpoints add their own, much tighter, buckets through ``rate_limited``.
Counters live in process memory, which is enough for the single-process
deployment this service targets.
"""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Callable, Dict, Optional, Tuple, Union

from flask import Flask, current_app, request

from prodtrack.errors import RateLimitExceeded

EXTENSION_KEY = 'prodtrack.ratelimit'

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitState:
    allowed: bool
    remaining: int
    reset_at: datetime


class RateLimiter:
    def __init__(self, *, prefix: str, limit: int, window_seconds: int,
                 clock: Optional[Callable[[], datetime]] = None):
        if limit <= 0:
            raise ValueError('limit must be positive')
        if window_seconds <= 0:
            raise ValueError('window_seconds must be positive')
        self.prefix = prefix
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._hits: Dict[str, Tuple[int, datetime]] = {}
        self._next_sweep: Optional[datetime] = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        return self._clock()

    def _key(self, identity: Union[str, int]) -> str:
        return f'rl:{self.prefix}:{identity}'

    def check(self, *, identity: Union[str, int]) -> RateLimitState:
        """Record a hit for ``identity`` and return the resulting state."""
        now = self.now()
        key = self._key(identity)
        with self._lock:
            self._sweep(now)
            count, reset_at = self._hits.get(key, (0, now))
            if reset_at <= now:
                reset_at = now + timedelta(seconds=self.window_seconds)
                self._hits[key] = (1, reset_at)
                return RateLimitState(True, max(self.limit - 1, 0), reset_at)
            if count >= self.limit:
                return RateLimitState(False, 0, reset_at)
            count += 1
            self._hits[key] = (count, reset_at)
            return RateLimitState(True, max(self.limit - count, 0), reset_at)

    def _sweep(self, now: datetime):
        # drop expired windows at most once per window so the map stays bounded
        if self._next_sweep is not None and now < self._next_sweep:
            return
        for key in [k for k, (_, reset_at) in self._hits.items() if reset_at <= now]:
            del self._hits[key]
        self._next_sweep = now + timedelta(seconds=self.window_seconds)

    def tracked(self) -> int:
        with self._lock:
            return len(self._hits)

    def reset(self):
        with self._lock:
            self._hits.clear()
            self._next_sweep = None


def client_identity() -> str:
    """Socket peer address; ProxyFix rewrites it from X-Forwarded-For only for trusted proxies."""
    return request.remote_addr or 'unknown'


def _enforce(limiter: RateLimiter):
    identity = client_identity()
    state = limiter.check(identity=identity)
    if not state.allowed:
        retry_after = max(int((state.reset_at - limiter.now()).total_seconds()), 1)
        logger.warning('Rate limit exceeded: bucket=%s client=%s path=%s', limiter.prefix, identity, request.path)
        raise RateLimitExceeded(details={'retryAfter': retry_after})


def init_rate_limiting(app: Flask):
    cfg = app.config
    limiters = {
        'global': RateLimiter(prefix='global', limit=cfg['RATE_LIMIT_MAX_REQUESTS'],
                              window_seconds=cfg['RATE_LIMIT_WINDOW_SECONDS']),
        'login': RateLimiter(prefix='login', limit=cfg['LOGIN_RATE_LIMIT_MAX_REQUESTS'],
                             window_seconds=cfg['LOGIN_RATE_LIMIT_WINDOW_SECONDS']),
        'register': RateLimiter(prefix='register', limit=cfg['REGISTER_RATE_LIMIT_MAX_REQUESTS'],
                                window_seconds=cfg['REGISTER_RATE_LIMIT_WINDOW_SECONDS']),
    }
    app.extensions[EXTENSION_KEY] = limiters

    @app.before_request
    def _global_rate_limit():  # type: ignore
        if not app.config['RATE_LIMIT_ENABLED'] or request.method == 'OPTIONS':
            return None
        if request.path.startswith('/api/'):
            _enforce(limiters['global'])
        return None

    return limiters


def rate_limited(bucket: str):
    def outer(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if current_app.config['RATE_LIMIT_ENABLED']:
                _enforce(current_app.extensions[EXTENSION_KEY][bucket])
            return fn(*args, **kwargs)
        return wrapper
    return outer


__all__ = ['RateLimiter', 'RateLimitState', 'init_rate_limiting', 'rate_limited', 'client_identity']
