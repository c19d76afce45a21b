from functools import wraps

from flask_jwt_extended import verify_jwt_in_request

from prodtrack.services.policy import assert_allowed


def require_auth(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        return fn(*args, **kwargs)
    return wrapper


def require_permission(entity_class: str, action: str):
    def outer(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            assert_allowed(entity_class, action)
            return fn(*args, **kwargs)
        return wrapper
    return outer
