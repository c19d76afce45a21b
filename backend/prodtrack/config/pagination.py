DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def normalize_pagination(page_raw, limit_raw):
    """Clamp raw query values to a usable (page, limit) pair.

    Non-numeric input falls back to the defaults instead of failing the request.
    """
    try:
        page = int(page_raw) if page_raw is not None else DEFAULT_PAGE
    except (TypeError, ValueError):
        page = DEFAULT_PAGE
    try:
        limit = int(limit_raw) if limit_raw is not None else DEFAULT_LIMIT
    except (TypeError, ValueError):
        limit = DEFAULT_LIMIT
    page = max(1, page)
    limit = max(1, min(limit, MAX_LIMIT))
    return page, limit


def page_window(page: int, limit: int):
    """Return (skip, take) for a 1-based page."""
    return (page - 1) * limit, limit
