from __future__ import annotations
from math import ceil
from typing import Any, Dict, Tuple

from flask import request

from prodtrack.config.pagination import normalize_pagination


def request_pagination() -> Tuple[int, int]:
    return normalize_pagination(request.args.get('page'), request.args.get('limit'))


def pagination_meta(page: int, limit: int, total: int) -> Dict[str, Any]:
    total_pages = ceil(total / limit) if total else 0
    return {
        'page': page,
        'limit': limit,
        'total': total,
        'totalPages': total_pages,
        'hasNext': page < total_pages,
        'hasPrev': page > 1,
    }


def build_list_payload(rows: list, page: int, limit: int, total: int):
    return {
        'success': True,
        'data': rows,
        'pagination': pagination_meta(page, limit, total),
    }


__all__ = ['request_pagination', 'pagination_meta', 'build_list_payload']
