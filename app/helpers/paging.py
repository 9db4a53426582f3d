# app/helpers/paging.py
from typing import Optional, Tuple

from config.appconfig import settings


def _positive_int(raw: Optional[str], default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except (TypeError, ValueError):
        return default
    return value if value >= 1 else default


def resolve_paging(page: Optional[str], limit: Optional[str]) -> Tuple[int, int]:
    """
    Lenient query paging: missing, non-numeric or < 1 values fall back to the
    defaults, and limit is capped at MAX_PAGE_SIZE.
    """
    resolved_page = _positive_int(page, settings.DEFAULT_PAGE)
    resolved_limit = min(_positive_int(limit, settings.DEFAULT_PAGE_SIZE), settings.MAX_PAGE_SIZE)
    return resolved_page, resolved_limit
