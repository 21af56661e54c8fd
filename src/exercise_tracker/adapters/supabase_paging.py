"""Paged reads for Supabase select queries."""

from collections.abc import Callable
from typing import Any

# PostgREST's default max_rows; larger responses are cut off silently.
PAGE_SIZE = 1000


def fetch_rows(
    build_query: Callable[[], Any],
    limit: int | None = None,
    page_size: int = PAGE_SIZE,
) -> list[dict[str, object]]:
    """Collect rows page by page until a short page or ``limit`` is reached.

    ``build_query`` must return a fresh, ordered select builder on every call.
    """
    rows: list[dict[str, object]] = []
    while limit is None or len(rows) < limit:
        size = page_size if limit is None else min(page_size, limit - len(rows))
        offset = len(rows)
        response = build_query().range(offset, offset + size - 1).execute()
        page = response.data or []
        rows.extend(page)
        if len(page) < size:
            break
    return rows
