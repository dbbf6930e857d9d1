"""Catalog name search for picking foods."""

from __future__ import annotations

from typing import Iterable, Optional

from nutrivec.engine.models import CatalogItem


def search_catalog(
    catalog: Iterable[CatalogItem],
    query: str,
    limit: Optional[int] = None,
) -> list[CatalogItem]:
    """Find items whose name contains the query, ignoring case.

    A query that is empty or only whitespace matches every item. Otherwise
    the query is matched as given, spaces included. Results keep catalog
    order.

    Args:
        catalog: Items to search
        query: Substring to look for
        limit: Maximum results (None = no limit)

    Returns:
        Matching catalog items

    Raises:
        ValueError: If limit is negative
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    needle = "" if not query.strip() else query.lower()
    results = []
    for item in catalog:
        if limit is not None and len(results) >= limit:
            break
        if needle in item.name.lower():
            results.append(item)
    return results
