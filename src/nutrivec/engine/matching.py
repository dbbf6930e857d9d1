"""Combine signed food vectors and find the closest catalog entry."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np

from nutrivec.engine.models import CatalogItem, Match, SignedEntry
from nutrivec.engine.vector_math import add, as_vector, cosine_similarity, scale


def combine_selection(selection: Sequence[SignedEntry]) -> Optional[np.ndarray]:
    """Fold a signed selection into a single query vector.

    Each item's vector is multiplied by its sign and the results are
    summed. The dimension is taken from the first entry.

    Args:
        selection: Ordered (item, sign) pairs

    Returns:
        The query vector, or None for an empty selection

    Raises:
        DimensionMismatchError: If the selected vectors differ in length
    """
    if not selection:
        return None

    query = np.zeros(selection[0].item.dimension)
    for entry in selection:
        query = add(query, scale(entry.item.vector, entry.sign.value))
    return query


def score_catalog(
    query: Sequence[float] | np.ndarray,
    catalog: Iterable[CatalogItem],
) -> list[Match]:
    """Compute cosine similarity of the query against every catalog item.

    Returns:
        One Match per catalog item, in catalog order
    """
    query_vec = as_vector(query)
    return [
        Match(item=item, similarity=cosine_similarity(query_vec, item.vector))
        for item in catalog
    ]


def find_closest_match(
    selection: Sequence[SignedEntry],
    catalog: Iterable[CatalogItem],
) -> Optional[Match]:
    """Find the catalog entry most similar to the combined selection.

    Ties go to the entry that appears first in catalog order.

    Returns:
        The best Match, or None if the selection or catalog is empty
    """
    query = combine_selection(selection)
    if query is None:
        return None

    best: Optional[Match] = None
    best_similarity = -np.inf
    for item in catalog:
        similarity = cosine_similarity(query, item.vector)
        if similarity > best_similarity:
            best_similarity = similarity
            best = Match(item=item, similarity=similarity)

    return best


def find_closest(
    selection: Sequence[SignedEntry],
    catalog: Iterable[CatalogItem],
) -> Optional[CatalogItem]:
    """Return the closest catalog item to the selection, or None."""
    match = find_closest_match(selection, catalog)
    return match.item if match else None


def rank_matches(
    selection: Sequence[SignedEntry],
    catalog: Iterable[CatalogItem],
    limit: Optional[int] = None,
) -> list[Match]:
    """Rank catalog entries by similarity to the combined selection.

    The sort is stable, so equal similarities keep catalog order and the
    first element always agrees with find_closest_match().

    Args:
        selection: Ordered (item, sign) pairs
        catalog: Items to score
        limit: Maximum number of matches to return (None = all)

    Returns:
        Matches ordered by descending similarity

    Raises:
        ValueError: If limit is negative
        DimensionMismatchError: If any vector differs in length
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    query = combine_selection(selection)
    if query is None:
        return []

    ranked = sorted(score_catalog(query, catalog), key=lambda m: -m.similarity)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
