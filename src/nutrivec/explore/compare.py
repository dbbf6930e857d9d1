"""Compare nutrient profiles of selected foods and their closest match."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from nutrivec.engine.models import CatalogItem, SignedEntry

DEFAULT_TOP_NUTRIENTS = 10


@dataclass(frozen=True)
class NutrientRecord:
    """Nutrient values for one food, keyed by nutrient name."""

    name: str
    nutrients: dict[str, float] = field(default_factory=dict)


@dataclass
class NutrientRow:
    """One nutrient in a comparison, with values normalized to [0, 1]."""

    nutrient_name: str
    spread: float
    values: dict[str, float]


def comparison_subjects(
    selection: Sequence[SignedEntry],
    match: Optional[CatalogItem] = None,
) -> list[str]:
    """Collect the names to compare: selected items, then the match.

    Duplicates are removed, keeping first-seen order.
    """
    names = [entry.item.name for entry in selection]
    if match is not None:
        names.append(match.name)
    return list(dict.fromkeys(names))


def _index_records(records: Iterable[NutrientRecord]) -> dict[str, dict[str, float]]:
    """Map food name to nutrients. The first record for a name wins."""
    index: dict[str, dict[str, float]] = {}
    for record in records:
        index.setdefault(record.name, record.nutrients)
    return index


def compare_nutrients(
    subjects: Iterable[str],
    records: Iterable[NutrientRecord],
    top_n: int = DEFAULT_TOP_NUTRIENTS,
) -> list[NutrientRow]:
    """Select the nutrients that differ most across subjects and normalize them.

    Spread is max minus min across subjects, with missing values counted
    as 0. The top_n nutrients by spread are kept (stable on discovery
    order). Each value is divided by the largest value for that nutrient
    among the subjects; a nutrient whose largest value is not positive
    normalizes to 0 for everyone.

    Args:
        subjects: Food names to compare (duplicates are ignored)
        records: Nutrient table
        top_n: Maximum number of nutrients to return

    Returns:
        Rows ordered by descending spread

    Raises:
        ValueError: If top_n is negative
    """
    if top_n < 0:
        raise ValueError(f"top_n must be non-negative, got {top_n}")

    names = list(dict.fromkeys(subjects))
    if not names:
        return []

    index = _index_records(records)
    profiles = {name: index.get(name, {}) for name in names}

    nutrient_names: list[str] = []
    seen: set[str] = set()
    for name in names:
        for nutrient in profiles[name]:
            if nutrient not in seen:
                seen.add(nutrient)
                nutrient_names.append(nutrient)

    spreads = []
    for nutrient in nutrient_names:
        values = [profiles[name].get(nutrient, 0.0) for name in names]
        spreads.append((nutrient, max(values) - min(values)))

    spreads.sort(key=lambda pair: -pair[1])

    rows = []
    for nutrient, spread in spreads[:top_n]:
        values = {name: profiles[name].get(nutrient, 0.0) for name in names}
        local_max = max(0.0, *values.values())
        rows.append(
            NutrientRow(
                nutrient_name=nutrient,
                spread=spread,
                values={
                    name: (0.0 if local_max == 0 else value / local_max)
                    for name, value in values.items()
                },
            )
        )

    return rows


def format_comparison(subjects: Sequence[str], rows: list[NutrientRow]) -> dict[str, Any]:
    """Format comparison rows for JSON output.

    Args:
        subjects: Food names in display order
        rows: Output of compare_nutrients()

    Returns:
        Formatted dictionary for JSON
    """
    return {
        "foods": list(subjects),
        "nutrients": [
            {
                "nutrient": row.nutrient_name,
                "spread": round(row.spread, 4),
                "values": {name: round(v, 4) for name, v in row.values.items()},
            }
            for row in rows
        ],
        "count": len(rows),
    }
