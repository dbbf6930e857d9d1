"""Explore module for catalog search and nutrient comparison."""

from __future__ import annotations

from nutrivec.explore.compare import (
    NutrientRecord,
    NutrientRow,
    compare_nutrients,
    comparison_subjects,
)
from nutrivec.explore.search import search_catalog

__all__ = [
    "NutrientRecord",
    "NutrientRow",
    "compare_nutrients",
    "comparison_subjects",
    "search_catalog",
]
