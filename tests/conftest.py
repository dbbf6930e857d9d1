"""Pytest fixtures for nutrivec tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nutrivec.engine.models import Catalog, CatalogItem
from nutrivec.explore.compare import NutrientRecord

# Three-component PC coordinates for a handful of foods
CATALOG_RECORDS = [
    {"foodName": "Apple", "PCs": [1.0, 0.0, 0.0]},
    {"foodName": "Banana", "PCs": [0.0, 1.0, 0.0]},
    {"foodName": "Milk", "PCs": [0.0, 0.0, 1.0]},
    {"foodName": "Fruit salad", "PCs": [0.7, 0.7, 0.0]},
    {"foodName": "Yogurt", "PCs": [0.1, 0.0, 0.9]},
]

NUTRIENT_RECORDS = [
    {"foodName": "Apple", "nutrients": {"Energy": 52.0, "Fiber": 2.4, "Protein": 0.3}},
    {"foodName": "Banana", "nutrients": {"Energy": 89.0, "Fiber": 2.6, "Protein": 1.1}},
    {"foodName": "Milk", "nutrients": {"Energy": 61.0, "Calcium": 113.0, "Protein": 3.2}},
    {"foodName": "Fruit salad", "nutrients": {"Energy": 50.0, "Fiber": 1.0, "Protein": 0.5}},
]


@pytest.fixture
def catalog() -> Catalog:
    """Small in-memory catalog."""
    return Catalog(
        CatalogItem(name=r["foodName"], vector=tuple(r["PCs"])) for r in CATALOG_RECORDS
    )


@pytest.fixture
def nutrient_records() -> list[NutrientRecord]:
    """Nutrient table matching the sample catalog (Yogurt deliberately absent)."""
    return [NutrientRecord(name=r["foodName"], nutrients=r["nutrients"]) for r in NUTRIENT_RECORDS]


@pytest.fixture
def catalog_file(tmp_path) -> Path:
    """Write the sample catalog to a JSON file."""
    path = tmp_path / "pc_values.json"
    path.write_text(json.dumps(CATALOG_RECORDS))
    return path


@pytest.fixture
def nutrients_file(tmp_path) -> Path:
    """Write the sample nutrient table to a JSON file."""
    path = tmp_path / "nutrients.json"
    path.write_text(json.dumps(NUTRIENT_RECORDS))
    return path
