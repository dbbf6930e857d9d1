"""Load food vector and nutrient JSON files."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from nutrivec.engine.models import Catalog, CatalogItem
from nutrivec.explore.compare import NutrientRecord


class CatalogLoader:
    """Loads principal-component vectors into a Catalog.

    JSON format:
        [{"foodName": "Apple", "PCs": [0.12, -0.4, ...]}, ...]
    """

    REQUIRED_COLUMNS = ["foodName", "PCs"]

    def __init__(self, path: Path):
        """Initialize the catalog loader.

        Args:
            path: Path to the PC values JSON file
        """
        self.path = path
        _validate_file(path)

    def load(self) -> Catalog:
        """Read the file and build a Catalog.

        Raises:
            ValueError: If required keys are missing
            DimensionMismatchError: If vectors differ in length
        """
        df = _read_records(self.path, self.REQUIRED_COLUMNS)

        items = [
            CatalogItem(
                name=str(row["foodName"]),
                vector=tuple(float(v) for v in row["PCs"]),
            )
            for _, row in df.iterrows()
        ]
        return Catalog(items)


class NutrientLoader:
    """Loads per-food nutrient values.

    JSON format:
        [{"foodName": "Apple", "nutrients": {"Protein": 0.3, ...}}, ...]
    """

    REQUIRED_COLUMNS = ["foodName", "nutrients"]

    def __init__(self, path: Path):
        """Initialize the nutrient loader.

        Args:
            path: Path to the nutrient JSON file
        """
        self.path = path
        _validate_file(path)

    def load(self) -> list[NutrientRecord]:
        """Read the file into NutrientRecords, keeping file order.

        Raises:
            ValueError: If required keys are missing
        """
        df = _read_records(self.path, self.REQUIRED_COLUMNS)

        records = []
        for _, row in df.iterrows():
            nutrients = row["nutrients"] if isinstance(row["nutrients"], dict) else {}
            records.append(
                NutrientRecord(
                    name=str(row["foodName"]),
                    nutrients={str(k): float(v) for k, v in nutrients.items()},
                )
            )
        return records


def _validate_file(path: Path) -> None:
    """Ensure a data file exists."""
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")


def _read_records(path: Path, required: list[str]) -> pd.DataFrame:
    """Read a JSON array of records and check required keys."""
    df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    if df.empty:
        return df

    missing = set(required) - set(df.columns)
    if missing:
        raise ValueError(
            f"Missing required keys in {path.name}: {sorted(missing)}. "
            f"Required keys are: {required}"
        )

    incomplete = df[required].isna().any(axis=1)
    if incomplete.any():
        first = int(incomplete.idxmax())
        raise ValueError(f"Record {first} in {path.name} is missing {required}")

    return df


def load_catalog(path: Path) -> Catalog:
    """Load a catalog from a PC values JSON file."""
    return CatalogLoader(path).load()


def load_nutrients(path: Path) -> list[NutrientRecord]:
    """Load nutrient records from a JSON file."""
    return NutrientLoader(path).load()
