"""Data loading for food vectors and nutrient tables."""

from nutrivec.data.loaders import load_catalog, load_nutrients

__all__ = ["load_catalog", "load_nutrients"]
