"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".nutrivec"


def _default_catalog_path() -> Path:
    """Return the default PC values path."""
    return _default_config_dir() / "pc_values.json"


def _default_nutrients_path() -> Path:
    """Return the default nutrient table path."""
    return _default_config_dir() / "nutrients.json"


@dataclass
class DataConfig:
    """Locations of the static data files."""

    catalog_path: Path = field(default_factory=_default_catalog_path)
    nutrients_path: Path = field(default_factory=_default_nutrients_path)


@dataclass
class MatchConfig:
    """Match engine configuration."""

    top_matches: int = 5


@dataclass
class ComparisonConfig:
    """Nutrient comparison configuration."""

    top_nutrients: int = 10


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table" or "json"


@dataclass
class Settings:
    """Main application settings."""

    data: DataConfig = field(default_factory=DataConfig)
    match: MatchConfig = field(default_factory=MatchConfig)
    comparison: ComparisonConfig = field(default_factory=ComparisonConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.nutrivec/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse data paths
        if "data" in data:
            data_cfg = data["data"] or {}
            if data_cfg.get("catalog_path"):
                settings.data.catalog_path = Path(data_cfg["catalog_path"]).expanduser()
            if data_cfg.get("nutrients_path"):
                settings.data.nutrients_path = Path(data_cfg["nutrients_path"]).expanduser()

        # Parse match config
        if "match" in data:
            match_cfg = data["match"] or {}
            if "top_matches" in match_cfg:
                settings.match.top_matches = int(match_cfg["top_matches"])

        # Parse comparison config
        if "comparison" in data:
            cmp_cfg = data["comparison"] or {}
            if "top_nutrients" in cmp_cfg:
                settings.comparison.top_nutrients = int(cmp_cfg["top_nutrients"])

        # Parse defaults
        if "defaults" in data:
            def_cfg = data["defaults"] or {}
            if "output_format" in def_cfg:
                settings.defaults.output_format = def_cfg["output_format"]

        return settings

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.nutrivec/config.yaml

        Returns:
            Path the settings were written to
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

        return config_path

    def to_dict(self) -> dict:
        """Convert to a plain dictionary in config.yaml layout."""
        return {
            "data": {
                "catalog_path": str(self.data.catalog_path),
                "nutrients_path": str(self.data.nutrients_path),
            },
            "match": {
                "top_matches": self.match.top_matches,
            },
            "comparison": {
                "top_nutrients": self.comparison.top_nutrients,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load()
    return _settings
