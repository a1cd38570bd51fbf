"""Configuration management for helmcharts.

This module handles loading and managing configuration from a YAML file
that tells the library where chart directories live and how generated
schemas are written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE_NAME = ".helmcharts.yaml"


@dataclass
class ChartConfig:
    """Configuration for charts."""

    path: str = "charts"
    """Path to the charts directory (relative to repo root)."""

    values_file: str = "values.yaml"
    """Name of the default values file inside each chart directory."""


@dataclass
class SchemaConfig:
    """Configuration for values.schema.json generation."""

    file_name: str = "values.schema.json"
    """Name of the generated schema file inside each chart directory."""

    type_prefixes: bool = True
    """Prefix field descriptions with type labels such as '[string]'."""


@dataclass
class HelmChartsConfig:
    """Main configuration for helmcharts."""

    charts: ChartConfig = field(default_factory=ChartConfig)
    """Chart configuration."""

    schema: SchemaConfig = field(default_factory=SchemaConfig)
    """Schema generation configuration."""

    @classmethod
    def get_default(cls) -> HelmChartsConfig:
        """Get default configuration with standard paths."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HelmChartsConfig:
        """Create config from a dictionary."""
        charts_data = data.get("charts") or {}
        charts = ChartConfig(
            path=charts_data.get("path", "charts"),
            values_file=charts_data.get("values_file", "values.yaml"),
        )

        schema_data = data.get("schema") or {}
        schema = SchemaConfig(
            file_name=schema_data.get("file_name", "values.schema.json"),
            type_prefixes=schema_data.get("type_prefixes", True),
        )

        return cls(charts=charts, schema=schema)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "charts": {
                "path": self.charts.path,
                "values_file": self.charts.values_file,
            },
            "schema": {
                "file_name": self.schema.file_name,
                "type_prefixes": self.schema.type_prefixes,
            },
        }


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find the config file by walking up the directory tree.

    Starts from start_path (or cwd) and walks up looking for .helmcharts.yaml.
    """
    if start_path is None:
        start_path: Path = Path.cwd()

    current: Path = start_path
    while current != current.parent:
        config_path: Path = current / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
        current: Path = current.parent

    return None


def load_config(config_path: Path | None = None) -> HelmChartsConfig:
    """Load configuration from file or return defaults.

    If config_path is None, searches for .helmcharts.yaml in the directory tree.
    If no config file is found, returns default configuration.
    """
    if config_path is None:
        config_path: Path | None = find_config_file()

    if config_path is None or not config_path.exists():
        return HelmChartsConfig.get_default()

    with config_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return HelmChartsConfig.from_dict(data)


def save_config(config: HelmChartsConfig, config_path: Path) -> None:
    """Save configuration to a file."""
    with config_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def generate_default_config() -> str:
    """Generate default configuration as YAML string."""
    config: HelmChartsConfig = HelmChartsConfig.get_default()
    return yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False)
