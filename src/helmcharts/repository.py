"""Git repository utilities."""

from __future__ import annotations

import subprocess
from functools import lru_cache
from pathlib import Path
from subprocess import CompletedProcess

from helmcharts.config import HelmChartsConfig, load_config


@lru_cache(maxsize=1)
def get_repo_root() -> Path:
    """Return the top level of the enclosing git checkout, or cwd outside one."""
    try:
        result: CompletedProcess[str] = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return Path.cwd()
    return Path(result.stdout.strip())


class ConfigProvider:
    """Provides access to configuration with caching."""

    _instance: ConfigProvider | None = None
    _config: HelmChartsConfig | None = None

    @classmethod
    def get_instance(cls) -> ConfigProvider:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None
        cls._config = None

    def get_config(self) -> HelmChartsConfig:
        if self._config is None:
            self._config: HelmChartsConfig = load_config()
        return self._config

    def reload(self) -> HelmChartsConfig:
        self._config: HelmChartsConfig = load_config()
        return self._config


def get_config() -> HelmChartsConfig:
    return ConfigProvider.get_instance().get_config()


def get_charts_dir() -> Path:
    config: HelmChartsConfig = get_config()
    return get_repo_root() / config.charts.path


def get_chart_path(chart_name: str) -> Path:
    return get_charts_dir() / chart_name


def get_values_path(chart_name: str) -> Path:
    config: HelmChartsConfig = get_config()
    return get_chart_path(chart_name) / config.charts.values_file


def list_chart_dirs() -> list[str]:
    """List chart directories (those holding a Chart.yaml) under the charts path."""
    charts_dir: Path = get_charts_dir()
    if not charts_dir.exists():
        return []

    return sorted(
        d.name for d in charts_dir.iterdir() if d.is_dir() and (d / "Chart.yaml").exists()
    )
