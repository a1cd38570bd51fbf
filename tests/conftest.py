"""Shared fixtures for the helmcharts test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

FIXTURES_DIR = Path(__file__).parent / "fixtures"
VALUES_DIR = FIXTURES_DIR / "values"


@pytest.fixture
def load_values() -> Callable[[str], dict[str, Any]]:
    """Return a loader for the default values fixture of a chart."""

    def _load(chart_name: str) -> dict[str, Any]:
        with (VALUES_DIR / f"{chart_name}.yaml").open(encoding="utf-8") as f:
            return yaml.safe_load(f)

    return _load


@pytest.fixture(autouse=True)
def reset_config_provider():
    """Drop cached configuration so tests never share it."""
    from helmcharts.repository import ConfigProvider, get_repo_root

    ConfigProvider.reset()
    get_repo_root.cache_clear()
    yield
    ConfigProvider.reset()
    get_repo_root.cache_clear()
