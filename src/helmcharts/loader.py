"""Reading Helm values documents from YAML."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from pathlib import Path


class ValuesFileError(ValueError):
    """Raised when a values document cannot be read as a YAML mapping."""


def load_values_string(text: str, source: str = "<string>") -> dict[str, Any]:
    """Parse a YAML values document.

    An empty document is treated as an empty mapping, the way Helm treats an
    empty values.yaml.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValuesFileError(f"{source}: invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValuesFileError(
            f"{source}: expected a mapping at the top level, got {type(data).__name__}"
        )
    return data


def load_values_file(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as f:
        return load_values_string(f.read(), source=str(path))
