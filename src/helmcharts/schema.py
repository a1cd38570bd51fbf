"""Generate values.schema.json files from the chart value models.

Helm validates ``helm install`` and ``helm lint`` input against a chart's
``values.schema.json``. By default type information is prepended to each
field description to make it visible in VSCode hover tooltips
(e.g., '[string] Description...').
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from helmcharts.charts.registry import require_chart_model
from helmcharts.repository import get_chart_path, get_config

if TYPE_CHECKING:
    from pathlib import Path

    from helmcharts.charts.utils.fields import ValuesModel

DEFS_REF_PREFIX = "#/$defs/"

# Descriptions starting with one of these already say what they hold.
LABELLED_DESCRIPTION_PREFIXES = ("(", "[")


def _type_name(node: dict[str, Any]) -> str | None:
    ref: str | None = node.get("$ref")
    if ref is not None:
        return ref.removeprefix(DEFS_REF_PREFIX) if ref.startswith(DEFS_REF_PREFIX) else "object"

    if "enum" in node:
        return " | ".join(json.dumps(member) for member in node["enum"])

    if "anyOf" in node:
        # Optional fields come out as anyOf with a null branch.
        names = [_type_name(option) for option in node["anyOf"] if option.get("type") != "null"]
        return " | ".join(name for name in names if name) or None

    node_type = node.get("type")
    if node_type == "array":
        return f"array<{_type_name(node.get('items', {})) or 'any'}>"
    if node_type == "string" and "format" in node:
        return f"string, {node['format']}"
    return node_type if isinstance(node_type, str) else None


def type_label(prop: dict[str, Any]) -> str:
    """Bracketed type label for a JSON schema property, e.g. ``[boolean]`` or ``[array<EnvVar>]``.

    Returns an empty string when the property carries no type information.
    """
    name: str | None = _type_name(prop)
    return f"[{name}]" if name else ""


def add_type_labels(schema: dict[str, Any]) -> dict[str, Any]:
    """Prefix every property description in ``schema`` with its type label.

    Walks the root, every ``$defs`` entry and any inline nested objects.
    The schema is changed in place and returned.
    """
    pending: list[Any] = [schema, *schema.get("$defs", {}).values()]
    while pending:
        node = pending.pop()
        if not isinstance(node, dict):
            continue
        for prop in node.get("properties", {}).values():
            if not isinstance(prop, dict):
                continue
            pending.append(prop)
            label: str = type_label(prop)
            description: str | None = prop.get("description")
            if label and description and not description.startswith(LABELLED_DESCRIPTION_PREFIXES):
                prop["description"] = f"{label} {description}"
    return schema


def generate_values_schema(chart_name: str, with_types: bool | None = None) -> dict[str, Any]:
    """Build the JSON schema for a chart's values.

    ``with_types`` defaults to the ``schema.type_prefixes`` config setting.

    Raises:
        ChartNotFoundError: If the chart has no registered schema.
    """
    model_cls: type[ValuesModel] = require_chart_model(chart_name)
    schema_dict: dict[str, Any] = model_cls.model_json_schema()
    if with_types is None:
        with_types = get_config().schema.type_prefixes
    if with_types:
        schema_dict = add_type_labels(schema_dict)
    return schema_dict


def render_values_schema(chart_name: str, with_types: bool | None = None) -> str:
    """Serialize a chart's values schema the way it is written to disk."""
    return json.dumps(generate_values_schema(chart_name, with_types), indent=2) + "\n"


def write_values_schema(
    chart_name: str, chart_dir: Path | None = None, with_types: bool | None = None
) -> Path:
    """Write values.schema.json into the chart directory.

    The chart directory defaults to ``<repo root>/<charts.path>/<chart_name>``.

    Raises:
        ChartNotFoundError: If the chart has no registered schema.
        FileNotFoundError: If the chart directory does not exist.
    """
    require_chart_model(chart_name)
    if chart_dir is None:
        chart_dir: Path = get_chart_path(chart_name)
    if not chart_dir.is_dir():
        raise FileNotFoundError(f"Chart directory not found: {chart_dir}")

    schema_content: str = render_values_schema(chart_name, with_types)
    schema_path: Path = chart_dir / get_config().schema.file_name
    with schema_path.open("w", encoding="utf-8") as f:
        f.write(schema_content)
    return schema_path
