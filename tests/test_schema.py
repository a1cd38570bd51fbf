"""Tests for the chart registry and values.schema.json generation.

These tests validate that:
1. Every chart is registered and resolves to its values model
2. The generated schemas are valid JSON and carry descriptions
3. Type labels are prefixed to descriptions unless disabled
4. Schema files are written where Helm expects them
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from helmcharts import repository
from helmcharts.charts.registry import (
    CHART_REGISTRY,
    ChartNotFoundError,
    get_chart_model,
    list_registered_charts,
    require_chart_model,
)
from helmcharts.charts.tacokumo_admin import TacokumoAdminValues
from helmcharts.config import CONFIG_FILE_NAME
from helmcharts.schema import (
    add_type_labels,
    generate_values_schema,
    render_values_schema,
    type_label,
    write_values_schema,
)


# =============================================================================
# Registry Tests
# =============================================================================


class TestChartRegistry:
    def test_registry_contains_expected_charts(self) -> None:
        assert set(CHART_REGISTRY) == {
            "portal-controller-kubernetes",
            "tacokumo-admin",
            "tacokumo-application",
            "tacokumo-portal",
            "tacokumo-portal-proxy",
        }

    def test_list_registered_charts(self) -> None:
        charts: list[str] = list_registered_charts()
        assert charts == sorted(charts)
        assert len(charts) == len(CHART_REGISTRY)

    def test_get_chart_model_exists(self) -> None:
        assert get_chart_model("tacokumo-admin") is TacokumoAdminValues

    def test_get_chart_model_not_exists(self) -> None:
        assert get_chart_model("non-existent-chart") is None

    def test_require_chart_model_not_exists(self) -> None:
        with pytest.raises(ChartNotFoundError) as exc_info:
            require_chart_model("non-existent-chart")
        assert exc_info.value.chart_name == "non-existent-chart"
        assert "tacokumo-admin" in str(exc_info.value)

    def test_chart_not_found_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            require_chart_model("non-existent-chart")


# =============================================================================
# Type Label Tests
# =============================================================================


class TestTypeLabels:
    @pytest.mark.parametrize(
        ("prop", "label"),
        [
            ({"type": "boolean"}, "[boolean]"),
            ({"type": "integer"}, "[integer]"),
            ({"type": "number"}, "[number]"),
            ({"type": "string"}, "[string]"),
            ({"type": "string", "format": "duration"}, "[string, duration]"),
            ({"type": "string", "enum": ["a", "b"]}, '["a" | "b"]'),
            ({"type": "object"}, "[object]"),
            ({"type": "array", "items": {"type": "string"}}, "[array<string>]"),
            ({"type": "array", "items": {"$ref": "#/$defs/EnvVar"}}, "[array<EnvVar>]"),
            ({"$ref": "#/$defs/Image"}, "[Image]"),
            ({"anyOf": [{"type": "integer"}, {"type": "null"}]}, "[integer]"),
            ({"anyOf": [{"$ref": "#/$defs/Affinity"}, {"type": "null"}]}, "[Affinity]"),
            ({"anyOf": [{"type": "string", "format": "duration"}, {"type": "null"}]}, "[string, duration]"),
            ({"anyOf": [{"type": "null"}]}, ""),
            ({"enum": [1, 2]}, "[1 | 2]"),
            ({"$ref": "https://example.com/schema.json"}, "[object]"),
            ({"type": "array"}, "[array<any>]"),
            ({}, ""),
        ],
    )
    def test_type_label(self, prop: dict, label: str) -> None:
        assert type_label(prop) == label

    def test_add_labels_prefixes_descriptions(self) -> None:
        schema = {
            "properties": {"enabled": {"type": "boolean", "description": "Turn it on."}},
            "$defs": {"Port": {"properties": {"port": {"type": "integer", "description": "Port."}}}},
        }
        enhanced = add_type_labels(schema)
        assert enhanced["properties"]["enabled"]["description"] == "[boolean] Turn it on."
        assert enhanced["$defs"]["Port"]["properties"]["port"]["description"] == "[integer] Port."

    def test_add_labels_skips_prefixed_descriptions(self) -> None:
        schema = {"properties": {"enabled": {"type": "boolean", "description": "[bool] Already labelled."}}}
        assert add_type_labels(schema)["properties"]["enabled"]["description"] == "[bool] Already labelled."

    def test_add_labels_reaches_inline_objects(self) -> None:
        schema = {
            "properties": {
                "extra": {
                    "type": "object",
                    "description": "Free-form settings.",
                    "properties": {"debug": {"type": "boolean", "description": "Verbose output."}},
                }
            }
        }
        extra = add_type_labels(schema)["properties"]["extra"]
        assert extra["description"] == "[object] Free-form settings."
        assert extra["properties"]["debug"]["description"] == "[boolean] Verbose output."

    def test_add_labels_leaves_undescribed_properties(self) -> None:
        schema = {"properties": {"port": {"type": "integer"}}}
        assert add_type_labels(schema)["properties"]["port"] == {"type": "integer"}


# =============================================================================
# Schema Generation Tests
# =============================================================================


class TestSchemaGeneration:
    @pytest.mark.parametrize("chart_name", list_registered_charts())
    def test_schema_is_valid_json(self, chart_name: str) -> None:
        schema = generate_values_schema(chart_name)

        json_str = json.dumps(schema, indent=2)
        assert json.loads(json_str) == schema

    @pytest.mark.parametrize("chart_name", list_registered_charts())
    def test_schema_has_title_and_properties(self, chart_name: str) -> None:
        schema = generate_values_schema(chart_name)
        assert "title" in schema
        assert len(schema["properties"]) > 0

    @pytest.mark.parametrize("chart_name", list_registered_charts())
    def test_schema_properties_have_descriptions(self, chart_name: str) -> None:
        schema = generate_values_schema(chart_name)
        for definition in schema.get("$defs", {}).values():
            for name, prop in definition.get("properties", {}).items():
                assert "description" in prop, f"{definition['title']}.{name} has no description"

    def test_admin_schema_uses_yaml_keys(self) -> None:
        schema = generate_values_schema("tacokumo-admin")
        assert "global" in schema["properties"]
        assert "global_" not in schema["properties"]
        assert "global" in schema["required"]

    def test_type_prefixes(self) -> None:
        schema = generate_values_schema("tacokumo-portal")
        port = schema["$defs"]["Image"]["properties"]["tag"]
        assert port["description"].startswith("[string] ")

    def test_format_prefix(self) -> None:
        schema = generate_values_schema("tacokumo-admin")
        ttl = schema["$defs"]["AuthAppConfig"]["properties"]["sessionTtl"]
        assert ttl["format"] == "duration"
        assert ttl["description"].startswith("[string, duration] ")

    def test_without_type_prefixes(self) -> None:
        schema = generate_values_schema("tacokumo-portal", with_types=False)
        assert not schema["$defs"]["Image"]["properties"]["tag"]["description"].startswith("[")

    def test_unknown_chart(self) -> None:
        with pytest.raises(ChartNotFoundError):
            generate_values_schema("nope")

    def test_render_ends_with_newline(self) -> None:
        content = render_values_schema("tacokumo-application")
        assert content.endswith("}\n")
        assert json.loads(content)["title"] == "TacokumoApplicationValues"


class TestWriteValuesSchema:
    def test_write_to_explicit_dir(self, tmp_path: Path) -> None:
        schema_path: Path = write_values_schema("tacokumo-portal", chart_dir=tmp_path)

        assert schema_path == tmp_path / "values.schema.json"
        assert json.loads(schema_path.read_text(encoding="utf-8")) == generate_values_schema("tacokumo-portal")

    def test_write_to_configured_charts_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text("charts:\n  path: helm\nschema:\n  file_name: schema.json\n")
        chart_dir: Path = tmp_path / "helm" / "tacokumo-admin"
        chart_dir.mkdir(parents=True)
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(repository, "get_repo_root", lambda: tmp_path)

        schema_path: Path = write_values_schema("tacokumo-admin")

        assert schema_path == chart_dir / "schema.json"
        assert schema_path.read_text(encoding="utf-8").endswith("\n")

    def test_missing_chart_dir(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            write_values_schema("tacokumo-admin", chart_dir=tmp_path / "missing")

    def test_unknown_chart(self, tmp_path: Path) -> None:
        with pytest.raises(ChartNotFoundError):
            write_values_schema("nope", chart_dir=tmp_path)

    def test_type_prefixes_follow_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text("schema:\n  type_prefixes: false\n")
        monkeypatch.chdir(tmp_path)

        schema = generate_values_schema("tacokumo-portal")

        assert not schema["$defs"]["Image"]["properties"]["tag"]["description"].startswith("[")
