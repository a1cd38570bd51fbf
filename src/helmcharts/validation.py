"""Validate Helm values documents against the registered chart schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from helmcharts.charts.registry import list_registered_charts, require_chart_model
from helmcharts.loader import ValuesFileError, load_values_file
from helmcharts.models import ValidationIssue, ValidationReport
from helmcharts.repository import get_values_path

if TYPE_CHECKING:
    from pathlib import Path

    from pydantic_core import ErrorDetails

    from helmcharts.charts.utils.fields import ValuesModel

__all__ = [
    "ValuesFileError",
    "format_errors",
    "load_values_file",
    "validate_chart_defaults",
    "validate_values",
    "validate_values_file",
]

_VALUE_ERROR_PREFIX = "Value error, "


def _format_location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _format_message(error: ErrorDetails) -> str:
    msg: str = error["msg"]
    if error["type"] == "value_error" and msg.startswith(_VALUE_ERROR_PREFIX):
        return msg[len(_VALUE_ERROR_PREFIX):]
    return msg


def format_errors(error: ValidationError) -> list[ValidationIssue]:
    """Flatten a pydantic ValidationError into one issue per failing location."""
    return [
        ValidationIssue(location=_format_location(e["loc"]), message=_format_message(e))
        for e in error.errors()
    ]


def validate_values(chart_name: str, values: dict[str, Any]) -> ValuesModel:
    """Validate a values mapping against a chart's schema.

    Raises:
        ChartNotFoundError: If the chart has no registered schema.
        pydantic.ValidationError: Aggregating every failing location.
    """
    model_cls: type[ValuesModel] = require_chart_model(chart_name)
    return model_cls.model_validate(values)


def validate_values_file(chart_name: str, values_path: Path) -> ValidationReport:
    """Validate a values file, collecting failures into a report.

    Raises:
        ChartNotFoundError: If the chart has no registered schema.
        ValuesFileError: If the file is not a YAML mapping.
    """
    model_cls: type[ValuesModel] = require_chart_model(chart_name)
    values: dict[str, Any] = load_values_file(values_path)

    report = ValidationReport(chart=chart_name, source=values_path)
    try:
        model_cls.model_validate(values)
    except ValidationError as e:
        report.issues.extend(format_errors(e))
    return report


def validate_chart_defaults(chart_name: str | None = None) -> list[ValidationReport]:
    """Validate the default values file of one chart, or of every registered chart.

    Charts without a values file on disk yield a skipped report.
    """
    names: list[str] = [chart_name] if chart_name else list_registered_charts()

    reports: list[ValidationReport] = []
    for name in names:
        require_chart_model(name)
        values_path: Path = get_values_path(name)
        if not values_path.exists():
            reports.append(
                ValidationReport(
                    chart=name,
                    source=values_path,
                    skipped=True,
                    reason="values file not found",
                )
            )
            continue
        reports.append(validate_values_file(name, values_path))
    return reports
