"""Typed values schemas and validation for the tacokumo Helm charts."""

from helmcharts.charts.registry import (
    CHART_REGISTRY,
    ChartNotFoundError,
    get_chart_model,
    list_registered_charts,
    require_chart_model,
)
from helmcharts.loader import ValuesFileError
from helmcharts.models import ValidationIssue, ValidationReport
from helmcharts.validation import (
    format_errors,
    load_values_file,
    validate_chart_defaults,
    validate_values,
    validate_values_file,
)

__all__ = [
    "CHART_REGISTRY",
    "ChartNotFoundError",
    "ValidationIssue",
    "ValidationReport",
    "ValuesFileError",
    "format_errors",
    "get_chart_model",
    "list_registered_charts",
    "load_values_file",
    "require_chart_model",
    "validate_chart_defaults",
    "validate_values",
    "validate_values_file",
]
