"""Chart registry mapping chart names to their Pydantic value models.

Add new chart schemas here to make them available to validation and schema
generation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from helmcharts.charts.portal_controller_kubernetes import PortalControllerKubernetesValues
from helmcharts.charts.tacokumo_admin import TacokumoAdminValues
from helmcharts.charts.tacokumo_application import TacokumoApplicationValues
from helmcharts.charts.tacokumo_portal import TacokumoPortalValues
from helmcharts.charts.tacokumo_portal_proxy import TacokumoPortalProxyValues

if TYPE_CHECKING:
    from helmcharts.charts.utils.fields import ValuesModel


class ChartNotFoundError(LookupError):
    """Raised when a chart name has no registered values model."""

    def __init__(self, chart_name: str) -> None:
        self.chart_name: str = chart_name
        available: str = ", ".join(list_registered_charts())
        super().__init__(f"no schema registered for chart {chart_name!r} (available: {available})")


CHART_REGISTRY: dict[str, type[ValuesModel]] = {
    "portal-controller-kubernetes": PortalControllerKubernetesValues,
    "tacokumo-admin": TacokumoAdminValues,
    "tacokumo-application": TacokumoApplicationValues,
    "tacokumo-portal": TacokumoPortalValues,
    "tacokumo-portal-proxy": TacokumoPortalProxyValues,
}
"""
Registry of Helm charts with Pydantic schema definitions.

To add a new chart:
1. Create a new package under helmcharts/charts/<chart_name>/
2. Define the values schema in values.py on top of ValuesModel
3. Import the model here and add it to the registry

Example:
    from helmcharts.charts.my_chart import MyChartValues

    CHART_REGISTRY = {
        ...
        "my-chart": MyChartValues,
    }
"""


def get_chart_model(chart_name: str) -> type[ValuesModel] | None:
    """Get the Pydantic model for a chart by name.

    Args:
        chart_name: The name of the chart directory (e.g., "tacokumo-admin")

    Returns:
        The Pydantic model class, or None if not found.
    """
    return CHART_REGISTRY.get(chart_name)


def require_chart_model(chart_name: str) -> type[ValuesModel]:
    """Get the Pydantic model for a chart by name.

    Raises:
        ChartNotFoundError: If the chart has no registered model.
    """
    model: type[ValuesModel] | None = get_chart_model(chart_name)
    if model is None:
        raise ChartNotFoundError(chart_name)
    return model


def list_registered_charts() -> list[str]:
    """List all chart names that have schema definitions.

    Returns:
        Sorted list of chart names.
    """
    return sorted(CHART_REGISTRY.keys())
