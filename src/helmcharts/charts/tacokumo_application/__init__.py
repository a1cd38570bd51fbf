"""Values schema for the tacokumo-application chart."""

from helmcharts.charts.tacokumo_application.values import MainConfig, TacokumoApplicationValues

__all__ = ["MainConfig", "TacokumoApplicationValues"]
