"""Values schema for the tacokumo-portal chart."""

from helmcharts.charts.tacokumo_portal.values import APIConfig, TacokumoPortalValues

__all__ = ["APIConfig", "TacokumoPortalValues"]
