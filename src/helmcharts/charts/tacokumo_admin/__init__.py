"""Values schema for the tacokumo-admin chart."""

from helmcharts.charts.tacokumo_admin.values import AdminConfig, TacokumoAdminValues

__all__ = ["AdminConfig", "TacokumoAdminValues"]
