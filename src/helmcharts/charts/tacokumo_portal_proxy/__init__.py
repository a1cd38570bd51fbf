"""Values schema for the tacokumo-portal-proxy chart."""

from helmcharts.charts.tacokumo_portal_proxy.values import PortalProxyConfig, TacokumoPortalProxyValues

__all__ = ["PortalProxyConfig", "TacokumoPortalProxyValues"]
