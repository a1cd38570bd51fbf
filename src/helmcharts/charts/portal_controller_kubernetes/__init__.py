"""Values schema for the portal-controller-kubernetes chart."""

from helmcharts.charts.portal_controller_kubernetes.values import (
    ControllerConfig,
    PortalControllerKubernetesValues,
)

__all__ = ["ControllerConfig", "PortalControllerKubernetesValues"]
