"""Base types for standard Helm charts with common Kubernetes patterns.

This module provides the reusable models for the chart-level sections that
most values files share: services, ingress, health probes and disruption
budgets. Specific chart value schemas compose or subclass these types.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import Field, model_validator

from helmcharts.charts.utils.fields import (
    FQDN,
    NodePort,
    NonNegativeInt,
    OmitEmpty,
    OmitZero,
    Port,
    PositiveInt,
    ValuesModel,
    required_if,
)
from helmcharts.charts.utils.kubernetes import (
    ExecAction,
    HTTPGetAction,
    NonEmptyStr,
    Protocol,
    ServiceType,
    TCPSocketAction,
)


class PathType(StrEnum):
    EXACT = "Exact"
    PREFIX = "Prefix"
    IMPLEMENTATION_SPECIFIC = "ImplementationSpecific"


class HTTPProbe(ValuesModel):
    """Flat HTTP health check configuration with an on/off switch.

    When enabled, the probe needs a path, a port and its timing settings.
    Disabled probes may be left empty.
    """

    enabled: bool = Field(
        default=False,
        description="Render the probe. When 'true', path, port, periodSeconds, timeoutSeconds and failureThreshold are required.",
    )
    path: str | None = Field(
        default=None,
        description=(
            "HTTP path to probe for health checks. Common patterns: '/healthz' for liveness, "
            "'/readyz' for readiness. The endpoint should return 2xx/3xx for healthy."
        ),
    )
    port: Annotated[Port | None, OmitZero] = Field(default=None, description="Container port to probe.")
    initialDelaySeconds: NonNegativeInt | None = Field(
        default=None, description="Seconds after the container starts before the first probe."
    )
    periodSeconds: Annotated[PositiveInt | None, OmitZero] = Field(default=None, description="How often (in seconds) to probe.")
    timeoutSeconds: Annotated[PositiveInt | None, OmitZero] = Field(default=None, description="Seconds after which the probe times out.")
    successThreshold: Annotated[PositiveInt | None, OmitZero] = Field(
        default=None, description="Consecutive successes needed after a failure to count as healthy."
    )
    failureThreshold: Annotated[PositiveInt | None, OmitZero] = Field(
        default=None, description="Consecutive failures after which the container is considered unhealthy."
    )

    @model_validator(mode="after")
    def _settings_required_when_enabled(self) -> HTTPProbe:
        required_if(
            self,
            "enabled",
            True,
            "path",
            "port",
            "periodSeconds",
            "timeoutSeconds",
            "failureThreshold",
        )
        return self


class ProbeConfig(ValuesModel):
    """Kubernetes probe configuration.

    A flexible probe that may be left empty (no probe) or carry one of the
    httpGet, tcpSocket or exec actions together with timing settings.
    """

    httpGet: HTTPGetAction | None = Field(
        default=None,
        description=(
            "HTTP GET probe configuration. The kubelet sends an HTTP GET request to the specified "
            "path and port. A response code between 200-399 indicates success."
        ),
    )
    tcpSocket: TCPSocketAction | None = Field(
        default=None, description="TCP probe: healthy when a connection to the port can be opened."
    )
    exec: ExecAction | None = Field(
        default=None, description="Exec probe: healthy when the command exits with status 0."
    )
    initialDelaySeconds: NonNegativeInt | None = Field(
        default=None, description="Seconds after the container starts before the first probe."
    )
    periodSeconds: PositiveInt | None = Field(default=None, description="How often (in seconds) to probe.")
    timeoutSeconds: PositiveInt | None = Field(default=None, description="Seconds after which the probe times out.")
    successThreshold: PositiveInt | None = Field(
        default=None, description="Consecutive successes needed after a failure to count as healthy."
    )
    failureThreshold: PositiveInt | None = Field(
        default=None, description="Consecutive failures after which the container is considered unhealthy."
    )


class HTTPProbeConfig(ValuesModel):
    """HTTP probe with a mandatory httpGet action and period."""

    httpGet: HTTPGetAction = Field(description="HTTP GET request the kubelet performs.")
    initialDelaySeconds: NonNegativeInt = Field(
        default=0, description="Seconds after the container starts before the first probe."
    )
    periodSeconds: PositiveInt = Field(description="How often (in seconds) to probe.")
    timeoutSeconds: Annotated[PositiveInt | None, OmitZero] = Field(default=None, description="Seconds after which the probe times out.")
    successThreshold: Annotated[PositiveInt | None, OmitZero] = Field(
        default=None, description="Consecutive successes needed after a failure to count as healthy."
    )
    failureThreshold: Annotated[PositiveInt | None, OmitZero] = Field(
        default=None, description="Consecutive failures after which the container is considered unhealthy."
    )


class ServicePort(ValuesModel):
    """A single port exposed by a Service."""

    name: str | None = Field(
        default=None, description="Port name. Required by Kubernetes when a Service exposes several ports."
    )
    port: Port = Field(description="Port the Service exposes.")
    targetPort: Annotated[Port | None, OmitZero] = Field(default=None, description="Container port traffic is forwarded to.")
    protocol: Annotated[Protocol | None, OmitEmpty] = Field(default=None, description="TCP, UDP or SCTP.")
    nodePort: Annotated[NodePort | None, OmitZero] = Field(
        default=None, description="Static node port (30000-32767) for NodePort and LoadBalancer services."
    )


class Service(ValuesModel):
    """Kubernetes Service configuration.

    Defines how the application is exposed within the cluster. Services
    provide stable network endpoints for pods, enabling service discovery and
    load balancing.
    """

    type: ServiceType = Field(
        description=(
            "Kubernetes Service type that determines how the service is exposed. "
            "'ClusterIP': internal cluster IP only. "
            "'NodePort': exposes on each node's IP at a static port (30000-32767). "
            "'LoadBalancer': provisions an external load balancer. "
            "'ExternalName': maps the service to a DNS name."
        ),
    )
    port: Port = Field(
        description="The port the Service exposes. This is the port other services use to connect.",
    )
    targetPort: Annotated[Port | None, OmitZero] = Field(
        default=None, description="Container port traffic is forwarded to; defaults to 'port'."
    )
    nodePort: Annotated[NodePort | None, OmitZero] = Field(default=None, description="Static node port (30000-32767).")
    annotations: dict[str, str] = Field(
        default_factory=dict, description="Annotations for controller-specific Service configuration."
    )


class IngressPath(ValuesModel):
    """Ingress host path configuration.

    Defines URL path routing rules for an Ingress host.
    """

    path: NonEmptyStr = Field(
        description=(
            "URL path to match for routing. Use '/' for the root path. Path matching behavior "
            "depends on the pathType setting."
        ),
    )
    pathType: PathType = Field(
        description=(
            "How the path should be matched. 'Prefix': matches based on URL path prefix. "
            "'Exact': only matches the exact path. 'ImplementationSpecific': interpretation depends on the IngressClass."
        ),
    )


class IngressHost(ValuesModel):
    """Ingress host configuration.

    Defines routing rules for a specific hostname. Each host can have
    multiple path rules.
    """

    host: FQDN = Field(description="Fully qualified hostname for this Ingress rule (e.g., 'app.example.com').")
    paths: list[IngressPath] = Field(
        min_length=1, description="Path rules for this host. More specific paths should come first."
    )


class IngressTLS(ValuesModel):
    """TLS termination settings for a set of Ingress hosts."""

    secretName: NonEmptyStr = Field(
        description="Secret holding the certificate. It must contain 'tls.crt' and 'tls.key' keys."
    )
    hosts: list[FQDN] = Field(min_length=1, description="Hostnames covered by the certificate.")


class Ingress(ValuesModel):
    """Ingress configuration.

    Ingress resources configure external HTTP/HTTPS access to services in the
    cluster. When enabled, an IngressClass and at least one host are required.
    """

    enabled: bool = Field(
        default=False,
        description="Enable Ingress resource creation to expose the service externally via HTTP/HTTPS.",
    )
    className: str | None = Field(
        default=None,
        description=(
            "IngressClass to use for this Ingress. Common values: 'nginx' for NGINX Ingress Controller, "
            "'alb' for AWS ALB Ingress Controller. Required when enabled."
        ),
    )
    annotations: dict[str, str] = Field(
        default_factory=dict,
        description=(
            "Annotations for controller-specific configuration. Examples: "
            "{'nginx.ingress.kubernetes.io/rewrite-target': '/'} for path rewriting, "
            "{'cert-manager.io/cluster-issuer': 'letsencrypt-prod'} for automatic TLS certificates."
        ),
    )
    hosts: list[IngressHost] = Field(
        default_factory=list,
        description=(
            "List of host rules for this Ingress. Required when enabled. "
            "Example: [{'host': 'app.example.com', 'paths': [{'path': '/', 'pathType': 'Prefix'}]}]"
        ),
    )
    tls: list[IngressTLS] = Field(
        default_factory=list,
        description="TLS configuration for HTTPS. Example: [{'secretName': 'app-tls', 'hosts': ['app.example.com']}].",
    )

    @model_validator(mode="after")
    def _class_and_hosts_required_when_enabled(self) -> Ingress:
        required_if(self, "enabled", True, "className", "hosts")
        return self


class PodDisruptionBudget(ValuesModel):
    """PodDisruptionBudget configuration.

    Limits how many replicas voluntary disruptions (node drains, upgrades)
    may take down at once.
    """

    enabled: bool = Field(default=False, description="Create a PodDisruptionBudget for the workload.")
    minAvailable: PositiveInt | None = Field(
        default=None, description="Minimum number of pods that must stay available."
    )
    maxUnavailable: PositiveInt | None = Field(
        default=None, description="Maximum number of pods that may be unavailable."
    )

