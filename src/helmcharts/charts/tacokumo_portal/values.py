"""Values schema for the tacokumo-portal chart.

The portal API server of a tacokumo installation. One release runs per
portal namespace; ``api.portalName`` names that namespace.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, model_validator

from helmcharts.charts.utils.base import ProbeConfig
from helmcharts.charts.utils.fields import (
    LogLevel,
    NonNegativeInt,
    OmitEmpty,
    OmitZero,
    Percentage,
    Port,
    PositiveInt,
    ValuesModel,
    gte_field,
    required_if,
)
from helmcharts.charts.utils.kubernetes import (
    Affinity,
    EnvFromSource,
    EnvVar,
    HTTPGetAction,
    Image,
    ImagePullSecret,
    NonEmptyStr,
    ResourceConfig,
    SeccompProfile,
    SecurityContext,
    ServiceAccountConfig,
    TCPSocketAction,
    Tolerations,
)


class HPAConfig(ValuesModel):
    """HorizontalPodAutoscaler configuration.

    Disabled autoscalers may be left empty. Once enabled, both replica bounds
    and the memory target are required, and the upper bound may not be
    below the lower one.
    """

    enabled: bool = Field(default=False, description="Create a HorizontalPodAutoscaler for the API.")
    minReplicas: Annotated[PositiveInt | None, OmitZero] = Field(default=None, description="Minimum number of replicas.")
    maxReplicas: Annotated[PositiveInt | None, OmitZero] = Field(
        default=None, description="Maximum number of replicas. Must be greater than or equal to minReplicas."
    )
    targetMemoryUtilizationPercentage: Annotated[Percentage | None, OmitZero] = Field(
        default=None, description="Average memory utilization (1-100) the HPA scales towards."
    )

    @model_validator(mode="after")
    def _bounds_required_when_enabled(self) -> HPAConfig:
        required_if(
            self,
            "enabled",
            True,
            "minReplicas",
            "maxReplicas",
            "targetMemoryUtilizationPercentage",
        )
        gte_field(self, "maxReplicas", "minReplicas")
        return self


class ServiceConfig(ValuesModel):
    enabled: bool = Field(default=False, description="Create a Service for the API.")
    type: Annotated[Literal["ClusterIP", "NodePort", "LoadBalancer"] | None, OmitEmpty] = Field(
        default=None, description="Service type: ClusterIP, NodePort or LoadBalancer."
    )
    port: Annotated[Port | None, OmitZero] = Field(default=None, description="Port the Service exposes. Required when enabled.")

    @model_validator(mode="after")
    def _port_required_when_enabled(self) -> ServiceConfig:
        required_if(self, "enabled", True, "port")
        return self


class PortalHTTPGetAction(HTTPGetAction):
    host: str | None = Field(default=None, description="Host name to connect to; defaults to the pod IP.")


class PortalTCPSocketAction(TCPSocketAction):
    host: str | None = Field(default=None, description="Host name to connect to; defaults to the pod IP.")


class PortalProbeConfig(ProbeConfig):
    """Probe whose action hosts are passed to the kubelet as written."""

    httpGet: PortalHTTPGetAction | None = Field(default=None, description="HTTP GET probe configuration.")
    tcpSocket: PortalTCPSocketAction | None = Field(
        default=None, description="TCP probe: healthy when a connection to the port can be opened."
    )


class PortalSeccompProfile(SeccompProfile):
    localhostProfile: str | None = Field(
        default=None, description="Profile file on the node. Required when type is 'Localhost'."
    )


class PortalSecurityContext(SecurityContext):
    seccompProfile: PortalSeccompProfile | None = Field(default=None, description="Seccomp profile to apply.")


class RBACConfig(ValuesModel):
    create: bool = Field(default=False, description="Create the Role and RoleBinding the API needs.")


class PortalServiceAccountConfig(ServiceAccountConfig):
    """ServiceAccount configuration; a created account must be named."""

    @model_validator(mode="after")
    def _name_required_when_created(self) -> PortalServiceAccountConfig:
        required_if(self, "create", True, "name")
        return self


class APIConfig(ValuesModel):
    """Settings for the portal API Deployment."""

    portalName: NonEmptyStr = Field(
        description="Portal namespace name. Exposed to the server as the PORTAL_NAME environment variable."
    )
    logLevel: Annotated[LogLevel | None, OmitEmpty] = Field(
        default=None, description="Server log level: debug, info, warn or error."
    )
    image: Image = Field(description="Container image of the API server.")

    hpa: HPAConfig = Field(default_factory=HPAConfig, description="HorizontalPodAutoscaler configuration.")
    service: ServiceConfig = Field(default_factory=ServiceConfig, description="Service configuration.")
    resources: ResourceConfig = Field(default_factory=ResourceConfig, description="CPU and memory requests and limits.")

    livenessProbe: PortalProbeConfig = Field(default_factory=PortalProbeConfig, description="Liveness probe.")
    readinessProbe: PortalProbeConfig = Field(default_factory=PortalProbeConfig, description="Readiness probe.")

    securityContext: PortalSecurityContext = Field(
        default_factory=PortalSecurityContext, description="Pod-level security context."
    )
    containerSecurityContext: PortalSecurityContext = Field(
        default_factory=PortalSecurityContext, description="Container-level security context."
    )

    rbac: RBACConfig = Field(default_factory=RBACConfig, description="RBAC configuration.")
    serviceAccount: PortalServiceAccountConfig = Field(
        default_factory=PortalServiceAccountConfig, description="ServiceAccount configuration."
    )
    terminationGracePeriodSeconds: NonNegativeInt | None = Field(
        default=None, description="Seconds the pod is given to shut down gracefully."
    )

    annotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the Deployment.")
    podAnnotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the pods.")
    labels: dict[str, str] = Field(default_factory=dict, description="Labels for the Deployment.")
    podLabels: dict[str, str] = Field(default_factory=dict, description="Labels for the pods.")
    nodeSelector: dict[str, str] = Field(default_factory=dict, description="Node labels for pod scheduling.")
    tolerations: Tolerations = Field(default_factory=list, description="Pod tolerations.")
    affinity: Affinity | None = Field(default=None, description="Pod affinity and anti-affinity rules.")
    imagePullSecrets: list[ImagePullSecret] = Field(
        default_factory=list, description="Secrets holding registry credentials."
    )
    env: list[EnvVar] = Field(default_factory=list, description="Additional environment variables.")
    envFrom: list[EnvFromSource] = Field(
        default_factory=list, description="ConfigMaps and Secrets imported as environment variables."
    )


class TacokumoPortalValues(ValuesModel):
    """Root values for the tacokumo-portal chart."""

    api: APIConfig = Field(description="Portal API server settings.")
