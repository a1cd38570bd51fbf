"""Values schema for the tacokumo-application chart.

Deploys a single user application: a Deployment with an HPA, an optional
Service, and either an Ingress or a Gateway API HTTPRoute in front of it.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field, model_validator

from helmcharts.charts.utils.base import Ingress, ProbeConfig, ServicePort
from helmcharts.charts.utils.fields import (
    FQDN,
    OmitEmpty,
    Percentage,
    PositiveInt,
    ValuesModel,
    gte_field,
    required_if,
)
from helmcharts.charts.utils.kubernetes import (
    EnvFromSource,
    ImagePullSecret,
    NonEmptyStr,
    PullPolicy,
    ResourceConfig,
)


class HPAConfig(ValuesModel):
    """HorizontalPodAutoscaler bounds for the application Deployment."""

    minReplicas: PositiveInt = Field(description="Minimum number of replicas the HPA keeps running.")
    maxReplicas: PositiveInt = Field(
        description="Maximum number of replicas. Must be greater than or equal to minReplicas."
    )
    targetMemoryUtilizationPercentage: Percentage = Field(
        description="Average memory utilization (1-100, as a percentage of requests) the HPA scales towards."
    )

    @model_validator(mode="after")
    def _max_at_least_min(self) -> HPAConfig:
        gte_field(self, "maxReplicas", "minReplicas")
        return self


class ServiceConfig(ValuesModel):
    """Service in front of the application. Ports are required once enabled."""

    enabled: bool = Field(default=False, description="Create a Service for the application.")
    type: Annotated[Literal["ClusterIP", "NodePort", "LoadBalancer"] | None, OmitEmpty] = Field(
        default=None, description="Service type: ClusterIP, NodePort or LoadBalancer."
    )
    ports: list[ServicePort] = Field(
        default_factory=list,
        description="Ports the Service exposes. Example: [{'name': 'http', 'port': 80, 'targetPort': 8080}].",
    )

    @model_validator(mode="after")
    def _ports_required_when_enabled(self) -> ServiceConfig:
        required_if(self, "enabled", True, "ports")
        return self


class HTTPRouteMatchType(StrEnum):
    PATH_PREFIX = "PathPrefix"
    EXACT = "Exact"
    REGULAR_EXPRESSION = "RegularExpression"


class HTTPRoutePath(ValuesModel):
    type: HTTPRouteMatchType = Field(description="How to match the path: PathPrefix, Exact or RegularExpression.")
    value: NonEmptyStr = Field(description="Path value to match against (e.g., '/api').")


class HTTPRouteMatch(ValuesModel):
    path: HTTPRoutePath | None = Field(default=None, description="Path match condition.")


class HTTPRouteRule(ValuesModel):
    matches: list[HTTPRouteMatch] = Field(default_factory=list, description="Conditions ORed together.")


class HTTPRouteParentRef(ValuesModel):
    name: NonEmptyStr = Field(description="Name of the Gateway the route attaches to.")
    namespace: NonEmptyStr = Field(description="Namespace of the Gateway.")


class HTTPRouteConfig(ValuesModel):
    """Gateway API HTTPRoute configuration.

    When enabled, the route must name its parent Gateways, hostnames and rules.
    """

    enabled: bool = Field(default=False, description="Create an HTTPRoute for the application.")
    parentRefs: list[HTTPRouteParentRef] = Field(
        default_factory=list, description="Gateways the route attaches to."
    )
    hostnames: list[FQDN] = Field(default_factory=list, description="Hostnames the route serves.")
    rules: list[HTTPRouteRule] = Field(default_factory=list, description="Routing rules.")

    @model_validator(mode="after")
    def _route_required_when_enabled(self) -> HTTPRouteConfig:
        required_if(self, "enabled", True, "parentRefs", "hostnames", "rules")
        return self


class RouteConfig(ValuesModel):
    http: HTTPRouteConfig = Field(default_factory=HTTPRouteConfig, description="HTTPRoute settings.")


class MainConfig(ValuesModel):
    """Settings for the application workload."""

    applicationName: NonEmptyStr = Field(
        description="Application name, used as the base name of every rendered resource."
    )
    image: NonEmptyStr = Field(description="Full image reference including the tag (e.g., 'nginx:1.27').")
    imagePullSecrets: list[ImagePullSecret] = Field(
        default_factory=list, description="Secrets holding registry credentials for private images."
    )
    imagePullPolicy: Annotated[PullPolicy | None, OmitEmpty] = Field(
        default=None, description="Image pull policy: Always, IfNotPresent or Never."
    )

    hpa: HPAConfig = Field(description="HorizontalPodAutoscaler configuration. The chart always renders an HPA.")
    service: ServiceConfig = Field(default_factory=ServiceConfig, description="Service configuration.")
    ingress: Ingress = Field(default_factory=Ingress, description="Ingress configuration.")
    route: RouteConfig = Field(default_factory=RouteConfig, description="Gateway API route configuration.")

    resources: ResourceConfig = Field(default_factory=ResourceConfig, description="CPU and memory requests and limits.")
    annotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the Deployment.")
    podAnnotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the pods.")
    envFrom: list[EnvFromSource] = Field(
        default_factory=list, description="ConfigMaps and Secrets imported as environment variables."
    )

    livenessProbe: ProbeConfig = Field(
        default_factory=ProbeConfig, description="Liveness probe. Leave empty to disable."
    )
    readinessProbe: ProbeConfig = Field(
        default_factory=ProbeConfig, description="Readiness probe. Leave empty to disable."
    )
    startupProbe: ProbeConfig = Field(
        default_factory=ProbeConfig, description="Startup probe. Leave empty to disable."
    )


class TacokumoApplicationValues(ValuesModel):
    """Root values for the tacokumo-application chart."""

    main: MainConfig = Field(description="Application workload settings.")
