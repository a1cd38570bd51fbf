"""Values schema for the tacokumo-portal-proxy chart.

The proxy routes ``*.<baseDomain>`` traffic to portal instances and exposes
its own metrics on a second port.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from helmcharts.charts.utils.base import HTTPProbe, PodDisruptionBudget, ServicePort
from helmcharts.charts.utils.fields import CIDR, FQDN, IPAddress, OmitEmpty, Port, PositiveInt, ValuesModel
from helmcharts.charts.utils.kubernetes import (
    Affinity,
    EnvFromSource,
    EnvVar,
    ExternalTrafficPolicy,
    Image,
    ImagePullSecret,
    NonEmptyStr,
    Resources,
    SecurityContext,
    ServiceType,
    Tolerations,
    Volume,
    VolumeMount,
)


class NamedServicePort(ServicePort):
    name: NonEmptyStr = Field(description="Port name, unique within the Service.")


class ProxyServiceConfig(ValuesModel):
    """Service exposing the proxy's HTTP and metrics ports."""

    type: ServiceType = Field(description="Service type: ClusterIP, NodePort, LoadBalancer or ExternalName.")
    httpPort: Port = Field(description="Port serving proxied HTTP traffic.")
    metricsPort: Port = Field(description="Port serving Prometheus metrics.")
    annotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the Service.")
    extraPorts: list[NamedServicePort] = Field(
        default_factory=list, description="Additional ports to expose. Each needs a name."
    )
    loadBalancerIP: Annotated[IPAddress | None, OmitEmpty] = Field(default=None, description="Requested load balancer IP.")
    loadBalancerSourceRanges: list[CIDR] = Field(
        default_factory=list, description="Client CIDRs allowed through the load balancer."
    )
    externalTrafficPolicy: Annotated[ExternalTrafficPolicy | None, OmitEmpty] = Field(
        default=None,
        description="'Local' preserves the client source IP; 'Cluster' spreads load evenly.",
    )


class PortalProxyConfig(ValuesModel):
    """Settings for the proxy Deployment."""

    replicaCount: PositiveInt = Field(description="Number of proxy replicas.")
    baseDomain: FQDN = Field(description="Domain whose subdomains are routed to portals (e.g., 'portal.example.com').")
    image: Image = Field(description="Container image of the proxy.")
    service: ProxyServiceConfig = Field(description="Service configuration.")
    resources: Resources = Field(default_factory=Resources, description="CPU and memory requests and limits.")

    livenessProbe: HTTPProbe = Field(default_factory=HTTPProbe, description="Liveness probe.")
    readinessProbe: HTTPProbe = Field(default_factory=HTTPProbe, description="Readiness probe.")
    securityContext: SecurityContext = Field(
        default_factory=SecurityContext, description="Container security context."
    )

    annotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the Deployment.")
    podAnnotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the pods.")
    nodeSelector: dict[str, str] = Field(default_factory=dict, description="Node labels for pod scheduling.")
    tolerations: Tolerations = Field(default_factory=list, description="Pod tolerations.")
    affinity: Affinity | None = Field(default=None, description="Pod affinity and anti-affinity rules.")
    imagePullSecrets: list[ImagePullSecret] = Field(
        default_factory=list, description="Secrets holding registry credentials."
    )
    podDisruptionBudget: PodDisruptionBudget = Field(
        default_factory=PodDisruptionBudget, description="PodDisruptionBudget configuration."
    )

    env: list[EnvVar] = Field(default_factory=list, description="Additional environment variables.")
    envFrom: list[EnvFromSource] = Field(
        default_factory=list, description="ConfigMaps and Secrets imported as environment variables."
    )
    volumeMounts: list[VolumeMount] = Field(default_factory=list, description="Additional volume mounts.")
    volumes: list[Volume] = Field(
        default_factory=list, description="Additional volumes, including projected volumes."
    )


class TacokumoPortalProxyValues(ValuesModel):
    """Root values for the tacokumo-portal-proxy chart."""

    portalProxy: PortalProxyConfig = Field(description="Portal proxy settings.")
