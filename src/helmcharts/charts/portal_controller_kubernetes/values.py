"""Values schema for the portal-controller-kubernetes chart.

The chart installs the portal CRDs and the controller-manager Deployment
that reconciles them.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator

from helmcharts.charts.utils.base import HTTPProbeConfig, PodDisruptionBudget
from helmcharts.charts.utils.fields import (
    FilePath,
    NonNegativeInt,
    OmitZero,
    Port,
    PositiveInt,
    ValuesModel,
    required_if,
)
from helmcharts.charts.utils.kubernetes import (
    Affinity,
    ContainerPort,
    ContainerSecurityContext,
    EnvFromSource,
    EnvVar,
    Image,
    ImagePullSecret,
    PodSecurityContext,
    Resources,
    ServiceAccountConfig,
    Tolerations,
    VolumeMount,
)


class CRDsConfig(ValuesModel):
    install: bool = Field(default=False, description="Install the portal CustomResourceDefinitions with the chart.")


class ManagerContainerConfig(ValuesModel):
    """The controller-manager container."""

    image: Image = Field(description="Container image of the controller manager.")
    extraArgs: list[str] = Field(default_factory=list, description="Extra command line arguments for the manager.")

    livenessProbe: HTTPProbeConfig = Field(description="Liveness probe, usually GET /healthz on port 8081.")
    readinessProbe: HTTPProbeConfig = Field(description="Readiness probe, usually GET /readyz on port 8081.")

    securityContext: ContainerSecurityContext = Field(
        default_factory=ContainerSecurityContext, description="Container security context."
    )
    resources: Resources = Field(default_factory=Resources, description="CPU and memory requests and limits.")
    env: list[EnvVar] = Field(default_factory=list, description="Additional environment variables.")
    envFrom: list[EnvFromSource] = Field(
        default_factory=list, description="ConfigMaps and Secrets imported as environment variables."
    )
    volumeMounts: list[VolumeMount] = Field(default_factory=list, description="Additional volume mounts.")
    ports: list[ContainerPort] = Field(default_factory=list, description="Ports the container exposes.")
    workingDir: FilePath | None = Field(default=None, description="Working directory of the container.")
    command: list[str] = Field(default_factory=list, description="Entrypoint override.")
    args: list[str] = Field(default_factory=list, description="Arguments override.")


class MetricsConfig(ValuesModel):
    """Metrics endpoint of the controller manager."""

    enabled: bool = Field(default=False, description="Expose the metrics endpoint.")
    port: Annotated[Port | None, OmitZero] = Field(default=None, description="Metrics port. Required when enabled.")
    path: str | None = Field(default=None, description="Metrics path (e.g., '/metrics'). Required when enabled.")
    annotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the metrics Service.")

    @model_validator(mode="after")
    def _endpoint_required_when_enabled(self) -> MetricsConfig:
        required_if(self, "enabled", True, "port", "path")
        return self


class ControllerConfig(ValuesModel):
    """Settings for the controller-manager Deployment."""

    terminationGracePeriodSeconds: NonNegativeInt = Field(
        default=0, description="Seconds the pod is given to shut down gracefully."
    )

    affinity: Affinity | None = Field(default=None, description="Pod affinity and anti-affinity rules.")
    labels: dict[str, str] = Field(default_factory=dict, description="Labels for the Deployment.")
    annotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the Deployment.")
    podAnnotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the pods.")
    podLabels: dict[str, str] = Field(default_factory=dict, description="Labels for the pods.")
    imagePullSecrets: list[ImagePullSecret] = Field(
        default_factory=list, description="Secrets holding registry credentials."
    )

    securityContext: PodSecurityContext = Field(
        default_factory=PodSecurityContext, description="Pod security context."
    )
    managerContainer: ManagerContainerConfig = Field(description="Controller manager container.")

    nodeSelector: dict[str, str] = Field(default_factory=dict, description="Node labels for pod scheduling.")
    tolerations: Tolerations = Field(default_factory=list, description="Pod tolerations.")
    priorityClassName: str | None = Field(default=None, description="PriorityClass of the pods.")

    serviceAccount: ServiceAccountConfig = Field(
        default_factory=ServiceAccountConfig, description="ServiceAccount configuration."
    )
    replicaCount: Annotated[PositiveInt | None, OmitZero] = Field(
        default=None, description="Number of replicas. Leader election keeps one active."
    )
    podDisruptionBudget: PodDisruptionBudget = Field(
        default_factory=PodDisruptionBudget, description="PodDisruptionBudget configuration."
    )
    metrics: MetricsConfig = Field(default_factory=MetricsConfig, description="Metrics endpoint configuration.")


class PortalControllerKubernetesValues(ValuesModel):
    """Root values for the portal-controller-kubernetes chart."""

    crds: CRDsConfig = Field(description="CRD installation.")
    controller: ControllerConfig = Field(description="Controller settings.")
