"""Utility types for Helm chart schemas.

This module exports common Kubernetes, Helm and external service types for
reuse across chart schemas.
"""

from helmcharts.charts.utils.base import (
    HTTPProbe,
    HTTPProbeConfig,
    Ingress,
    IngressHost,
    IngressPath,
    IngressTLS,
    PathType,
    PodDisruptionBudget,
    ProbeConfig,
    Service,
    ServicePort,
)
from helmcharts.charts.utils.external import (
    AuthConfig,
    CORSConfig,
    ExternalServiceConfig,
    OpenTelemetryConfig,
    PostgreSQLConfig,
    RedisConfig,
    TLSConfig,
)
from helmcharts.charts.utils.fields import ValuesModel, validate_struct
from helmcharts.charts.utils.kubernetes import (
    Affinity,
    ContainerPort,
    ContainerSecurityContext,
    EnvFromSource,
    EnvVar,
    Image,
    ImagePullSecret,
    PodSecurityContext,
    PullPolicy,
    ResourceConfig,
    ResourceRequirements,
    ResourceSpec,
    Resources,
    SecurityContext,
    ServiceAccountConfig,
    Toleration,
    Tolerations,
    Volume,
    VolumeMount,
)

__all__ = [
    "Affinity",
    "AuthConfig",
    "CORSConfig",
    "ContainerPort",
    "ContainerSecurityContext",
    "EnvFromSource",
    "EnvVar",
    "ExternalServiceConfig",
    "HTTPProbe",
    "HTTPProbeConfig",
    "Image",
    "ImagePullSecret",
    "Ingress",
    "IngressHost",
    "IngressPath",
    "IngressTLS",
    "OpenTelemetryConfig",
    "PathType",
    "PodDisruptionBudget",
    "PodSecurityContext",
    "PostgreSQLConfig",
    "ProbeConfig",
    "PullPolicy",
    "RedisConfig",
    "ResourceConfig",
    "ResourceRequirements",
    "ResourceSpec",
    "Resources",
    "SecurityContext",
    "Service",
    "ServiceAccountConfig",
    "ServicePort",
    "TLSConfig",
    "Toleration",
    "Tolerations",
    "ValuesModel",
    "Volume",
    "VolumeMount",
    "validate_struct",
]
