"""Values schema for the tacokumo-admin chart.

The admin server is configured in three places: ``global`` describes the
PostgreSQL and Redis instances it connects to, ``admin`` configures the
Deployment and the application config file rendered into it, and ``ingress``
exposes it.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, model_validator

from helmcharts.charts.utils.base import HTTPProbeConfig, Ingress, PodDisruptionBudget, Service
from helmcharts.charts.utils.external import RedisDB
from helmcharts.charts.utils.fields import (
    CIDR,
    FQDN,
    URL,
    FilePath,
    FQDNOrIP,
    IPAddress,
    LogLevel,
    NonNegativeInt,
    OmitEmpty,
    OmitZero,
    Percentage,
    Port,
    PositiveInt,
    RequiredDuration,
    RequiredPortString,
    ResourceQuantity,
    ValuesModel,
    required_if,
)
from helmcharts.charts.utils.kubernetes import (
    Affinity,
    EnvFromSource,
    EnvVar,
    ExternalTrafficPolicy,
    Image,
    ImagePullSecret,
    LabelSelector,
    NonEmptyStr,
    PodSecurityContext,
    Resources,
    SecurityContext,
    ServiceAccountConfig,
    Tolerations,
    Volume,
    VolumeMount,
)

# Global


class PostgreSQLExternalConfig(ValuesModel):
    """PostgreSQL instance the admin server connects to."""

    host: FQDNOrIP = Field(description="Database hostname or IP address.")
    port: Port = Field(description="Database port, usually 5432.")
    database: NonEmptyStr = Field(description="Name of the admin database.")
    username: NonEmptyStr = Field(description="Database user.")
    secretName: NonEmptyStr = Field(description="Secret holding the database password.")
    initialConnRetry: PositiveInt = Field(description="Connection attempts made at startup before giving up.")


class RedisExternalConfig(ValuesModel):
    """Redis instance the admin server connects to."""

    host: FQDNOrIP = Field(description="Redis hostname or IP address.")
    port: Port = Field(description="Redis port, usually 6379.")
    db: RedisDB = Field(default=0, description="Logical database index (0-15).")
    secretName: NonEmptyStr = Field(description="Secret holding the Redis password.")
    initialConnRetry: PositiveInt = Field(description="Connection attempts made at startup before giving up.")


class ExternalServicesConfig(ValuesModel):
    postgresql: PostgreSQLExternalConfig = Field(description="PostgreSQL connection settings.")
    redis: RedisExternalConfig = Field(description="Redis connection settings.")


class GlobalConfig(ValuesModel):
    """Settings shared by every component of the release."""

    externalServices: ExternalServicesConfig = Field(description="External services the release depends on.")


# Application config file


class AdminDBConfig(ValuesModel):
    """Database section of the admin config file.

    Host, user, password and database name are injected from the
    environment at runtime, so only the port and retry count are checked.
    """

    host: str | None = Field(default=None, description="Overridden by the environment at runtime.")
    port: Port = Field(description="Database port.")
    user: str | None = Field(default=None, description="Overridden by the environment at runtime.")
    password: str | None = Field(default=None, description="Overridden by the environment at runtime.")
    dbName: str | None = Field(default=None, description="Overridden by the environment at runtime.")
    initialConnRetry: PositiveInt = Field(description="Connection attempts made at startup before giving up.")


class AuthAppConfig(ValuesModel):
    """GitHub login settings of the admin config file."""

    clientId: str | None = Field(default=None, description="Overridden by the environment at runtime.")
    clientSecret: str | None = Field(default=None, description="Overridden by the environment at runtime.")
    callbackUrl: URL = Field(description="OAuth callback URL registered with GitHub.")
    frontendUrl: URL = Field(description="URL of the admin frontend users are redirected to after login.")
    githubOrg: NonEmptyStr = Field(description="GitHub organization whose members may sign in.")
    sessionTtl: RequiredDuration = Field(
        description="Session lifetime as a Go duration (e.g., '24h')."
    )
    cookieSecure: bool = Field(default=False, description="Only send the session cookie over HTTPS.")


class RedisAppConfig(ValuesModel):
    host: str | None = Field(default=None, description="Overridden by the environment at runtime.")
    port: Port = Field(description="Redis port.")
    password: str | None = Field(default=None, description="Overridden by the environment at runtime.")
    db: RedisDB = Field(default=0, description="Logical database index (0-15).")
    initialConnRetry: PositiveInt = Field(description="Connection attempts made at startup before giving up.")


class CORSAppConfig(ValuesModel):
    """CORS section of the admin config file. Lists are comma separated strings."""

    allowOrigins: NonEmptyStr = Field(description="Comma separated allowed origins.")
    allowMethods: NonEmptyStr = Field(description="Comma separated allowed methods.")
    allowHeaders: NonEmptyStr = Field(description="Comma separated allowed request headers.")
    exposeHeaders: str | None = Field(default=None, description="Comma separated exposed response headers.")
    allowCredentials: bool = Field(default=False, description="Allow cookies and credentials.")
    maxAge: NonNegativeInt = Field(default=0, description="Seconds a preflight response may be cached.")


class TLSAppConfig(ValuesModel):
    enabled: bool = Field(default=False, description="Serve HTTPS directly from the admin server.")
    certFile: FilePath | None = Field(default=None, description="Path to the certificate file. Required when enabled.")
    keyFile: FilePath | None = Field(default=None, description="Path to the private key file. Required when enabled.")

    @model_validator(mode="after")
    def _files_required_when_enabled(self) -> TLSAppConfig:
        required_if(self, "enabled", True, "certFile", "keyFile")
        return self


class OpenTelemetryAppConfig(ValuesModel):
    enabled: bool = Field(default=False, description="Enable OpenTelemetry export.")
    serviceName: str | None = Field(default=None, description="service.name resource attribute.")
    tracesExporter: Annotated[Literal["otlp", "jaeger", "zipkin", "console"] | None, OmitEmpty] = Field(
        default=None, description="Trace exporter: otlp, jaeger, zipkin or console."
    )
    otlpEndpoint: Annotated[URL | None, OmitEmpty] = Field(default=None, description="OTLP collector endpoint.")
    otlpProtocol: Annotated[Literal["grpc", "http"] | None, OmitEmpty] = Field(
        default=None, description="OTLP transport: grpc or http."
    )


class AdminAppConfig(ValuesModel):
    """The admin server's config file, rendered into a ConfigMap."""

    addr: IPAddress = Field(description="Address the server listens on (e.g., '0.0.0.0').")
    port: RequiredPortString = Field(
        description="Port the server listens on, as a string (e.g., '8080')."
    )
    baseDomain: FQDN = Field(description="Base domain the admin UI is served under.")
    logLevel: LogLevel = Field(description="Server log level: debug, info, warn or error.")

    adminDb: AdminDBConfig = Field(description="Database settings.")
    auth: AuthAppConfig = Field(description="Authentication settings.")
    redis: RedisAppConfig = Field(description="Redis settings.")
    cors: CORSAppConfig = Field(description="CORS settings.")
    tls: TLSAppConfig = Field(default_factory=TLSAppConfig, description="TLS settings.")
    opentelemetry: OpenTelemetryAppConfig = Field(
        default_factory=OpenTelemetryAppConfig, description="OpenTelemetry settings."
    )


class GitHubOAuthConfig(ValuesModel):
    secretName: NonEmptyStr = Field(description="Secret holding the GitHub OAuth client ID and secret.")


class GitHubConfig(ValuesModel):
    oauth: GitHubOAuthConfig = Field(description="GitHub OAuth app credentials.")


# Service


class ClientIPConfig(ValuesModel):
    timeoutSeconds: NonNegativeInt | None = Field(
        default=None, description="Seconds a ClientIP session stays sticky."
    )


class SessionAffinityConfig(ValuesModel):
    clientIP: ClientIPConfig | None = Field(default=None, description="ClientIP session affinity settings.")


class AdminServiceConfig(Service):
    """Service for the admin server. Unlike the generic Service, targetPort is required."""

    targetPort: Port = Field(description="Container port traffic is forwarded to.")
    sessionAffinity: Annotated[Literal["None", "ClientIP"] | None, OmitEmpty] = Field(
        default=None, description="Session affinity: None or ClientIP."
    )
    sessionAffinityConfig: SessionAffinityConfig | None = Field(
        default=None, description="Session affinity settings."
    )
    loadBalancerIP: Annotated[IPAddress | None, OmitEmpty] = Field(default=None, description="Requested load balancer IP.")
    loadBalancerSourceRanges: list[CIDR] = Field(
        default_factory=list, description="Client CIDRs allowed through the load balancer."
    )
    externalTrafficPolicy: Annotated[ExternalTrafficPolicy | None, OmitEmpty] = Field(
        default=None, description="Cluster or Local."
    )
    externalName: Annotated[FQDN | None, OmitEmpty] = Field(default=None, description="DNS name for ExternalName services.")


class AdminServiceAccountConfig(ServiceAccountConfig):
    name: NonEmptyStr = Field(description="The name of the ServiceAccount to use or create.")


class AdminHTTPProbeConfig(HTTPProbeConfig):
    """HTTP probe whose timeout and failure threshold must be set explicitly."""

    timeoutSeconds: PositiveInt = Field(description="Seconds after which the probe times out.")
    failureThreshold: PositiveInt = Field(
        description="Consecutive failures after which the container is considered unhealthy."
    )


# Autoscaling


class MetricTarget(ValuesModel):
    type: Literal["Utilization", "Value", "AverageValue"] = Field(description="Kind of target.")
    value: ResourceQuantity | None = Field(default=None, description="Target value of the metric.")
    averageValue: ResourceQuantity | None = Field(
        default=None, description="Target value of the metric averaged across pods."
    )
    averageUtilization: Percentage | None = Field(
        default=None, description="Target utilization (1-100) averaged across pods."
    )


class MetricIdentifier(ValuesModel):
    name: NonEmptyStr = Field(description="Name of the metric.")
    selector: LabelSelector | None = Field(default=None, description="Selects a specific metric stream.")


class CrossVersionObjectReference(ValuesModel):
    kind: NonEmptyStr = Field(description="Kind of the referent.")
    name: NonEmptyStr = Field(description="Name of the referent.")
    apiVersion: NonEmptyStr = Field(description="API version of the referent.")


class ResourceMetricSource(ValuesModel):
    name: NonEmptyStr = Field(description="Resource name: cpu or memory.")
    target: MetricTarget = Field(description="Target value.")


class PodsMetricSource(ValuesModel):
    metric: MetricIdentifier = Field(description="Per-pod metric to scale on.")
    target: MetricTarget = Field(description="Target value.")


class ObjectMetricSource(ValuesModel):
    describedObject: CrossVersionObjectReference = Field(description="Object the metric describes.")
    metric: MetricIdentifier = Field(description="Metric to scale on.")
    target: MetricTarget = Field(description="Target value.")


class ExternalMetricSource(ValuesModel):
    metric: MetricIdentifier = Field(description="External metric to scale on.")
    target: MetricTarget = Field(description="Target value.")


class ContainerResourceMetricSource(ValuesModel):
    name: NonEmptyStr = Field(description="Resource name: cpu or memory.")
    container: NonEmptyStr = Field(description="Container whose usage is measured.")
    target: MetricTarget = Field(description="Target value.")


class MetricSpec(ValuesModel):
    """One metric the autoscaler scales on. Set the source matching ``type``."""

    type: Literal["Resource", "Pods", "Object", "External", "ContainerResource"] = Field(
        description="Metric source type."
    )
    resource: ResourceMetricSource | None = Field(default=None, description="Resource metric source.")
    pods: PodsMetricSource | None = Field(default=None, description="Pods metric source.")
    object: ObjectMetricSource | None = Field(default=None, description="Object metric source.")
    external: ExternalMetricSource | None = Field(default=None, description="External metric source.")
    containerResource: ContainerResourceMetricSource | None = Field(
        default=None, description="Container resource metric source."
    )


class HPAScalingPolicy(ValuesModel):
    type: Literal["Pods", "Percent"] = Field(description="Whether value counts pods or a percentage.")
    value: PositiveInt = Field(description="Amount of change the policy permits.")
    periodSeconds: PositiveInt = Field(description="Window the policy applies over.")


class HPAScalingRules(ValuesModel):
    stabilizationWindowSeconds: NonNegativeInt | None = Field(
        default=None, description="Seconds of past recommendations considered when scaling."
    )
    selectPolicy: Annotated[Literal["Max", "Min", "Disabled"] | None, OmitEmpty] = Field(
        default=None, description="Which policy wins when several apply."
    )
    policies: list[HPAScalingPolicy] = Field(default_factory=list, description="Scaling policies.")


class HPABehavior(ValuesModel):
    scaleUp: HPAScalingRules | None = Field(default=None, description="Rules for scaling up.")
    scaleDown: HPAScalingRules | None = Field(default=None, description="Rules for scaling down.")


class HPAConfig(ValuesModel):
    """HorizontalPodAutoscaler configuration.

    When enabled, both replica bounds are required. Metrics and behavior
    follow the autoscaling/v2 API.
    """

    enabled: bool = Field(default=False, description="Create a HorizontalPodAutoscaler.")
    minReplicas: PositiveInt | None = Field(default=None, description="Minimum number of replicas.")
    maxReplicas: Annotated[PositiveInt | None, OmitZero] = Field(default=None, description="Maximum number of replicas.")
    targetCPUUtilizationPercentage: Percentage | None = Field(
        default=None, description="Average CPU utilization (1-100) the HPA scales towards."
    )
    targetMemoryUtilizationPercentage: Percentage | None = Field(
        default=None, description="Average memory utilization (1-100) the HPA scales towards."
    )
    metrics: list[MetricSpec] = Field(default_factory=list, description="Additional metrics to scale on.")
    behavior: HPABehavior | None = Field(default=None, description="Scale up and scale down behavior.")

    @model_validator(mode="after")
    def _bounds_required_when_enabled(self) -> HPAConfig:
        required_if(self, "enabled", True, "minReplicas", "maxReplicas")
        return self


class AdminConfig(ValuesModel):
    """Settings for the admin server Deployment."""

    replicaCount: PositiveInt = Field(description="Number of admin server replicas.")
    config: AdminAppConfig = Field(description="Application config file contents.")
    github: GitHubConfig = Field(description="GitHub integration.")
    image: Image = Field(description="Container image of the admin server.")
    service: AdminServiceConfig = Field(description="Service configuration.")
    serviceAccount: AdminServiceAccountConfig = Field(description="ServiceAccount configuration.")

    terminationGracePeriodSeconds: NonNegativeInt = Field(
        default=0, description="Seconds the pod is given to shut down gracefully."
    )
    affinity: Affinity | None = Field(default=None, description="Pod affinity and anti-affinity rules.")
    nodeSelector: dict[str, str] = Field(default_factory=dict, description="Node labels for pod scheduling.")
    tolerations: Tolerations = Field(default_factory=list, description="Pod tolerations.")
    labels: dict[str, str] = Field(default_factory=dict, description="Labels for the Deployment.")
    annotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the Deployment.")
    podAnnotations: dict[str, str] = Field(default_factory=dict, description="Annotations for the pods.")
    podLabels: dict[str, str] = Field(default_factory=dict, description="Labels for the pods.")

    securityContext: SecurityContext | None = Field(default=None, description="Container security context.")
    podSecurityContext: PodSecurityContext | None = Field(default=None, description="Pod security context.")

    livenessProbe: AdminHTTPProbeConfig | None = Field(default=None, description="Liveness probe.")
    readinessProbe: AdminHTTPProbeConfig | None = Field(default=None, description="Readiness probe.")

    resources: Resources = Field(default_factory=Resources, description="CPU and memory requests and limits.")
    imagePullSecrets: list[ImagePullSecret] = Field(
        default_factory=list, description="Secrets holding registry credentials."
    )
    podDisruptionBudget: PodDisruptionBudget = Field(
        default_factory=PodDisruptionBudget, description="PodDisruptionBudget configuration."
    )
    horizontalPodAutoscaler: HPAConfig = Field(
        default_factory=HPAConfig, description="HorizontalPodAutoscaler configuration."
    )

    env: list[EnvVar] = Field(default_factory=list, description="Additional environment variables.")
    envFrom: list[EnvFromSource] = Field(
        default_factory=list, description="ConfigMaps and Secrets imported as environment variables."
    )
    volumeMounts: list[VolumeMount] = Field(default_factory=list, description="Additional volume mounts.")
    volumes: list[Volume] = Field(default_factory=list, description="Additional volumes.")


class TacokumoAdminValues(ValuesModel):
    """Root values for the tacokumo-admin chart."""

    global_: GlobalConfig = Field(alias="global", description="Settings shared across components.")
    admin: AdminConfig = Field(description="Admin server settings.")
    ingress: Ingress = Field(default_factory=Ingress, description="Ingress configuration.")
