"""Common Kubernetes types used across Helm chart schemas.

These types model Kubernetes primitives (images, resources, security
contexts, scheduling, environment and volumes) that several chart value
definitions reuse. Charts that check a primitive more loosely get their own
type (``ResourceConfig``) or subclass the one here.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field, model_validator

from helmcharts.charts.utils.fields import (
    FQDNOrIP,
    FileMode,
    FilePath,
    IPAddress,
    NonNegativeInt,
    OmitEmpty,
    Port,
    RequiredFilePath,
    ResourceQuantity,
    ValuesModel,
    Weight,
    required_if,
)

NonEmptyStr = Annotated[str, Field(min_length=1)]


class PullPolicy(StrEnum):
    """Container image pull policy.

    Defines when the kubelet should attempt to pull (download) the specified image.
    """

    ALWAYS = "Always"
    IF_NOT_PRESENT = "IfNotPresent"
    NEVER = "Never"


class Protocol(StrEnum):
    TCP = "TCP"
    UDP = "UDP"
    SCTP = "SCTP"


class Scheme(StrEnum):
    HTTP = "HTTP"
    HTTPS = "HTTPS"


class SeccompProfileType(StrEnum):
    RUNTIME_DEFAULT = "RuntimeDefault"
    LOCALHOST = "Localhost"
    UNCONFINED = "Unconfined"


class NodeSelectorOperator(StrEnum):
    IN = "In"
    NOT_IN = "NotIn"
    EXISTS = "Exists"
    DOES_NOT_EXIST = "DoesNotExist"
    GT = "Gt"
    LT = "Lt"


class LabelSelectorOperator(StrEnum):
    IN = "In"
    NOT_IN = "NotIn"
    EXISTS = "Exists"
    DOES_NOT_EXIST = "DoesNotExist"


class TolerationOperator(StrEnum):
    EXISTS = "Exists"
    EQUAL = "Equal"


class TaintEffect(StrEnum):
    NO_SCHEDULE = "NoSchedule"
    PREFER_NO_SCHEDULE = "PreferNoSchedule"
    NO_EXECUTE = "NoExecute"


class MountPropagation(StrEnum):
    NONE = "None"
    HOST_TO_CONTAINER = "HostToContainer"
    BIDIRECTIONAL = "Bidirectional"


class HostPathType(StrEnum):
    DIRECTORY_OR_CREATE = "DirectoryOrCreate"
    DIRECTORY = "Directory"
    FILE_OR_CREATE = "FileOrCreate"
    FILE = "File"
    SOCKET = "Socket"
    CHAR_DEVICE = "CharDevice"
    BLOCK_DEVICE = "BlockDevice"


class ServiceType(StrEnum):
    """Kubernetes Service type, which decides how a Service is exposed."""

    CLUSTER_IP = "ClusterIP"
    NODE_PORT = "NodePort"
    LOAD_BALANCER = "LoadBalancer"
    EXTERNAL_NAME = "ExternalName"


class ExternalTrafficPolicy(StrEnum):
    CLUSTER = "Cluster"
    LOCAL = "Local"


class Image(ValuesModel):
    """Container image configuration.

    Defines the container image to use for a workload: the repository, the
    tag and an optional pull policy.
    """

    repository: NonEmptyStr = Field(
        description=(
            "Container image repository path, excluding the tag. Can be a Docker Hub image (e.g., 'nginx') "
            "or a fully qualified registry path (e.g., 'ghcr.io/tacokumo/admin')."
        )
    )
    tag: NonEmptyStr = Field(
        description=(
            "Container image tag to pull. Use semantic versions (e.g., 'v1.2.3') for production or git "
            "commit SHAs for CI/CD traceability. Numeric tags such as 1.21 are read as strings."
        )
    )
    pullPolicy: Annotated[PullPolicy | None, OmitEmpty] = Field(
        default=None,
        description=(
            "Image pull policy that determines when Kubernetes pulls the image. "
            "'Always' forces a pull on every pod start, 'IfNotPresent' only pulls if the image isn't cached, "
            "'Never' assumes the image exists locally. Leave unset to use the cluster default."
        ),
    )


class ResourceRequirements(ValuesModel):
    """CPU and memory quantities for one side (requests or limits) of a container's resources."""

    cpu: ResourceQuantity | None = Field(
        default=None,
        description=(
            "CPU resource quantity using Kubernetes notation. Examples: '100m' (0.1 CPU), '500m', '1', '2.5'."
        ),
    )
    memory: ResourceQuantity | None = Field(
        default=None,
        description=(
            "Memory resource quantity using Kubernetes notation. Examples: '128Mi', '1Gi', '512M', '1000000'. "
            "Exceeding a memory limit causes the container to be OOMKilled."
        ),
    )


class Resources(ValuesModel):
    """Pod resource requests and limits.

    Requests are guaranteed to the container; limits cap what it can consume.
    """

    requests: ResourceRequirements = Field(
        default_factory=ResourceRequirements,
        description="Resource requests: the minimum resources the scheduler reserves for the container.",
    )
    limits: ResourceRequirements = Field(
        default_factory=ResourceRequirements,
        description="Resource limits: CPU is throttled and memory is OOMKilled beyond these values.",
    )


class ResourceSpec(ValuesModel):
    """CPU and memory for one side of a container's resources, passed through unchecked."""

    cpu: str | None = Field(default=None, description="CPU quantity (e.g., '100m'). Not validated.")
    memory: str | None = Field(default=None, description="Memory quantity (e.g., '128Mi'). Not validated.")


class ResourceConfig(ValuesModel):
    """Resource limits and requests whose quantities are left to the Kubernetes API to check."""

    limits: ResourceSpec = Field(default_factory=ResourceSpec, description="Resource limits.")
    requests: ResourceSpec = Field(default_factory=ResourceSpec, description="Resource requests.")


class Capabilities(ValuesModel):
    """Linux capabilities to add to or drop from a container."""

    add: list[str] = Field(default_factory=list, description="Capabilities to add (e.g., 'NET_BIND_SERVICE').")
    drop: list[str] = Field(default_factory=list, description="Capabilities to drop (e.g., 'ALL').")


class SeccompProfile(ValuesModel):
    """Seccomp profile applied to a pod or container.

    A ``Localhost`` profile must name the profile file on the node.
    """

    type: SeccompProfileType = Field(
        description=(
            "Which kind of seccomp profile to apply. 'RuntimeDefault' uses the container runtime default, "
            "'Localhost' uses a profile file on the node, 'Unconfined' disables seccomp filtering."
        )
    )
    localhostProfile: FilePath | None = Field(
        default=None,
        description=(
            "Path of the profile file relative to the kubelet's seccomp directory. "
            "Required when type is 'Localhost'."
        ),
    )

    @model_validator(mode="after")
    def _localhost_profile_required(self) -> SeccompProfile:
        required_if(self, "type", SeccompProfileType.LOCALHOST, "localhostProfile")
        return self


class SELinuxOptions(ValuesModel):
    """SELinux labels applied to a pod or container."""

    user: str | None = Field(default=None, description="SELinux user label.")
    role: str | None = Field(default=None, description="SELinux role label.")
    type: str | None = Field(default=None, description="SELinux type label.")
    level: str | None = Field(default=None, description="SELinux level label.")


class WindowsOptions(ValuesModel):
    """Windows-specific settings for pods and containers."""

    gmsaCredentialSpecName: str | None = Field(
        default=None, description="Name of the GMSA credential spec to use."
    )
    gmsaCredentialSpec: str | None = Field(
        default=None, description="Inlined contents of the GMSA credential spec."
    )
    runAsUserName: str | None = Field(
        default=None, description="Windows user name to run the entrypoint of the container process."
    )
    hostProcess: bool | None = Field(
        default=None, description="Run the container as a Windows 'Host Process' container."
    )


class Sysctl(ValuesModel):
    """A namespaced kernel parameter to set for the pod."""

    name: NonEmptyStr = Field(description="Name of the sysctl (e.g., 'net.ipv4.ip_local_port_range').")
    value: NonEmptyStr = Field(description="Value to set for the sysctl.")


class SecurityContext(ValuesModel):
    """Security settings shared by pod and container security contexts.

    Common hardened setting: ``runAsNonRoot: true``, ``readOnlyRootFilesystem: true``,
    ``allowPrivilegeEscalation: false`` and ``capabilities: {drop: [ALL]}``.
    """

    runAsUser: NonNegativeInt | None = Field(
        default=None, description="UID to run the entrypoint of the container process."
    )
    runAsGroup: NonNegativeInt | None = Field(
        default=None, description="GID to run the entrypoint of the container process."
    )
    runAsNonRoot: bool | None = Field(
        default=None,
        description="Require the container to run as a non-root user. The kubelet refuses to start root containers.",
    )
    readOnlyRootFilesystem: bool | None = Field(
        default=None, description="Mount the container's root filesystem as read-only."
    )
    allowPrivilegeEscalation: bool | None = Field(
        default=None,
        description="Whether a process can gain more privileges than its parent (controls no_new_privs).",
    )
    capabilities: Capabilities | None = Field(
        default=None, description="Linux capabilities to add or drop."
    )
    seccompProfile: SeccompProfile | None = Field(
        default=None, description="Seccomp profile to apply."
    )


class PodSecurityContext(ValuesModel):
    """Pod-level security settings applied to all containers in the pod."""

    runAsUser: NonNegativeInt | None = Field(default=None, description="UID for all containers in the pod.")
    runAsGroup: NonNegativeInt | None = Field(default=None, description="GID for all containers in the pod.")
    runAsNonRoot: bool | None = Field(
        default=None, description="Require every container in the pod to run as a non-root user."
    )
    fsGroup: NonNegativeInt | None = Field(
        default=None,
        description=(
            "Supplemental group applied to all containers. Volumes that support ownership management "
            "are owned by this GID."
        ),
    )
    fsGroupChangePolicy: Annotated[Literal["Always", "OnRootMismatch"] | None, OmitEmpty] = Field(
        default=None,
        description="When to change volume ownership to fsGroup: 'Always' or only 'OnRootMismatch'.",
    )
    seccompProfile: SeccompProfile | None = Field(default=None, description="Seccomp profile for the pod.")
    seLinuxOptions: SELinuxOptions | None = Field(default=None, description="SELinux context for the pod.")
    supplementalGroups: list[NonNegativeInt] = Field(
        default_factory=list, description="Additional GIDs applied to the first process of each container."
    )
    sysctls: list[Sysctl] = Field(default_factory=list, description="Namespaced sysctls to set for the pod.")
    windowsOptions: WindowsOptions | None = Field(
        default=None, description="Windows-specific settings for all containers."
    )


class ContainerSecurityContext(SecurityContext):
    """Container-level security settings.

    These harden an individual container beyond the pod-level settings.
    """

    privileged: bool | None = Field(
        default=None,
        description="Run the container in privileged mode, equivalent to root on the host. Avoid in production.",
    )
    seLinuxOptions: SELinuxOptions | None = Field(default=None, description="SELinux context for the container.")
    windowsOptions: WindowsOptions | None = Field(
        default=None, description="Windows-specific settings for the container."
    )


# Scheduling


class NodeSelectorRequirement(ValuesModel):
    key: NonEmptyStr = Field(description="Node label key the selector applies to.")
    operator: NodeSelectorOperator = Field(
        description="Relationship between the key and values: In, NotIn, Exists, DoesNotExist, Gt or Lt."
    )
    values: list[str] = Field(default_factory=list, description="Values to compare against.")


class NodeSelectorTerm(ValuesModel):
    matchExpressions: list[NodeSelectorRequirement] = Field(
        default_factory=list, description="Node selector requirements by node labels."
    )
    matchFields: list[NodeSelectorRequirement] = Field(
        default_factory=list, description="Node selector requirements by node fields."
    )


class NodeSelector(ValuesModel):
    nodeSelectorTerms: list[NodeSelectorTerm] = Field(
        min_length=1, description="Terms ORed together. At least one term is required."
    )


class PreferredSchedulingTerm(ValuesModel):
    weight: Weight = Field(description="Weight in the range 1-100 added when the preference matches.")
    preference: NodeSelectorTerm = Field(description="Node selector term associated with the weight.")


class NodeAffinity(ValuesModel):
    """Node affinity rules.

    Hard requirements use ``requiredDuringSchedulingIgnoredDuringExecution``,
    soft preferences use ``preferredDuringSchedulingIgnoredDuringExecution``.
    """

    requiredDuringSchedulingIgnoredDuringExecution: NodeSelector | None = Field(
        default=None, description="Rules that must be met for the pod to be scheduled onto a node."
    )
    preferredDuringSchedulingIgnoredDuringExecution: list[PreferredSchedulingTerm] = Field(
        default_factory=list, description="Weighted preferences the scheduler tries to honour."
    )


class LabelSelectorRequirement(ValuesModel):
    key: NonEmptyStr = Field(description="Label key the selector applies to.")
    operator: LabelSelectorOperator = Field(
        description="Relationship between the key and values: In, NotIn, Exists or DoesNotExist."
    )
    values: list[str] = Field(default_factory=list, description="Values to compare against.")


class LabelSelector(ValuesModel):
    """Label query over a set of resources; the match conditions are ANDed."""

    matchLabels: dict[str, str] = Field(default_factory=dict, description="Exact label matches.")
    matchExpressions: list[LabelSelectorRequirement] = Field(
        default_factory=list, description="Set-based label requirements."
    )


class PodAffinityTerm(ValuesModel):
    labelSelector: LabelSelector | None = Field(default=None, description="Selects the pods to (anti-)co-locate with.")
    namespaces: list[str] = Field(default_factory=list, description="Namespaces the label selector applies to.")
    topologyKey: NonEmptyStr = Field(
        description="Node label that defines the topology domain (e.g., 'kubernetes.io/hostname')."
    )


class WeightedPodAffinityTerm(ValuesModel):
    weight: Weight = Field(description="Weight in the range 1-100.")
    podAffinityTerm: PodAffinityTerm = Field(description="Pod affinity term associated with the weight.")


class PodAffinity(ValuesModel):
    requiredDuringSchedulingIgnoredDuringExecution: list[PodAffinityTerm] = Field(
        default_factory=list, description="Hard co-location requirements."
    )
    preferredDuringSchedulingIgnoredDuringExecution: list[WeightedPodAffinityTerm] = Field(
        default_factory=list, description="Weighted co-location preferences."
    )


class PodAntiAffinity(ValuesModel):
    requiredDuringSchedulingIgnoredDuringExecution: list[PodAffinityTerm] = Field(
        default_factory=list, description="Hard anti-co-location requirements."
    )
    preferredDuringSchedulingIgnoredDuringExecution: list[WeightedPodAffinityTerm] = Field(
        default_factory=list,
        description="Weighted anti-co-location preferences, e.g. spreading replicas across nodes.",
    )


class Affinity(ValuesModel):
    """Pod affinity/anti-affinity rules.

    Advanced scheduling constraints for pod placement:
    - nodeAffinity: Select nodes based on labels (soft/hard constraints)
    - podAffinity: Co-locate with other pods
    - podAntiAffinity: Spread pods apart (e.g., one per node for HA)
    """

    nodeAffinity: NodeAffinity | None = Field(default=None, description="Node affinity scheduling rules.")
    podAffinity: PodAffinity | None = Field(default=None, description="Pod affinity scheduling rules.")
    podAntiAffinity: PodAntiAffinity | None = Field(
        default=None, description="Pod anti-affinity scheduling rules."
    )


class Toleration(ValuesModel):
    """Pod toleration.

    Tolerations allow pods to be scheduled on nodes with matching taints.
    Example: ``{key: dedicated, operator: Equal, value: gpu, effect: NoSchedule}``.
    """

    key: str | None = Field(default=None, description="Taint key the toleration applies to.")
    operator: Annotated[TolerationOperator | None, OmitEmpty] = Field(
        default=None, description="'Exists' matches any value; 'Equal' (the default) matches 'value'."
    )
    value: str | None = Field(default=None, description="Taint value the toleration matches.")
    effect: Annotated[TaintEffect | None, OmitEmpty] = Field(
        default=None, description="Taint effect to match: NoSchedule, PreferNoSchedule or NoExecute."
    )
    tolerationSeconds: NonNegativeInt | None = Field(
        default=None, description="How long a NoExecute toleration keeps the pod bound after the taint appears."
    )


Tolerations = list[Toleration]


class ImagePullSecret(ValuesModel):
    """Reference to a Secret holding registry credentials."""

    name: NonEmptyStr = Field(description="Name of the docker-registry Secret in the release namespace.")


class ServiceAccountConfig(ValuesModel):
    """ServiceAccount configuration.

    ServiceAccounts provide an identity for pods running in the cluster and
    are used for authentication with the Kubernetes API.
    """

    create: bool = Field(
        default=False,
        description=(
            "Whether to create a new ServiceAccount for this release. Set to 'false' to use an existing "
            "ServiceAccount named in the 'name' field."
        ),
    )
    name: str | None = Field(
        default=None,
        description="The name of the ServiceAccount to use or create.",
    )
    annotations: dict[str, str] = Field(
        default_factory=dict, description="Annotations to add to the ServiceAccount."
    )


# Environment


class ObjectFieldSelector(ValuesModel):
    apiVersion: str | None = Field(default=None, description="Schema version the fieldPath is written in.")
    fieldPath: NonEmptyStr = Field(description="Path of the field to select (e.g., 'metadata.name').")


class ResourceFieldSelector(ValuesModel):
    containerName: str | None = Field(default=None, description="Container name, required for volumes.")
    resource: NonEmptyStr = Field(description="Resource to select (e.g., 'limits.memory').")
    divisor: ResourceQuantity | None = Field(default=None, description="Output format of the exposed resource.")


class ConfigMapKeySelector(ValuesModel):
    name: NonEmptyStr = Field(description="Name of the ConfigMap.")
    key: NonEmptyStr = Field(description="Key to select.")
    optional: bool | None = Field(default=None, description="Whether the ConfigMap or key may be missing.")


class SecretKeySelector(ValuesModel):
    name: NonEmptyStr = Field(description="Name of the Secret.")
    key: NonEmptyStr = Field(description="Key to select.")
    optional: bool | None = Field(default=None, description="Whether the Secret or key may be missing.")


class EnvVarSource(ValuesModel):
    """Source for an environment variable's value."""

    fieldRef: ObjectFieldSelector | None = Field(default=None, description="Selects a field of the pod.")
    resourceFieldRef: ResourceFieldSelector | None = Field(
        default=None, description="Selects a resource of the container."
    )
    configMapKeyRef: ConfigMapKeySelector | None = Field(default=None, description="Selects a ConfigMap key.")
    secretKeyRef: SecretKeySelector | None = Field(default=None, description="Selects a Secret key.")


class EnvVar(ValuesModel):
    """Environment variable configuration.

    Defines an environment variable to inject into containers. Supports both
    direct values and references to Secrets/ConfigMaps.
    """

    name: NonEmptyStr = Field(
        description="Name of the environment variable. By convention, use UPPER_SNAKE_CASE (e.g., DATABASE_URL)."
    )
    value: str | None = Field(
        default=None,
        description=(
            "Direct value for the environment variable. For sensitive values use 'valueFrom' with a "
            "Secret reference instead."
        ),
    )
    valueFrom: EnvVarSource | None = Field(
        default=None, description="Reference to get the value from a Secret, ConfigMap or field."
    )


class ConfigMapEnvSource(ValuesModel):
    name: NonEmptyStr = Field(description="Name of the ConfigMap.")
    optional: bool | None = Field(default=None, description="Whether the ConfigMap may be missing.")


class SecretEnvSource(ValuesModel):
    name: NonEmptyStr = Field(description="Name of the Secret.")
    optional: bool | None = Field(default=None, description="Whether the Secret may be missing.")


class EnvFromSource(ValuesModel):
    """Imports every key of a ConfigMap or Secret as environment variables."""

    prefix: str | None = Field(default=None, description="Identifier prepended to each key.")
    configMapRef: ConfigMapEnvSource | None = Field(default=None, description="ConfigMap to import.")
    secretRef: SecretEnvSource | None = Field(default=None, description="Secret to import.")


# Volumes


class VolumeMount(ValuesModel):
    """Volume mount configuration.

    Defines how a volume is mounted into a container's filesystem.
    """

    name: NonEmptyStr = Field(
        description="Name of the volume to mount. Must match the name of a volume in the pod's 'volumes' list."
    )
    mountPath: RequiredFilePath = Field(
        description="Path within the container where the volume is mounted (e.g., '/etc/app')."
    )
    subPath: str | None = Field(default=None, description="Path within the volume to mount instead of its root.")
    readOnly: bool = Field(default=False, description="Mount the volume as read-only.")
    mountPropagation: Annotated[MountPropagation | None, OmitEmpty] = Field(
        default=None, description="How mounts propagate between host and container."
    )
    subPathExpr: str | None = Field(
        default=None, description="Like subPath, but expands $(VAR_NAME) environment references."
    )


class KeyToPath(ValuesModel):
    """Maps one key of a Secret or ConfigMap to a file path inside the volume."""

    key: NonEmptyStr = Field(description="Key to project.")
    path: RequiredFilePath = Field(description="Relative path of the file to map the key to.")
    mode: FileMode | None = Field(default=None, description="File mode bits (0-0777) for this file.")


class HostPathVolumeSource(ValuesModel):
    path: RequiredFilePath = Field(description="Path of the directory on the host.")
    type: Annotated[HostPathType | None, OmitEmpty] = Field(
        default=None, description="Type of the host path; unset performs no checks."
    )


class EmptyDirVolumeSource(ValuesModel):
    medium: Annotated[Literal["Memory"] | None, OmitEmpty] = Field(
        default=None, description="Storage medium. 'Memory' backs the volume with tmpfs."
    )
    sizeLimit: ResourceQuantity | None = Field(default=None, description="Total local storage for the volume.")


class SecretVolumeSource(ValuesModel):
    secretName: NonEmptyStr = Field(description="Name of the Secret to mount.")
    items: list[KeyToPath] = Field(default_factory=list, description="Keys to project; all keys when empty.")
    defaultMode: FileMode | None = Field(default=None, description="Default file mode bits (0-0777).")
    optional: bool | None = Field(default=None, description="Whether the Secret may be missing.")


class ConfigMapVolumeSource(ValuesModel):
    name: NonEmptyStr = Field(description="Name of the ConfigMap to mount.")
    items: list[KeyToPath] = Field(default_factory=list, description="Keys to project; all keys when empty.")
    defaultMode: FileMode | None = Field(default=None, description="Default file mode bits (0-0777).")
    optional: bool | None = Field(default=None, description="Whether the ConfigMap may be missing.")


class PersistentVolumeClaimSource(ValuesModel):
    claimName: NonEmptyStr = Field(description="Name of a PersistentVolumeClaim in the release namespace.")
    readOnly: bool = Field(default=False, description="Force the volume to be mounted read-only.")


class SecretProjection(ValuesModel):
    name: NonEmptyStr = Field(description="Name of the Secret to project.")
    items: list[KeyToPath] = Field(default_factory=list, description="Keys to project.")
    optional: bool | None = Field(default=None, description="Whether the Secret may be missing.")


class ConfigMapProjection(ValuesModel):
    name: NonEmptyStr = Field(description="Name of the ConfigMap to project.")
    items: list[KeyToPath] = Field(default_factory=list, description="Keys to project.")
    optional: bool | None = Field(default=None, description="Whether the ConfigMap may be missing.")


class DownwardAPIVolumeFile(ValuesModel):
    path: RequiredFilePath = Field(description="Relative path of the file to create.")
    fieldRef: ObjectFieldSelector | None = Field(default=None, description="Pod field to expose.")
    resourceFieldRef: ResourceFieldSelector | None = Field(default=None, description="Container resource to expose.")
    mode: FileMode | None = Field(default=None, description="File mode bits (0-0777).")


class DownwardAPIProjection(ValuesModel):
    items: list[DownwardAPIVolumeFile] = Field(min_length=1, description="Downward API files to project.")


class ServiceAccountTokenProjection(ValuesModel):
    audience: str | None = Field(default=None, description="Intended audience of the token.")
    expirationSeconds: Annotated[int, Field(ge=600)] | None = Field(
        default=None, description="Requested token lifetime. Must be at least 10 minutes."
    )
    path: RequiredFilePath = Field(description="Relative path of the token file.")


class VolumeProjection(ValuesModel):
    secret: SecretProjection | None = Field(default=None, description="Secret to project.")
    configMap: ConfigMapProjection | None = Field(default=None, description="ConfigMap to project.")
    downwardAPI: DownwardAPIProjection | None = Field(default=None, description="Downward API data to project.")
    serviceAccountToken: ServiceAccountTokenProjection | None = Field(
        default=None, description="Service account token to project."
    )


class ProjectedVolumeSource(ValuesModel):
    sources: list[VolumeProjection] = Field(min_length=1, description="Projections merged into one directory.")
    defaultMode: FileMode | None = Field(default=None, description="Default file mode bits (0-0777).")


class Volume(ValuesModel):
    """A named volume that containers in the pod can mount.

    Exactly one source is normally set. Common types: 'configMap' for
    configuration, 'secret' for credentials, 'emptyDir' for scratch space.
    """

    name: NonEmptyStr = Field(description="Volume name, referenced by volumeMounts.")
    hostPath: HostPathVolumeSource | None = Field(default=None, description="Directory on the host node.")
    emptyDir: EmptyDirVolumeSource | None = Field(default=None, description="Scratch space that lives with the pod.")
    secret: SecretVolumeSource | None = Field(default=None, description="Secret mounted as files.")
    configMap: ConfigMapVolumeSource | None = Field(default=None, description="ConfigMap mounted as files.")
    persistentVolumeClaim: PersistentVolumeClaimSource | None = Field(
        default=None, description="PersistentVolumeClaim to mount."
    )
    projected: ProjectedVolumeSource | None = Field(
        default=None, description="Several sources projected into one directory."
    )


# Containers


class ContainerPort(ValuesModel):
    """A network port exposed by a container."""

    name: str | None = Field(default=None, description="Named port, referable from Services and probes.")
    containerPort: Port = Field(description="Port number on the container's IP address.")
    protocol: Annotated[Protocol | None, OmitEmpty] = Field(
        default=None, description="Protocol for the port: TCP, UDP or SCTP."
    )
    hostIP: Annotated[IPAddress | None, OmitEmpty] = Field(default=None, description="Host IP to bind the external port to.")
    hostPort: Annotated[int, Field(ge=0, le=65535)] | None = Field(
        default=None, description="Port number to expose on the host."
    )


class HTTPHeader(ValuesModel):
    name: NonEmptyStr = Field(description="Header field name.")
    value: NonEmptyStr = Field(description="Header field value.")


class HTTPGetAction(ValuesModel):
    """HTTP GET request used by a probe.

    A response code between 200 and 399 indicates success.
    """

    path: NonEmptyStr = Field(
        description="HTTP path to probe. Common patterns: '/healthz' for liveness, '/readyz' for readiness."
    )
    port: Port = Field(description="Port number to probe on the container.")
    host: Annotated[FQDNOrIP | None, OmitEmpty] = Field(default=None, description="Host name to connect to; defaults to the pod IP.")
    scheme: Annotated[Scheme | None, OmitEmpty] = Field(default=None, description="HTTP or HTTPS.")
    httpHeaders: list[HTTPHeader] = Field(default_factory=list, description="Custom headers to set in the request.")


class TCPSocketAction(ValuesModel):
    port: Port = Field(description="Port number to open a TCP connection to.")
    host: Annotated[FQDNOrIP | None, OmitEmpty] = Field(default=None, description="Host name to connect to; defaults to the pod IP.")


class ExecAction(ValuesModel):
    command: list[str] = Field(
        min_length=1, description="Command line to execute inside the container. Exit status 0 is healthy."
    )

