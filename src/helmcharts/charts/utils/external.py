"""Configuration types for services a chart's workload depends on.

PostgreSQL, Redis, authentication, CORS, TLS and OpenTelemetry settings that
applications read from their values. Each section with an ``enabled`` switch
only demands its settings while switched on.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field, model_validator

from helmcharts.charts.utils.fields import (
    FQDN,
    URL,
    Duration,
    FilePath,
    FQDNOrIP,
    LogLevel,
    NonNegativeInt,
    OmitEmpty,
    OmitZero,
    Port,
    PositiveInt,
    TLSVersion,
    ValuesModel,
    required_if,
)
from helmcharts.charts.utils.kubernetes import NonEmptyStr

Secret = Annotated[str, Field(min_length=32)]
RedisDB = Annotated[int, Field(ge=0, le=15)]


class SSLMode(StrEnum):
    """PostgreSQL client SSL negotiation mode."""

    DISABLE = "disable"
    ALLOW = "allow"
    PREFER = "prefer"
    REQUIRE = "require"
    VERIFY_CA = "verify-ca"
    VERIFY_FULL = "verify-full"


class HTTPMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class PostgreSQLConfig(ValuesModel):
    """PostgreSQL database connection and pool settings."""

    host: FQDNOrIP = Field(description="Database hostname or IP address (e.g., 'postgres.db.svc.cluster.local').")
    port: Port = Field(description="Database port, usually 5432.")
    database: NonEmptyStr = Field(description="Name of the database to connect to.")
    username: NonEmptyStr = Field(description="Database user.")
    password: NonEmptyStr = Field(description="Database password. Prefer injecting it from a Secret.")
    sslMode: Annotated[SSLMode | None, OmitEmpty] = Field(
        default=None,
        description="SSL negotiation mode: disable, allow, prefer, require, verify-ca or verify-full.",
    )
    maxOpenConns: Annotated[PositiveInt | None, OmitZero] = Field(default=None, description="Maximum number of open connections.")
    maxIdleConns: Annotated[PositiveInt | None, OmitZero] = Field(default=None, description="Maximum number of idle connections.")
    connMaxLifetime: Duration | None = Field(
        default=None, description="Maximum lifetime of a connection, as a Go duration (e.g., '1h')."
    )
    connMaxIdleTime: Duration | None = Field(
        default=None, description="Maximum idle time of a connection, as a Go duration (e.g., '10m')."
    )


class RedisConfig(ValuesModel):
    """Redis connection, retry and pool settings.

    Every timeout is a Go duration string such as ``500ms`` or ``5s``.
    """

    host: FQDNOrIP = Field(description="Redis hostname or IP address.")
    port: Port = Field(description="Redis port, usually 6379.")
    password: str | None = Field(default=None, description="Redis password, if AUTH is enabled.")
    db: RedisDB = Field(default=0, description="Logical database index (0-15).")

    maxRetries: NonNegativeInt | None = Field(default=None, description="Maximum number of retries before giving up.")
    minRetryBackoff: Duration | None = Field(default=None, description="Minimum backoff between retries.")
    maxRetryBackoff: Duration | None = Field(default=None, description="Maximum backoff between retries.")
    dialTimeout: Duration | None = Field(default=None, description="Timeout for establishing new connections.")
    readTimeout: Duration | None = Field(default=None, description="Timeout for socket reads.")
    writeTimeout: Duration | None = Field(default=None, description="Timeout for socket writes.")

    poolSize: Annotated[PositiveInt | None, OmitZero] = Field(default=None, description="Maximum number of socket connections.")
    minIdleConns: NonNegativeInt | None = Field(default=None, description="Minimum number of idle connections.")
    maxConnAge: Duration | None = Field(default=None, description="Connection age at which it is closed.")
    poolTimeout: Duration | None = Field(default=None, description="How long to wait for a free connection.")
    idleTimeout: Duration | None = Field(default=None, description="Idle time after which a connection is closed.")
    idleCheckFrequency: Duration | None = Field(default=None, description="Frequency of idle connection checks.")


class AuthConfig(ValuesModel):
    """OAuth, session and JWT settings for user authentication.

    When enabled, the OAuth client and endpoints, the session secret, name
    and TTL are all required.
    """

    enabled: bool = Field(default=False, description="Enable authentication.")

    oauthClientId: str | None = Field(default=None, description="OAuth client ID.")
    oauthClientSecret: str | None = Field(default=None, description="OAuth client secret.")
    oauthAuthUrl: Annotated[URL | None, OmitEmpty] = Field(default=None, description="Authorization endpoint of the OAuth provider.")
    oauthTokenUrl: Annotated[URL | None, OmitEmpty] = Field(default=None, description="Token endpoint of the OAuth provider.")
    oauthCallbackUrl: Annotated[URL | None, OmitEmpty] = Field(default=None, description="Redirect URL registered with the provider.")
    oauthScopes: list[str] = Field(default_factory=list, description="OAuth scopes to request.")

    sessionSecret: Annotated[Secret | None, OmitEmpty] = Field(
        default=None, description="Key used to sign session cookies. At least 32 characters."
    )
    sessionName: str | None = Field(default=None, description="Session cookie name.")
    sessionTtl: Duration | None = Field(default=None, description="Session lifetime as a Go duration (e.g., '24h').")
    sessionSecure: bool = Field(default=False, description="Only send the session cookie over HTTPS.")
    sessionSameSite: Annotated[Literal["Strict", "Lax", "None"] | None, OmitEmpty] = Field(
        default=None, description="SameSite attribute of the session cookie."
    )
    sessionDomain: Annotated[FQDN | None, OmitEmpty] = Field(default=None, description="Domain attribute of the session cookie.")

    jwtSecret: Annotated[Secret | None, OmitEmpty] = Field(default=None, description="Key used to sign JWTs. At least 32 characters.")
    jwtExpiration: Duration | None = Field(default=None, description="Access token lifetime.")
    jwtRefreshExpiration: Duration | None = Field(default=None, description="Refresh token lifetime.")

    @model_validator(mode="after")
    def _oauth_and_session_required_when_enabled(self) -> AuthConfig:
        required_if(
            self,
            "enabled",
            True,
            "oauthClientId",
            "oauthClientSecret",
            "oauthAuthUrl",
            "oauthTokenUrl",
            "oauthCallbackUrl",
            "sessionSecret",
            "sessionName",
            "sessionTtl",
        )
        return self


class CORSConfig(ValuesModel):
    """Cross-origin resource sharing policy."""

    enabled: bool = Field(default=False, description="Enable CORS handling.")
    allowedOrigins: list[URL] = Field(
        default_factory=list, description="Origins allowed to make requests (e.g., 'https://app.example.com')."
    )
    allowedMethods: list[HTTPMethod] = Field(default_factory=list, description="HTTP methods allowed.")
    allowedHeaders: list[str] = Field(default_factory=list, description="Request headers allowed.")
    exposedHeaders: list[str] = Field(default_factory=list, description="Response headers exposed to the browser.")
    allowCredentials: bool = Field(default=False, description="Allow cookies and credentials.")
    maxAge: NonNegativeInt | None = Field(default=None, description="Seconds a preflight response may be cached.")

    @model_validator(mode="after")
    def _origins_and_methods_required_when_enabled(self) -> CORSConfig:
        required_if(self, "enabled", True, "allowedOrigins", "allowedMethods")
        return self


class TLSConfig(ValuesModel):
    """TLS certificate files and protocol versions."""

    enabled: bool = Field(default=False, description="Serve over TLS.")
    certFile: FilePath | None = Field(default=None, description="Path to the certificate file. Required when enabled.")
    keyFile: FilePath | None = Field(default=None, description="Path to the private key file. Required when enabled.")
    caFile: FilePath | None = Field(default=None, description="Path to the CA bundle for client verification.")
    minVersion: Annotated[TLSVersion | None, OmitEmpty] = Field(
        default=None, description="Minimum TLS version: 1.0, 1.1, 1.2 or 1.3."
    )
    maxVersion: Annotated[TLSVersion | None, OmitEmpty] = Field(
        default=None, description="Maximum TLS version: 1.0, 1.1, 1.2 or 1.3."
    )

    @model_validator(mode="after")
    def _files_required_when_enabled(self) -> TLSConfig:
        required_if(self, "enabled", True, "certFile", "keyFile")
        return self


class OpenTelemetryConfig(ValuesModel):
    """OpenTelemetry tracing, metrics and logging export.

    Each signal has its own switch; an enabled signal needs its endpoint.
    """

    enabled: bool = Field(default=False, description="Enable OpenTelemetry instrumentation.")
    serviceName: str | None = Field(default=None, description="service.name resource attribute. Required when enabled.")
    serviceVersion: str | None = Field(default=None, description="service.version resource attribute.")

    tracingEnabled: bool = Field(default=False, description="Export traces.")
    tracingEndpoint: Annotated[URL | None, OmitEmpty] = Field(default=None, description="Collector endpoint for traces.")
    tracingSampling: Annotated[float, Field(ge=0, le=1)] = Field(
        default=0, description="Fraction of traces to sample, between 0 and 1."
    )

    metricsEnabled: bool = Field(default=False, description="Export metrics.")
    metricsEndpoint: Annotated[URL | None, OmitEmpty] = Field(default=None, description="Collector endpoint for metrics.")
    metricsInterval: Duration | None = Field(default=None, description="Export interval as a Go duration.")

    loggingEnabled: bool = Field(default=False, description="Export logs.")
    logLevel: Annotated[LogLevel | None, OmitEmpty] = Field(
        default=None, description="Minimum level to export: debug, info, warn or error."
    )
    logFormat: Annotated[Literal["json", "text"] | None, OmitEmpty] = Field(
        default=None, description="Log output format."
    )

    resourceAttributes: dict[str, str] = Field(default_factory=dict, description="Extra resource attributes.")
    headers: dict[str, str] = Field(default_factory=dict, description="Headers sent to the collector, e.g. for auth.")

    @model_validator(mode="after")
    def _endpoints_required_when_enabled(self) -> OpenTelemetryConfig:
        required_if(self, "enabled", True, "serviceName")
        required_if(self, "tracingEnabled", True, "tracingEndpoint")
        required_if(self, "metricsEnabled", True, "metricsEndpoint")
        return self


class ExternalServiceConfig(ValuesModel):
    """All external dependencies of an application in one section."""

    database: PostgreSQLConfig = Field(description="PostgreSQL database settings.")
    redis: RedisConfig = Field(description="Redis cache settings.")
    auth: AuthConfig = Field(default_factory=AuthConfig, description="Authentication settings.")
    cors: CORSConfig = Field(default_factory=CORSConfig, description="CORS policy.")
    tls: TLSConfig = Field(default_factory=TLSConfig, description="TLS settings.")
    openTelemetry: OpenTelemetryConfig = Field(
        default_factory=OpenTelemetryConfig, description="Observability export settings."
    )
