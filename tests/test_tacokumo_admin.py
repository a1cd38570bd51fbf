"""Tests for the tacokumo-admin values schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from helmcharts.charts.tacokumo_admin import AdminConfig, TacokumoAdminValues
from helmcharts.charts.tacokumo_admin.values import (
    AdminHTTPProbeConfig,
    AdminServiceConfig,
    GlobalConfig,
    HPAConfig,
    MetricSpec,
    OpenTelemetryAppConfig,
    TLSAppConfig,
)

CHART = "tacokumo-admin"


@pytest.fixture
def values(load_values) -> dict:
    return load_values(CHART)


def errors_at(exc: ValidationError) -> set[tuple]:
    return {e["loc"] for e in exc.errors()}


class TestDefaultValues:
    def test_fixture_validates(self, values: dict) -> None:
        parsed = TacokumoAdminValues.model_validate(values)
        assert parsed.global_.externalServices.postgresql.host == "postgres.tacokumo-system.svc.cluster.local"
        assert parsed.admin.config.baseDomain == "admin.tacokumo.example.com"
        assert parsed.admin.replicaCount >= 1

    def test_global_key_round_trips(self, values: dict) -> None:
        dumped = TacokumoAdminValues.model_validate(values).to_values()
        assert "global" in dumped
        assert dumped["global"]["externalServices"]["redis"]["db"] == 0

    @pytest.mark.parametrize("section", ["global", "admin"])
    def test_sections_required(self, values: dict, section: str) -> None:
        del values[section]
        with pytest.raises(ValidationError) as exc_info:
            TacokumoAdminValues.model_validate(values)
        assert errors_at(exc_info.value) == {(section,)}


class TestGlobalConfig:
    @pytest.mark.parametrize(
        ("service", "field", "value"),
        [
            ("postgresql", "host", ""),
            ("postgresql", "port", 0),
            ("postgresql", "initialConnRetry", 0),
            ("redis", "db", 16),
            ("redis", "secretName", ""),
        ],
    )
    def test_invalid(self, values: dict, service: str, field: str, value) -> None:
        values["global"]["externalServices"][service][field] = value
        with pytest.raises(ValidationError) as exc_info:
            GlobalConfig.model_validate(values["global"])
        assert errors_at(exc_info.value) == {("externalServices", service, field)}


class TestAdminAppConfig:
    def test_port_is_a_string(self, values: dict) -> None:
        values["admin"]["config"]["port"] = 9090
        parsed = TacokumoAdminValues.model_validate(values)
        assert parsed.admin.config.port == "9090"

    @pytest.mark.parametrize("port", ["", "0", "http", "70000"])
    def test_invalid_port(self, values: dict, port: str) -> None:
        values["admin"]["config"]["port"] = port
        with pytest.raises(ValidationError):
            TacokumoAdminValues.model_validate(values)

    @pytest.mark.parametrize(
        ("field", "value"),
        [("addr", "everywhere"), ("baseDomain", "admin"), ("logLevel", "trace")],
    )
    def test_invalid_top_level(self, values: dict, field: str, value: str) -> None:
        values["admin"]["config"][field] = value
        with pytest.raises(ValidationError) as exc_info:
            TacokumoAdminValues.model_validate(values)
        assert errors_at(exc_info.value) == {("admin", "config", field)}

    @pytest.mark.parametrize("field", ["callbackUrl", "frontendUrl"])
    def test_auth_urls(self, values: dict, field: str) -> None:
        values["admin"]["config"]["auth"][field] = "admin.example.com/callback"
        with pytest.raises(ValidationError):
            TacokumoAdminValues.model_validate(values)

    @pytest.mark.parametrize("ttl", ["", "1 day", "24"])
    def test_session_ttl(self, values: dict, ttl: str) -> None:
        values["admin"]["config"]["auth"]["sessionTtl"] = ttl
        with pytest.raises(ValidationError):
            TacokumoAdminValues.model_validate(values)

    def test_cors_requires_origins(self, values: dict) -> None:
        values["admin"]["config"]["cors"]["allowOrigins"] = ""
        with pytest.raises(ValidationError):
            TacokumoAdminValues.model_validate(values)

    def test_enabled_tls_requires_files(self, values: dict) -> None:
        values["admin"]["config"]["tls"] = {"enabled": True}
        with pytest.raises(ValidationError) as exc_info:
            TacokumoAdminValues.model_validate(values)
        assert errors_at(exc_info.value) == {("admin", "config", "tls")}

    def test_opentelemetry_exporter(self, values: dict) -> None:
        values["admin"]["config"]["opentelemetry"] = {
            "enabled": True,
            "tracesExporter": "otlp",
            "otlpEndpoint": "http://otel-collector:4317",
            "otlpProtocol": "grpc",
        }
        assert TacokumoAdminValues.model_validate(values).admin.config.opentelemetry.otlpProtocol == "grpc"

    def test_blank_otlp_endpoint_is_unset(self) -> None:
        otel = OpenTelemetryAppConfig.model_validate({"enabled": True, "otlpEndpoint": ""})
        assert otel.otlpEndpoint is None

    def test_tls_files_are_paths(self) -> None:
        tls = TLSAppConfig.model_validate({"enabled": True, "certFile": "/etc/tls/tls.crt", "keyFile": "/etc/tls/tls.key"})
        assert tls.keyFile == "/etc/tls/tls.key"

    def test_tls_disabled_needs_no_files(self) -> None:
        assert TLSAppConfig.model_validate({"enabled": False}).certFile is None

    def test_tls_enabled_requires_both_files(self) -> None:
        with pytest.raises(ValidationError, match="keyFile required when enabled is true"):
            TLSAppConfig.model_validate({"enabled": True, "certFile": "/etc/tls/tls.crt"})


class TestAdminService:
    def test_target_port_required(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            AdminServiceConfig.model_validate({"type": "ClusterIP", "port": 80})
        assert errors_at(exc_info.value) == {("targetPort",)}

    def test_load_balancer_options(self) -> None:
        service = AdminServiceConfig.model_validate(
            {
                "type": "LoadBalancer",
                "port": 80,
                "targetPort": 8080,
                "loadBalancerIP": "203.0.113.10",
                "loadBalancerSourceRanges": ["203.0.113.0/24"],
                "externalTrafficPolicy": "Local",
                "sessionAffinity": "ClientIP",
                "sessionAffinityConfig": {"clientIP": {"timeoutSeconds": 600}},
            }
        )
        assert service.loadBalancerSourceRanges == ["203.0.113.0/24"]

    def test_blank_address_fields_are_unset(self) -> None:
        service = AdminServiceConfig.model_validate(
            {"type": "ClusterIP", "port": 80, "targetPort": 8080, "loadBalancerIP": "", "externalName": ""}
        )
        assert service.loadBalancerIP is None
        assert service.externalName is None

    def test_bad_load_balancer_ip(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            AdminServiceConfig.model_validate(
                {"type": "LoadBalancer", "port": 80, "targetPort": 8080, "loadBalancerIP": "lb.example.com"}
            )
        assert errors_at(exc_info.value) == {("loadBalancerIP",)}

    def test_bad_source_range(self) -> None:
        with pytest.raises(ValidationError):
            AdminServiceConfig.model_validate(
                {"type": "LoadBalancer", "port": 80, "targetPort": 8080, "loadBalancerSourceRanges": ["anywhere"]}
            )


class TestAdminConfig:
    def test_service_account_needs_name(self, values: dict) -> None:
        values["admin"]["serviceAccount"] = {"create": True}
        with pytest.raises(ValidationError) as exc_info:
            AdminConfig.model_validate(values["admin"])
        assert errors_at(exc_info.value) == {("serviceAccount", "name")}

    def test_probe_requires_timeout_and_threshold(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            AdminHTTPProbeConfig.model_validate({"httpGet": {"path": "/healthz", "port": 8080}, "periodSeconds": 10})
        assert errors_at(exc_info.value) == {("timeoutSeconds",), ("failureThreshold",)}

    def test_probes_are_optional(self, values: dict) -> None:
        del values["admin"]["livenessProbe"]
        del values["admin"]["readinessProbe"]
        assert AdminConfig.model_validate(values["admin"]).livenessProbe is None

    def test_replica_count_positive(self, values: dict) -> None:
        values["admin"]["replicaCount"] = 0
        with pytest.raises(ValidationError):
            AdminConfig.model_validate(values["admin"])

    def test_volumes(self, values: dict) -> None:
        values["admin"]["volumes"] = [{"name": "tmp", "emptyDir": {"medium": "Memory", "sizeLimit": "64Mi"}}]
        values["admin"]["volumeMounts"] = [{"name": "tmp", "mountPath": "/tmp"}]
        parsed = AdminConfig.model_validate(values["admin"])
        assert parsed.volumeMounts[0].mountPath == "/tmp"


class TestAutoscaling:
    def test_enabled_requires_bounds(self) -> None:
        with pytest.raises(ValidationError, match="minReplicas, maxReplicas required when enabled is true"):
            HPAConfig.model_validate({"enabled": True})

    def test_zero_max_replicas_is_unset(self) -> None:
        assert HPAConfig.model_validate({"enabled": False, "maxReplicas": 0}).maxReplicas is None

    def test_zero_max_replicas_counts_as_missing_when_enabled(self) -> None:
        with pytest.raises(ValidationError, match="maxReplicas required when enabled is true"):
            HPAConfig.model_validate({"enabled": True, "minReplicas": 1, "maxReplicas": 0})

    def test_zero_min_replicas_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            HPAConfig.model_validate({"enabled": False, "minReplicas": 0})
        assert errors_at(exc_info.value) == {("minReplicas",)}

    def test_metrics_and_behavior(self) -> None:
        hpa = HPAConfig.model_validate(
            {
                "enabled": True,
                "minReplicas": 2,
                "maxReplicas": 10,
                "targetCPUUtilizationPercentage": 70,
                "metrics": [
                    {
                        "type": "Resource",
                        "resource": {"name": "cpu", "target": {"type": "Utilization", "averageUtilization": 60}},
                    },
                    {
                        "type": "Pods",
                        "pods": {
                            "metric": {"name": "requests_per_second"},
                            "target": {"type": "AverageValue", "averageValue": "100"},
                        },
                    },
                ],
                "behavior": {
                    "scaleDown": {
                        "stabilizationWindowSeconds": 300,
                        "selectPolicy": "Min",
                        "policies": [{"type": "Percent", "value": 50, "periodSeconds": 60}],
                    }
                },
            }
        )
        assert len(hpa.metrics) == 2

    def test_unknown_metric_type(self) -> None:
        with pytest.raises(ValidationError):
            MetricSpec.model_validate({"type": "Custom"})

    def test_bad_policy_type(self) -> None:
        with pytest.raises(ValidationError):
            HPAConfig.model_validate(
                {"behavior": {"scaleUp": {"policies": [{"type": "Nodes", "value": 1, "periodSeconds": 15}]}}}
            )
