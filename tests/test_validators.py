"""Tests for the named validator registry."""

from __future__ import annotations

from datetime import timedelta

import pytest

from helmcharts.validators import (
    get_validator,
    is_cidr,
    is_duration,
    is_filepath,
    is_fqdn,
    is_fqdn_or_ip,
    is_ip,
    is_port_string,
    is_resource_quantity,
    is_url,
    parse_duration,
    register_custom_validators,
    register_validator,
    registered_validators,
    run_validator,
)


@pytest.fixture
def restore_registry():
    """Re-register the built-in validators after a test replaces one."""
    yield
    register_custom_validators()


# =============================================================================
# Registry
# =============================================================================


class TestRegistry:
    def test_builtin_validators_registered(self) -> None:
        assert registered_validators() == [
            "cidr",
            "duration",
            "filepath",
            "fqdn",
            "fqdn_or_ip",
            "ip",
            "port_string",
            "resource_quantity",
            "url",
        ]

    def test_get_validator_returns_predicate(self) -> None:
        assert get_validator("duration") is is_duration

    def test_get_unknown_validator_raises(self) -> None:
        with pytest.raises(KeyError, match="no validator registered as 'nope'"):
            get_validator("nope")

    def test_run_validator(self) -> None:
        assert run_validator("port_string", "8080") is True
        assert run_validator("port_string", "http") is False

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            register_validator("", lambda value: True)

    def test_register_replaces_existing(self, restore_registry) -> None:
        register_validator("port_string", lambda value: value == "magic")
        assert run_validator("port_string", "magic") is True
        assert run_validator("port_string", "8080") is False

    def test_register_new_name(self, restore_registry) -> None:
        register_validator("lowercase", str.islower)
        assert "lowercase" in registered_validators()
        assert run_validator("lowercase", "abc") is True

    def test_register_custom_validators_is_idempotent(self) -> None:
        before = registered_validators()
        register_custom_validators()
        register_custom_validators()
        assert registered_validators() == before


# =============================================================================
# Resource quantities
# =============================================================================


class TestResourceQuantity:
    @pytest.mark.parametrize(
        "value",
        ["", "100m", "0.5", "1", "2.5", ".5", "128Mi", "1Gi", "512M", "1000000", "1e", "3Ti", "10k"],
    )
    def test_valid(self, value: str) -> None:
        assert is_resource_quantity(value)

    @pytest.mark.parametrize("value", ["abc", "100mm", "-1", "1.2.3", "Mi", "1 Gi", "1GB"])
    def test_invalid(self, value: str) -> None:
        assert not is_resource_quantity(value)


# =============================================================================
# Durations
# =============================================================================


class TestDuration:
    @pytest.mark.parametrize(
        "value",
        ["", "0", "30s", "1h30m", "250ms", "1.5h", "-1.5h", "+5m", "100ns", "10us", "10µs", ".5s"],
    )
    def test_valid(self, value: str) -> None:
        assert is_duration(value)

    @pytest.mark.parametrize("value", ["30", "1d", "abc", "s", "1h 30m", "--1s", "10000000h"])
    def test_invalid(self, value: str) -> None:
        assert not is_duration(value)

    def test_parse_compound(self) -> None:
        assert parse_duration("1h30m") == timedelta(hours=1, minutes=30)

    def test_parse_fraction(self) -> None:
        assert parse_duration("1.5s") == timedelta(seconds=1.5)

    def test_parse_negative(self) -> None:
        assert parse_duration("-2m") == timedelta(minutes=-2)

    def test_parse_zero(self) -> None:
        assert parse_duration("0") == timedelta(0)

    def test_parse_invalid_raises(self) -> None:
        with pytest.raises(ValueError, match="invalid duration"):
            parse_duration("forever")

    def test_parse_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            parse_duration("3000000h")


# =============================================================================
# File paths and port strings
# =============================================================================


class TestFilePath:
    @pytest.mark.parametrize(
        "value",
        ["", "/etc/tls/tls.crt", "certs/tls.key", "./local", "C:\\certs\\tls.crt", "with spaces/file"],
    )
    def test_valid(self, value: str) -> None:
        assert is_filepath(value)

    def test_nul_byte_rejected(self) -> None:
        assert not is_filepath("/etc/\x00passwd")


class TestPortString:
    @pytest.mark.parametrize("value", ["", "1", "80", "8080", "65535", "+443"])
    def test_valid(self, value: str) -> None:
        assert is_port_string(value)

    @pytest.mark.parametrize("value", ["0", "65536", "-1", "http", "80a", "8080.0", " 80"])
    def test_invalid(self, value: str) -> None:
        assert not is_port_string(value)


# =============================================================================
# Format checks
# =============================================================================


class TestFormats:
    @pytest.mark.parametrize(
        "value", ["example.com", "admin.tacokumo.example.com", "redis.svc.cluster.local", "example.com."]
    )
    def test_valid_fqdn(self, value: str) -> None:
        assert is_fqdn(value)

    @pytest.mark.parametrize("value", ["", "localhost", "-bad.example.com", "example.123", "exa mple.com"])
    def test_invalid_fqdn(self, value: str) -> None:
        assert not is_fqdn(value)

    @pytest.mark.parametrize("value", ["10.0.0.1", "0.0.0.0", "::1", "2001:db8::1"])
    def test_valid_ip(self, value: str) -> None:
        assert is_ip(value)

    @pytest.mark.parametrize("value", ["", "256.0.0.1", "10.0.0", "example.com", "fe80::1%eth0", "10.0.0.1\n"])
    def test_invalid_ip(self, value: str) -> None:
        assert not is_ip(value)

    def test_fqdn_or_ip(self) -> None:
        assert is_fqdn_or_ip("postgres.example.com")
        assert is_fqdn_or_ip("192.168.1.10")
        assert not is_fqdn_or_ip("postgres")
        assert not is_fqdn_or_ip("")

    @pytest.mark.parametrize(
        "value",
        [
            "https://admin.example.com/auth/callback",
            "http://localhost:4317",
            "file:///etc/config",
            "mailto:admin@example.com",
            "otel://#fragment",
        ],
    )
    def test_valid_url(self, value: str) -> None:
        assert is_url(value)

    @pytest.mark.parametrize("value", ["", "example.com", "/relative/path", "https://", "http:///path"])
    def test_invalid_url(self, value: str) -> None:
        assert not is_url(value)

    @pytest.mark.parametrize("value", ["10.0.0.0/8", "192.168.1.1/24", "2001:db8::/32"])
    def test_valid_cidr(self, value: str) -> None:
        assert is_cidr(value)

    @pytest.mark.parametrize(
        "value",
        ["", "10.0.0.0", "10.0.0.0/33", "example.com/24", "10.0.0.0/255.0.0.0", "10.0.0.0/+8", "fe80::%eth0/64", "10.0.0.0/8\n"],
    )
    def test_invalid_cidr(self, value: str) -> None:
        assert not is_cidr(value)


# =============================================================================
# Whole-string matching
# =============================================================================


class TestWholeStringMatch:
    @pytest.mark.parametrize(
        ("validator", "value"),
        [
            (is_fqdn, "example.com\n"),
            (is_port_string, "8080\n"),
            (is_duration, "1s\n"),
            (is_resource_quantity, "100m\n"),
            (is_resource_quantity, "128Mi\n"),
        ],
    )
    def test_trailing_newline_rejected(self, validator, value: str) -> None:
        assert not validator(value)

    @pytest.mark.parametrize(
        ("validator", "value"),
        [
            (is_duration, "١s"),
            (is_duration, "1٥m"),
            (is_port_string, "٨٠"),
            (is_resource_quantity, "١٠٠m"),
        ],
    )
    def test_non_ascii_digits_rejected(self, validator, value: str) -> None:
        assert not validator(value)

    def test_trailing_dot_fqdn_still_valid(self) -> None:
        assert is_fqdn("example.com.")
