"""Named validators used by Helm values schemas.

Each validator is a plain ``str -> bool`` predicate registered under a name.
Field types in :mod:`helmcharts.charts.utils.fields` look validators up by
name, so a registration made here changes every field that uses it.

The domain validators (``resource_quantity``, ``duration``, ``filepath``,
``port_string``) accept the empty string so that optional fields left blank
in a values file pass. Format validators (``fqdn``, ``ip``, ``url``, ...) do not.
"""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable
from datetime import timedelta
from urllib.parse import urlsplit

Validator = Callable[[str], bool]

CPU_QUANTITY_PATTERN = re.compile(r"([0-9]+(\.[0-9]*)?|\.[0-9]+)(m?)")
MEMORY_QUANTITY_PATTERN = re.compile(
    r"([0-9]+(\.[0-9]*)?|\.[0-9]+)([KMGTPE]i?|[kmgtpe])?"
)
MAX_DURATION_NANOSECONDS = 2**63 - 1
PORT_STRING_PATTERN = re.compile(r"[+-]?[0-9]+")
PREFIX_LENGTH_PATTERN = re.compile(r"[0-9]+")
FQDN_PATTERN = re.compile(
    r"([a-zA-Z0-9]{1}[a-zA-Z0-9-]{0,62})"
    r"(\.[a-zA-Z0-9]{1}[a-zA-Z0-9-]{0,62})*?"
    r"(\.[a-zA-Z]{1}[a-zA-Z0-9]{0,62})\.?"
)

_DURATION_PATTERN = re.compile(r"[-+]?(0|(([0-9]+(\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h))+)")
_DURATION_TERM = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)")

# Microseconds per unit.
_DURATION_UNITS: dict[str, float] = {
    "ns": 0.001,
    "us": 1,
    "µs": 1,
    "μs": 1,
    "ms": 1_000,
    "s": 1_000_000,
    "m": 60 * 1_000_000,
    "h": 3600 * 1_000_000,
}


def is_resource_quantity(value: str) -> bool:
    """Check a Kubernetes resource quantity such as ``100m``, ``0.5`` or ``128Mi``."""
    if value == "":
        return True
    return bool(
        CPU_QUANTITY_PATTERN.fullmatch(value) or MEMORY_QUANTITY_PATTERN.fullmatch(value)
    )


def parse_duration(value: str) -> timedelta:
    """Parse a Go duration string (``1h30m``, ``250ms``, ``-1.5h``).

    Raises:
        ValueError: If the string is not a valid duration.
    """
    if not _DURATION_PATTERN.fullmatch(value):
        raise ValueError(f"invalid duration: {value!r}")

    sign = -1 if value.startswith("-") else 1
    body: str = value.lstrip("+-")
    if body == "0":
        return timedelta(0)

    micros = 0.0
    for number, unit in _DURATION_TERM.findall(body):
        micros += float(number) * _DURATION_UNITS[unit]

    # Go stores durations as int64 nanoseconds.
    if micros * 1_000 > MAX_DURATION_NANOSECONDS:
        raise ValueError(f"duration out of range: {value!r}")
    return timedelta(microseconds=sign * micros)


def is_duration(value: str) -> bool:
    if value == "":
        return True
    try:
        parse_duration(value)
    except ValueError:
        return False
    return True


def is_filepath(value: str) -> bool:
    """Check that a string can name a file path.

    The path does not have to exist. Relative, absolute and Windows-style
    paths are all accepted; only strings that no filesystem can hold (NUL
    bytes) are rejected.
    """
    if value == "":
        return True
    return "\x00" not in value


def is_port_string(value: str) -> bool:
    """Check a port number written as a string (``"8080"``), range 1-65535."""
    if value == "":
        return True
    if not PORT_STRING_PATTERN.fullmatch(value):
        return False
    return 1 <= int(value) <= 65535


def is_fqdn(value: str) -> bool:
    if not value:
        return False
    return FQDN_PATTERN.fullmatch(value) is not None


def is_ip(value: str) -> bool:
    """Check a bare IPv4 or IPv6 address. IPv6 zone ids (``fe80::1%eth0``) are rejected."""
    if "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_fqdn_or_ip(value: str) -> bool:
    return is_fqdn(value) or is_ip(value)


def is_url(value: str) -> bool:
    """Check an absolute URL: a scheme plus a host, fragment or opaque part."""
    if not value:
        return False
    if value.lower().startswith("file:"):
        return True
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    if not parts.scheme:
        return False
    opaque: bool = bool(parts.path) and not parts.path.startswith("/")
    return bool(parts.netloc or parts.fragment or opaque)


def is_cidr(value: str) -> bool:
    """Check an address with a prefix length, such as ``10.0.0.0/8``.

    Host bits may be set. The prefix must be a decimal length, so netmask
    forms like ``10.0.0.0/255.0.0.0`` are rejected.
    """
    address, _, prefix = value.partition("/")
    if not is_ip(address) or not PREFIX_LENGTH_PATTERN.fullmatch(prefix):
        return False
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError:
        return False
    return True


_REGISTRY: dict[str, Validator] = {}


def register_validator(name: str, func: Validator) -> None:
    """Register ``func`` under ``name``, replacing any existing registration."""
    if not name:
        raise ValueError("validator name must not be empty")
    _REGISTRY[name] = func


def get_validator(name: str) -> Validator:
    """Return the validator registered as ``name``.

    Raises:
        KeyError: If nothing is registered under that name.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"no validator registered as {name!r}") from None


def run_validator(name: str, value: str) -> bool:
    return get_validator(name)(value)


def registered_validators() -> list[str]:
    return sorted(_REGISTRY)


def register_custom_validators() -> None:
    """Register the built-in validators. Safe to call more than once."""
    register_validator("resource_quantity", is_resource_quantity)
    register_validator("duration", is_duration)
    register_validator("filepath", is_filepath)
    register_validator("port_string", is_port_string)
    register_validator("fqdn", is_fqdn)
    register_validator("ip", is_ip)
    register_validator("fqdn_or_ip", is_fqdn_or_ip)
    register_validator("url", is_url)
    register_validator("cidr", is_cidr)


register_custom_validators()
