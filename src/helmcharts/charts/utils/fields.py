"""Field types and rule helpers shared by every values schema.

Constraints live on the field types themselves (``Port``, ``FQDN``,
``ResourceQuantity``...) so a model declaration reads like the values file it
describes. Rules that involve more than one field (``required_if``,
``gte_field``) are called from ``model_validator(mode="after")`` hooks on the
owning model.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Annotated, Any, Literal, Self

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    WithJsonSchema,
)

from helmcharts.loader import load_values_file, load_values_string
from helmcharts.validators import run_validator

if TYPE_CHECKING:
    from pathlib import Path


def _registered(name: str) -> Callable[[str], str]:
    """Build an after-validator that defers to the named registry entry."""
    label: str = name.replace("_", " ")

    def check(value: str) -> str:
        if not run_validator(name, value):
            raise ValueError(f"{value!r} is not a valid {label}")
        return value

    return check


def blank_to_none(value: Any) -> Any:
    return None if value == "" else value


def number_to_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def zero_to_none(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool) and value == 0:
        return None
    return value


OmitEmpty = BeforeValidator(blank_to_none)
"""Treat ``""`` as unset, so blank optional fields skip their format check."""

OmitZero = BeforeValidator(zero_to_none)
"""Treat ``0`` as unset on optional integers that are plain values rather than pointers upstream."""

Port = Annotated[int, Field(ge=1, le=65535)]
NodePort = Annotated[int, Field(ge=30000, le=32767)]
Percentage = Annotated[int, Field(ge=1, le=100)]
Weight = Annotated[int, Field(ge=1, le=100)]
FileMode = Annotated[int, Field(ge=0, le=511)]
NonNegativeInt = Annotated[int, Field(ge=0)]
PositiveInt = Annotated[int, Field(ge=1)]

ResourceQuantity = Annotated[
    str,
    AfterValidator(_registered("resource_quantity")),
    WithJsonSchema({"type": "string", "format": "quantity"}),
]
Duration = Annotated[
    str,
    AfterValidator(_registered("duration")),
    WithJsonSchema({"type": "string", "format": "duration"}),
]
FilePath = Annotated[
    str,
    AfterValidator(_registered("filepath")),
    WithJsonSchema({"type": "string", "format": "path"}),
]
PortString = Annotated[
    str,
    BeforeValidator(number_to_str),
    AfterValidator(_registered("port_string")),
    WithJsonSchema({"type": "string", "format": "port"}),
]
RequiredDuration = Annotated[
    str,
    Field(min_length=1),
    AfterValidator(_registered("duration")),
    WithJsonSchema({"type": "string", "format": "duration", "minLength": 1}),
]
RequiredFilePath = Annotated[
    str,
    Field(min_length=1),
    AfterValidator(_registered("filepath")),
    WithJsonSchema({"type": "string", "format": "path", "minLength": 1}),
]
RequiredPortString = Annotated[
    str,
    BeforeValidator(number_to_str),
    Field(min_length=1),
    AfterValidator(_registered("port_string")),
    WithJsonSchema({"type": "string", "format": "port", "minLength": 1}),
]
FQDN = Annotated[
    str,
    AfterValidator(_registered("fqdn")),
    WithJsonSchema({"type": "string", "format": "hostname"}),
]
IPAddress = Annotated[
    str,
    AfterValidator(_registered("ip")),
    WithJsonSchema({"type": "string", "format": "ip"}),
]
FQDNOrIP = Annotated[str, AfterValidator(_registered("fqdn_or_ip"))]
URL = Annotated[
    str,
    AfterValidator(_registered("url")),
    WithJsonSchema({"type": "string", "format": "uri"}),
]
CIDR = Annotated[str, AfterValidator(_registered("cidr"))]

TLSVersion = Annotated[Literal["1.0", "1.1", "1.2", "1.3"], BeforeValidator(number_to_str)]
LogLevel = Literal["debug", "info", "warn", "error"]


def is_empty(value: Any) -> bool:
    """Report whether ``value`` is a Go-style zero value.

    ``None``, ``False``, ``0``, ``""`` and empty collections are all empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, dict, tuple, set)):
        return len(value) == 0
    return False


def _show(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def required_if(model: BaseModel, condition: str, expected: Any, *fields: str) -> None:
    """Require ``fields`` to be non-empty while ``condition`` equals ``expected``.

    Raises:
        ValueError: Naming every empty field, when the condition holds.
    """
    if getattr(model, condition) != expected:
        return

    missing: list[str] = [name for name in fields if is_empty(getattr(model, name))]
    if missing:
        raise ValueError(
            f"{', '.join(missing)} required when {condition} is {_show(expected)}"
        )


def gte_field(model: BaseModel, field: str, other: str) -> None:
    """Require ``field >= other`` when both are set."""
    value = getattr(model, field)
    bound = getattr(model, other)
    if value is None or bound is None:
        return
    if value < bound:
        raise ValueError(
            f"{field} ({value}) must be greater than or equal to {other} ({bound})"
        )


def validate_struct(model: BaseModel) -> None:
    """Run full validation over the current state of ``model``.

    Models are validated when built, but values can be changed afterwards
    (including inside nested objects). This re-checks everything.

    Raises:
        pydantic.ValidationError: If any constraint fails.
    """
    data: dict[str, Any] = model.model_dump(by_alias=True, round_trip=True)
    type(model).model_validate(data)


class ValuesModel(BaseModel):
    """Base class for Helm values models.

    Unknown keys are kept, matching how Helm passes arbitrary values through
    to templates. Numeric scalars are accepted for string fields since YAML
    reads ``tag: 1.21`` as a float.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    def validate_values(self) -> None:
        """Validate this object and everything nested under it.

        Raises:
            pydantic.ValidationError: Aggregating every failing location.
        """
        validate_struct(self)

    def to_values(self) -> dict[str, Any]:
        """Dump as a values mapping, keyed by YAML names, without unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        return cls.model_validate(load_values_file(path))

    @classmethod
    def from_yaml_string(cls, text: str) -> Self:
        return cls.model_validate(load_values_string(text))
