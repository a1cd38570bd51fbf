"""Result types for values validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class ValidationIssue:
    """A single failed constraint."""

    location: str
    """Dot-joined path to the failing value (e.g., 'api.hpa.maxReplicas')."""

    message: str

    def __str__(self) -> str:
        if not self.location:
            return self.message
        return f"{self.location}: {self.message}"


@dataclass
class ValidationReport:
    """Outcome of validating one values document against a chart schema."""

    chart: str
    source: Path | None = None
    issues: list[ValidationIssue] = field(default_factory=list)
    skipped: bool = False
    """Set when there was nothing to validate, e.g. the values file is missing."""
    reason: str | None = None
    """Why the report was skipped."""

    @property
    def valid(self) -> bool:
        return not self.skipped and not self.issues

    def __repr__(self) -> str:
        state: str = "skipped" if self.skipped else f"issues={len(self.issues)}"
        return f"ValidationReport(chart={self.chart}, {state})"
