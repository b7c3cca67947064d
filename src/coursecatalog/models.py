"""Core domain models for the course catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Course:
    """One course record keyed by its uppercase identifier."""

    id: str
    title: str
    prerequisites: tuple[str, ...] = ()


class DiagnosticKind(Enum):
    """Category of a load diagnostic."""

    SOURCE_UNAVAILABLE = "source-unavailable"
    MALFORMED_LINE = "malformed-line"
    MISSING_REQUIRED_FIELD = "missing-required-field"
    UNRESOLVED_PREREQUISITE = "unresolved-prerequisite"


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal problem found while loading a source."""

    kind: DiagnosticKind
    message: str
    line_number: int = 0


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one catalog source."""

    success: bool
    loaded_count: int
    issues: tuple[Diagnostic, ...]
    source: str = ""

    @property
    def diagnostics(self) -> list[str]:
        """Diagnostic messages in the order they were found."""
        return [issue.message for issue in self.issues]
