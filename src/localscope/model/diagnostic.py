"""Diagnostic model: non-fatal findings reported by a scoping pass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the stylesheet being scoped.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        identifier: The class or id name involved, if applicable.
        line: Source line of the offending rule, if known.
        column: Source column of the offending rule, if known.
    """

    rule: str
    severity: Severity
    message: str
    identifier: str | None = None
    line: int | None = None
    column: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [{self.line}:{self.column}]"
        elif self.identifier:
            location = f" [name={self.identifier}]"
        return f"{self.severity.value}{location}: {self.message}"
