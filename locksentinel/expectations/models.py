"""Data models for parsed batch expectations."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExpectedPackage:
    """One row of audit intent.

    ``versions`` empty means "any version".  ``original_status`` and
    ``detection_date`` only come from security-report input.
    """

    name: str
    versions: tuple[str, ...] = ()
    original_status: str | None = None
    detection_date: str | None = None


@dataclass(frozen=True)
class RowSkipped:
    """A malformed batch row that was left out of the audit."""

    line_number: int
    line: str
    reason: str


@dataclass(frozen=True)
class ExpectationBatch:
    """Result of parsing a batch file: the rows kept and the rows skipped."""

    format: str | None
    expectations: tuple[ExpectedPackage, ...] = ()
    skipped: tuple[RowSkipped, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.expectations)
