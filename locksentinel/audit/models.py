"""Data models for audit results."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from locksentinel.expectations.models import ExpectedPackage, RowSkipped
from locksentinel.lockfile.models import LockOccurrence


class AuditStatus(enum.Enum):
    """Classification of one expectation; values are the report labels."""

    FOUND = "Found"
    PARTIAL_MATCH = "Partial Match"
    VERSION_MISMATCH = "Version Mismatch"
    NOT_FOUND = "Not Found"


@dataclass(frozen=True)
class AuditResult:
    """One expectation, its status and the evidence behind it.

    ``matches`` holds the occurrences satisfying at least one expected
    version (every occurrence when no version was expected); ``occurrences``
    holds every occurrence of the package name.
    """

    expected: ExpectedPackage
    status: AuditStatus
    matches: tuple[LockOccurrence, ...] = ()
    occurrences: tuple[LockOccurrence, ...] = ()

    @property
    def name(self) -> str:
        return self.expected.name

    @property
    def found_versions(self) -> list[str]:
        """Distinct versions of all occurrences, in discovery order."""
        return list(dict.fromkeys(occ.version for occ in self.occurrences))

    @property
    def locations(self) -> list[str]:
        return [occ.context for occ in self.occurrences]


@dataclass(frozen=True)
class Counters:
    total: int = 0
    found: int = 0
    partial: int = 0
    mismatch: int = 0
    not_found: int = 0

    @classmethod
    def from_results(cls, results: Iterable[AuditResult]) -> Counters:
        """Tally result statuses; the fields always sum to ``total``."""
        tally = dict.fromkeys(AuditStatus, 0)
        for result in results:
            tally[result.status] += 1
        return cls(
            total=sum(tally.values()),
            found=tally[AuditStatus.FOUND],
            partial=tally[AuditStatus.PARTIAL_MATCH],
            mismatch=tally[AuditStatus.VERSION_MISMATCH],
            not_found=tally[AuditStatus.NOT_FOUND],
        )


@dataclass(frozen=True)
class AuditRun:
    """Results in the order the expectations were supplied, plus counters."""

    results: tuple[AuditResult, ...]
    counters: Counters
    skipped: tuple[RowSkipped, ...] = field(default_factory=tuple)
