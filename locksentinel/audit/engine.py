"""AuditEngine — pure-function classification of expectations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

import structlog

from locksentinel.audit.models import AuditResult, AuditRun, AuditStatus, Counters
from locksentinel.expectations.models import ExpectedPackage, RowSkipped
from locksentinel.lockfile.model import LockModel
from locksentinel.version_rule import Satisfaction, classify, matches

log = structlog.get_logger("locksentinel.audit")

_STATUS_BY_SATISFACTION = {
    Satisfaction.ALL: AuditStatus.FOUND,
    Satisfaction.SOME: AuditStatus.PARTIAL_MATCH,
    Satisfaction.NONE: AuditStatus.VERSION_MISMATCH,
}


class AuditEngine:
    """Resolve expectations against a read-only :class:`LockModel`."""

    def __init__(self, model: LockModel) -> None:
        self._model = model

    def resolve(self, expected: ExpectedPackage) -> AuditResult:
        occurrences = self._model.occurrences_for(expected.name)
        if not occurrences:
            return AuditResult(expected=expected, status=AuditStatus.NOT_FOUND)

        if not expected.versions:
            return AuditResult(
                expected=expected,
                status=AuditStatus.FOUND,
                matches=occurrences,
                occurrences=occurrences,
            )

        found_versions = {occ.version for occ in occurrences}
        status = _STATUS_BY_SATISFACTION[classify(expected.versions, found_versions)]
        matching = tuple(
            occ
            for occ in occurrences
            if any(matches(occ.version, spec) for spec in expected.versions)
        )
        return AuditResult(
            expected=expected,
            status=status,
            matches=matching,
            occurrences=occurrences,
        )

    def query(self, name: str, version: str | None = None) -> AuditResult:
        """Ad-hoc lookup of one package with an optional version."""
        versions = (version.strip(),) if version and version.strip() else ()
        return self.resolve(ExpectedPackage(name=name, versions=versions))

    def run(
        self,
        expectations: Sequence[ExpectedPackage],
        *,
        workers: int = 1,
        skipped: Iterable[RowSkipped] = (),
    ) -> AuditRun:
        """Resolve every expectation; results keep the input order.

        With ``workers > 1`` expectations are resolved on a thread pool;
        ``Executor.map`` yields results in submission order.
        """
        if workers > 1 and len(expectations) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                results = tuple(pool.map(self.resolve, expectations))
        else:
            results = tuple(self.resolve(expected) for expected in expectations)

        counters = Counters.from_results(results)
        log.debug(
            "audit.run_complete",
            total=counters.total,
            found=counters.found,
            partial=counters.partial,
            mismatch=counters.mismatch,
            not_found=counters.not_found,
        )
        return AuditRun(results=results, counters=counters, skipped=tuple(skipped))


def query(model: LockModel, name: str, version: str | None = None) -> AuditResult:
    return AuditEngine(model).query(name, version)


def run(
    model: LockModel,
    expectations: Sequence[ExpectedPackage],
    *,
    workers: int = 1,
    skipped: Iterable[RowSkipped] = (),
) -> AuditRun:
    return AuditEngine(model).run(expectations, workers=workers, skipped=skipped)
