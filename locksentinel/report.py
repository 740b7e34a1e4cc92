"""Render audit results as console text and as a TSV report."""

from __future__ import annotations

import re

from locksentinel.audit.models import AuditResult, AuditRun, AuditStatus
from locksentinel.lockfile.models import LockOccurrence

TSV_COLUMNS = (
    "Package Name",
    "Status",
    "Expected Versions",
    "Found Versions",
    "Locations",
    "Original Status",
    "Detection Date",
)

_FIELD_BREAKS = re.compile(r"[\t\r\n]+")


def _field(value: str | None) -> str:
    """One TSV cell: tabs and line breaks collapse to a single space."""
    if value is None:
        return ""
    return _FIELD_BREAKS.sub(" ", value)


def _tag(status: AuditStatus) -> str:
    return f"[{status.value.upper()}]"


def _expected_label(result: AuditResult) -> str:
    return ", ".join(result.expected.versions) if result.expected.versions else "any version"


# ── TSV ──────────────────────────────────────────────────────────────────


def render_tsv(run: AuditRun) -> str:
    """Fixed 7-column report, header first, one row per result in run order."""
    rows = ["\t".join(TSV_COLUMNS)]
    for result in run.results:
        expected = result.expected
        found_versions = result.found_versions
        fields = (
            expected.name,
            result.status.value,
            ", ".join(expected.versions) if expected.versions else "Any",
            ", ".join(found_versions) if found_versions else "None",
            "; ".join(result.locations) if result.occurrences else "None",
            expected.original_status,
            expected.detection_date,
        )
        rows.append("\t".join(_field(f) for f in fields))
    return "\n".join(rows) + "\n"


# ── console ──────────────────────────────────────────────────────────────


def _occurrence_lines(occ: LockOccurrence, verbose: bool) -> list[str]:
    if not verbose:
        return [f"   - {occ.version} ({occ.context})"]
    lines = [
        f"   location: {occ.context}",
        f"      section: {occ.section.value}",
    ]
    if occ.specifier:
        lines.append(f"      specifier: {occ.specifier}")
    lines.append(f"      version: {occ.version}")
    return lines


def _render_result(result: AuditResult, verbose: bool) -> list[str]:
    status = result.status
    if status is AuditStatus.NOT_FOUND:
        return [f"{_tag(status)} {result.name}"]

    versions = result.expected.versions
    if status is AuditStatus.VERSION_MISMATCH:
        lines = [
            f"{_tag(status)} {result.name}",
            f"   expected: {_expected_label(result)}",
            "   found:",
        ]
        evidence = result.occurrences
    else:
        headline = f"{_tag(status)} {result.name}"
        if versions:
            headline += f" @ {', '.join(versions)}"
        lines = [headline]
        evidence = result.matches

    for occ in evidence:
        lines.extend(_occurrence_lines(occ, verbose))
    return lines


def _render_run(run: AuditRun, verbose: bool) -> list[str]:
    lines = ["Batch audit results:", ""]
    for result in run.results:
        lines.append(f"{_tag(result.status)} {result.name}")
        if not verbose and result.status is AuditStatus.FOUND:
            continue

        lines.append(f"   expected: {_expected_label(result)}")
        if result.status is not AuditStatus.NOT_FOUND:
            lines.append("   found:")
            for occ in result.occurrences:
                lines.append(f"   - {occ.version} ({occ.context})")
        if result.expected.original_status:
            lines.append(f"   status: {result.expected.original_status}")
        if result.expected.detection_date:
            lines.append(f"   detection date: {result.expected.detection_date}")
        lines.append("")

    counters = run.counters
    lines += [
        "Summary:",
        f"   total: {counters.total}",
        f"   found: {counters.found}",
        f"   partial match: {counters.partial}",
        f"   version mismatch: {counters.mismatch}",
        f"   not found: {counters.not_found}",
    ]
    if run.skipped:
        lines.append(f"   skipped rows: {len(run.skipped)}")
        if verbose:
            for skip in run.skipped:
                lines.append(f"   - line {skip.line_number}: {skip.reason}")
    return lines


def render_console(target: AuditResult | AuditRun, verbose: bool = False) -> str:
    """Human-readable text for a single query result or a whole batch run."""
    if isinstance(target, AuditRun):
        lines = _render_run(target, verbose)
    else:
        lines = _render_result(target, verbose)
    return "\n".join(lines) + "\n"
