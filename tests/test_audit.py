"""Tests for the audit engine."""

from __future__ import annotations

import dataclasses

import pytest

from locksentinel.audit import AuditEngine, AuditRun, AuditStatus, Counters, query, run
from locksentinel.audit.models import AuditResult
from locksentinel.expectations import ExpectedPackage, RowSkipped, parse
from locksentinel.lockfile import LockModel, LockOccurrence, Section

# ── helpers ──────────────────────────────────────────────────────────────


def _model(*pairs: tuple[str, str]) -> LockModel:
    return LockModel(
        [
            LockOccurrence(name=name, version=version, section=Section.PACKAGES, context="packages")
            for name, version in pairs
        ]
    )


def _expect(name: str, *versions: str) -> ExpectedPackage:
    return ExpectedPackage(name=name, versions=versions)


# ── ad-hoc ───────────────────────────────────────────────────────────────


class TestQuery:
    def test_found_any_version(self, lock_react_only):
        result = query(lock_react_only, "react")
        assert result.status is AuditStatus.FOUND
        assert len(result.matches) == 2
        assert result.matches == result.occurrences

    def test_version_mismatch(self, lock_react_only):
        result = query(lock_react_only, "react", "17.0.0")
        assert result.status is AuditStatus.VERSION_MISMATCH
        assert result.matches == ()
        assert result.found_versions == ["18.3.1"]
        assert len(result.occurrences) == 2

    def test_exact_version(self, lock_v9):
        result = query(lock_v9, "@ant-design/icons", "4.8.3")
        assert result.status is AuditStatus.FOUND
        assert len(result.matches) == 3

    def test_prefix_version(self, lock_v9):
        assert query(lock_v9, "lodash", "4.17").status is AuditStatus.FOUND

    def test_v5_peer_suffixed_version_found(self):
        model = LockModel.load(
            "lockfileVersion: 5.4\n"
            "dependencies:\n"
            "  react-dom: 18.2.0_react@18.2.0\n"
            "packages:\n"
            "  /react-dom/18.2.0_react@18.2.0:\n"
            "    dev: false\n"
        )
        result = query(model, "react-dom", "18.2.0")
        assert result.status is AuditStatus.FOUND
        assert len(result.matches) == 2

    def test_not_found_ignores_version(self, lock_v9):
        assert query(lock_v9, "left-pad").status is AuditStatus.NOT_FOUND
        assert query(lock_v9, "left-pad", "1.3.0").status is AuditStatus.NOT_FOUND

    def test_blank_version_means_any(self, lock_v9):
        assert query(lock_v9, "react", "  ").status is AuditStatus.FOUND

    def test_expected_record_synthesized(self, lock_v9):
        result = AuditEngine(lock_v9).query("react", "18.3.1")
        assert result.expected == ExpectedPackage(name="react", versions=("18.3.1",))
        assert result.name == "react"


# ── batch ────────────────────────────────────────────────────────────────


class TestRun:
    def test_partial_match(self):
        result = run(_model(("pkg", "1.0.0")), [_expect("pkg", "1.0.0", "1.0.1")]).results[0]
        assert result.status is AuditStatus.PARTIAL_MATCH
        assert [occ.version for occ in result.matches] == ["1.0.0"]

    def test_version_mismatch(self):
        result = run(_model(("pkg", "2.0.0")), [_expect("pkg", "1.0.0")]).results[0]
        assert result.status is AuditStatus.VERSION_MISMATCH

    def test_all_specs_found(self):
        model = _model(("pkg", "1.0.0"), ("pkg", "1.0.1"))
        result = run(model, [_expect("pkg", "1.0.0", "1.0.1")]).results[0]
        assert result.status is AuditStatus.FOUND

    def test_two_occurrences_one_spec_is_partial(self):
        # two occurrences match the first spec; the second spec is unmet
        model = _model(("pkg", "1.0.0"), ("pkg", "1.0.0"))
        result = run(model, [_expect("pkg", "1.0.0", "2.0.0")]).results[0]
        assert result.status is AuditStatus.PARTIAL_MATCH
        assert len(result.matches) == 2

    def test_order_preserved(self):
        model = _model(("pkgA", "1.0.0"), ("pkgB", "1.0.0"))
        audit = run(model, [_expect("pkgB"), _expect("pkgA")])
        assert [r.name for r in audit.results] == ["pkgB", "pkgA"]

    def test_order_preserved_with_workers(self):
        names = [f"pkg{i:03d}" for i in range(200, 0, -1)]
        model = _model(*[(name, "1.0.0") for name in names[::2]])
        audit = run(model, [_expect(name, "1.0.0") for name in names], workers=8)
        assert [r.name for r in audit.results] == names
        assert audit.counters.found == 100
        assert audit.counters.not_found == 100

    def test_not_found_counters(self):
        text = "Row\tPackage Name\tVersion(s)\n1\tlodash\t4.17.21, 4.17.20\n"
        audit = run(_model(("react", "18.3.1")), parse(text).expectations)
        assert audit.results[0].status is AuditStatus.NOT_FOUND
        assert audit.counters == Counters(total=1, found=0, partial=0, mismatch=0, not_found=1)

    def test_counters_sum_to_total(self, lock_v9, standard_list_text, security_report_text):
        expectations = (
            parse(standard_list_text).expectations + parse(security_report_text).expectations
        )
        counters = run(lock_v9, expectations).counters
        assert counters.total == len(expectations)
        assert (
            counters.found + counters.partial + counters.mismatch + counters.not_found
            == counters.total
        )

    def test_mixed_statuses(self, lock_v9, standard_list_text):
        audit = run(lock_v9, parse(standard_list_text).expectations)
        statuses = [r.status for r in audit.results]
        assert statuses == [
            AuditStatus.NOT_FOUND,  # @ctrl/tinycolor
            AuditStatus.PARTIAL_MATCH,  # lodash 4.17.21 yes, 4.17.20 no
            AuditStatus.FOUND,  # react, any version
        ]

    def test_skipped_rows_carried(self):
        skipped = (RowSkipped(line_number=2, line="1\tx", reason="expected 3 columns, got 2"),)
        audit = AuditEngine(_model()).run([], skipped=skipped)
        assert isinstance(audit, AuditRun)
        assert audit.skipped == skipped
        assert audit.counters == Counters()

    def test_found_versions_deduplicated(self, lock_v9):
        result = run(lock_v9, [_expect("react", "17")]).results[0]
        assert result.found_versions == ["18.3.1"]
        assert len(result.locations) == 3


class TestCounters:
    def test_from_results(self):
        results = [AuditResult(expected=_expect("pkg"), status=status) for status in AuditStatus]
        counters = Counters.from_results(results)
        assert counters == Counters(total=4, found=1, partial=1, mismatch=1, not_found=1)

    def test_frozen(self):
        counters = Counters.from_results([])
        with pytest.raises(dataclasses.FrozenInstanceError):
            counters.total = 1  # type: ignore[misc]
