"""Security report layout: ``Package Name  Compromised Version(s)  Detection Date  Status``."""

from __future__ import annotations

import re

from locksentinel.expectations.cells import (
    clean_name,
    optional_cell,
    split_cells,
    split_versions,
)
from locksentinel.expectations.models import ExpectedPackage
from locksentinel.expectations.registry import register_format

# "pkg 1.0.0, 1.0.1 2025-09-16 Compromised" when the file was flattened to single spaces
_SINGLE_SPACE_ROW = re.compile(
    r"^\s*(\S+)"  # package name
    r"\s+([^\s,]+(?:\s*,\s*[^\s,]+)*)"  # comma-separated versions
    r"(?:\s+(\S+))?"  # detection date
    r"(?:\s+(.*?))?\s*$"  # status (may contain spaces)
)


class SecurityReportFormat:
    name = "security-report"
    columns = ["Package Name", "Compromised Version(s)", "Detection Date", "Status"]

    def sniff(self, header: str) -> bool:
        return "Compromised Version(s)" in header

    def split(self, line: str) -> list[str]:
        return split_cells(line, len(self.columns), _SINGLE_SPACE_ROW)

    def parse_row(self, cells: list[str]) -> ExpectedPackage:
        if len(cells) < 2:
            raise ValueError("missing version column")
        name = clean_name(cells[0])
        if not name:
            raise ValueError("empty package name")
        return ExpectedPackage(
            name=name,
            versions=split_versions(cells[1]),
            detection_date=optional_cell(cells, 2),
            original_status=optional_cell(cells, 3),
        )


register_format(SecurityReportFormat())
