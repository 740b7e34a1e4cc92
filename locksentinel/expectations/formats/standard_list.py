"""Standard list layout: ``Row  Package Name  Version(s)``."""

from __future__ import annotations

import re

from locksentinel.expectations.cells import clean_name, split_cells, split_versions
from locksentinel.expectations.models import ExpectedPackage
from locksentinel.expectations.registry import register_format

_ROW_TOKEN = re.compile(r"\bRow\b")

# "1 lodash 4.17.21, 4.17.20" when the file was flattened to single spaces
_SINGLE_SPACE_ROW = re.compile(r"^\s*(\S+)\s+(\S+)\s+(.*?)\s*$")


class StandardListFormat:
    name = "standard-list"
    columns = ["Row", "Package Name", "Version(s)"]

    def sniff(self, header: str) -> bool:
        return bool(_ROW_TOKEN.search(header)) and "Package Name" in header

    def split(self, line: str) -> list[str]:
        return split_cells(line, len(self.columns), _SINGLE_SPACE_ROW)

    def parse_row(self, cells: list[str]) -> ExpectedPackage:
        if len(cells) < 3:
            raise ValueError(f"expected {len(self.columns)} columns, got {len(cells)}")
        name = clean_name(cells[1])
        if not name:
            raise ValueError("empty package name")
        return ExpectedPackage(name=name, versions=split_versions(cells[2]))


register_format(StandardListFormat())
