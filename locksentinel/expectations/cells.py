"""Cell splitting and cleaning shared by the batch formats."""

from __future__ import annotations

import re

_WIDE_GAP = re.compile(r"\s{2,}")
_COMMA_GAP = re.compile(r"\s*,\s*")

# Annotations advisories append to versions: "1.0.0 (yanked)", "1.0.0*", "2.1.0†".
_TRAILING_NOTE = re.compile(r"\s*\([^()]*\)\s*$")
_TRAILING_GLYPHS = re.compile(r"[^0-9A-Za-z+\-]+$")

_QUOTES = ("\"", "'", "`")


def split_cells(line: str, required: int, fallback: re.Pattern[str]) -> list[str]:
    """Split a row into cells.

    Tabs win when present.  Otherwise columns are separated by runs of two or
    more spaces and the last column takes any remainder; if that yields fewer
    than *required* cells the format's single-space *fallback* pattern is
    tried.
    """
    line = line.rstrip("\r\n")
    if "\t" in line:
        return [cell.strip() for cell in line.split("\t")]

    # Version lists never span columns: close up gaps around their commas.
    flat = _COMMA_GAP.sub(", ", line.strip())
    cells = _WIDE_GAP.split(flat, maxsplit=required - 1)
    if len(cells) >= required:
        return cells

    m = fallback.match(flat)
    if m:
        return [(group or "").strip() for group in m.groups()]
    return cells


def clean_name(raw: str) -> str:
    """Trim a package name and drop one layer of surrounding quotes."""
    name = raw.strip()
    if len(name) >= 2 and name[0] == name[-1] and name[0] in _QUOTES:
        name = name[1:-1].strip()
    return name


def clean_version(raw: str) -> str:
    token = _TRAILING_NOTE.sub("", raw.strip())
    return _TRAILING_GLYPHS.sub("", token)


def split_versions(raw: str) -> tuple[str, ...]:
    """Split a comma-separated version cell; an empty cell means any version."""
    versions = (clean_version(token) for token in raw.split(","))
    return tuple(v for v in versions if v)


def optional_cell(cells: list[str], index: int) -> str | None:
    if index >= len(cells):
        return None
    return cells[index].strip() or None
