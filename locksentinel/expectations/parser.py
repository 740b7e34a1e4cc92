"""Parse batch files into expectations, sniffing the layout from the header."""

from __future__ import annotations

import structlog

# Ensure formats are registered before any batch is parsed.
import locksentinel.expectations.formats  # noqa: F401
from locksentinel.exceptions import BatchFormatError
from locksentinel.expectations.models import ExpectationBatch, ExpectedPackage, RowSkipped
from locksentinel.expectations.registry import detect_format

log = structlog.get_logger("locksentinel.expectations")


def parse(text: str) -> ExpectationBatch:
    """Parse batch *text* into an :class:`ExpectationBatch`.

    The first non-empty line is the header and selects the format; an
    unrecognized header raises :class:`BatchFormatError` before any row is
    read.  Malformed rows are skipped and recorded in ``skipped``; the rest
    of the batch is still parsed.  Text without any non-empty line yields an
    empty batch.
    """
    lines = text.splitlines()
    header_index = next((i for i, line in enumerate(lines) if line.strip()), None)
    if header_index is None:
        return ExpectationBatch(format=None)

    header = lines[header_index].strip()
    fmt = detect_format(header)
    if fmt is None:
        raise BatchFormatError(header)

    expectations: list[ExpectedPackage] = []
    skipped: list[RowSkipped] = []
    for offset, line in enumerate(lines[header_index + 1 :], start=header_index + 2):
        if not line.strip():
            continue
        try:
            expectations.append(fmt.parse_row(fmt.split(line)))
        except ValueError as exc:
            skipped.append(RowSkipped(line_number=offset, line=line, reason=str(exc)))
            log.info("batch.row_skipped", line_number=offset, reason=str(exc))

    log.debug(
        "batch.parsed",
        format=fmt.name,
        expectations=len(expectations),
        skipped=len(skipped),
    )
    return ExpectationBatch(
        format=fmt.name,
        expectations=tuple(expectations),
        skipped=tuple(skipped),
    )
