"""Batch-format registry — match a header line to a parsing strategy."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from locksentinel.expectations.models import ExpectedPackage


@runtime_checkable
class BatchFormat(Protocol):
    """Interface that every batch-file layout must satisfy."""

    name: str
    columns: list[str]

    def sniff(self, header: str) -> bool: ...

    def split(self, line: str) -> list[str]: ...

    def parse_row(self, cells: list[str]) -> ExpectedPackage:
        """Build an expectation from *cells*; raise ``ValueError`` to skip the row."""
        ...


# Sniffed in registration order.
FORMAT_REGISTRY: dict[str, BatchFormat] = {}


def register_format(fmt: BatchFormat) -> None:
    """Register a format instance by its name."""
    FORMAT_REGISTRY[fmt.name] = fmt


def detect_format(header: str) -> BatchFormat | None:
    """Return the first registered format whose header sniff matches."""
    for fmt in FORMAT_REGISTRY.values():
        if fmt.sniff(header):
            return fmt
    return None
