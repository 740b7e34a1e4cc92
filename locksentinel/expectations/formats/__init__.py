"""Batch-file formats, auto-registered on import and sniffed in this order."""

from locksentinel.expectations.formats import (
    standard_list,  # noqa: F401
    security_report,  # noqa: F401
)
