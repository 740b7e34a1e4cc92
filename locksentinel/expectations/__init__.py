"""Batch expectations parsed from advisory package lists."""

from locksentinel.expectations.models import ExpectationBatch, ExpectedPackage, RowSkipped
from locksentinel.expectations.parser import parse

__all__ = ["ExpectationBatch", "ExpectedPackage", "RowSkipped", "parse"]
