"""Data models for the lock-file index."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Section(enum.Enum):
    """Top-level lock-file section an occurrence was found in."""

    DIRECT = "direct-dependency"
    PACKAGES = "package-definition"
    SNAPSHOTS = "snapshot"


@dataclass(frozen=True)
class LockOccurrence:
    """One place a package/version pair was observed in the lock file."""

    name: str
    version: str
    section: Section
    context: str
    specifier: str | None = None
