"""Version matching by exact or dotted-prefix comparison.

A spec with as many segments as the found version is an exact match target;
a shorter spec matches any version sharing its leading segments::

    matches("1.0.5", "1.0")    -> True
    matches("1.10.0", "1.0")   -> False
    matches("1.0.0", "1.0.0")  -> True

No semver range semantics (``^``, ``~``, ``>=``) are applied.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence


class Satisfaction(enum.Enum):
    ALL = "all"
    SOME = "some"
    NONE = "none"


def matches(found: str, spec: str) -> bool:
    """Return True if *found* satisfies the version *spec*."""
    found_parts = found.strip().split(".")
    spec_parts = spec.strip().split(".")
    if len(spec_parts) > len(found_parts):
        return False
    return found_parts[: len(spec_parts)] == spec_parts


def satisfied_specs(expected: Sequence[str], found_versions: Iterable[str]) -> list[str]:
    """Specs from *expected* matched by at least one found version, in order."""
    found = list(found_versions)
    return [spec for spec in expected if any(matches(v, spec) for v in found)]


def classify(expected: Sequence[str], found_versions: Iterable[str]) -> Satisfaction:
    """Classify how many of the *expected* specs the found versions satisfy."""
    if not expected:
        raise ValueError("classify() needs at least one expected version")
    satisfied = len(satisfied_specs(expected, found_versions))
    if satisfied == len(expected):
        return Satisfaction.ALL
    if satisfied == 0:
        return Satisfaction.NONE
    return Satisfaction.SOME
