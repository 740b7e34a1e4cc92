"""LockModel — index of package occurrences across a pnpm lock file."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import structlog
import yaml

from locksentinel.exceptions import LockParseError
from locksentinel.lockfile.keys import parse_package_key, strip_peer_suffix
from locksentinel.lockfile.models import LockOccurrence, Section

log = structlog.get_logger("locksentinel.lockfile")

DEPENDENCY_KINDS = ("dependencies", "devDependencies", "optionalDependencies")

# Single-project lock files (lockfileVersion 5/6) keep direct deps at the top.
_ROOT_IMPORTER = "."


class LockModel:
    """Read-only index ``name -> occurrences`` built once per run.

    Build it with :meth:`load`; the constructor takes already-extracted
    occurrences and is mostly useful in tests.
    """

    def __init__(
        self,
        occurrences: list[LockOccurrence],
        lockfile_version: str | None = None,
    ) -> None:
        index: dict[str, list[LockOccurrence]] = {}
        for occ in occurrences:
            index.setdefault(occ.name, []).append(occ)
        self._index: dict[str, tuple[LockOccurrence, ...]] = {
            name: tuple(found) for name, found in index.items()
        }
        self._count = len(occurrences)
        self.lockfile_version = lockfile_version

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def load(cls, text: str) -> LockModel:
        """Parse lock-file *text* into a model.

        Raises :class:`LockParseError` when the text is not valid YAML, is not
        a mapping, or contains none of the recognized sections.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            problem = getattr(exc, "problem", None) or "invalid YAML"
            if mark is not None:
                raise LockParseError(
                    f"Lock file is not valid YAML: {problem}",
                    line=mark.line + 1,
                    column=mark.column + 1,
                ) from exc
            raise LockParseError(f"Lock file is not valid YAML: {problem}") from exc

        if not isinstance(data, dict):
            raise LockParseError("Lock file does not contain a mapping at the top level")

        has_importers = "importers" in data
        has_root_deps = not has_importers and any(kind in data for kind in DEPENDENCY_KINDS)
        if not (has_importers or has_root_deps or "packages" in data or "snapshots" in data):
            raise LockParseError(
                "Lock file has none of the sections 'importers', 'packages', 'snapshots'"
            )

        occurrences: list[LockOccurrence] = []
        if has_importers:
            occurrences.extend(_extract_importers(_as_mapping(data, "importers")))
        elif has_root_deps:
            occurrences.extend(_extract_importer(_ROOT_IMPORTER, data))
        occurrences.extend(_extract_keyed(_as_mapping(data, "packages"), Section.PACKAGES))
        occurrences.extend(_extract_keyed(_as_mapping(data, "snapshots"), Section.SNAPSHOTS))

        raw_version = data.get("lockfileVersion")
        model = cls(occurrences, None if raw_version is None else str(raw_version))
        log.debug(
            "lockfile.loaded",
            lockfile_version=model.lockfile_version,
            packages=len(model._index),
            occurrences=model._count,
        )
        return model

    # ── queries ──────────────────────────────────────────────────────────

    def occurrences_for(self, name: str) -> tuple[LockOccurrence, ...]:
        """All occurrences of *name* in discovery order; empty when absent."""
        return self._index.get(name, ())

    def names(self) -> list[str]:
        return list(self._index)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[LockOccurrence]:
        for found in self._index.values():
            yield from found

    def __len__(self) -> int:
        return self._count


def _as_mapping(data: dict, key: str) -> dict:
    """Return ``data[key]`` as a mapping; absent or null sections are empty."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise LockParseError(f"Section '{key}' must be a mapping, got {type(value).__name__}")
    return value


def _extract_importers(importers: dict) -> list[LockOccurrence]:
    occurrences: list[LockOccurrence] = []
    for importer_path, importer in importers.items():
        if isinstance(importer, dict):
            occurrences.extend(_extract_importer(str(importer_path), importer))
    return occurrences


def _extract_importer(importer_path: str, importer: dict) -> list[LockOccurrence]:
    occurrences: list[LockOccurrence] = []
    for kind in DEPENDENCY_KINDS:
        deps = importer.get(kind)
        if not isinstance(deps, dict):
            continue
        for name, ref in deps.items():
            version, specifier = _parse_dependency_ref(ref)
            if not name or version is None:
                log.debug("lockfile.dependency_skipped", importer=importer_path, name=name)
                continue
            occurrences.append(
                LockOccurrence(
                    name=str(name),
                    version=version,
                    section=Section.DIRECT,
                    context=f"{importer_path} ({kind})",
                    specifier=specifier,
                )
            )
    return occurrences


def _parse_dependency_ref(ref: Any) -> tuple[str | None, str | None]:
    """Return ``(version, specifier)`` from an importer dependency entry.

    Newer lock files store ``{specifier, version}``; older ones store the
    version string directly.
    """
    if isinstance(ref, dict):
        raw_version = ref.get("version")
        specifier = ref.get("specifier")
        specifier = None if specifier is None else str(specifier)
    else:
        raw_version = ref
        specifier = None
    if raw_version is None:
        return None, specifier
    version = strip_peer_suffix(str(raw_version))
    return (version or None), specifier


def _extract_keyed(section: dict, kind: Section) -> list[LockOccurrence]:
    occurrences: list[LockOccurrence] = []
    for raw_key in section:
        key = str(raw_key)
        parsed = parse_package_key(key)
        if parsed is None:
            log.debug("lockfile.key_skipped", section=kind.value, key=key)
            continue
        name, version = parsed
        context = "packages" if kind is Section.PACKAGES else f"snapshots[{key}]"
        occurrences.append(
            LockOccurrence(name=name, version=version, section=kind, context=context)
        )
    return occurrences
