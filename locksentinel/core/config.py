"""Run configuration for the command-line layer."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_LOCKFILE = "pnpm-lock.yaml"


def _env_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return max(1, int(raw))
    except ValueError:
        return default


@dataclass
class AuditConfig:
    """Parsed invocation settings handed from the CLI to the core."""

    lockfile: str = DEFAULT_LOCKFILE
    package: str | None = None
    version: str | None = None
    batch: str | None = None
    output: str | None = None
    verbose: bool = False
    workers: int = 1

    @property
    def is_batch(self) -> bool:
        return self.batch is not None

    @classmethod
    def from_env(cls, **overrides) -> AuditConfig:
        """Build a config from environment defaults, then apply *overrides*.

        Reads:
            LOCKSENTINEL_LOCKFILE — default lock file path
            LOCKSENTINEL_WORKERS  — default worker count for batch audits
        """
        config = cls(
            lockfile=os.environ.get("LOCKSENTINEL_LOCKFILE", DEFAULT_LOCKFILE),
            workers=_env_int("LOCKSENTINEL_WORKERS", 1),
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)
        return config
