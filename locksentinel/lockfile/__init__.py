"""Lock-file model: normalized package occurrences from pnpm-lock.yaml."""

from locksentinel.lockfile.keys import parse_package_key, strip_peer_suffix
from locksentinel.lockfile.model import LockModel
from locksentinel.lockfile.models import LockOccurrence, Section

__all__ = ["LockModel", "LockOccurrence", "Section", "parse_package_key", "strip_peer_suffix"]
