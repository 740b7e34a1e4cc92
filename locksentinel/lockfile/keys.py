"""Parse package keys shared by ``packages`` and ``snapshots``.

Two encodings exist:

    lockfile v6+   ``/name@version(peers)``, ``name@version(peers)``
    lockfile v5    ``/name/version_peers``, ``/@scope/name/version_peers``
"""

from __future__ import annotations

import re

# v5 peer qualifiers never contain "/": scoped peers are written "@types+react".
_LEGACY_KEY = re.compile(r"^/((?:@[^/@]+/)?[^/@]+)/([^/]+)$")


def strip_peer_suffix(value: str) -> str:
    """Drop a peer qualifier from a version.

    ``"4.8.3(react-dom@18.3.1)(react@18.3.1)"`` -> ``"4.8.3"``
    ``"18.2.0_react@18.2.0"`` -> ``"18.2.0"``
    """
    for marker in ("(", "_"):
        cut = value.find(marker)
        if cut != -1:
            value = value[:cut]
    return value.strip()


def _valid_name(name: str) -> bool:
    if not name or name == "@":
        return False
    if "/" not in name:
        return True
    return name.startswith("@") and name.count("/") == 1


def parse_package_key(key: str) -> tuple[str, str] | None:
    """Split a lock-file package key into ``(name, version)``.

    Handles scoped names (``@ant-design/icons@4.8.3``), the leading slash of
    lockfile v6 keys (``/lodash@4.17.21``), v5 slash keys
    (``/react-dom/18.2.0_react@18.2.0``) and peer qualifiers
    (``antd@5.0.0(react@18.3.1)``).  Returns ``None`` for keys that fit
    neither encoding.
    """
    base = key.strip()
    paren = base.find("(")
    if paren != -1:
        base = base[:paren]

    m = _LEGACY_KEY.match(base)
    if m:
        name, version = m.group(1), strip_peer_suffix(m.group(2))
        return (name, version) if version else None

    if base.startswith("/"):
        base = base[1:]

    # The leading "@" of a scoped name is never the version separator.
    at = base.rfind("@")
    if at <= 0:
        return None

    name, version = base[:at], strip_peer_suffix(base[at + 1 :])
    if not _valid_name(name) or not version:
        return None
    return name, version
