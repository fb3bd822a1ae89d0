# trapper/utils/hashing.py
from __future__ import annotations

import hashlib
from pathlib import Path

_CHUNK = 64 * 1024


def fingerprint_file(path: Path) -> str:
    """Lowercase SHA-256 hex digest of a protocol definition file."""
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        while True:
            block = f.read(_CHUNK)
            if not block:
                break
            digest.update(block)
    return digest.hexdigest()
