# trapper/protocol/loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from trapper.utils.hashing import fingerprint_file

DEFAULT_PROTOCOL_DIR = Path(__file__).resolve().parent / "metadata"


class ProtocolLoader:
    """Load the protocol YAML files into dicts + keep per-file SHA256 hashes."""

    REQUIRED_FILES = (
        "constants.yml",
        "header.yml",
    )

    def __init__(self, config_dir: str | Path = DEFAULT_PROTOCOL_DIR):
        self.config_dir = Path(config_dir)

        self.constants: Dict[str, Any] = {}
        self.header: list[Dict[str, Any]] = []

        # filename -> sha256 hex
        self.file_hashes: Dict[str, str] = {}

    def load_all(self) -> None:
        self.file_hashes.clear()
        for fn in self.REQUIRED_FILES:
            path = self.config_dir / fn
            if not path.exists():
                raise FileNotFoundError(f"Protocol file not found: {path}")
            self.file_hashes[fn] = fingerprint_file(path)

        self.constants = self._load_yaml("constants.yml")
        header_doc = self._load_yaml("header.yml")

        if not isinstance(self.constants, dict):
            raise ValueError("constants.yml must be a mapping")
        if not isinstance(header_doc, dict):
            raise ValueError("header.yml must be a mapping")
        self.header = header_doc.get("header", []) or []
        if not isinstance(self.header, list):
            raise ValueError("header.yml must contain 'header' list")
        for key in ("magic", "protocol_version", "request", "max_payload"):
            if key not in self.constants:
                raise ValueError(f"constants.yml is missing '{key}'")

    def protocol_version(self) -> int:
        v = self.constants.get("protocol_version", 1)
        try:
            return int(v)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid protocol version in constants.yml: {v!r}") from None

    def _load_yaml(self, filename: str) -> Dict[str, Any]:
        path = self.config_dir / filename
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
