from __future__ import annotations

import struct
from typing import Any, Dict, Optional

from .types import YAML_TO_STRUCT
from .header import parse_header, build_header
from ..loader import ProtocolLoader

HEADER_FIELDS = ("magic", "version", "len")


class Protocol:
    """Runtime access to trapper protocol metadata."""

    def __init__(self, loader: ProtocolLoader, *, max_payload: Optional[int] = None):
        self.constants: Dict[str, Any] = loader.constants
        self.header_def: list[Dict[str, Any]] = loader.header
        self.file_hashes: Dict[str, str] = dict(loader.file_hashes)

        # Build header struct
        try:
            self.header_fields = [f["name"] for f in self.header_def]
            self.header_fmt = "<" + "".join(YAML_TO_STRUCT[f["type"]] for f in self.header_def)
        except KeyError as e:
            raise ValueError(f"Unknown header field type in header.yml: {e}") from e
        except Exception as e:
            raise ValueError(f"Invalid header definition in header.yml: {e}") from e

        if tuple(self.header_fields) != HEADER_FIELDS:
            raise ValueError(f"header.yml must define fields {list(HEADER_FIELDS)}, got {self.header_fields}")

        self.header_struct = struct.Struct(self.header_fmt)

        self.magic: bytes = str(self.constants.get("magic", "ZBXD")).encode("ascii")
        if len(self.magic) != 4:
            raise ValueError(f"magic must be 4 ASCII characters, got {self.magic!r}")

        self.version: int = loader.protocol_version()
        if not 0 <= self.version <= 0xFF:
            raise ValueError(f"protocol_version must fit in one byte, got {self.version}")

        self.request: str = str(self.constants.get("request", "sender data"))

        if max_payload is None:
            max_payload = self.constants.get("max_payload")
        if isinstance(max_payload, bool) or not isinstance(max_payload, int) or max_payload <= 0:
            raise ValueError(f"max_payload must be a positive int, got {max_payload!r}")
        self.max_payload: int = max_payload

    @classmethod
    def default(cls, *, max_payload: Optional[int] = None) -> "Protocol":
        """Protocol built from the definition files shipped with the package."""
        loader = ProtocolLoader()
        loader.load_all()
        return cls(loader, max_payload=max_payload)

    @property
    def header_size(self) -> int:
        return self.header_struct.size

    # Delegated
    def parse_header(self, raw: bytes) -> Dict[str, Any]:
        return parse_header(self, raw)

    def build_header(self, payload_len: int) -> bytes:
        return build_header(self, payload_len)
