# trapper/protocol/core/header.py
from __future__ import annotations

from typing import Any, Dict


def parse_header(proto, raw: bytes) -> Dict[str, Any]:
    """Split a raw header into its magic/version/len fields."""
    size = proto.header_struct.size
    if len(raw) != size:
        raise ValueError(f"Trapper header must be {size} bytes, got {len(raw)}")
    values = proto.header_struct.unpack_from(raw)
    return {name: values[i] for i, name in enumerate(proto.header_fields)}


def build_header(proto, payload_len: int) -> bytes:
    if payload_len < 0:
        raise ValueError(f"payload length must be non-negative, got {payload_len}")
    by_name = {"magic": proto.magic, "version": proto.version, "len": payload_len}
    return proto.header_struct.pack(*[by_name[name] for name in proto.header_fields])
