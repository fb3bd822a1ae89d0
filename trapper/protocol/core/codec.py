# trapper/protocol/core/codec.py
"""
Trapper frame codec.

Frame layout (little-endian):

    offset  size  field
    0       4     magic    b"ZBXD"
    4       1     version  0x01
    5       8     len      payload byte length
    13      len   payload  UTF-8 JSON document

Everything here is a pure function of its inputs; the only I/O is through
the ``read(n)`` method of the stream handed to decode_response().
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Optional

from trapper.interfaces.byte_stream import ByteSource
from trapper.model import Batch
from ..errors import (
    ProtocolError,
    BAD_MAGIC,
    INCOMPLETE_BODY,
    INCOMPLETE_HEADER,
    INVALID_BODY,
    INVALID_LENGTH,
)
from .defs import Protocol

_log = logging.getLogger(__name__)

_SIGN_BIT = 1 << 63

# Consecutive "no data yet" reads tolerated before a read gives up.
MAX_IDLE_READS = 1000
IDLE_SLEEP_S = 0.001


# ---------------- encode ----------------

def build_request(proto: Protocol, batch: Batch) -> Dict[str, Any]:
    doc: Dict[str, Any] = {
        "request": proto.request,
        "data": [s.as_dict() for s in batch.samples],
    }
    # ns rides along only with a batch clock
    if batch.clock is not None:
        doc["clock"] = batch.clock
        doc["ns"] = batch.ns if batch.ns is not None else 0
    return doc


def encode_frame(proto: Protocol, payload: bytes) -> bytes:
    return proto.build_header(len(payload)) + payload


def encode_request(proto: Protocol, batch: Batch) -> bytes:
    """Serialize a batch into one complete request frame."""
    payload = json.dumps(
        build_request(proto, batch),
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")
    return encode_frame(proto, payload)


# ---------------- decode ----------------

def read_exactly(stream: ByteSource, n: int, *, max_idle_reads: Optional[int] = None) -> bytes:
    """
    Read n bytes, tolerating short reads.

    A read returning None means "nothing yet"; it is retried after a short
    sleep, up to max_idle_reads times in a row (default MAX_IDLE_READS).
    Returns fewer than n bytes if the stream ends (b"") or stays idle
    past that bound.
    """
    if max_idle_reads is None:
        max_idle_reads = MAX_IDLE_READS
    buf = bytearray()
    idle = 0
    while len(buf) < n:
        chunk = stream.read(n - len(buf))
        if chunk is None:
            idle += 1
            if idle > max_idle_reads:
                _log.debug("READ_IDLE_LIMIT read=%d wanted=%d", len(buf), n)
                break
            time.sleep(IDLE_SLEEP_S)
            continue
        idle = 0
        if not chunk:
            break
        buf.extend(chunk)
    return bytes(buf)


def read_frame(proto: Protocol, stream: ByteSource) -> bytes:
    """Read one frame off the stream and return its raw payload."""
    hdr_size = proto.header_size
    raw_header = read_exactly(stream, hdr_size)
    if len(raw_header) < hdr_size:
        raise ProtocolError(
            INCOMPLETE_HEADER,
            f"Failed to read complete response header. Read {len(raw_header)} of {hdr_size} bytes.",
            details={"read": len(raw_header)},
        )

    # magic first; the remaining header bytes are meaningless without it
    if raw_header[:len(proto.magic)] != proto.magic:
        raise ProtocolError(
            BAD_MAGIC,
            f"Invalid response header magic: {raw_header[:len(proto.magic)]!r}",
            details={"magic": bytes(raw_header[:len(proto.magic)])},
        )

    hdr = proto.parse_header(raw_header)

    if hdr["version"] != proto.version:
        _log.debug("FRAME_VERSION_MISMATCH got=%d expected=%d", hdr["version"], proto.version)

    length = hdr["len"]
    if length & _SIGN_BIT or length > proto.max_payload:
        raise ProtocolError(
            INVALID_LENGTH,
            f"Invalid response data length: {length} (max={proto.max_payload})",
            details={"len": length, "max_payload": proto.max_payload},
        )

    payload = read_exactly(stream, length)
    if len(payload) < length:
        raise ProtocolError(
            INCOMPLETE_BODY,
            f"Failed to read complete response data. Expected {length}, got {len(payload)} bytes.",
            details={"expected": length, "read": len(payload)},
        )
    return payload


def decode_response(proto: Protocol, stream: ByteSource) -> Any:
    """Read one frame and parse its payload as a JSON document."""
    payload = read_frame(proto, stream)
    try:
        return json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise ProtocolError(
            INVALID_BODY,
            f"Response payload is not valid JSON: {e}",
            details={"payload": payload},
        ) from None
