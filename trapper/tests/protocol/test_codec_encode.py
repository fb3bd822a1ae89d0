from __future__ import annotations

import json
import struct

import pytest

from trapper.core.errors import ArgumentError
from trapper.model import Batch, Sample
from trapper.protocol.core.codec import build_request, encode_request
from trapper.protocol.core.defs import Protocol


@pytest.fixture(scope="module")
def proto() -> Protocol:
    return Protocol.default()


def _payload(frame: bytes) -> dict:
    (length,) = struct.unpack("<Q", frame[5:13])
    assert len(frame) == 13 + length
    return json.loads(frame[13:].decode("utf-8"))


def test_single_sample_frame_layout(proto):
    frame = encode_request(proto, Batch.of([Sample("h", "k", "v")]))

    expected = b'{"request":"sender data","data":[{"host":"h","key":"k","value":"v"}]}'
    assert len(frame) == 13 + len(expected)
    assert frame[0:4] == b"ZBXD"
    assert frame[4] == 1
    assert struct.unpack("<Q", frame[5:13])[0] == len(expected)
    assert frame[13:] == expected


def test_batch_clock_without_ns_sends_zero_ns(proto):
    frame = encode_request(proto, Batch.of([Sample("h", "k", "v")], clock=1700000000))
    doc = _payload(frame)
    assert doc["clock"] == 1700000000
    assert doc["ns"] == 0
    assert b'"clock":1700000000,"ns":0' in frame


def test_batch_clock_and_ns(proto):
    doc = _payload(encode_request(proto, Batch.of([Sample("h", "k", "v")], clock=10, ns=123456789)))
    assert (doc["clock"], doc["ns"]) == (10, 123456789)


def test_batch_ns_without_clock_is_not_sent(proto):
    doc = build_request(proto, Batch.of([Sample("h", "k", "v")], ns=5))
    assert "clock" not in doc
    assert "ns" not in doc


def test_per_sample_timestamps_and_order(proto):
    items = [
        Sample("hostA", "keyA", "valA").with_clock(1000),
        Sample("hostB", "keyB", "valB").with_ns(500),
    ]
    doc = _payload(encode_request(proto, Batch.of(items)))
    assert doc["data"] == [
        {"host": "hostA", "key": "keyA", "value": "valA", "clock": 1000},
        {"host": "hostB", "key": "keyB", "value": "valB", "ns": 500},
    ]
    assert "clock" not in doc


def test_length_counts_utf8_bytes(proto):
    frame = encode_request(proto, Batch.of([Sample("höst", "k", "°C")]))
    (length,) = struct.unpack("<Q", frame[5:13])
    assert length == len(frame) - 13
    assert "höst".encode("utf-8") in frame
    assert _payload(frame)["data"][0]["value"] == "°C"


def test_empty_batch_fails_before_encoding():
    with pytest.raises(ArgumentError):
        Batch.of([])
