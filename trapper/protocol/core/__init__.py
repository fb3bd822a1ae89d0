# trapper/protocol/core/__init__.py

from .defs import Protocol
from .codec import encode_request, decode_response, read_exactly, read_frame

__all__ = [
    "Protocol",
    "encode_request", "decode_response",
    "read_exactly", "read_frame",
]
