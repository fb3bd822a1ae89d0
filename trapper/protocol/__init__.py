# trapper/protocol/__init__.py

from .core import Protocol, encode_request, decode_response
from .errors import ProtocolError, CollectorRejected
from .validator import validate_response
from .sender_client import SenderClient, SendResult, send

__all__ = [
    "Protocol",
    "encode_request", "decode_response", "validate_response",
    "ProtocolError", "CollectorRejected",
    "SenderClient", "SendResult", "send"]
