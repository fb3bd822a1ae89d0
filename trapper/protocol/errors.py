# trapper/protocol/errors.py
from __future__ import annotations

from typing import Any

from trapper.core.errors import ErrorKind, TrapperError

INCOMPLETE_HEADER = "incomplete header"
BAD_MAGIC = "bad magic"
INVALID_LENGTH = "invalid length"
INCOMPLETE_BODY = "incomplete body"
INVALID_BODY = "invalid body"
MISSING_RESPONSE = "missing response field"

NO_INFO = "No additional info."


class ProtocolError(TrapperError):
    """Well-formed I/O carrying a malformed envelope or acknowledgement."""
    kind = ErrorKind.PROTOCOL

    def __init__(self, reason: str, message: str | None = None, *, details: dict | None = None):
        super().__init__(message or reason, details=details)
        self.reason = reason


class CollectorRejected(TrapperError):
    """The collector answered, but not with "success"."""
    kind = ErrorKind.APPLICATION

    def __init__(self, info: str, response: Any):
        super().__init__(
            f"Collector reported an error: {info}",
            details={"response": response},
        )
        self.info = info
        self.response = response
