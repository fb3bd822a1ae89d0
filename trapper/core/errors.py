# trapper/core/errors.py
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """The four ways a single send can fail."""

    ARGUMENT = "argument_error"
    TRANSPORT = "transport_error"
    PROTOCOL = "protocol_error"
    APPLICATION = "application_error"


class TrapperError(Exception):
    """
    Base class for all expected operational errors in trapper.
    """

    #: Stable machine-readable identifier (for CLI exit mapping, result tagging, etc.)
    kind: ErrorKind = ErrorKind.ARGUMENT

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Caller input errors (raised before any socket is touched)
# ---------------------------------------------------------------------------

class ArgumentError(TrapperError, ValueError):
    """
    Invalid caller input.

    Examples:
      - empty batch
      - ns outside [0, 999_999_999]
      - missing or empty sample host/key, missing sample value
      - sample text that cannot be encoded as UTF-8
      - port outside 1..65535
    """
    kind = ErrorKind.ARGUMENT


class ConfigError(ArgumentError):
    """
    Sender configuration file is missing, malformed or holds invalid values.
    """
