# trapper/transport/errors.py
from __future__ import annotations

from trapper.core.errors import ErrorKind, TrapperError


class TransportError(TrapperError):
    """Base class for transport-layer failures."""
    kind = ErrorKind.TRANSPORT


class TransportOpenError(TransportError):
    pass


class TransportIOError(TransportError):
    pass
