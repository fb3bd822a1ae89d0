# trapper/protocol/sender_client.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from trapper.core.errors import ErrorKind, TrapperError
from trapper.model import Batch, Sample, Target, DEFAULT_PORT
from trapper.transport.base import Transport
from trapper.transport.tcp import TCPTransport

from .core import Protocol, decode_response, encode_request
from .errors import CollectorRejected
from .validator import validate_response

TransportFactory = Callable[[Target, Optional[float]], Transport]


def tcp_transport(target: Target, timeout_s: Optional[float]) -> Transport:
    return TCPTransport(target.host, target.port, timeout=timeout_s)


@dataclass(frozen=True)
class SendResult:
    """
    Outcome of one submission: either the collector's response or the error.

    kind is None on success, otherwise the ErrorKind of the failure.
    """
    response: Optional[Dict[str, Any]] = None
    error: Optional[TrapperError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> Dict[str, Any]:
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


class SenderClient:
    """
    User-facing API for pushing samples to a collector (server or proxy).

    Every send opens its own connection and closes it before returning;
    the client keeps no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        server: str,
        port: int = DEFAULT_PORT,
        *,
        timeout_s: Optional[float] = None,
        protocol: Optional[Protocol] = None,
        transport_factory: Optional[TransportFactory] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.target = Target(server, port)
        self.timeout_s = timeout_s
        self.proto = protocol or Protocol.default()
        self._transport_factory = transport_factory or tcp_transport
        self._log = logger or logging.getLogger(__name__)
        self._log.debug(
            "PROTOCOL_LOADED version=%d max_payload=%d files=%s",
            self.proto.version, self.proto.max_payload, self.proto.file_hashes,
        )

    def send(
        self,
        samples: Iterable[Sample],
        clock: Optional[int] = None,
        ns: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Send a batch and return the collector's response document.

        clock/ns, when given, timestamp the whole batch; ns without clock is
        validated but not sent.

        Raises ArgumentError before touching the network, TransportError on
        connect/read/write failure, ProtocolError on a malformed reply and
        CollectorRejected when the collector does not answer "success".
        """
        batch = Batch.of(samples, clock=clock, ns=ns)
        frame = encode_request(self.proto, batch)

        self._log.debug("SEND_START target=%s samples=%d frame_len=%d", self.target, len(batch), len(frame))
        try:
            with self._transport_factory(self.target, self.timeout_s) as transport:
                transport.write(frame)
                transport.flush()
                body = decode_response(self.proto, transport)
            response = validate_response(body)
        except CollectorRejected as e:
            self._log.warning("SEND_REJECTED target=%s info=%s", self.target, e.info)
            raise
        except TrapperError as e:
            self._log.warning("SEND_FAILED target=%s kind=%s msg=%s", self.target, e.kind.value, e.message)
            raise

        self._log.info("SEND_OK target=%s info=%s", self.target, response.get("info"))
        return response

    def send_one(self, sample: Sample) -> Dict[str, Any]:
        return self.send((sample,))

    def submit(
        self,
        samples: Iterable[Sample],
        clock: Optional[int] = None,
        ns: Optional[int] = None,
    ) -> SendResult:
        """Like send(), but every expected failure comes back as a value."""
        try:
            return SendResult(response=self.send(samples, clock=clock, ns=ns))
        except TrapperError as e:
            return SendResult(error=e)


def send(
    target: Target,
    samples: Iterable[Sample],
    clock: Optional[int] = None,
    ns: Optional[int] = None,
    **kwargs: Any,
) -> Dict[str, Any]:
    """One-shot send without keeping a client around."""
    return SenderClient(target.host, target.port, **kwargs).send(samples, clock=clock, ns=ns)
