# trapper/model/target.py
from __future__ import annotations

from dataclasses import dataclass

from trapper.core.errors import ArgumentError

DEFAULT_PORT = 10051


@dataclass(frozen=True)
class Target:
    """Collector (server or proxy) address a batch is sent to."""

    host: str
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        if not isinstance(self.host, str) or not self.host:
            raise ArgumentError("Server address cannot be empty")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ArgumentError(f"Server port must be an int, got {type(self.port).__name__}")
        if not 0 < self.port <= 65535:
            raise ArgumentError(
                f"Server port {self.port} out of range",
                hint="Server port must be between 1 and 65535",
            )

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"
