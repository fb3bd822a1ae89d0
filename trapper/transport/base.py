from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class Transport(ABC):
    """
    Abstract stream transport (TCP today).

    Contract:
      - open()/close() manage the underlying connection; close() is safe to repeat.
      - read(n) returns 1..n bytes, None if no data is available yet, or b""
        once the peer has closed its side.
      - write(data) sends all of data and returns the number of bytes written.
      - flush() forces pending output to be transmitted.
    """

    @abstractmethod
    def open(self) -> None: ...

    @abstractmethod
    def close(self) -> None: ...

    @abstractmethod
    def read(self, n: int) -> Optional[bytes]: ...

    @abstractmethod
    def write(self, data: bytes) -> int: ...

    @abstractmethod
    def flush(self) -> None: ...

    def __enter__(self) -> "Transport":
        self.open()
        return self

    def __exit__(self, exc_type: type | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        self.close()
