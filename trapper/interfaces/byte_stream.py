# trapper/interfaces/byte_stream.py
from typing import Optional, Protocol


class ByteSource(Protocol):
    """
    Inbound side of a byte stream.

    read(n) returns 1..n bytes, None when nothing is available yet but the
    stream is still open, or b"" once the stream has ended.
    """
    def read(self, n: int) -> Optional[bytes]: ...

