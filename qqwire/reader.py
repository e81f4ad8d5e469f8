"""Big-endian readers over byte buffers and stream connections."""

from __future__ import annotations

from typing import Protocol


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")


class Reader:
    """Sequential big-endian reader over an in-memory buffer.

    Reading past the end raises EOFError.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def _take(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"negative read length: {length}")
        end = self._pos + length
        if end > len(self._data):
            raise EOFError(f"need {length} bytes, {len(self._data) - self._pos} left")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def read_byte(self) -> int:
        return self._take(1)[0]

    def read_bytes(self, length: int) -> bytes:
        return self._take(length)

    def read_bytes_short(self) -> bytes:
        return self._take(self.read_uint16())

    def read_uint16(self) -> int:
        return int.from_bytes(self._take(2), "big")

    def read_int32(self) -> int:
        return int.from_bytes(self._take(4), "big", signed=True)

    def read_int64(self) -> int:
        return int.from_bytes(self._take(8), "big", signed=True)

    def read_string(self) -> str:
        """Read a string whose int32 prefix counts itself plus the body."""
        return _decode(self._take(self.read_int32() - 4))

    def read_int32_bytes(self) -> bytes:
        return self._take(self.read_int32() - 4)

    def read_string_short(self) -> str:
        return _decode(self._take(self.read_uint16()))

    def read_string_limit(self, limit: int) -> str:
        return _decode(self._take(limit))

    def read_available(self) -> bytes:
        return self._take(len(self._data) - self._pos)

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def index(self) -> int:
        """Size of the whole underlying buffer, regardless of position."""
        return len(self._data)


class _Connection(Protocol):
    def recv(self, bufsize: int) -> bytes: ...


class NetworkReader:
    """Big-endian reader over a socket-like object with ``recv``."""

    __slots__ = ("_conn",)

    def __init__(self, conn: _Connection) -> None:
        self._conn = conn

    def read_byte(self) -> int:
        return self.read_bytes(1)[0]

    def read_bytes(self, length: int) -> bytes:
        """Read exactly ``length`` bytes; raise EOFError if the peer closes."""
        if length < 0:
            raise ValueError(f"negative read length: {length}")
        buf = bytearray()
        while len(buf) < length:
            chunk = self._conn.recv(length - len(buf))
            if not chunk:
                raise EOFError(f"connection closed after {len(buf)} of {length} bytes")
            buf += chunk
        return bytes(buf)

    def read_int32(self) -> int:
        return int.from_bytes(self.read_bytes(4), "big", signed=True)