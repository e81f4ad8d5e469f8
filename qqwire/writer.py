"""Big-endian byte writer used to assemble protocol packets."""

from __future__ import annotations

from collections.abc import Callable

from .tea import Tea

_UINT32_MASK = 0xFFFFFFFF


class Writer:
    """A growable big-endian byte buffer."""

    __slots__ = ("_buf",)

    def __init__(self) -> None:
        self._buf = bytearray()

    def fill_uint16(self) -> int:
        """Reserve two zero bytes and return their position."""
        pos = len(self._buf)
        self._buf += b"\x00\x00"
        return pos

    def write_uint16_at(self, pos: int, value: int) -> None:
        self._buf[pos:pos + 2] = value.to_bytes(2, "big")

    def fill_uint32(self) -> int:
        """Reserve four zero bytes and return their position."""
        pos = len(self._buf)
        self._buf += b"\x00\x00\x00\x00"
        return pos

    def write_uint32_at(self, pos: int, value: int) -> None:
        self._buf[pos:pos + 4] = value.to_bytes(4, "big")

    def write(self, data: bytes) -> None:
        self._buf += data

    def write_hex(self, text: str) -> None:
        self._buf += bytes.fromhex(text)

    def write_byte(self, value: int) -> None:
        self._buf.append(value)

    def write_uint16(self, value: int) -> None:
        self._buf += value.to_bytes(2, "big")

    def write_uint32(self, value: int) -> None:
        self._buf += value.to_bytes(4, "big")

    def write_uint64(self, value: int) -> None:
        self._buf += value.to_bytes(8, "big")

    def write_string(self, value: str) -> None:
        """Write a string prefixed by its byte length plus four, as uint32."""
        raw = value.encode("utf-8")
        self.write_uint32(len(raw) + 4)
        self._buf += raw

    def write_string_short(self, value: str) -> None:
        """Write a string prefixed by its byte length as uint16."""
        raw = value.encode("utf-8")
        self.write_uint16(len(raw))
        self._buf += raw

    def write_bool(self, value: bool) -> None:
        self._buf.append(1 if value else 0)

    def encrypt_and_write(self, key: bytes, data: bytes) -> None:
        self._buf += Tea(key).encrypt(data)

    def write_int_lv_packet(self, offset: int, fill: Callable[[Writer], None]) -> None:
        """Write a uint32 length, then what ``fill`` writes.

        The length counts the body only, plus ``offset``.
        """
        pos = self.fill_uint32()
        fill(self)
        self.write_uint32_at(pos, (len(self._buf) + offset - pos - 4) & _UINT32_MASK)

    def write_bytes_short(self, data: bytes) -> None:
        self.write_uint16(len(data))
        self._buf += data

    def write_tlv_limited_size(self, data: bytes, limit: int) -> None:
        self.write_bytes_short(data[:limit])

    def __len__(self) -> int:
        return len(self._buf)

    def to_bytes(self) -> bytes:
        return bytes(self._buf)

    def reset(self) -> None:
        self._buf.clear()


def build(fill: Callable[[Writer], None]) -> bytes:
    """Run ``fill`` on a fresh writer and return what it wrote."""
    writer = Writer()
    fill(writer)
    return writer.to_bytes()