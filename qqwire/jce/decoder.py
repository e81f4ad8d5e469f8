"""Decoder for the tagged JCE binary format."""

from __future__ import annotations

import struct
from collections.abc import Callable
from typing import Optional, Protocol, TypeVar

from .encoder import _JceType


class JceDecodeError(ValueError):
    """Raised when JCE data is truncated or malformed."""


class _Decodable(Protocol):
    def read_from(self, reader: JceReader) -> None: ...


S = TypeVar("S", bound=_Decodable)


class JceReader:
    """Reads JCE fields by tag.

    A field that is absent yields the type's default (0, "" or None).
    A field present with an unexpected type is skipped and also yields
    the default. Narrow integers are widened as the wire format stores
    them: one-byte values are unsigned, and so are four-byte values read
    as int64.
    """

    __slots__ = ("_buf", "_off")

    def __init__(self, data: bytes) -> None:
        self._buf = bytes(data)
        self._off = 0

    # --- low level -------------------------------------------------------

    def _peek_head(self) -> tuple[int, int, int]:
        if self._off >= len(self._buf):
            raise JceDecodeError("unexpected end of data in field head")
        b = self._buf[self._off]
        typ, tag, length = b & 0xF, b >> 4, 1
        if tag == 0xF:
            if self._off + 1 >= len(self._buf):
                raise JceDecodeError("unexpected end of data in field head")
            tag, length = self._buf[self._off + 1], 2
        return typ, tag, length

    def _read_head(self) -> tuple[int, int]:
        typ, tag, length = self._peek_head()
        self._off += length
        return typ, tag

    def _skip_head(self) -> None:
        self._read_head()

    def _take(self, n: int) -> bytes:
        if n < 0:
            raise JceDecodeError(f"negative length: {n}")
        end = self._off + n
        if end > len(self._buf):
            raise JceDecodeError(f"need {n} bytes, {len(self._buf) - self._off} left")
        chunk = self._buf[self._off:end]
        self._off = end
        return chunk

    def _uint(self, n: int) -> int:
        return int.from_bytes(self._take(n), "big")

    def _sint(self, n: int) -> int:
        return int.from_bytes(self._take(n), "big", signed=True)

    def _skip_payload(self, typ: int) -> None:
        if typ == _JceType.INT8:
            self._take(1)
        elif typ == _JceType.INT16:
            self._take(2)
        elif typ in (_JceType.INT32, _JceType.FLOAT):
            self._take(4)
        elif typ in (_JceType.INT64, _JceType.DOUBLE):
            self._take(8)
        elif typ == _JceType.STRING1:
            self._take(self._uint(1))
        elif typ == _JceType.STRING4:
            self._take(self._uint(4))
        elif typ == _JceType.MAP:
            self.skip_field(self.read_int32(0) * 2)
        elif typ == _JceType.LIST:
            self.skip_field(self.read_int32(0))
        elif typ == _JceType.SIMPLE_LIST:
            self._skip_head()
            self._take(self.read_int32(0))
        elif typ == _JceType.STRUCT_BEGIN:
            self._skip_to_struct_end()
        elif typ in (_JceType.STRUCT_END, _JceType.ZERO):
            pass
        else:
            raise JceDecodeError(f"unknown field type: {typ}")

    def _skip_next_field(self) -> None:
        typ, _ = self._read_head()
        self._skip_payload(typ)

    def _skip_to_tag(self, tag: int) -> bool:
        while self._off < len(self._buf):
            typ, field_tag, length = self._peek_head()
            if typ == _JceType.STRUCT_END:
                return False
            if field_tag >= tag:
                return field_tag == tag
            self._off += length
            self._skip_payload(typ)
        return False

    def _skip_to_struct_end(self) -> None:
        while True:
            typ, _ = self._read_head()
            if typ == _JceType.STRUCT_END:
                return
            self._skip_payload(typ)

    def _field(self, tag: int) -> Optional[int]:
        if not self._skip_to_tag(tag):
            return None
        typ, _ = self._read_head()
        return typ

    def _discard(self, typ: Optional[int]) -> None:
        if typ is not None:
            self._skip_payload(typ)

    # --- public ----------------------------------------------------------

    def skip_field(self, count: int) -> None:
        """Skip the next ``count`` fields, whatever their tags."""
        for _ in range(count):
            self._skip_next_field()

    def read_byte(self, tag: int) -> int:
        typ = self._field(tag)
        if typ == _JceType.INT8:
            return self._uint(1)
        self._discard(typ)
        return 0

    def read_bool(self, tag: int) -> bool:
        return self.read_byte(tag) != 0

    def read_int16(self, tag: int) -> int:
        typ = self._field(tag)
        if typ == _JceType.INT8:
            return self._uint(1)
        if typ == _JceType.INT16:
            return self._sint(2)
        self._discard(typ)
        return 0

    def read_int32(self, tag: int) -> int:
        typ = self._field(tag)
        if typ == _JceType.INT8:
            return self._uint(1)
        if typ == _JceType.INT16:
            return self._uint(2)
        if typ == _JceType.INT32:
            return self._sint(4)
        self._discard(typ)
        return 0

    def read_int64(self, tag: int) -> int:
        typ = self._field(tag)
        if typ == _JceType.INT8:
            return self._uint(1)
        if typ == _JceType.INT16:
            return self._sint(2)
        if typ == _JceType.INT32:
            return self._uint(4)
        if typ == _JceType.INT64:
            return self._sint(8)
        self._discard(typ)
        return 0

    def read_float32(self, tag: int) -> float:
        typ = self._field(tag)
        if typ == _JceType.FLOAT:
            return struct.unpack(">f", self._take(4))[0]
        self._discard(typ)
        return 0.0

    def read_float64(self, tag: int) -> float:
        typ = self._field(tag)
        if typ == _JceType.FLOAT:
            return struct.unpack(">f", self._take(4))[0]
        if typ == _JceType.DOUBLE:
            return struct.unpack(">d", self._take(8))[0]
        self._discard(typ)
        return 0.0

    def read_string(self, tag: int) -> str:
        typ = self._field(tag)
        if typ == _JceType.STRING1:
            raw = self._take(self._uint(1))
        elif typ == _JceType.STRING4:
            raw = self._take(self._uint(4))
        else:
            self._discard(typ)
            return ""
        return raw.decode("utf-8", errors="surrogateescape")

    def read_bytes(self, tag: int) -> Optional[bytes]:
        typ = self._field(tag)
        if typ == _JceType.LIST:
            count = self.read_int32(0)
            return bytes(self.read_byte(0) for _ in range(count))
        if typ == _JceType.SIMPLE_LIST:
            self._skip_head()
            return self._take(self.read_int32(0))
        self._discard(typ)
        return None

    def read_byte_arr_arr(self, tag: int) -> Optional[list[Optional[bytes]]]:
        typ = self._field(tag)
        if typ == _JceType.LIST:
            return [self.read_bytes(0) for _ in range(self.read_int32(0))]
        self._discard(typ)
        return None

    def read_struct(self, obj: S, tag: int) -> S:
        """Fill ``obj`` from the struct at ``tag``; return ``obj``."""
        typ = self._field(tag)
        if typ != _JceType.STRUCT_BEGIN:
            self._discard(typ)
            return obj
        obj.read_from(self)
        self._skip_to_struct_end()
        return obj

    def read_map_str_str(self, tag: int) -> Optional[dict[str, str]]:
        typ = self._field(tag)
        if typ != _JceType.MAP:
            self._discard(typ)
            return None
        result: dict[str, str] = {}
        for _ in range(self.read_int32(0)):
            key = self.read_string(0)
            result[key] = self.read_string(1)
        return result

    def read_map_str_bytes(self, tag: int) -> Optional[dict[str, Optional[bytes]]]:
        typ = self._field(tag)
        if typ != _JceType.MAP:
            self._discard(typ)
            return None
        result: dict[str, Optional[bytes]] = {}
        for _ in range(self.read_int32(0)):
            key = self.read_string(0)
            result[key] = self.read_bytes(1)
        return result

    def read_map_str_map_str_bytes(
        self, tag: int
    ) -> Optional[dict[str, Optional[dict[str, Optional[bytes]]]]]:
        typ = self._field(tag)
        if typ != _JceType.MAP:
            self._discard(typ)
            return None
        result: dict[str, Optional[dict[str, Optional[bytes]]]] = {}
        for _ in range(self.read_int32(0)):
            key = self.read_string(0)
            result[key] = self.read_map_str_bytes(1)
        return result

    def read_struct_list(self, factory: Callable[[], S], tag: int) -> Optional[list[S]]:
        """Read a list of structs, each built by ``factory`` and filled in."""
        typ = self._field(tag)
        if typ != _JceType.LIST:
            self._discard(typ)
            return None
        items: list[S] = []
        for _ in range(self.read_int32(0)):
            self._skip_head()
            item = factory()
            item.read_from(self)
            self._skip_to_struct_end()
            items.append(item)
        return items

    def read_map_int_struct(self, factory: Callable[[], S], tag: int) -> Optional[dict[int, S]]:
        """Read a struct at ``tag`` that wraps an int-keyed map of structs."""
        if not self._skip_to_tag(tag):
            return None
        self._skip_head()
        typ, _ = self._read_head()
        if typ != _JceType.MAP:
            self._skip_payload(typ)
            self._skip_to_struct_end()
            return None
        result: dict[int, S] = {}
        for _ in range(self.read_int32(0)):
            key = self.read_int64(0)
            value = factory()
            self._read_head()
            value.read_from(self)
            self._skip_to_struct_end()
            result[key] = value
        self._skip_to_struct_end()
        return result