"""Encoder for the tagged JCE binary format."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Mapping
from enum import IntEnum
from typing import Optional, Protocol


class _JceType(IntEnum):
    INT8 = 0
    INT16 = 1
    INT32 = 2
    INT64 = 3
    FLOAT = 4
    DOUBLE = 5
    STRING1 = 6
    STRING4 = 7
    MAP = 8
    LIST = 9
    STRUCT_BEGIN = 10
    STRUCT_END = 11
    ZERO = 12
    SIMPLE_LIST = 13


class _Encodable(Protocol):
    def to_bytes(self) -> bytes: ...


def _check_signed(value: int, bits: int) -> None:
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in a signed {bits}-bit integer")


class JceWriter:
    """Accumulates JCE-encoded fields; every write returns the writer."""

    __slots__ = ("_buf",)

    def __init__(self) -> None:
        self._buf = bytearray()

    def _head(self, typ: int, tag: int) -> None:
        if not 0 <= tag <= 0xFF:
            raise ValueError(f"tag out of range: {tag}")
        if tag < 0xF:
            self._buf.append((tag << 4) | typ)
        else:
            self._buf.append(0xF0 | typ)
            self._buf.append(tag)

    def _put(self, typ: int, fmt: str, value: int | float, tag: int) -> None:
        self._head(typ, tag)
        self._buf += struct.pack(fmt, value)

    def write_byte(self, value: int, tag: int) -> JceWriter:
        """Write one byte; values from -128 to 255 are accepted."""
        if not -128 <= value <= 0xFF:
            raise ValueError(f"{value} does not fit in a byte")
        value &= 0xFF
        if value == 0:
            self._head(_JceType.ZERO, tag)
        else:
            self._head(_JceType.INT8, tag)
            self._buf.append(value)
        return self

    def write_bool(self, value: bool, tag: int) -> JceWriter:
        return self.write_byte(1 if value else 0, tag)

    def write_int16(self, value: int, tag: int) -> JceWriter:
        _check_signed(value, 16)
        if -128 <= value <= 127:
            return self.write_byte(value & 0xFF, tag)
        self._put(_JceType.INT16, ">h", value, tag)
        return self

    def write_int32(self, value: int, tag: int) -> JceWriter:
        _check_signed(value, 32)
        if -32768 <= value <= 32767:
            return self.write_int16(value, tag)
        self._put(_JceType.INT32, ">i", value, tag)
        return self

    def write_int64(self, value: int, tag: int) -> JceWriter:
        _check_signed(value, 64)
        if -(1 << 31) <= value < (1 << 31):
            return self.write_int32(value, tag)
        self._put(_JceType.INT64, ">q", value, tag)
        return self

    def write_float32(self, value: float, tag: int) -> JceWriter:
        self._put(_JceType.FLOAT, ">f", value, tag)
        return self

    def write_float64(self, value: float, tag: int) -> JceWriter:
        self._put(_JceType.DOUBLE, ">d", value, tag)
        return self

    def write_string(self, value: str, tag: int) -> JceWriter:
        """Write UTF-8 text; over 255 bytes it takes a four-byte length."""
        raw = value.encode("utf-8")
        if len(raw) > 0xFF:
            self._head(_JceType.STRING4, tag)
            self._buf += len(raw).to_bytes(4, "big")
        else:
            self._head(_JceType.STRING1, tag)
            self._buf.append(len(raw))
        self._buf += raw
        return self

    def write_bytes(self, value: Optional[bytes], tag: int) -> JceWriter:
        """Write a byte string as a simple list; None counts as empty."""
        raw = bytes(value or b"")
        self._head(_JceType.SIMPLE_LIST, tag)
        self._buf.append(0)
        self.write_int32(len(raw), 0)
        self._buf += raw
        return self

    def write_int64_list(self, values: Optional[Iterable[int]], tag: int) -> JceWriter:
        items = list(values or ())
        self._head(_JceType.LIST, tag)
        self.write_int32(len(items), 0)
        for item in items:
            self.write_int64(item, 0)
        return self

    def write_bytes_list(self, values: Optional[Iterable[bytes]], tag: int) -> JceWriter:
        items = list(values or ())
        self._head(_JceType.LIST, tag)
        self.write_int32(len(items), 0)
        for item in items:
            self.write_bytes(item, 0)
        return self

    def write_map_str_str(self, mapping: Optional[Mapping[str, str]], tag: int) -> JceWriter:
        items = dict(mapping or {})
        self._head(_JceType.MAP, tag)
        self.write_int32(len(items), 0)
        for key, value in items.items():
            self.write_string(key, 0)
            self.write_string(value, 1)
        return self

    def write_map_str_bytes(self, mapping: Optional[Mapping[str, bytes]], tag: int) -> JceWriter:
        items = dict(mapping or {})
        self._head(_JceType.MAP, tag)
        self.write_int32(len(items), 0)
        for key, value in items.items():
            self.write_string(key, 0)
            self.write_bytes(value, 1)
        return self

    def write_map_str_map_str_bytes(
        self, mapping: Optional[Mapping[str, Mapping[str, bytes]]], tag: int
    ) -> JceWriter:
        items = dict(mapping or {})
        self._head(_JceType.MAP, tag)
        self.write_int32(len(items), 0)
        for key, value in items.items():
            self.write_string(key, 0)
            self.write_map_str_bytes(value, 1)
        return self

    def write_struct(self, obj: _Encodable, tag: int) -> JceWriter:
        """Write ``obj.to_bytes()`` between struct begin and end markers."""
        self._head(_JceType.STRUCT_BEGIN, tag)
        self._buf += obj.to_bytes()
        self._head(_JceType.STRUCT_END, 0)
        return self

    def write_struct_list(self, items: Optional[Iterable[_Encodable]], tag: int) -> JceWriter:
        structs = list(items or ())
        self._head(_JceType.LIST, tag)
        self.write_int32(len(structs), 0)
        for obj in structs:
            self.write_struct(obj, 0)
        return self

    def to_bytes(self) -> bytes:
        return bytes(self._buf)