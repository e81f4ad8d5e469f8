"""Compression and small encoding helpers."""

from __future__ import annotations

import gzip
import ipaddress
import zlib
from uuid import UUID

_INT_SIZES = (2, 4)


def zlib_compress(data: bytes) -> bytes:
    return zlib.compress(bytes(data))


def zlib_uncompress(data: bytes) -> bytes:
    """Inflate a zlib stream; raise ValueError on malformed input."""
    try:
        return zlib.decompress(bytes(data))
    except zlib.error as exc:
        raise ValueError(f"invalid zlib data: {exc}") from exc


def gzip_compress(data: bytes) -> bytes:
    return gzip.compress(bytes(data), compresslevel=6, mtime=0)


def gzip_uncompress(data: bytes) -> bytes:
    """Inflate gzip data; raise ValueError on malformed input."""
    try:
        return gzip.decompress(bytes(data))
    except (OSError, EOFError, zlib.error) as exc:
        raise ValueError(f"invalid gzip data: {exc}") from exc


def gen_uuid(uuid: bytes) -> str:
    """Format the first 16 bytes as a lower-case hyphenated UUID."""
    if len(uuid) < 16:
        raise ValueError(f"need at least 16 bytes, got {len(uuid)}")
    return str(UUID(bytes=bytes(uuid[:16])))


def calculate_image_resource_id(md5: bytes) -> str:
    """Resource id of an image: its md5 as an upper-case braced UUID plus .PNG."""
    return f"{{{gen_uuid(md5)}}}.png".upper()


def uint32_to_ipv4_address(value: int) -> str:
    """Dotted IPv4 address of a uint32 stored in little-endian order."""
    return str(ipaddress.IPv4Address((value & 0xFFFFFFFF).to_bytes(4, "little")))


def to_bytes(value: int, size: int) -> bytes:
    """Big-endian two's-complement encoding of a 16- or 32-bit integer."""
    if size not in _INT_SIZES:
        raise ValueError(f"unsupported integer size: {size}")
    return (value & ((1 << (8 * size)) - 1)).to_bytes(size, "big")