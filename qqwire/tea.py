"""TEA cipher in the chained 16-round mode used by the wire protocol."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_DELTA = 0x9E3779B9
_ROUNDS = 16
_SUMS = tuple((_DELTA * i) & _MASK for i in range(1, _ROUNDS + 1))
_SUMS_REVERSED = tuple(reversed(_SUMS))


class Tea:
    """A TEA cipher bound to a 16-byte key.

    A key of any other length yields the all-zero key.
    """

    __slots__ = ("_key",)

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) == 16:
            self._key = struct.unpack(">4I", key)
        else:
            self._key = (0, 0, 0, 0)

    def _encode(self, block: int) -> int:
        v0, v1 = block >> 32, block & _MASK
        k0, k1, k2, k3 = self._key
        for s in _SUMS:
            v0 = (v0 + ((v1 + s) ^ ((v1 << 4) + k0) ^ ((v1 >> 5) + k1))) & _MASK
            v1 = (v1 + ((v0 + s) ^ ((v0 << 4) + k2) ^ ((v0 >> 5) + k3))) & _MASK
        return (v0 << 32) | v1

    def _decode(self, block: int) -> int:
        v0, v1 = block >> 32, block & _MASK
        k0, k1, k2, k3 = self._key
        for s in _SUMS_REVERSED:
            v1 = (v1 - ((v0 + s) ^ ((v0 << 4) + k2) ^ ((v0 >> 5) + k3))) & _MASK
            v0 = (v0 - ((v1 + s) ^ ((v1 << 4) + k0) ^ ((v1 >> 5) + k1))) & _MASK
        return (v0 << 32) | v1

    def encrypt(self, data: bytes) -> bytes:
        """Pad and encrypt ``data``; the result is a multiple of 8 bytes."""
        data = bytes(data)
        fill = 10 - (len(data) + 1) % 8
        buf = bytearray(fill + len(data) + 7)
        buf[0] = ((fill - 3) | 0xF8) & 0xFF
        buf[fill:fill + len(data)] = data

        out = bytearray()
        iv1 = iv2 = 0
        for (block,) in struct.iter_unpack(">Q", buf):
            holder = block ^ iv1
            iv1 = self._encode(holder) ^ iv2
            iv2 = holder
            out += iv1.to_bytes(8, "big")
        return bytes(out)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt ``data`` and strip its padding.

        Raises ValueError when the input cannot be a ciphertext.
        """
        data = bytes(data)
        if len(data) < 16 or len(data) % 8 != 0:
            raise ValueError(
                f"ciphertext length must be a multiple of 8 and at least 16, got {len(data)}"
            )
        out = bytearray()
        iv2 = holder = 0
        for (block,) in struct.iter_unpack(">Q", data):
            iv2 = self._decode(iv2 ^ block)
            out += (iv2 ^ holder).to_bytes(8, "big")
            holder = block
        start = (out[0] & 7) + 3
        end = len(out) - 7
        if start > end:
            raise ValueError("invalid padding in ciphertext")
        return bytes(out[start:end])