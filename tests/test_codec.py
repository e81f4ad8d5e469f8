import os

import pytest
from hypothesis import given, strategies as st

from qqwire.codec import (
    calculate_image_resource_id,
    gen_uuid,
    gzip_compress,
    gzip_uncompress,
    to_bytes,
    uint32_to_ipv4_address,
    zlib_compress,
    zlib_uncompress,
)
from qqwire.reader import Reader


@given(st.binary(max_size=2000))
def test_zlib_round_trip(data):
    assert zlib_uncompress(zlib_compress(data)) == data


@given(st.binary(max_size=2000))
def test_gzip_round_trip(data):
    assert gzip_uncompress(gzip_compress(data)) == data


def test_gzip_magic_header():
    assert gzip_compress(b"hello")[:2] == b"\x1f\x8b"


def test_zlib_header_byte():
    assert zlib_compress(b"hello")[0] == 0x78


def test_zlib_invalid_input():
    with pytest.raises(ValueError):
        zlib_uncompress(b"not zlib at all")


def test_gzip_invalid_input():
    with pytest.raises(ValueError):
        gzip_uncompress(b"not gzip at all")


def test_gen_uuid_format():
    assert gen_uuid(bytes(range(16))) == "00010203-0405-0607-0809-0a0b0c0d0e0f"


def test_gen_uuid_uses_first_16_bytes():
    data = os.urandom(20)
    assert gen_uuid(data) == gen_uuid(data[:16])


def test_gen_uuid_too_short():
    with pytest.raises(ValueError):
        gen_uuid(bytes(15))


def test_image_resource_id():
    md5 = os.urandom(16)
    result = calculate_image_resource_id(md5)
    assert result == "{" + gen_uuid(md5).upper() + "}.PNG"
    assert len(result) == 42


def test_ipv4_little_endian():
    assert uint32_to_ipv4_address(0x0100007F) == "127.0.0.1"


@pytest.mark.parametrize("value", [0, 1, -1, 0x7FFF, -0x8000])
def test_to_bytes_int16(value):
    encoded = to_bytes(value, 2)
    assert len(encoded) == 2
    assert int.from_bytes(encoded, "big", signed=True) == value


@pytest.mark.parametrize("value", [0, -2, 0x7FFFFFFF, -0x80000000])
def test_to_bytes_int32(value):
    assert Reader(to_bytes(value, 4)).read_int32() == value


def test_to_bytes_unsupported_size():
    with pytest.raises(ValueError):
        to_bytes(1, 8)