from __future__ import annotations

from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from qqwire.jce.decoder import JceReader
from qqwire.jce.encoder import JceWriter


@dataclass
class _Point:
    x: int = 0
    label: str = ""

    def to_bytes(self) -> bytes:
        return JceWriter().write_int64(self.x, 0).write_string(self.label, 1).to_bytes()

    def read_from(self, reader: JceReader) -> None:
        self.x = reader.read_int64(0)
        self.label = reader.read_string(1)


def test_zero_byte_uses_zero_type():
    assert JceWriter().write_byte(0, 0).to_bytes() == b"\x0c"


def test_large_tag_uses_two_byte_head():
    assert JceWriter().write_byte(5, 20).to_bytes() == b"\xf0\x14\x05"


def test_bytes_wire_form():
    assert JceWriter().write_bytes(b"ab", 1).to_bytes() == b"\x1d\x00\x00\x02ab"


def test_writes_chain_on_same_writer():
    w = JceWriter()
    assert w.write_byte(1, 0) is w
    assert w.write_string("a", 1) is w


def test_integer_width_grows_with_magnitude():
    values = [1, 200, 70000, 1 << 40]
    encoded = [JceWriter().write_int64(v, 0).to_bytes() for v in values]
    lengths = [len(e) for e in encoded]
    assert lengths == sorted(set(lengths))
    assert [JceReader(e).read_int64(0) for e in encoded] == values


@given(st.integers(min_value=0, max_value=(1 << 63) - 1), st.integers(min_value=0, max_value=255))
def test_non_negative_int64_round_trip(value, tag):
    data = JceWriter().write_int64(value, tag).to_bytes()
    assert JceReader(data).read_int64(tag) == value


def test_negative_int16_round_trip():
    data = JceWriter().write_int16(-300, 1).to_bytes()
    assert JceReader(data).read_int16(1) == -300


def test_float_round_trips():
    data = JceWriter().write_float32(1.5, 0).write_float64(-2.25, 1).to_bytes()
    r = JceReader(data)
    assert r.read_float32(0) == 1.5
    assert r.read_float64(1) == -2.25


@given(st.text(), st.text(min_size=256))
def test_string_round_trip(short, long):
    data = JceWriter().write_string(short, 0).write_string(long, 1).to_bytes()
    r = JceReader(data)
    assert r.read_string(0) == short
    assert r.read_string(1) == long


def test_bool_round_trip():
    data = JceWriter().write_bool(True, 0).write_bool(False, 1).to_bytes()
    r = JceReader(data)
    assert r.read_bool(0) is True
    assert r.read_bool(1) is False


@given(st.binary())
def test_bytes_round_trip(raw):
    assert JceReader(JceWriter().write_bytes(raw, 3).to_bytes()).read_bytes(3) == raw


def test_none_bytes_equal_empty():
    assert JceWriter().write_bytes(None, 2).to_bytes() == JceWriter().write_bytes(b"", 2).to_bytes()


def test_int64_list_is_skipped_cleanly():
    data = JceWriter().write_int64_list([1, 300, 1 << 40], 3).write_int32(42, 4).to_bytes()
    assert JceReader(data).read_int32(4) == 42


def test_empty_list_matches_none():
    assert JceWriter().write_int64_list([], 1).to_bytes() == JceWriter().write_int64_list(None, 1).to_bytes()


def test_bytes_list_round_trip():
    items = [b"a", b"", b"xyz"]
    data = JceWriter().write_bytes_list(items, 2).to_bytes()
    assert JceReader(data).read_byte_arr_arr(2) == items


def test_map_str_str_keeps_order():
    mapping = {"b": "1", "a": "2", "c": ""}
    result = JceReader(JceWriter().write_map_str_str(mapping, 9).to_bytes()).read_map_str_str(9)
    assert result == mapping
    assert list(result) == list(mapping)


def test_none_map_equals_empty_map():
    assert JceWriter().write_map_str_bytes(None, 0).to_bytes() == JceWriter().write_map_str_bytes({}, 0).to_bytes()


def test_nested_map_round_trip():
    mapping = {"x": {"k": b"v"}, "y": {}}
    data = JceWriter().write_map_str_map_str_bytes(mapping, 0).to_bytes()
    assert JceReader(data).read_map_str_map_str_bytes(0) == mapping


def test_struct_round_trip():
    data = JceWriter().write_struct(_Point(7, "seven"), 5).to_bytes()
    assert JceReader(data).read_struct(_Point(), 5) == _Point(7, "seven")


def test_struct_list_round_trip():
    points = [_Point(1, "a"), _Point(1 << 33, "b")]
    data = JceWriter().write_struct_list(points, 1).write_int32(9, 2).to_bytes()
    r = JceReader(data)
    assert r.read_struct_list(_Point, 1) == points
    assert r.read_int32(2) == 9


def test_tag_out_of_range():
    with pytest.raises(ValueError):
        JceWriter().write_byte(1, 256)


def test_int16_out_of_range():
    with pytest.raises(ValueError):
        JceWriter().write_int16(40000, 0)


def test_byte_out_of_range():
    with pytest.raises(ValueError):
        JceWriter().write_byte(300, 0)