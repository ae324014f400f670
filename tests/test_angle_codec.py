import pytest

from wrapang.angle import Angle, QUARTER
from wrapang.binary.codecs.cursor import Cursor
from wrapang.binary.codecs.angle_codec import ANGLE_SIZE, AngleDecodeError, decode_angle, encode_angle

def test_wire_is_little_endian():
    assert ANGLE_SIZE == 4
    assert encode_angle(QUARTER) == b"\x00\x00\x00\x40"
    assert Angle(0x12345678).to_bytes() == b"\x78\x56\x34\x12"
    assert Angle.from_bytes(b"\x78\x56\x34\x12") == Angle(0x12345678)

def test_from_bytes_requires_exactly_four():
    with pytest.raises(AngleDecodeError):
        Angle.from_bytes(b"\x00\x00")
    with pytest.raises(AngleDecodeError):
        Angle.from_bytes(b"\x00" * 5)

def test_short_decode_leaves_cursor():
    cur = Cursor(b"\x01\x02")
    with pytest.raises(AngleDecodeError):
        decode_angle(cur)
    assert cur.tell() == 0

def test_cursor_walks_packed_words():
    cur = Cursor(b"\xff\xff\xff\xff" + b"\x00\x00\x00\x80" + b"\xAA" * 3)
    assert cur.word() == 0xFFFFFFFF
    assert decode_angle(cur).as_signed_unit() == -0.5
    assert cur.tell() == 8
    assert cur.remaining() == 3
    with pytest.raises(ValueError):
        cur.word()
    assert cur.tell() == 8

def test_decode_from_bytearray_and_memoryview():
    data = bytearray(b"\x00\x00\x00\x40")
    assert decode_angle(Cursor(data)) == QUARTER
    assert decode_angle(Cursor(memoryview(data))) == QUARTER
