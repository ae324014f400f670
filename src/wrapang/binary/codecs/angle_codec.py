from __future__ import annotations
from .cursor import WORD, Cursor
from wrapang.angle import Angle

# Wire form: the raw 32-bit encoding, little-endian.
ANGLE_SIZE = WORD.size


class AngleDecodeError(ValueError):
    pass


def encode_angle(angle: Angle) -> bytes:
    return WORD.pack(angle.as_integer())

def decode_angle(cur: Cursor) -> Angle:
    """
    Read one 4-byte angle at the cursor position.
    The cursor is left untouched if fewer than 4 bytes remain.
    """
    if cur.remaining() < ANGLE_SIZE:
        raise AngleDecodeError(f"need {ANGLE_SIZE} bytes at {cur.tell()}, have {cur.remaining()}")
    return Angle.from_integer(cur.word())
