from __future__ import annotations
import struct

# One packed angle word: unsigned 32-bit, little-endian.
WORD = struct.Struct("<I")


class Cursor:
    """Forward-only reader over packed angle words."""

    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data)
        self.pos = 0

    def remaining(self) -> int:
        return len(self.buf) - self.pos

    def tell(self) -> int:
        return self.pos

    def word(self) -> int:
        if self.remaining() < WORD.size:
            raise ValueError(f"underrun: need {WORD.size} at {self.pos}, have {self.remaining()}")
        (v,) = WORD.unpack_from(self.buf, self.pos)
        self.pos += WORD.size
        return v
