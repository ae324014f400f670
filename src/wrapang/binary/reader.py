from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Union

from .codecs.cursor import Cursor
from .codecs.angle_codec import ANGLE_SIZE, AngleDecodeError, decode_angle
from wrapang.angle import Angle

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


class ParseError(ValueError):
    pass


# -----------------------------
# Helpers
# -----------------------------

def _load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def _check_length(raw: bytes) -> None:
    if len(raw) % ANGLE_SIZE:
        raise ParseError(
            f"Packed angle data must be a multiple of {ANGLE_SIZE} bytes, got {len(raw)}"
        )


# -----------------------------
# Full parse
# -----------------------------

def parse_angles(data: BytesLike) -> List[Angle]:
    """
    Parse a packed run of little-endian 4-byte angles, from bytes or a file path.
    """
    return list(iter_angles(data))


# -----------------------------
# Streaming
# -----------------------------

def iter_angles(data: BytesLike, max_angles: Optional[int] = None) -> Iterator[Angle]:
    """
    Yield angles one at a time; stops after max_angles if given.
    The length check runs before anything is yielded.
    """
    raw = _load_bytes(data)
    _check_length(raw)
    cur = Cursor(raw)
    count = 0
    while cur.remaining() > 0:
        if max_angles is not None and count >= max_angles:
            return
        pos = cur.tell()
        try:
            angle = decode_angle(cur)
        except AngleDecodeError as e:
            raise ParseError(f"angle decode failed at offset {pos}: {e}") from e
        yield angle
        count += 1
