from __future__ import annotations
from pathlib import Path
from typing import Iterable, Union

from .codecs.angle_codec import ANGLE_SIZE, encode_angle
from wrapang.angle import Angle

def write_angles(angles: Iterable[Angle]) -> bytes:
    """Pack angles back to back as little-endian 4-byte words."""
    out = bytearray()
    for a in angles:
        out += encode_angle(a)
    return bytes(out)

def write_angles_file(path: Union[str, Path], angles: Iterable[Angle]) -> int:
    """Write packed angles to `path`; returns how many were written."""
    data = write_angles(angles)
    Path(path).write_bytes(data)
    return len(data) // ANGLE_SIZE
