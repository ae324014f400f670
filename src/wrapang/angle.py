from __future__ import annotations
import math
from typing import Any, Tuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from wrapang.binary.scale import (
    MASK,
    fraction_u32,
    normalize_unit,
    s32_unit,
    trunc_div,
    u32_to_s32,
    u32_to_unit,
    unit_to_u32,
    wrap_u32,
)

TWO_PI = math.tau


class AngleError(ValueError):
    """Base for angle construction errors."""


class InvalidFloatError(AngleError):
    """Non-finite input, or a unit value outside [0, 1]."""


class TrigDomainError(AngleError):
    """Inverse sine/cosine argument outside [-1, 1]."""


def _is_scalar(k: Any) -> bool:
    return isinstance(k, int) and not isinstance(k, bool)


class Angle:
    """
    A wrapping angle stored as an unsigned 32-bit integer.

    The integer v stands for v / 2**32 of a full turn, so every value is a
    valid angle and adding past a full circle wraps back to zero (compass
    bearings behave this way).

    Multiplying or dividing does not keep track of whole turns: an obtuse
    angle multiplied by 4 then divided by 4 comes back as an acute one.
    """

    __slots__ = ("_v",)

    def __init__(self, value: int = 0):
        if not _is_scalar(value):
            raise TypeError(f"Angle encoding must be an int, got {type(value).__name__}")
        if not (0 <= value <= MASK):
            raise AngleError(f"Angle encoding must be in [0, 2**32), got {value}")
        self._v = value

    @classmethod
    def _wrap(cls, v: int) -> "Angle":
        out = object.__new__(cls)
        out._v = wrap_u32(v)
        return out

    # -----------------------------
    # Construction
    # -----------------------------

    @classmethod
    def from_radians(cls, rad: float) -> "Angle":
        if not math.isfinite(rad):
            raise InvalidFloatError(f"Expected finite number of radians, got {rad!r}")
        return cls.from_radians_unchecked(rad)

    @classmethod
    def from_radians_unchecked(cls, rad: float) -> "Angle":
        """
        Skip the finiteness check. NaN and infinities give a zero angle
        instead of raising.
        """
        if not math.isfinite(rad):
            return cls._wrap(0)
        return cls.from_unit_unchecked(normalize_unit(rad / TWO_PI))

    @classmethod
    def from_degrees(cls, deg: float) -> "Angle":
        if not math.isfinite(deg):
            raise InvalidFloatError(f"Expected finite number of degrees, got {deg!r}")
        return cls.from_unit(normalize_unit(deg / 360.0))

    @classmethod
    def from_degrees_unchecked(cls, deg: float) -> "Angle":
        if not math.isfinite(deg):
            return cls._wrap(0)
        return cls.from_unit_unchecked(normalize_unit(deg / 360.0))

    @classmethod
    def from_unit(cls, unit: float) -> "Angle":
        """
        Create an angle from a value in [0, 1], where 1 is a whole circle.

        1.0 is accepted and wraps to zero; callers should prefer a value
        strictly below 1.
        """
        if not (math.isfinite(unit) and 0.0 <= unit <= 1.0):
            raise InvalidFloatError(f"unit must be in the range [0, 1], got {unit!r}")
        return cls._wrap(unit_to_u32(unit))

    @classmethod
    def from_unit_unchecked(cls, unit: float) -> "Angle":
        """
        Unvalidated variant of from_unit. It is still total: NaN and
        infinities give zero, finite negatives clamp to zero, and finite
        values above 1 wrap by whole turns.
        """
        if not math.isfinite(unit):
            return cls._wrap(0)
        return cls._wrap(unit_to_u32(unit))

    @classmethod
    def from_integer(cls, value: int) -> "Angle":
        return cls(value)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> "Angle":
        """Decode exactly one little-endian 4-byte angle."""
        from .binary.codecs.cursor import Cursor
        from .binary.codecs.angle_codec import ANGLE_SIZE, AngleDecodeError, decode_angle
        cur = Cursor(data)
        angle = decode_angle(cur)
        if cur.remaining():
            raise AngleDecodeError(f"expected {ANGLE_SIZE} bytes, got {len(cur.buf)}")
        return angle

    # -----------------------------
    # Extraction
    # -----------------------------

    @property
    def value(self) -> int:
        return self._v

    def as_integer(self) -> int:
        return self._v

    def as_unit(self) -> float:
        """The angle in [0, 1), where 1 is a whole circle."""
        return u32_to_unit(self._v)

    def as_signed_unit(self) -> float:
        """The angle in [-0.5, 0.5); values past half a turn read as negative."""
        return s32_unit(self._v)

    def as_radians(self) -> float:
        return self.as_unit() * TWO_PI

    def as_signed_radians(self) -> float:
        return self.as_signed_unit() * TWO_PI

    def as_degrees(self) -> float:
        return self.as_unit() * 360.0

    def as_signed_degrees(self) -> float:
        return self.as_signed_unit() * 360.0

    def to_bytes(self) -> bytes:
        from .binary.codecs.angle_codec import encode_angle
        return encode_angle(self)

    # -----------------------------
    # Arithmetic (all wrapping mod 2**32)
    # -----------------------------

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._wrap(self._v + other._v)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._wrap(self._v - other._v)

    def __neg__(self) -> "Angle":
        return self._wrap(-self._v)

    def __mod__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._wrap(self._v % other._v)

    def __mul__(self, k):
        if not _is_scalar(k):
            return NotImplemented
        return self._wrap(self._v * wrap_u32(k))

    __rmul__ = __mul__

    def __truediv__(self, k):
        """
        Divide by an integer, treating the angle as signed.

        An angle past half a turn is negative here, so 270 deg / 2 gives
        -45 deg. The division truncates, so (a * k) / k can be off by a
        few parts in 2**32 from a; compare such results with a tolerance.
        """
        if not _is_scalar(k):
            return NotImplemented
        return self._wrap(trunc_div(u32_to_s32(self._v), k))

    __floordiv__ = __truediv__

    # -----------------------------
    # Trigonometry
    # -----------------------------

    def sin(self) -> float:
        return math.sin(self.as_radians())

    def cos(self) -> float:
        return math.cos(self.as_radians())

    def tan(self) -> float:
        return math.tan(self.as_radians())

    def sin_cos(self) -> Tuple[float, float]:
        """Returns (sin(self), cos(self))."""
        rad = self.as_radians()
        return math.sin(rad), math.cos(rad)

    @classmethod
    def asin(cls, x: float) -> "Angle":
        try:
            rad = math.asin(x)
        except ValueError as e:
            raise TrigDomainError(f"asin argument must be in [-1, 1], got {x!r}") from e
        return cls.from_radians(rad)

    @classmethod
    def acos(cls, x: float) -> "Angle":
        try:
            rad = math.acos(x)
        except ValueError as e:
            raise TrigDomainError(f"acos argument must be in [-1, 1], got {x!r}") from e
        return cls.from_radians(rad)

    @classmethod
    def atan(cls, x: float) -> "Angle":
        return cls.from_radians(math.atan(x))

    @classmethod
    def atan2(cls, y: float, x: float) -> "Angle":
        """Four-quadrant arctangent of y/x, see math.atan2."""
        return cls.from_radians(math.atan2(y, x))

    # -----------------------------
    # Rounding
    # -----------------------------

    def round(self, unit: "Angle") -> "Angle":
        """
        Round to the nearest multiple of `unit`, preferring the larger one
        on a tie. Both angles are treated as unsigned.

        Meant for units that divide the whole circle (right angles for
        compass bearings and the like). Other units still round, but in
        the unsigned wraparound sense, which can surprise near zero.
        """
        v, u = self._v, unit._v
        times = v // u
        lo = wrap_u32(u * times)
        hi = wrap_u32(u * (times + 1))
        if wrap_u32(hi - v) <= wrap_u32(v - lo):
            return self._wrap(hi)
        return self._wrap(lo)

    # -----------------------------
    # Value semantics
    # -----------------------------

    def __eq__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._v == other._v

    def __hash__(self) -> int:
        return hash((Angle, self._v))

    def __repr__(self) -> str:
        return f"Angle({self._v}, {self.as_unit()} of whole circle)"

    # Pydantic field support: accepts Angle or a u32 int, dumps the raw int.
    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler):
        from_int = core_schema.no_info_after_validator_function(
            cls.from_integer,
            core_schema.int_schema(ge=0, le=MASK, strict=True),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_int,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_int]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda a: a.as_integer(),
                return_schema=core_schema.int_schema(),
            ),
        )


# Named constants; each is the nearest 32-bit encoding of its fraction.
ZERO = Angle(0)
TWELFTH = Angle(fraction_u32(1, 12))        # ~30 deg
EIGHTH = Angle(fraction_u32(1, 8))          # 45 deg
SIXTH = Angle(fraction_u32(1, 6))           # ~60 deg
QUARTER = Angle(fraction_u32(1, 4))         # 90 deg
THIRD = Angle(fraction_u32(1, 3))           # ~120 deg
HALF = Angle(fraction_u32(1, 2))            # 180 deg
THREE_QUARTERS = Angle(fraction_u32(3, 4))  # 270 deg
