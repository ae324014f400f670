from __future__ import annotations
import math

TURN = 1 << 32
HALF_TURN = 1 << 31
MASK = TURN - 1

def wrap_u32(v: int) -> int:
    """Reduce an integer modulo 2**32 (unsigned 32-bit wraparound)."""
    return v & MASK

def u32_to_s32(v: int) -> int:
    """Interpret a 32-bit unsigned as signed two's complement."""
    return v - TURN if (v & HALF_TURN) else v

def fract(x: float) -> float:
    """Fractional part carrying the sign of x, i.e. x - trunc(x)."""
    return math.fmod(x, 1.0)

def normalize_unit(x: float) -> float:
    """
    Move a turn count into [0, 1].
    Negative fractions are pushed forward by one turn; a tiny negative value
    can land on exactly 1.0, which the unit encoding wraps back to 0.
    """
    unit = fract(x)
    if unit < 0.0:
        unit += 1.0
    return unit

def round_half_away(x: float) -> int:
    """Round to nearest, ties away from zero (builtin round() is banker's)."""
    a = abs(x)
    n = math.floor(a)
    if a - n >= 0.5:
        n += 1
    return -n if x < 0 else n

def unit_to_u32(unit: float) -> int:
    """
    Encode a turn fraction: negatives and non-finite values give 0, values
    above 1 drop their whole turns first (exact, since 2**32 is a power of
    two), so huge inputs never overflow the scaling.
    """
    if not math.isfinite(unit) or unit <= 0.0:
        return 0
    if unit > 1.0:
        unit = math.fmod(unit, 1.0)
    # Round through an unbounded int before truncating to 32 bits, so that
    # 1 - eps gives 0 rather than 0xFFFFFFFF.
    return wrap_u32(round_half_away(unit * TURN))

def u32_to_unit(v: int) -> float:
    """Unsigned binary angle 0..1 turn over 32 bits."""
    return v / TURN

def s32_unit(v: int) -> float:
    """Signed binary angle -0.5..0.5 turn over 32 bits."""
    return u32_to_s32(v) / TURN

def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (C semantics, not floor)."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q

def fraction_u32(num: int, den: int) -> int:
    """Nearest 32-bit encoding of num/den of a turn, ties rounded up."""
    return wrap_u32((TURN * num + den // 2) // den)
