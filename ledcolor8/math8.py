"""Saturating, wrapping and averaging arithmetic on 8- and 16-bit integers.

Every function checks that its arguments fit the integer width it works on
and returns a result of that same width. Results wrap or saturate exactly
as the fixed-width operation would.
"""

from __future__ import annotations

import math

__all__ = [
    "qadd8",
    "qadd7",
    "qsub8",
    "add8",
    "add8to16",
    "sub8",
    "avg8",
    "avg16",
    "avg7",
    "avg15",
    "mod8",
    "addmod8",
    "submod8",
    "mul8",
    "qmul8",
    "abs8",
    "sqrt16",
    "blend8",
]


def _check_int(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    return value


def _unsigned(value: int, bits: int, name: str) -> int:
    limit = (1 << bits) - 1
    if not 0 <= _check_int(value, name) <= limit:
        raise ValueError(f"{name} must be in 0..{limit}, got {value}")
    return value


def _signed(value: int, bits: int, name: str) -> int:
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= _check_int(value, name) <= high:
        raise ValueError(f"{name} must be in {low}..{high}, got {value}")
    return value


def _wrap_signed(value: int, bits: int) -> int:
    """Reinterpret the low ``bits`` bits of ``value`` as two's complement."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def qadd8(i: int, j: int) -> int:
    """Add two bytes, saturating at 255."""
    return min(_unsigned(i, 8, "i") + _unsigned(j, 8, "j"), 255)


def qadd7(i: int, j: int) -> int:
    """Add two signed bytes, saturating at 127.

    Only the upper bound saturates; sums below -128 wrap around.
    """
    total = _signed(i, 8, "i") + _signed(j, 8, "j")
    return _wrap_signed(min(total, 127), 8)


def qsub8(i: int, j: int) -> int:
    """Subtract one byte from another, with a floor of 0."""
    return max(_unsigned(i, 8, "i") - _unsigned(j, 8, "j"), 0)


def add8(i: int, j: int) -> int:
    """Add two bytes, wrapping to an 8-bit result."""
    return (_unsigned(i, 8, "i") + _unsigned(j, 8, "j")) & 0xFF


def add8to16(i: int, j: int) -> int:
    """Add a byte to a 16-bit value, wrapping to a 16-bit result."""
    return (_unsigned(i, 8, "i") + _unsigned(j, 16, "j")) & 0xFFFF


def sub8(i: int, j: int) -> int:
    """Subtract one byte from another, wrapping to an 8-bit result."""
    return (_unsigned(i, 8, "i") - _unsigned(j, 8, "j")) & 0xFF


def avg8(i: int, j: int) -> int:
    """Average of two bytes, rounded down."""
    return (_unsigned(i, 8, "i") + _unsigned(j, 8, "j")) >> 1


def avg16(i: int, j: int) -> int:
    """Average of two 16-bit values, rounded down."""
    return (_unsigned(i, 16, "i") + _unsigned(j, 16, "j")) >> 1


def avg7(i: int, j: int) -> int:
    """Average of two signed bytes; rounds up when ``i`` is odd."""
    i = _signed(i, 8, "i")
    j = _signed(j, 8, "j")
    return _wrap_signed(((i + j) >> 1) + (i & 1), 8)


def avg15(i: int, j: int) -> int:
    """Average of two signed 16-bit values; rounds up when ``i`` is odd."""
    i = _signed(i, 16, "i")
    j = _signed(j, 16, "j")
    return _wrap_signed(((i + j) >> 1) + (i & 1), 16)


def _modulo(a: int, m: int) -> int:
    if m == 0:
        raise ZeroDivisionError("modulus must be non-zero")
    return a % m


def mod8(a: int, m: int) -> int:
    """Remainder of ``a`` divided by ``m``."""
    return _modulo(_unsigned(a, 8, "a"), _unsigned(m, 8, "m"))


def addmod8(a: int, b: int, m: int) -> int:
    """Return ``(a + b) % m``, with the sum wrapped to 8 bits first."""
    total = (_unsigned(a, 8, "a") + _unsigned(b, 8, "b")) & 0xFF
    return _modulo(total, _unsigned(m, 8, "m"))


def submod8(a: int, b: int, m: int) -> int:
    """Return ``(a - b) % m``, with the difference wrapped to 8 bits first."""
    difference = (_unsigned(a, 8, "a") - _unsigned(b, 8, "b")) & 0xFF
    return _modulo(difference, _unsigned(m, 8, "m"))


def mul8(i: int, j: int) -> int:
    """Multiply two bytes, keeping the low 8 bits."""
    return (_unsigned(i, 8, "i") * _unsigned(j, 8, "j")) & 0xFF


def qmul8(i: int, j: int) -> int:
    """Multiply two bytes, saturating at 255."""
    return min(_unsigned(i, 8, "i") * _unsigned(j, 8, "j"), 255)


def abs8(i: int) -> int:
    """Absolute value of a signed byte; -128 stays -128."""
    return _wrap_signed(abs(_signed(i, 8, "i")), 8)


def sqrt16(x: int) -> int:
    """Integer square root of a 16-bit value, rounded down."""
    return min(math.isqrt(_unsigned(x, 16, "x")), 255)


def blend8(a: int, b: int, amount_of_b: int) -> int:
    """Blend ``amount_of_b``/255 of ``b`` into ``a``.

    The result always lies between ``a`` and ``b`` inclusive.
    """
    a = _unsigned(a, 8, "a")
    b = _unsigned(b, 8, "b")
    amount_of_b = _unsigned(amount_of_b, 8, "amount_of_b")
    amount_of_a = 255 - amount_of_b
    partial = a * amount_of_a + a + b * amount_of_b + b
    return partial >> 8