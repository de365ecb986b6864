"""Smooth HSV gradients written into sequences of colours."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from .colors import HSV, GradientDirection

__all__ = ["fill_gradient", "fill_gradient_colors"]


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _check_pos(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{name} must be in 0..65535, got {value}")
    return value


def _resolve_direction(direction: GradientDirection, huedelta8: int) -> GradientDirection:
    if direction is GradientDirection.SHORTEST_HUES:
        return GradientDirection.BACKWARD_HUES if huedelta8 > 127 else GradientDirection.FORWARD_HUES
    if direction is GradientDirection.LONGEST_HUES:
        return GradientDirection.BACKWARD_HUES if huedelta8 < 128 else GradientDirection.FORWARD_HUES
    return direction


def fill_gradient(
    targets: MutableSequence[Any],
    start_pos: int,
    start_color: HSV,
    end_pos: int,
    end_color: HSV,
    direction: GradientDirection = GradientDirection.SHORTEST_HUES,
) -> None:
    """Write an HSV gradient into ``targets[start_pos..end_pos]`` inclusive.

    Each written entry is a new :class:`HSV`. The positions may be given in
    either order; ``direction`` picks which way the hue travels.
    """
    start_pos = _check_pos(start_pos, "start_pos")
    end_pos = _check_pos(end_pos, "end_pos")
    if not isinstance(direction, GradientDirection):
        raise TypeError("direction must be a GradientDirection")
    start, end = start_color.copy(), end_color.copy()
    if end_pos < start_pos:
        start_pos, end_pos = end_pos, start_pos
        start, end = end, start

    # Black or white has no hue of its own: borrow the other end's hue.
    if end.val == 0 or end.sat == 0:
        end.hue = start.hue
    if start.val == 0 or start.sat == 0:
        start.hue = end.hue

    satdistance87 = _int16((end.sat - start.sat) << 7)
    valdistance87 = _int16((end.val - start.val) << 7)
    huedelta8 = (end.hue - start.hue) & 0xFF

    if _resolve_direction(direction, huedelta8) is GradientDirection.FORWARD_HUES:
        huedistance87 = huedelta8 << 7
    else:
        huedistance87 = -(((256 - huedelta8) & 0xFF) << 7)

    pixeldistance = end_pos - start_pos
    divisor = _int16(pixeldistance) if pixeldistance else 1

    huedelta87 = _int16(_trunc_div(huedistance87, divisor) * 2)
    satdelta87 = _int16(_trunc_div(satdistance87, divisor) * 2)
    valdelta87 = _int16(_trunc_div(valdistance87, divisor) * 2)

    hue88, sat88, val88 = start.hue << 8, start.sat << 8, start.val << 8
    for position in range(start_pos, end_pos + 1):
        targets[position] = HSV(hue88 >> 8, sat88 >> 8, val88 >> 8)
        hue88 = (hue88 + huedelta87) & 0xFFFF
        sat88 = (sat88 + satdelta87) & 0xFFFF
        val88 = (val88 + valdelta87) & 0xFFFF


def fill_gradient_colors(
    targets: MutableSequence[Any],
    *args: HSV,
    direction: GradientDirection = GradientDirection.SHORTEST_HUES,
) -> None:
    """Fill all of ``targets`` with a gradient through two to four colours."""
    count = len(targets)
    if count == 0:
        raise ValueError("targets must not be empty")
    last = count - 1
    if len(args) == 2:
        c1, c2 = args
        fill_gradient(targets, 0, c1, last, c2, direction)
    elif len(args) == 3:
        c1, c2, c3 = args
        half = count // 2
        fill_gradient(targets, 0, c1, half, c2, direction)
        fill_gradient(targets, half, c2, last, c3, direction)
    elif len(args) == 4:
        c1, c2, c3, c4 = args
        one_third = count // 3
        two_thirds = (count * 2) // 3
        fill_gradient(targets, 0, c1, one_third, c2, direction)
        fill_gradient(targets, one_third, c2, two_thirds, c3, direction)
        fill_gradient(targets, two_thirds, c3, last, c4, direction)
    else:
        raise ValueError(f"expected 2 to 4 colours, got {len(args)}")