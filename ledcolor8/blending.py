"""Blending colours together and blurring lines and matrices of colours."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Optional, TypeVar

from .colors import HSV, RGB, GradientDirection
from .math8 import blend8
from .scale8 import scale8

__all__ = [
    "nblend",
    "blend",
    "nblend_all",
    "blend_all",
    "blur1d",
    "blur_rows",
    "blur_columns",
    "blur2d",
]

C = TypeVar("C", RGB, HSV)


def _byte(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")
    return value


def _resolve(direction: GradientDirection, huedelta8: int) -> GradientDirection:
    if direction is GradientDirection.SHORTEST_HUES:
        return (
            GradientDirection.BACKWARD_HUES
            if huedelta8 > 127
            else GradientDirection.FORWARD_HUES
        )
    if direction is GradientDirection.LONGEST_HUES:
        return (
            GradientDirection.BACKWARD_HUES
            if huedelta8 < 128
            else GradientDirection.FORWARD_HUES
        )
    return direction


def _nblend_rgb(existing: RGB, overlay: RGB, amount: int) -> None:
    existing.r = blend8(existing.r, overlay.r, amount)
    existing.g = blend8(existing.g, overlay.g, amount)
    existing.b = blend8(existing.b, overlay.b, amount)


def _nblend_hsv(
    existing: HSV, overlay: HSV, amount: int, direction: GradientDirection
) -> None:
    keep = 255 - amount
    huedelta8 = (overlay.hue - existing.hue) & 0xFF
    if _resolve(direction, huedelta8) is GradientDirection.FORWARD_HUES:
        existing.hue = (existing.hue + scale8(huedelta8, amount)) & 0xFF
    else:
        backward = (-huedelta8) & 0xFF
        existing.hue = (existing.hue - scale8(backward, amount)) & 0xFF
    existing.sat = (scale8(existing.sat, keep) + scale8(overlay.sat, amount)) & 0xFF
    existing.val = (scale8(existing.val, keep) + scale8(overlay.val, amount)) & 0xFF


def nblend(
    existing: C,
    overlay: C,
    amount: int,
    direction: GradientDirection = GradientDirection.SHORTEST_HUES,
) -> C:
    """Blend ``amount``/255 of ``overlay`` into ``existing`` in place.

    Works on two RGB or two HSV colours; ``direction`` only matters for HSV.
    Returns ``existing``.
    """
    amount = _byte(amount, "amount")
    if not isinstance(direction, GradientDirection):
        raise TypeError("direction must be a GradientDirection")
    both_rgb = isinstance(existing, RGB) and isinstance(overlay, RGB)
    both_hsv = isinstance(existing, HSV) and isinstance(overlay, HSV)
    if not (both_rgb or both_hsv):
        raise TypeError("nblend needs two RGB or two HSV colours")
    if amount == 0:
        return existing
    if amount == 255:
        for name, value in zip(("r", "g", "b") if both_rgb else ("hue", "sat", "val"), overlay):
            setattr(existing, name, value)
        return existing
    if both_rgb:
        _nblend_rgb(existing, overlay, amount)
    else:
        _nblend_hsv(existing, overlay, amount, direction)
    return existing


def blend(
    p1: C,
    p2: C,
    amount: int,
    direction: GradientDirection = GradientDirection.SHORTEST_HUES,
) -> C:
    """Return a new colour ``amount``/255 of the way from ``p1`` to ``p2``."""
    return nblend(p1.copy(), p2, amount, direction)


def nblend_all(
    existing: Sequence[C],
    overlay: Sequence[C],
    amount: int,
    direction: GradientDirection = GradientDirection.SHORTEST_HUES,
) -> None:
    """Blend each colour of ``overlay`` into the matching one of ``existing``.

    Raises ValueError if the sequences differ in length.
    """
    if existing is overlay:
        return
    for target, source in zip(existing, overlay, strict=True):
        nblend(target, source, amount, direction)


def blend_all(
    src1: Sequence[C],
    src2: Sequence[C],
    amount: int,
    direction: GradientDirection = GradientDirection.SHORTEST_HUES,
) -> list[C]:
    """Return a list of colours blended pairwise from two sequences."""
    return [
        blend(a, b, amount, direction) for a, b in zip(src1, src2, strict=True)
    ]


def _blur_line(
    leds: MutableSequence[RGB], indices: Iterable[int], blur_amount: int
) -> None:
    keep = 255 - blur_amount
    seep = blur_amount >> 1
    carryover = RGB()
    previous: Optional[int] = None
    for index in indices:
        cur = leds[index].copy()
        part = cur.copy().nscale8(seep)
        cur.nscale8(keep)
        cur += carryover
        if previous is not None:
            leds[previous] += part
        target = leds[index]
        target.r, target.g, target.b = cur.r, cur.g, cur.b
        carryover = part
        previous = index


def _check_matrix(leds: Sequence[RGB], width: int, height: int) -> None:
    _byte(width, "width")
    _byte(height, "height")
    if width * height > len(leds):
        raise ValueError(
            f"a {width}x{height} matrix needs {width * height} colours, "
            f"got {len(leds)}"
        )


def blur1d(leds: MutableSequence[RGB], blur_amount: int) -> None:
    """Spread light from each colour to its two neighbours.

    0 means no spread, 172 gives the smoothest even spread; light is not
    fully conserved, so repeated blurring fades towards black.
    """
    _blur_line(leds, range(len(leds)), _byte(blur_amount, "blur_amount"))


def blur_rows(
    leds: MutableSequence[RGB], width: int, height: int, blur_amount: int
) -> None:
    """Blur every row of a row-major ``width`` x ``height`` matrix."""
    _check_matrix(leds, width, height)
    blur_amount = _byte(blur_amount, "blur_amount")
    for row in range(height):
        start = row * width
        _blur_line(leds, range(start, start + width), blur_amount)


def blur_columns(
    leds: MutableSequence[RGB],
    width: int,
    height: int,
    blur_amount: int,
    xy: Optional[Callable[[int, int], int]] = None,
) -> None:
    """Blur every column of a matrix.

    ``xy(x, y)`` maps a matrix position to an index into ``leds``; by
    default the matrix is row-major.
    """
    _byte(width, "width")
    _byte(height, "height")
    blur_amount = _byte(blur_amount, "blur_amount")
    if xy is None:
        _check_matrix(leds, width, height)

        def xy(x: int, y: int) -> int:
            return y * width + x

    for col in range(width):
        _blur_line(leds, [xy(col, row) for row in range(height)], blur_amount)


def blur2d(
    leds: MutableSequence[RGB],
    width: int,
    height: int,
    blur_amount: int,
    xy: Optional[Callable[[int, int], int]] = None,
) -> None:
    """Blur a matrix along its rows and then along its columns."""
    blur_rows(leds, width, height, blur_amount)
    blur_columns(leds, width, height, blur_amount, xy)