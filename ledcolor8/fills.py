"""Filling, fading and scaling whole sequences of colours in place."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Union

from .colors import HSV, RGB
from .scale8 import scale8

__all__ = [
    "fill_solid",
    "fill_rainbow",
    "fill_gradient_rgb",
    "fill_gradient_rgb_colors",
    "nscale8_video",
    "fade_video",
    "fade_light_by",
    "fade_to_black_by",
    "fade_raw",
    "nscale8_raw",
    "nscale8",
    "fade_using_color",
]

Color = Union[RGB, HSV]


def _check_int(value: int, limit: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be in 0..{limit}, got {value}")
    return value


def _byte(value: int, name: str) -> int:
    return _check_int(value, 0xFF, name)


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def fill_solid(leds: MutableSequence[Any], color: Color) -> None:
    """Set every entry of ``leds`` to its own copy of ``color``."""
    if not isinstance(color, (RGB, HSV)):
        raise TypeError("color must be an RGB or HSV")
    for index, _ in enumerate(leds):
        leds[index] = color.copy()


def fill_rainbow(
    targets: MutableSequence[Any], initial_hue: int, delta_hue: int = 5
) -> None:
    """Fill ``targets`` with HSV colours whose hue steps by ``delta_hue``.

    Every entry has saturation 240 and full value; the hue wraps at 256.
    """
    hue = _byte(initial_hue, "initial_hue")
    delta_hue = _byte(delta_hue, "delta_hue")
    for index, _ in enumerate(targets):
        targets[index] = HSV(hue, 240, 255)
        hue = (hue + delta_hue) & 0xFF


def fill_gradient_rgb(
    leds: MutableSequence[Any],
    start_pos: int,
    start_color: RGB,
    end_pos: int,
    end_color: RGB,
) -> None:
    """Write an RGB gradient into ``leds[start_pos..end_pos]`` inclusive.

    The positions may be given in either order.
    """
    start_pos = _check_int(start_pos, 0xFFFF, "start_pos")
    end_pos = _check_int(end_pos, 0xFFFF, "end_pos")
    if not isinstance(start_color, RGB) or not isinstance(end_color, RGB):
        raise TypeError("gradient colours must be RGB")
    start, end = start_color, end_color
    if end_pos < start_pos:
        start_pos, end_pos = end_pos, start_pos
        start, end = end, start

    pixeldistance = end_pos - start_pos
    divisor = _int16(pixeldistance) if pixeldistance else 1

    deltas = [
        _int16(_trunc_div(_int16((e - s) << 7), divisor) * 2)
        for s, e in zip(start, end)
    ]
    accumulators = [channel << 8 for channel in start]
    for position in range(start_pos, end_pos + 1):
        leds[position] = RGB(*(acc >> 8 for acc in accumulators))
        accumulators = [
            (acc + delta) & 0xFFFF for acc, delta in zip(accumulators, deltas)
        ]


def fill_gradient_rgb_colors(leds: MutableSequence[Any], *args: RGB) -> None:
    """Fill all of ``leds`` with an RGB gradient through two to four colours."""
    count = len(leds)
    if count == 0:
        raise ValueError("leds must not be empty")
    last = count - 1
    if len(args) == 2:
        c1, c2 = args
        fill_gradient_rgb(leds, 0, c1, last, c2)
    elif len(args) == 3:
        c1, c2, c3 = args
        half = count // 2
        fill_gradient_rgb(leds, 0, c1, half, c2)
        fill_gradient_rgb(leds, half, c2, last, c3)
    elif len(args) == 4:
        c1, c2, c3, c4 = args
        one_third = count // 3
        two_thirds = (count * 2) // 3
        fill_gradient_rgb(leds, 0, c1, one_third, c2)
        fill_gradient_rgb(leds, one_third, c2, two_thirds, c3)
        fill_gradient_rgb(leds, two_thirds, c3, last, c4)
    else:
        raise ValueError(f"expected 2 to 4 colours, got {len(args)}")


def nscale8_video(leds: MutableSequence[RGB], scale: int) -> None:
    """Scale every colour down, never taking a lit channel to zero."""
    scale = _byte(scale, "scale")
    for led in leds:
        led.nscale8_video(scale)


def fade_video(leds: MutableSequence[RGB], fade_by: int) -> None:
    """Dim every colour by ``fade_by``/256 without reaching black."""
    nscale8_video(leds, 255 - _byte(fade_by, "fade_by"))


def fade_light_by(leds: MutableSequence[RGB], fade_by: int) -> None:
    """Synonym of :func:`fade_video`."""
    fade_video(leds, fade_by)


def nscale8(leds: MutableSequence[RGB], scale: int) -> None:
    """Scale every colour by ``scale``/256; may reach black."""
    scale = _byte(scale, "scale")
    for led in leds:
        led.nscale8(scale)


def nscale8_raw(leds: MutableSequence[RGB], scale: int) -> None:
    """Synonym of :func:`nscale8`."""
    nscale8(leds, scale)


def fade_to_black_by(leds: MutableSequence[RGB], fade_by: int) -> None:
    """Dim every colour by ``fade_by``/256; repeated calls reach black."""
    nscale8(leds, 255 - _byte(fade_by, "fade_by"))


def fade_raw(leds: MutableSequence[RGB], fade_by: int) -> None:
    """Synonym of :func:`fade_to_black_by`."""
    fade_to_black_by(leds, fade_by)


def fade_using_color(leds: MutableSequence[RGB], colormask: RGB) -> None:
    """Scale each channel as if seen through a filter of ``colormask``."""
    if not isinstance(colormask, RGB):
        raise TypeError("colormask must be an RGB")
    for led in leds:
        led.r = scale8(led.r, colormask.r)
        led.g = scale8(led.g, colormask.g)
        led.b = scale8(led.b, colormask.b)