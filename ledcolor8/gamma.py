"""Gamma adjustment of brightness values and the heat colour ramp.

Colours are handled as three-channel values: either objects carrying
``r``, ``g`` and ``b`` attributes, or any sequence of three channel values.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from .scale8 import scale8_video

__all__ = [
    "apply_gamma_video",
    "apply_gamma_video_rgb",
    "napply_gamma_video",
    "heat_color",
]


def _check_byte(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")
    return value


def _channels(color: Any) -> tuple[int, int, int]:
    if all(hasattr(color, channel) for channel in ("r", "g", "b")):
        return color.r, color.g, color.b
    r, g, b = color
    return r, g, b


def apply_gamma_video(brightness: int, gamma: float) -> int:
    """Gamma-adjust a brightness, never turning a positive value into zero.

    Raises ValueError for a gamma that is not positive.
    """
    brightness = _check_byte(brightness, "brightness")
    if gamma <= 0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    result = int(pow(brightness / 255.0, gamma) * 255.0)
    if brightness > 0 and result == 0:
        result = 1
    return result


def apply_gamma_video_rgb(
    color: Any,
    gamma_r: float,
    gamma_g: float | None = None,
    gamma_b: float | None = None,
) -> tuple[int, int, int]:
    """Gamma-adjust each channel of a colour.

    With only ``gamma_r`` given, the same gamma applies to all channels.
    """
    gamma_g = gamma_r if gamma_g is None else gamma_g
    gamma_b = gamma_r if gamma_b is None else gamma_b
    r, g, b = _channels(color)
    return (
        apply_gamma_video(r, gamma_r),
        apply_gamma_video(g, gamma_g),
        apply_gamma_video(b, gamma_b),
    )


def napply_gamma_video(
    leds: MutableSequence[Any],
    gamma_r: float,
    gamma_g: float | None = None,
    gamma_b: float | None = None,
) -> None:
    """Gamma-adjust every colour in ``leds`` in place.

    Colour objects with ``r``, ``g`` and ``b`` attributes are updated
    themselves; other entries are replaced by ``(r, g, b)`` tuples.
    """
    for index, color in enumerate(leds):
        r, g, b = apply_gamma_video_rgb(color, gamma_r, gamma_g, gamma_b)
        if all(hasattr(color, channel) for channel in ("r", "g", "b")):
            color.r, color.g, color.b = r, g, b
        else:
            leds[index] = (r, g, b)


def heat_color(temperature: int) -> tuple[int, int, int]:
    """Approximate a black-body colour for a heat level from 0 to 255.

    Returns an ``(r, g, b)`` tuple that ramps from black through red and
    yellow to white.
    """
    t192 = scale8_video(_check_byte(temperature, "temperature"), 191)
    heatramp = (t192 & 0x3F) << 2
    if t192 & 0x80:
        return 255, 255, heatramp
    if t192 & 0x40:
        return 255, heatramp, 0
    return heatramp, 0, 0