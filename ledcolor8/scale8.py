"""Fixed-point scaling and dimming of 8- and 16-bit unsigned values.

A ``scale`` argument is the numerator of a fraction whose denominator is
256 (or 65536 for :func:`scale16`).  The "fixed" rounding behaviour is used
throughout: a scale of 255 (or 65535) leaves the input unchanged.
"""

from __future__ import annotations

__all__ = [
    "scale8",
    "scale8_video",
    "nscale8x3",
    "nscale8x3_video",
    "nscale8x2",
    "nscale8x2_video",
    "scale16by8",
    "scale16",
    "dim8_raw",
    "dim8_video",
    "dim8_lin",
    "brighten8_raw",
    "brighten8_video",
    "brighten8_lin",
]


def _check(value: int, bits: int, name: str) -> int:
    limit = (1 << bits) - 1
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be in 0..{limit}, got {value}")
    return value


def _u8(value: int, name: str) -> int:
    return _check(value, 8, name)


def _u16(value: int, name: str) -> int:
    return _check(value, 16, name)


def _scale_fixed(value: int, scale: int) -> int:
    return (value * (scale + 1)) >> 8


def _scale_video(value: int, scale: int) -> int:
    return ((value * scale) >> 8) + (1 if value and scale else 0)


def scale8(i: int, scale: int) -> int:
    """Return ``i * (scale / 256)``, with a scale of 255 keeping ``i``."""
    return _scale_fixed(_u8(i, "i"), _u8(scale, "scale"))


def scale8_video(i: int, scale: int) -> int:
    """Scale ``i`` so that the result is zero only if an input is zero."""
    return _scale_video(_u8(i, "i"), _u8(scale, "scale"))


def nscale8x3(r: int, g: int, b: int, scale: int) -> tuple[int, int, int]:
    """Scale three channel values by the same fraction."""
    scale = _u8(scale, "scale")
    return (
        _scale_fixed(_u8(r, "r"), scale),
        _scale_fixed(_u8(g, "g"), scale),
        _scale_fixed(_u8(b, "b"), scale),
    )


def nscale8x3_video(r: int, g: int, b: int, scale: int) -> tuple[int, int, int]:
    """Scale three channel values, keeping non-zero values non-zero."""
    scale = _u8(scale, "scale")
    return (
        _scale_video(_u8(r, "r"), scale),
        _scale_video(_u8(g, "g"), scale),
        _scale_video(_u8(b, "b"), scale),
    )


def nscale8x2(i: int, j: int, scale: int) -> tuple[int, int]:
    """Scale two values by the same fraction."""
    scale = _u8(scale, "scale")
    return _scale_fixed(_u8(i, "i"), scale), _scale_fixed(_u8(j, "j"), scale)


def nscale8x2_video(i: int, j: int, scale: int) -> tuple[int, int]:
    """Scale two values, keeping non-zero values non-zero."""
    scale = _u8(scale, "scale")
    return _scale_video(_u8(i, "i"), scale), _scale_video(_u8(j, "j"), scale)


def scale16by8(i: int, scale: int) -> int:
    """Return the 16-bit ``i`` scaled by ``scale / 256``."""
    return (_u16(i, "i") * (1 + _u8(scale, "scale"))) >> 8


def scale16(i: int, scale: int) -> int:
    """Return the 16-bit ``i`` scaled by ``scale / 65536``."""
    return (_u16(i, "i") * (1 + _u16(scale, "scale"))) >> 16


def dim8_raw(x: int) -> int:
    """Apply the quadratic dimming curve."""
    return scale8(x, x)


def dim8_video(x: int) -> int:
    """Apply the dimming curve without reaching zero for non-zero input."""
    return scale8_video(x, x)


def dim8_lin(x: int) -> int:
    """Dimming curve that halves values below 128 linearly."""
    x = _u8(x, "x")
    if x & 0x80:
        return _scale_fixed(x, x)
    return (x + 1) // 2


def brighten8_raw(x: int) -> int:
    """Inverse of :func:`dim8_raw`: brighten a value."""
    ix = 255 - _u8(x, "x")
    return 255 - _scale_fixed(ix, ix)


def brighten8_video(x: int) -> int:
    """Inverse of :func:`dim8_video`: brighten a value."""
    ix = 255 - _u8(x, "x")
    return 255 - _scale_video(ix, ix)


def brighten8_lin(x: int) -> int:
    """Inverse of :func:`dim8_lin`: brighten a value."""
    ix = 255 - _u8(x, "x")
    if ix & 0x80:
        ix = _scale_fixed(ix, ix)
    else:
        ix = (ix + 1) // 2
    return 255 - ix