"""Colour value types and the enumerations used by fills and palettes."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from .math8 import qadd8
from .scale8 import scale8, scale8_video

__all__ = ["RGB", "HSV", "GradientDirection", "BlendType"]


def _check_byte(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")
    return value


class GradientDirection(enum.Enum):
    """Which way a hue gradient travels around the colour wheel."""

    FORWARD_HUES = 0
    BACKWARD_HUES = 1
    SHORTEST_HUES = 2
    LONGEST_HUES = 3


class BlendType(enum.IntEnum):
    """Whether palette lookups interpolate between neighbouring entries."""

    NOBLEND = 0
    LINEARBLEND = 1


@dataclass
class RGB:
    """A mutable colour with 8-bit red, green and blue channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __setattr__(self, name: str, value: int) -> None:
        if name in ("r", "g", "b"):
            value = _check_byte(value, name)
        super().__setattr__(name, value)

    @classmethod
    def from_code(cls, code: int) -> RGB:
        """Build a colour from a 24-bit ``0xRRGGBB`` code."""
        if not isinstance(code, int) or isinstance(code, bool):
            raise TypeError(f"code must be an int, not {type(code).__name__}")
        if not 0 <= code <= 0xFFFFFF:
            raise ValueError(f"code must be in 0..0xFFFFFF, got {code:#x}")
        return cls((code >> 16) & 0xFF, (code >> 8) & 0xFF, code & 0xFF)

    def nscale8(self, scale: int) -> RGB:
        """Scale every channel by ``scale / 256`` in place; return self."""
        self.r = scale8(self.r, scale)
        self.g = scale8(self.g, scale)
        self.b = scale8(self.b, scale)
        return self

    def nscale8_video(self, scale: int) -> RGB:
        """Scale in place, keeping non-zero channels non-zero; return self."""
        self.r = scale8_video(self.r, scale)
        self.g = scale8_video(self.g, scale)
        self.b = scale8_video(self.b, scale)
        return self

    def __add__(self, other: object) -> RGB:
        if not isinstance(other, RGB):
            return NotImplemented
        return RGB(qadd8(self.r, other.r), qadd8(self.g, other.g), qadd8(self.b, other.b))

    def __iadd__(self, other: object) -> RGB:
        if not isinstance(other, RGB):
            return NotImplemented
        self.r = qadd8(self.r, other.r)
        self.g = qadd8(self.g, other.g)
        self.b = qadd8(self.b, other.b)
        return self

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def copy(self) -> RGB:
        """Return an independent copy of this colour."""
        return RGB(self.r, self.g, self.b)


@dataclass
class HSV:
    """A mutable colour with 8-bit hue, saturation and value."""

    hue: int = 0
    sat: int = 0
    val: int = 0

    def __setattr__(self, name: str, value: int) -> None:
        if name in ("hue", "sat", "val"):
            value = _check_byte(value, name)
        super().__setattr__(name, value)

    def __iter__(self) -> Iterator[int]:
        return iter((self.hue, self.sat, self.val))

    def copy(self) -> HSV:
        """Return an independent copy of this colour."""
        return HSV(self.hue, self.sat, self.val)