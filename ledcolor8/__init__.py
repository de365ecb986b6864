"""Integer 8-bit colour math, fills, gradients, blending, blur and gamma for LED effects."""

__version__ = "0.1.0"

__all__ = [
    "blending",
    "colors",
    "fills",
    "gamma",
    "gradients",
    "math8",
    "scale8",
]