# ledcolor8

Integer-exact colour math for addressable LED strips and matrices, in
plain Python. Every channel is an 8-bit value (0..255), and operations
use 8-bit and 16-bit fixed-point arithmetic, so results are whole numbers
that wrap or saturate exactly as fixed-width integers would. Arguments
outside their range raise `ValueError`; arguments of the wrong type raise
`TypeError`.

## Installation

```
pip install ledcolor8
```

There are no runtime dependencies. Python 3.10 or later is required.

## Modules

- `ledcolor8.scale8`: scaling by a fraction of 256 (`scale8`,
  `scale8_video`, `nscale8x2`, `nscale8x2_video`, `nscale8x3`,
  `nscale8x3_video`), 16-bit scaling (`scale16by8`, `scale16`) and
  dimming curves (`dim8_raw`, `dim8_video`, `dim8_lin`, `brighten8_raw`,
  `brighten8_video`, `brighten8_lin`). A scale of 255 leaves a value
  unchanged; the `_video` variants never take a non-zero value to zero
  unless the scale is zero. The multi-value functions return tuples.
- `ledcolor8.math8`: saturating and wrapping arithmetic (`qadd8`, `qadd7`,
  `qsub8`, `add8`, `add8to16`, `sub8`, `mul8`, `qmul8`, `abs8`), averages
  (`avg8`, `avg16`, `avg7`, `avg15`), modular helpers (`mod8`, `addmod8`,
  `submod8`), `sqrt16` and `blend8`.
- `ledcolor8.colors`: the mutable `RGB` (`r`, `g`, `b`) and `HSV`
  (`hue`, `sat`, `val`) dataclasses, and the `GradientDirection`
  (`FORWARD_HUES`, `BACKWARD_HUES`, `SHORTEST_HUES`, `LONGEST_HUES`) and
  `BlendType` (`NOBLEND`, `LINEARBLEND`) enums. `RGB` has `from_code`
  for `0xRRGGBB` codes, in-place `nscale8` / `nscale8_video`, and
  saturating `+` / `+=`.
- `ledcolor8.fills`: `fill_solid`, `fill_rainbow`, `fill_gradient_rgb`,
  `fill_gradient_rgb_colors`, and whole-sequence scaling and fading:
  `nscale8`, `nscale8_raw`, `nscale8_video`, `fade_to_black_by`,
  `fade_raw`, `fade_light_by`, `fade_video`, `fade_using_color`.
- `ledcolor8.gradients`: HSV gradients with a chosen hue direction
  (`fill_gradient`, `fill_gradient_colors`).
- `ledcolor8.blending`: `blend` / `nblend` for single RGB or HSV colours,
  `blend_all` / `nblend_all` for sequences, and the blur filters
  `blur1d`, `blur_rows`, `blur_columns` and `blur2d`.
- `ledcolor8.gamma`: `apply_gamma_video`, `apply_gamma_video_rgb`,
  `napply_gamma_video`, and `heat_color`, a black-body approximation for
  fire effects.

## Examples

Bytes:

```python
from ledcolor8.scale8 import scale8, scale8_video
from ledcolor8.math8 import qadd8, blend8

scale8(255, 128)        # 128
scale8_video(1, 1)      # 1: a lit value is never dimmed to zero
qadd8(200, 100)         # 255: saturates instead of wrapping
blend8(0, 255, 128)     # 128
```

Filling and fading a strip:

```python
from ledcolor8.colors import RGB
from ledcolor8.fills import fill_solid, fill_rainbow, fade_to_black_by

leds = [RGB() for _ in range(60)]
fill_solid(leds, RGB(50, 0, 200))
fade_to_black_by(leds, 64)          # every entry is now RGB(37, 0, 150)

hues = [None] * 60
fill_rainbow(hues, 0, 5)            # HSV(0, 240, 255), HSV(5, 240, 255), ...
```

`fill_rainbow` writes `HSV` entries.

Gradients and blending:

```python
from ledcolor8.colors import HSV, RGB, GradientDirection
from ledcolor8.gradients import fill_gradient_colors
from ledcolor8.fills import fill_gradient_rgb_colors
from ledcolor8.blending import blend, blur1d

strip = [HSV() for _ in range(16)]
fill_gradient_colors(strip, HSV(0, 255, 255), HSV(160, 255, 255),
                     direction=GradientDirection.LONGEST_HUES)

leds = [RGB() for _ in range(16)]
fill_gradient_rgb_colors(leds, RGB(255, 0, 0), RGB(0, 255, 0), RGB(0, 0, 255))
blur1d(leds, 64)

blend(RGB(255, 0, 0), RGB(0, 0, 255), 128)   # RGB(127, 0, 128)
```

`blur_columns` and `blur2d` take an optional `xy(x, y)` function that maps
a matrix position to an index; without it the matrix is row-major.

Fire colours and gamma:

```python
from ledcolor8.gamma import heat_color, apply_gamma_video

heat_color(200)                 # (255, 255, 88)
apply_gamma_video(128, 2.2)     # 55
```

## What the package does not do

- It has no palettes: there are no palette classes, no palette lookup
  with interpolation, no palette cross-fades and no gradient-palette
  definitions. `BlendType` is defined but nothing here uses it yet.
- It does not convert between HSV and RGB. HSV fills and gradients
  produce `HSV` values that you convert yourself.
- It does not drive LED hardware; it only computes colour values.

## Running the tests

```
pip install "ledcolor8[test]"
pytest
```