import pytest
from hypothesis import given
from hypothesis import strategies as st

from ledcolor8.scale8 import (
    brighten8_lin,
    brighten8_raw,
    brighten8_video,
    dim8_lin,
    dim8_raw,
    dim8_video,
    nscale8x2,
    nscale8x2_video,
    nscale8x3,
    nscale8x3_video,
    scale8,
    scale8_video,
    scale16,
    scale16by8,
)

u8 = st.integers(min_value=0, max_value=255)
u16 = st.integers(min_value=0, max_value=65535)


@given(u8)
def test_scale8_full_scale_is_identity(i):
    assert scale8(i, 255) == i


@given(u8)
def test_scale8_of_zero_is_zero(scale):
    assert scale8(0, scale) == 0


@given(u8, u8)
def test_scale8_never_exceeds_input(i, scale):
    assert 0 <= scale8(i, scale) <= i


@given(u8, u8, u8)
def test_scale8_monotonic_in_scale(i, a, b):
    lo, hi = sorted((a, b))
    assert scale8(i, lo) <= scale8(i, hi)


def test_scale8_half():
    assert scale8(128, 128) == 64


@given(u8, u8)
def test_scale8_video_zero_only_for_zero_input(i, scale):
    result = scale8_video(i, scale)
    assert (result == 0) == (i == 0 or scale == 0)
    assert result <= 255


@given(u8)
def test_scale8_video_full_scale(i):
    assert scale8_video(i, 255) == i


@given(u8, u8, u8, u8)
def test_nscale8x3_matches_scale8(r, g, b, scale):
    assert nscale8x3(r, g, b, scale) == (
        scale8(r, scale),
        scale8(g, scale),
        scale8(b, scale),
    )


@given(u8, u8, u8, u8)
def test_nscale8x3_video_matches_scale8_video(r, g, b, scale):
    assert nscale8x3_video(r, g, b, scale) == (
        scale8_video(r, scale),
        scale8_video(g, scale),
        scale8_video(b, scale),
    )


@given(u8, u8, u8)
def test_nscale8x2_matches_scale8(i, j, scale):
    assert nscale8x2(i, j, scale) == (scale8(i, scale), scale8(j, scale))


@given(u8, u8, u8)
def test_nscale8x2_video_matches_scale8_video(i, j, scale):
    assert nscale8x2_video(i, j, scale) == (
        scale8_video(i, scale),
        scale8_video(j, scale),
    )


@given(u16)
def test_scale16by8_full_scale(i):
    assert scale16by8(i, 255) == i


@given(u16, u8)
def test_scale16by8_bounded(i, scale):
    assert 0 <= scale16by8(i, scale) <= i


@given(u16)
def test_scale16_full_scale(i):
    assert scale16(i, 65535) == i


@given(u16, u16)
def test_scale16_bounded(i, scale):
    assert 0 <= scale16(i, scale) <= i


@given(u8)
def test_dim8_raw_is_self_scaling(x):
    assert dim8_raw(x) == scale8(x, x)
    assert dim8_raw(x) <= x


@given(u8)
def test_dim8_video_keeps_nonzero(x):
    assert (dim8_video(x) == 0) == (x == 0)


def test_dim_endpoints():
    assert dim8_raw(255) == 255
    assert dim8_raw(0) == 0
    assert dim8_lin(255) == 255
    assert dim8_lin(0) == 0


@given(u8)
def test_dim8_lin_never_exceeds_input(x):
    assert dim8_lin(x) <= x


@given(u8)
def test_brighten8_raw_mirrors_dim8_raw(x):
    assert brighten8_raw(x) == 255 - dim8_raw(255 - x)
    assert brighten8_raw(x) >= x


@given(u8)
def test_brighten8_video_mirrors_dim8_video(x):
    assert brighten8_video(x) == 255 - dim8_video(255 - x)


@given(u8)
def test_brighten8_lin_mirrors_dim8_lin(x):
    assert brighten8_lin(x) == 255 - dim8_lin(255 - x)
    assert brighten8_lin(x) >= x


@pytest.mark.parametrize("args", [(256, 1), (-1, 1), (1, 256), (1, -1)])
def test_scale8_rejects_out_of_range(args):
    with pytest.raises(ValueError):
        scale8(*args)


def test_scale16_rejects_out_of_range():
    with pytest.raises(ValueError):
        scale16(65536, 1)
    with pytest.raises(ValueError):
        scale16by8(1, 256)


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        scale8(1.5, 10)
    with pytest.raises(TypeError):
        dim8_raw("10")