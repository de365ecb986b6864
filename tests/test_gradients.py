import pytest
from hypothesis import given
from hypothesis import strategies as st

from ledcolor8.colors import HSV, GradientDirection
from ledcolor8.gradients import fill_gradient, fill_gradient_colors

byte = st.integers(min_value=0, max_value=255)
nonzero = st.integers(min_value=1, max_value=255)
hsv_colors = st.builds(HSV, byte, nonzero, nonzero)


def test_start_entry_is_start_color_and_range_is_limited():
    targets = [None] * 10
    fill_gradient(targets, 2, HSV(10, 100, 200), 6, HSV(40, 200, 100))
    assert targets[2] == HSV(10, 100, 200)
    assert targets[:2] == [None, None]
    assert targets[7:] == [None, None, None]
    assert all(isinstance(t, HSV) for t in targets[2:7])


def test_swapped_positions_give_same_result():
    a = [None] * 8
    b = [None] * 8
    fill_gradient(a, 0, HSV(10, 50, 60), 7, HSV(90, 250, 255))
    fill_gradient(b, 7, HSV(90, 250, 255), 0, HSV(10, 50, 60))
    assert a == b


def test_input_colors_are_not_modified():
    start, end = HSV(30, 255, 255), HSV(200, 255, 0)
    fill_gradient([None] * 4, 0, start, 3, end)
    assert start == HSV(30, 255, 255)
    assert end == HSV(200, 255, 0)


def test_saturation_and_value_move_monotonically():
    targets = [None] * 16
    fill_gradient(targets, 0, HSV(0, 10, 250), 15, HSV(0, 240, 20))
    sats = [t.sat for t in targets]
    vals = [t.val for t in targets]
    assert sats == sorted(sats)
    assert vals == sorted(vals, reverse=True)


def test_forward_and_backward_hues():
    forward = [None] * 5
    backward = [None] * 5
    fill_gradient(forward, 0, HSV(0, 255, 255), 4, HSV(64, 255, 255),
                  GradientDirection.FORWARD_HUES)
    fill_gradient(backward, 0, HSV(0, 255, 255), 4, HSV(64, 255, 255),
                  GradientDirection.BACKWARD_HUES)
    hues = [t.hue for t in forward]
    assert hues == sorted(hues)
    assert hues[-1] <= 64
    assert backward[1].hue > 128


def test_shortest_and_longest_resolve_to_fixed_directions():
    def run(end_hue, direction):
        targets = [None] * 6
        fill_gradient(targets, 0, HSV(0, 255, 255), 5, HSV(end_hue, 255, 255), direction)
        return targets

    assert run(200, GradientDirection.SHORTEST_HUES) == run(200, GradientDirection.BACKWARD_HUES)
    assert run(50, GradientDirection.SHORTEST_HUES) == run(50, GradientDirection.FORWARD_HUES)
    assert run(50, GradientDirection.LONGEST_HUES) == run(50, GradientDirection.BACKWARD_HUES)
    assert run(200, GradientDirection.LONGEST_HUES) == run(200, GradientDirection.FORWARD_HUES)


def test_fading_to_black_keeps_start_hue():
    targets = [None] * 8
    fill_gradient(targets, 0, HSV(77, 255, 255), 7, HSV(200, 255, 0))
    assert {t.hue for t in targets} == {77}


@given(hsv_colors, hsv_colors, st.sampled_from(list(GradientDirection)))
def test_adjacent_positions_hit_both_endpoints(start, end, direction):
    targets = [None, None]
    fill_gradient(targets, 0, start, 1, end, direction)
    assert targets == [start, end]


def test_position_validation():
    with pytest.raises(ValueError):
        fill_gradient([None] * 3, -1, HSV(), 2, HSV())
    with pytest.raises(IndexError):
        fill_gradient([None] * 3, 0, HSV(), 5, HSV())
    with pytest.raises(TypeError):
        fill_gradient([None] * 3, 0, HSV(), 2, HSV(), "forward")


def test_two_color_fill_covers_everything():
    targets = [None] * 12
    fill_gradient_colors(targets, HSV(0, 255, 255), HSV(100, 255, 255))
    assert targets[0] == HSV(0, 255, 255)
    assert all(isinstance(t, HSV) for t in targets)


def test_three_color_fill_passes_through_middle():
    targets = [None] * 16
    c1, c2, c3 = HSV(0, 255, 255), HSV(80, 200, 200), HSV(160, 255, 100)
    fill_gradient_colors(targets, c1, c2, c3)
    assert targets[0] == c1
    assert targets[8] == c2


def test_four_color_fill_passes_through_thirds():
    targets = [None] * 30
    c1, c2, c3, c4 = (HSV(0, 255, 255), HSV(40, 255, 255),
                      HSV(90, 255, 255), HSV(130, 255, 255))
    fill_gradient_colors(targets, c1, c2, c3, c4, direction=GradientDirection.FORWARD_HUES)
    assert targets[0] == c1
    assert targets[10] == c2
    assert targets[20] == c3


def test_fill_colors_errors():
    with pytest.raises(ValueError):
        fill_gradient_colors([None] * 4, HSV())
    with pytest.raises(ValueError):
        fill_gradient_colors([None] * 4, HSV(), HSV(), HSV(), HSV(), HSV())
    with pytest.raises(ValueError):
        fill_gradient_colors([], HSV(), HSV())