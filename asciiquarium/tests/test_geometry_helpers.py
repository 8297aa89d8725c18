from asciiquarium.assets import FishArt
from asciiquarium.geometry import (
    saturating_sub,
    floor_cell,
    footprint,
    fully_left_of,
    fully_right_of,
    overlaps_span,
    exited_toward,
    clamp_reflect,
)


def test_saturating_sub():
    assert saturating_sub(10, 3) == 7
    assert saturating_sub(3, 10) == 0
    assert saturating_sub(4, 4) == 0


def test_floor_cell_negative():
    assert floor_cell(2.9) == 2
    assert floor_cell(-0.1) == -1
    assert floor_cell(-1.0) == -1


def test_footprint_fallback():
    assets = [FishArt.from_text("<><\n>")]
    assert footprint(assets, 0) == (3, 2)
    assert footprint(assets, 1) == (1, 1)
    assert footprint(assets, -1) == (1, 1)
    assert footprint([], 0) == (1, 1)


def test_span_edges():
    # Touching the edge counts as outside
    assert fully_left_of(-3.0, 3)
    assert not fully_left_of(-2.9, 3)
    assert fully_right_of(20.0, 20.0)
    assert not fully_right_of(19.99, 20.0)

    assert overlaps_span(-2.5, 3, 20.0)
    assert overlaps_span(19.5, 3, 20.0)
    assert not overlaps_span(-3.0, 3, 20.0)


def test_exited_toward_direction():
    assert exited_toward(20.0, 3, 1.0, 20.0)
    assert not exited_toward(-5.0, 3, 1.0, 20.0)
    assert exited_toward(-5.0, 3, -1.0, 20.0)
    assert not exited_toward(25.0, 3, -1.0, 20.0)


def test_clamp_reflect_low_edge():
    pos, vel, side = clamp_reflect(-0.5, -1.0, 2, 10.0)
    assert (pos, vel, side) == (0.0, 1.0, -1)


def test_clamp_reflect_high_edge():
    pos, vel, side = clamp_reflect(8.5, 1.0, 2, 10.0)
    assert (pos, vel, side) == (8.0, -1.0, 1)


def test_clamp_reflect_inside():
    assert clamp_reflect(4.0, 0.3, 2, 10.0) == (4.0, 0.3, 0)


def test_clamp_reflect_oversized_art():
    # Art wider than the grid is pinned at 0
    pos, vel, side = clamp_reflect(1.0, 1.0, 12, 10.0)
    assert pos == 0.0
    assert vel == -1.0
    assert side == 1
