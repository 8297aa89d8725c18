"""
Tests for the layered compositor.

Covers frame shape, clipping, pass order, fish mirroring, and the static
environment layers (waterlines, castle, seaweed, ships, whales).
"""

import pytest

from asciiquarium.art import CASTLE
from asciiquarium.assets import FishArt, FISH_02, measure_art
from asciiquarium.data_types import AquariumState
from asciiquarium.entity import FishInstance, Bubble, Seaweed, Creature
from asciiquarium.render import render_aquarium_to_string, wave_offset, bob_offset
from asciiquarium.simulation import AquariumSimulation

ARROW = FishArt.from_text("><>")


def bare_state(size):
    """No castle, no seaweed, no creatures"""
    state = AquariumState(size=size)
    state.environment.castle_enabled = False
    return state


def rows_of(state, assets=()):
    return render_aquarium_to_string(state, list(assets)).split("\n")


# ============================================================================
# Frame shape
# ============================================================================

def test_empty_grid_renders_empty_string():
    for size in [(0, 5), (5, 0), (0, 0)]:
        assert render_aquarium_to_string(AquariumState(size=size), [ARROW]) == ""


def test_frame_dimensions():
    sim = AquariumSimulation(size=(50, 18), seed=5)
    for _ in range(30):
        sim.tick()
    text = sim.render()

    assert not text.endswith("\n")
    rows = text.split("\n")
    assert len(rows) == 18
    assert all(len(row) == 50 for row in rows)


def test_render_is_pure():
    sim = AquariumSimulation(size=(60, 20), seed=11)
    for _ in range(200):
        sim.tick()
    before = sim.state.to_dict()

    assert sim.render() == sim.render()
    assert sim.state.to_dict() == before


# ============================================================================
# Clipping and pass order
# ============================================================================

def test_fish_clipped_at_right_edge():
    state = bare_state((4, 1))
    state.fishes.append(FishInstance(art_index=0, position=(2.0, 0.0), velocity=(0.1, 0.0)))
    assert rows_of(state, [ARROW]) == ["  ><"]


def test_fish_clipped_at_left_edge():
    state = bare_state((4, 1))
    state.fishes.append(FishInstance(art_index=0, position=(-1.0, 0.0), velocity=(0.1, 0.0)))
    assert rows_of(state, [ARROW]) == ["<>  "]


def test_two_wide_fish_left_clipped():
    state = bare_state((4, 1))
    state.fishes.append(FishInstance(art_index=0, position=(-1.0, 0.0), velocity=(0.0, 0.0)))
    text = render_aquarium_to_string(state, [FishArt.from_text("<>")])

    assert len(text) == 4
    assert text == ">   "


def test_small_grid_keeps_frame_size():
    state = bare_state((4, 1))
    state.fishes.append(FishInstance(art_index=0, position=(0.0, 0.0), velocity=(0.1, 0.0)))
    text = render_aquarium_to_string(state, [FishArt.from_text("><>======")])

    assert text.startswith(">")
    assert len(text) == 4


def test_positions_floored():
    state = bare_state((6, 2))
    state.fishes.append(FishInstance(art_index=0, position=(1.9, 1.7), velocity=(0.1, 0.0)))
    assert rows_of(state, [ARROW]) == ["      ", " ><>  "]


def test_bad_art_index_not_drawn():
    state = bare_state((6, 2))
    state.fishes.append(FishInstance(art_index=3, position=(1.0, 0.0), velocity=(0.1, 0.0)))
    state.fishes.append(FishInstance(art_index=-1, position=(1.0, 1.0), velocity=(0.1, 0.0)))
    assert rows_of(state, [ARROW]) == ["      ", "      "]


def test_bubble_drawn_over_fish():
    state = bare_state((4, 1))
    state.fishes.append(FishInstance(art_index=0, position=(0.0, 0.0), velocity=(0.1, 0.0)))
    state.bubbles.append(Bubble(position=(1.4, 0.2), velocity=(0.0, -3.0)))
    assert rows_of(state, [ARROW]) == [">.> "]


def test_spaces_are_transparent():
    gappy = FishArt.from_text("> >")
    state = bare_state((3, 6))
    # Row 5 is the top waterline; the gap in the fish lets it show through
    state.fishes.append(FishInstance(art_index=0, position=(0.0, 5.0), velocity=(0.1, 0.0)))
    assert rows_of(state, [gappy])[5] == ">~>"


# ============================================================================
# Mirroring
# ============================================================================

def test_fish_mirrored_when_moving_against_facing():
    state = bare_state((10, 1))
    state.fishes.append(FishInstance(art_index=0, position=(0.0, 0.0), velocity=(-0.3, 0.0)))
    assert rows_of(state, [FishArt.from_text(FISH_02)]) == ["<º)))><   "]


def test_fish_drawn_as_authored_when_facing_matches():
    state = bare_state((10, 1))
    state.fishes.append(FishInstance(art_index=0, position=(0.0, 0.0), velocity=(0.3, 0.0)))
    assert rows_of(state, [FishArt.from_text(FISH_02)]) == ["><(((º>   "]


# ============================================================================
# Environment
# ============================================================================

def test_wave_profile():
    assert [wave_offset(0, c) for c in (0, 5, 6, 12, 18, 24)] == [0, 0, 1, 2, 1, 0]
    # Phase shifts the wave sideways
    assert wave_offset(6, 0) == wave_offset(0, 6)


def test_waterlines_follow_wave():
    rows = rows_of(bare_state((40, 12)))

    assert rows[5][0] == '~'
    assert rows[6][0] == '^'
    # Column 6 is one row lower, column 12 two rows lower
    assert rows[5][6] == ' '
    assert rows[6][6] == '~'
    assert rows[7][12] == '~'
    assert all(row.strip() == "" for row in rows[:5])


def test_castle_anchored_bottom_right():
    state = AquariumState(size=(40, 15))
    rows = rows_of(state)
    cw, ch = measure_art(CASTLE)
    castle_lines = CASTLE.splitlines()

    assert rows[-1] == " " * (40 - cw) + castle_lines[-1].ljust(cw)
    assert rows[15 - ch].rstrip().endswith("T~~")


def test_castle_disabled():
    rows = rows_of(bare_state((40, 15)))
    assert rows[-1].strip() == ""


def test_seaweed_single_column():
    state = bare_state((10, 6))
    state.environment.seaweed.append(Seaweed(x=5, height=3, sway_phase=1))
    rows = rows_of(state)

    assert [rows[r][5] for r in (3, 4, 5)] == [')', '(', ')']
    assert rows[2][5] == ' '


def test_seaweed_double_column():
    state = bare_state((10, 6))
    state.environment.seaweed.append(Seaweed(x=5, height=2, sway_phase=0))
    rows = rows_of(state)

    assert rows[4][4:6] == "()"
    assert rows[5][4:6] == ")("


def test_seaweed_sways_with_water_phase():
    state = bare_state((10, 4))
    state.environment.seaweed.append(Seaweed(x=5, height=1, sway_phase=1))
    columns = []
    for phase in (0, 4, 8):
        state.environment.water_phase = phase
        row = rows_of(state)[3]
        columns.append(len(row) - len(row.lstrip()))
    assert columns == [5, 6, 4]


def test_ship_bobs_on_column_parity():
    assert bob_offset(0, 3.0) == 1
    assert bob_offset(8, 3.0) == 0
    assert bob_offset(0, 2.9) == 0

    state = bare_state((40, 12))
    state.environment.ships.append(Creature(x=3.0, y=0, vx=6.0))
    rows = rows_of(state)

    assert rows[0].strip() == ""
    assert rows[1][8] == '|'


def test_whale_with_spout():
    state = bare_state((60, 20))
    state.environment.whales.append(Creature(x=10.0, y=8, vx=4.5))
    rows = rows_of(state)

    assert rows[7][24] == ':'
    assert rows[10][23:26] == "(o)"


def test_shark_drawn_over_whale():
    state = bare_state((80, 24))
    state.environment.whales.append(Creature(x=0.0, y=12, vx=4.5))
    state.environment.sharks.append(Creature(x=0.0, y=12, vx=9.0))
    rows = rows_of(state)
    # Shark tail over the whale's bottom line; the gap at col 2 shows the whale
    assert rows[15][:5] == ";'.`."


@pytest.mark.parametrize("tick", [0, 12, 24, 36, 48, 60, 72])
def test_spout_frames_stay_above_whale(tick):
    state = bare_state((60, 20))
    state.tick = tick
    state.environment.whales.append(Creature(x=11.0, y=8, vx=-4.5))
    rows = rows_of(state)
    assert all(row.strip() == "" for row in rows[:4])


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
