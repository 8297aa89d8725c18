"""
Layered compositor.

Projects an AquariumState onto a character buffer through ordered draw
passes. Each pass overdraws earlier ones; spaces are transparent. All
positions are floored to cells and anything outside the grid is clipped.

Pass order:
    1. waterlines   4. seaweed            7. bubbles
    2. ships        5. whales and sharks
    3. castle       6. fish
"""

from typing import Iterable, Sequence

import numpy as np

from .art import (
    WATERLINES,
    CASTLE,
    WHALE_SPOUT,
    WHALE_SPOUT_ALIGN,
    creature_art,
)
from .assets import measure_art
from .data_types import AquariumState
from .facing import needs_mirror, mirror_art
from .geometry import floor_cell, saturating_sub
from .constants import (
    WATERLINE_TOP_ROW,
    WATER_WAVE_PERIOD,
    WATER_WAVE_STEP,
    BOB_PERIOD_TICKS,
    SPOUT_FRAME_TICKS,
    SEAWEED_SWAY_DIVISOR,
    BUBBLE_GLYPH,
)

BLANK = ' '

# Vertical waterline offset for each run of WATER_WAVE_STEP columns
WAVE_PROFILE = (0, 1, 2, 1)


def new_buffer(width: int, height: int) -> np.ndarray:
    """Blank (height, width) character buffer"""
    return np.full((height, width), BLANK, dtype='<U1')


def buffer_to_string(grid: np.ndarray) -> str:
    """Join buffer rows with newlines (no trailing newline)"""
    return "\n".join("".join(row) for row in grid)


def put(grid: np.ndarray, x: int, y: int, ch: str):
    """Write one glyph, ignoring blanks and out-of-bounds cells"""
    h, w = grid.shape
    if ch != BLANK and 0 <= y < h and 0 <= x < w:
        grid[y, x] = ch


def blit(grid: np.ndarray, lines: Iterable[str], x0: int, y0: int):
    """Draw lines of text with their top-left corner at (x0, y0)"""
    h, w = grid.shape
    for dy, line in enumerate(lines):
        y = y0 + dy
        if y < 0 or y >= h:
            continue
        for dx, ch in enumerate(line):
            x = x0 + dx
            if ch != BLANK and 0 <= x < w:
                grid[y, x] = ch


def wave_offset(water_phase: int, column: int) -> int:
    """Triangular-wave row offset (0, 1, 2, 1 in runs) for a column"""
    k = (water_phase + column) % WATER_WAVE_PERIOD
    return WAVE_PROFILE[(k // WATER_WAVE_STEP) % len(WAVE_PROFILE)]


def bob_offset(tick: int, x: float) -> int:
    """0 or 1 cell vertical bob from tick and column parity"""
    return ((tick // BOB_PERIOD_TICKS) + floor_cell(x)) & 1


# ============================================================================
# Draw Passes
# ============================================================================

def draw_waterlines(grid: np.ndarray, water_phase: int):
    _, w = grid.shape
    for col in range(w):
        wave = wave_offset(water_phase, col)
        for row, pattern in enumerate(WATERLINES):
            ch = pattern[(col + water_phase) % len(pattern)]
            put(grid, col, WATERLINE_TOP_ROW + row + wave, ch)


def draw_creatures(grid: np.ndarray, creatures, species: str, tick: int):
    for creature in creatures:
        text = creature_art(species, creature.vx)
        y = creature.y + bob_offset(tick, creature.x)
        blit(grid, text.splitlines(), floor_cell(creature.x), y)


def draw_castle(grid: np.ndarray):
    """Castle anchored bottom-right; pinned to 0 when the grid is smaller"""
    h, w = grid.shape
    cw, ch = measure_art(CASTLE)
    blit(grid, CASTLE.splitlines(), saturating_sub(w, cw), saturating_sub(h, ch))


def draw_seaweed(grid: np.ndarray, stalks, water_phase: int):
    """
    Bottom-anchored stalks of alternating '(' / ')' glyphs.

    Each stalk sways one cell left/right on a 3-step cycle of the water
    phase offset by its own sway_phase. Stalks whose phase is a multiple
    of three also draw a mirrored second column alongside.
    """
    h, _ = grid.shape
    for stalk in stalks:
        cycle = (water_phase // SEAWEED_SWAY_DIVISOR + stalk.sway_phase) % 3
        col = stalk.x + cycle - 1
        top = h - stalk.height
        for i in range(stalk.height):
            left = (i + cycle) % 2 == 0
            put(grid, col, top + i, '(' if left else ')')
            if stalk.sway_phase % 3 == 0:
                put(grid, col + 1, top + i, ')' if left else '(')


def draw_whales(grid: np.ndarray, whales, tick: int):
    frame = WHALE_SPOUT[(tick // SPOUT_FRAME_TICKS) % len(WHALE_SPOUT)]
    for whale in whales:
        x = floor_cell(whale.x)
        y = whale.y + bob_offset(tick, whale.x)
        align = WHALE_SPOUT_ALIGN[0] if whale.vx >= 0 else WHALE_SPOUT_ALIGN[1]
        blit(grid, frame, x + align, y - len(frame))
        blit(grid, creature_art('whale', whale.vx).splitlines(), x, y)


def draw_fish(grid: np.ndarray, fishes, assets: Sequence):
    """Fish at floored positions, mirrored to face their direction of travel"""
    for fish in fishes:
        if not 0 <= fish.art_index < len(assets):
            continue
        art = assets[fish.art_index]
        if needs_mirror(art.art, float(fish.velocity[0])):
            lines = mirror_art(art.art, art.width)
        else:
            lines = art.lines
        blit(grid, lines, floor_cell(fish.position[0]), floor_cell(fish.position[1]))


def draw_bubbles(grid: np.ndarray, bubbles):
    for bubble in bubbles:
        put(grid, floor_cell(bubble.position[0]), floor_cell(bubble.position[1]), BUBBLE_GLYPH)


def render_aquarium_to_string(state: AquariumState, assets: Sequence) -> str:
    """
    Render the aquarium into newline-joined text.

    Pure with respect to state: calling it twice without a tick in between
    returns the same string.

    Args:
        state: Aquarium state (read only)
        assets: Asset table; fish with out-of-range indices are skipped

    Returns:
        width x height characters in height rows, or "" for an empty grid
    """
    w, h = state.width, state.height
    if w == 0 or h == 0:
        return ""

    env = state.environment
    grid = new_buffer(w, h)

    draw_waterlines(grid, env.water_phase)
    draw_creatures(grid, env.ships, 'ship', state.tick)
    if env.castle_enabled:
        draw_castle(grid)
    draw_seaweed(grid, env.seaweed, env.water_phase)
    draw_whales(grid, env.whales, state.tick)
    draw_creatures(grid, env.sharks, 'shark', state.tick)
    draw_fish(grid, state.fishes, assets)
    draw_bubbles(grid, state.bubbles)

    return buffer_to_string(grid)
