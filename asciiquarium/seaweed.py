"""
Seeded seaweed placement.

Stalk layout is a pure function of the grid size: the same (width, height)
always yields the same stalk count, columns, heights, sway phases and
order. No call-time entropy is involved.
"""

from typing import List

from .entity import Seaweed
from .rng import LcgRng
from .constants import (
    SEAWEED_SEED,
    SEAWEED_COLUMNS_PER_STALK,
    SEAWEED_MIN_HEIGHT,
    SEAWEED_MAX_HEIGHT,
    SEAWEED_MAX_PHASE,
    SEAWEED_PLACEMENT_RETRIES,
)


def seaweed_seed(width: int, height: int) -> int:
    """Fixed seed constant XOR'd with the grid dimensions"""
    return SEAWEED_SEED ^ width ^ (height << 32)


def target_seaweed_count(width: int, height: int) -> int:
    """
    Number of stalks a grid of this size should hold.

    Zero for grids too narrow to fit a stalk column in [1, width - 2]
    or with no rows at all.
    """
    if width < 3 or height <= 0:
        return 0
    return width // SEAWEED_COLUMNS_PER_STALK


def generate_seaweed(width: int, height: int) -> List[Seaweed]:
    """
    Generate the stalk layout for a grid.

    Columns are drawn from [1, width - 2]; a duplicate column is redrawn up
    to SEAWEED_PLACEMENT_RETRIES times and then accepted as is.

    Args:
        width: Grid width in cells
        height: Grid height in cells

    Returns:
        Stalks sorted by column (stable left-to-right draw order)
    """
    count = target_seaweed_count(width, height)
    if count == 0:
        return []

    rng = LcgRng(seaweed_seed(width, height))
    used = set()
    stalks = []

    for _ in range(count):
        x = rng.range(1, width - 2)
        retries = 0
        while x in used and retries < SEAWEED_PLACEMENT_RETRIES:
            x = rng.range(1, width - 2)
            retries += 1
        used.add(x)

        stalk_height = rng.range(SEAWEED_MIN_HEIGHT, SEAWEED_MAX_HEIGHT)
        sway_phase = rng.range(0, SEAWEED_MAX_PHASE)
        stalks.append(Seaweed(x=x, height=stalk_height, sway_phase=sway_phase))

    stalks.sort(key=lambda s: s.x)
    return stalks


def sync_seaweed(environment, width: int, height: int) -> bool:
    """
    Regenerate seaweed when the held count no longer matches the grid.

    Returns:
        True if the stalk list was regenerated
    """
    if len(environment.seaweed) == target_seaweed_count(width, height):
        return False
    environment.seaweed = generate_seaweed(width, height)
    return True
