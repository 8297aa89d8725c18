"""
Geometry helpers for the cell grid.

Small, state-free functions shared by the simulation step and the
compositor: footprint lookup with a 1x1 fallback, saturating subtraction,
floor projection and off-grid tests on horizontal extents.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple


def saturating_sub(a: int, b: int) -> int:
    """a - b floored at zero (unsigned-style dimension arithmetic)"""
    return a - b if a > b else 0


def floor_cell(value: float) -> int:
    """Project a fractional coordinate onto its cell index"""
    return int(math.floor(value))


def footprint(assets: Sequence, art_index: int) -> Tuple[int, int]:
    """
    Measured (width, height) of an asset, or (1, 1) for a bad index.

    Negative indices are treated as bad rather than wrapping.
    """
    if 0 <= art_index < len(assets):
        art = assets[art_index]
        return art.width, art.height
    return 1, 1


def fully_left_of(x: float, width: float, edge: float = 0.0) -> bool:
    """True when the span [x, x + width) lies entirely left of edge"""
    return x + width <= edge


def fully_right_of(x: float, edge: float) -> bool:
    """True when a span starting at x lies entirely at or right of edge"""
    return x >= edge


def overlaps_span(x: float, width: float, grid_width: float) -> bool:
    """True when [x, x + width) intersects [0, grid_width)"""
    return not (fully_left_of(x, width) or fully_right_of(x, grid_width))


def exited_toward(x: float, width: float, vx: float, grid_width: float) -> bool:
    """
    True once a span has fully left the grid on the side it travels toward.

    vx >= 0 exits on the right, vx < 0 on the left.
    """
    if vx < 0:
        return fully_left_of(x, width)
    return fully_right_of(x, grid_width)


def clamp_reflect(pos: float, vel: float, size: float, limit: float) -> Tuple[float, float, int]:
    """
    Clamp a span [pos, pos + size) into [0, limit) and reflect its velocity.

    Args:
        pos: Leading coordinate (x or y)
        vel: Velocity along the same axis
        size: Extent along the axis
        limit: Grid extent along the axis

    Returns:
        (pos, vel, side) where side is -1 for a low-edge bounce,
        +1 for a high-edge bounce and 0 for no bounce
    """
    if pos < 0.0:
        return 0.0, abs(vel), -1
    if pos + size > limit:
        return float(max(limit - size, 0.0)), -abs(vel), 1
    return pos, vel, 0
