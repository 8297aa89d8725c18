"""
Entity runtime representation.

Fish, bubbles, seaweed stalks and the single-slot creatures (ships,
sharks, whales). Positions are top-left corners in cell coordinates;
fractional positions are projected to whole cells with floor() when drawn.
"""

import numpy as np
from dataclasses import dataclass
from enum import Enum


def _as_vec2(value) -> np.ndarray:
    """Copy a pair into its own float64 array of shape (2,)"""
    return np.array(value, dtype=np.float64)


class FishBehavior(Enum):
    """
    Fish lifecycle.

    NORMAL fish bounce at the walls and live forever; TRANSIT fish cross
    the grid once and are removed after leaving it.
    """
    NORMAL = "normal"
    TRANSIT = "transit"


@dataclass
class FishInstance:
    """
    A single moving fish.

    Attributes:
        art_index: Index into the asset table (may be out of range)
        position: Top-left [x, y] in cells, float64
        velocity: [vx, vy] in cells/tick at 1x speed, float64
        entering: True for a school fish that has not yet overlapped the grid
    """
    art_index: int
    position: np.ndarray
    velocity: np.ndarray
    entering: bool = False

    def __post_init__(self):
        """Ensure position and velocity are float64 arrays"""
        self.position = _as_vec2(self.position)
        self.velocity = _as_vec2(self.velocity)

    def to_dict(self) -> dict:
        return {
            'art_index': self.art_index,
            'position': self.position.tolist(),
            'velocity': self.velocity.tolist(),
            'entering': self.entering,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'FishInstance':
        return cls(
            art_index=data['art_index'],
            position=data['position'],
            velocity=data['velocity'],
            entering=data.get('entering', False)
        )


@dataclass
class Bubble:
    """Bubble rising from a fish mouth; culled once above row 0"""
    position: np.ndarray
    velocity: np.ndarray

    def __post_init__(self):
        self.position = _as_vec2(self.position)
        self.velocity = _as_vec2(self.velocity)

    def update_position(self, dt: float):
        """
        Update position using current velocity.

        Args:
            dt: Logical seconds per tick
        """
        self.position += self.velocity * dt

    def to_dict(self) -> dict:
        return {
            'position': self.position.tolist(),
            'velocity': self.velocity.tolist(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Bubble':
        return cls(position=data['position'], velocity=data['velocity'])


@dataclass(frozen=True)
class Seaweed:
    """
    One seaweed stalk, bottom-anchored.

    Attributes:
        x: Column of the stalk
        height: Stalk height in cells
        sway_phase: Per-stalk offset so stalks do not sway in unison
    """
    x: int
    height: int
    sway_phase: int

    def to_dict(self) -> dict:
        return {'x': self.x, 'height': self.height, 'sway_phase': self.sway_phase}


@dataclass
class Creature:
    """
    Ship, shark or whale. y is fixed for the lifetime of a spawn.

    Attributes:
        x: Left edge column (fractional)
        y: Top row
        vx: Horizontal speed in cells per logical second
    """
    x: float
    y: int
    vx: float

    def update_position(self, dt: float):
        self.x += self.vx * dt

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'vx': self.vx}

    @classmethod
    def from_dict(cls, data: dict) -> 'Creature':
        return cls(x=data['x'], y=data['y'], vx=data['vx'])
