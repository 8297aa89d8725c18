"""
Deterministic RNG utilities for the aquarium engine.

Two families live here:

- Integer mixers (mix64, LcgRng) used by the simulation step and seaweed
  placement. They are pure integer arithmetic with no hidden state, so a
  given (grid size, tick, index) always yields the same value.
- Seed derivation (make_seed) plus numpy.random.Generator(PCG64) helpers
  used by caller-side seeding of initial fish. These are never called from
  update_aquarium or the renderer.
"""

import hashlib
import numpy as np
from typing import Any

MASK64 = 0xFFFFFFFFFFFFFFFF

LCG_MULTIPLIER = 6364136223846793005
LCG_INCREMENT = 1442695040888963407


def splitmix64(value: int) -> int:
    """Apply the splitmix64 finaliser to a 64-bit integer."""
    z = (value + 0x9E3779B97F4A7C15) & MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)


def mix64(*values: int) -> int:
    """
    Fold integer components into one well-mixed 64-bit value.

    Args:
        *values: Integer components (tick, art index, side tag, ...)

    Returns:
        64-bit unsigned integer

    Example:
        jitter_bits = mix64(tick, fish.art_index, 0)
    """
    h = 0
    for v in values:
        h = splitmix64(h ^ (int(v) & MASK64))
    return h


def unit_interval(*values: int) -> float:
    """Map mixed components to a float in [0.0, 1.0)."""
    return (mix64(*values) >> 11) / float(1 << 53)


def chance_percent(percent: int, *values: int) -> bool:
    """Deterministic Bernoulli draw: True for `percent` out of 100 inputs."""
    return mix64(*values) % 100 < percent


class LcgRng:
    """
    64-bit linear-congruential generator.

    Used for seaweed placement where a short reproducible sequence of draws
    is needed from a single seed.
    """

    def __init__(self, seed: int):
        self.state = int(seed) & MASK64

    def next_u32(self) -> int:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) & MASK64
        return self.state >> 32

    def range(self, lo: int, hi: int) -> int:
        """Draw an integer in [lo, hi] (inclusive). Returns lo when hi < lo."""
        if hi <= lo:
            return lo
        return lo + self.next_u32() % (hi - lo + 1)


def make_seed(*components: Any) -> int:
    """
    Generate deterministic 64-bit seed from hierarchical components.

    Uses SHA256 to hash components into stable seed value.

    Args:
        *components: Seed components (run seed, fish index, etc.)

    Returns:
        64-bit integer seed for numpy RNG

    Example:
        fish_seed = make_seed(run_seed, "fish", index)
        velocity_seed = make_seed(fish_seed, "initial_velocity")
    """
    # Join all components with colon separator
    hash_input = ":".join(str(c) for c in components)

    # SHA256 hash and extract 64-bit integer
    hash_bytes = hashlib.sha256(hash_input.encode('utf-8')).digest()
    seed = int.from_bytes(hash_bytes[:8], byteorder='big')

    return seed


def random_index(seed: int, count: int) -> int:
    """Random integer in [0, count). Returns 0 when count <= 0."""
    if count <= 0:
        return 0
    rng = np.random.Generator(np.random.PCG64(seed))
    return int(rng.integers(0, count))


def random_cell(seed: int, width: int, height: int) -> np.ndarray:
    """
    Random whole-cell position inside a grid.

    Args:
        seed: RNG seed
        width: Grid width in cells
        height: Grid height in cells

    Returns:
        Position [x, y] as float64 array; [0, 0] for an empty grid
    """
    rng = np.random.Generator(np.random.PCG64(seed))
    x = rng.integers(0, max(width, 1))
    y = rng.integers(0, max(height, 1))
    return np.array([x, y], dtype=np.float64)


def random_drift_velocity(
    seed: int,
    max_vx: float,
    max_vy: float,
    min_vx: float,
    min_vy: float
) -> np.ndarray:
    """
    Random drift velocity with a minimum magnitude per axis.

    Components are drawn uniformly from [-max, max]; any component smaller
    than its minimum is pushed out to the minimum, keeping its sign.

    Returns:
        Velocity [vx, vy] as float64 array (cells/tick)
    """
    rng = np.random.Generator(np.random.PCG64(seed))
    vx, vy = rng.uniform(-max_vx, max_vx), rng.uniform(-max_vy, max_vy)
    vx = _push_out(vx, min_vx)
    vy = _push_out(vy, min_vy)
    return np.array([vx, vy], dtype=np.float64)


def _push_out(value: float, minimum: float) -> float:
    if abs(value) >= minimum:
        return float(value)
    return -minimum if value < 0 else minimum


def signed_jitter(amplitude: float, *values: int) -> float:
    """Deterministic offset in [-amplitude, +amplitude]."""
    return (unit_interval(*values) * 2.0 - 1.0) * amplitude

