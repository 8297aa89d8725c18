"""
Aquarium simulation kernel.

update_aquarium() advances an AquariumState by one tick in place. It is a
total function: bad art indices fall back to a 1x1 footprint, zero-sized
grids simply hold no seaweed, and nothing here performs I/O.

AquariumSimulation is a thin driver that owns a state, an asset table and
a config, and adds tick timing, snapshots and console summaries.
"""

import os
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .assets import get_fish_assets
from .art import creature_size
from .entity import FishBehavior, Bubble
from .data_types import AquariumState, SimulationConfig, DEFAULT_CONFIG, SPECIES
from .geometry import footprint, clamp_reflect, overlaps_span, exited_toward
from .rng import signed_jitter, chance_percent
from .seaweed import sync_seaweed
from .spawning import spawn_creatures, maybe_spawn_school, seed_fish
from .render import render_aquarium_to_string
from .constants import (
    TICK_MASK,
    WATER_PHASE_MASK,
    TICK_TIME_WINDOW,
    DEFAULT_FISH_COUNT,
)

# Bounce side tags mixed into the orthogonal-flip hash
SIDE_LEFT = 0
SIDE_RIGHT = 1
SIDE_TOP = 2
SIDE_BOTTOM = 3


def update_aquarium(
    state: AquariumState,
    assets: Sequence,
    config: Optional[SimulationConfig] = None
):
    """
    Advance the aquarium by one tick.

    Order of operations:
        1. Seaweed sync with the current grid size
        2. Behavior list padded/truncated to the fish list
        3. Ship, shark and whale spawn checks
        4. School spawn check
        5. Fish integration (jitter, wall bounce or transit culling)
        6. Bubble emission
        7. Bubble integration and culling
        8. Creature movement and despawn (cooldown scheduling)
        9. Water phase and tick counter advance

    Args:
        state: Aquarium state, mutated in place
        assets: Read-only asset table
        config: Tuning constants (defaults from constants.py)
    """
    config = config or DEFAULT_CONFIG
    env = state.environment

    sync_seaweed(env, state.width, state.height)
    state.sync_behaviors()

    spawn_creatures(state, config)
    maybe_spawn_school(state, assets, config)

    _integrate_fish(state, assets, config)
    _emit_bubbles(state, assets, config)
    _integrate_bubbles(state, config)
    _advance_creatures(state, config)

    if state.tick % max(config.water_phase_divisor, 1) == 0:
        env.water_phase = (env.water_phase + 1) & WATER_PHASE_MASK
    state.tick = (state.tick + 1) & TICK_MASK


def _integrate_fish(state: AquariumState, assets: Sequence, config: SimulationConfig):
    """Move every fish, then bounce NORMAL fish and cull departed TRANSIT fish"""
    scale = config.tick_delta_seconds * config.fish_speed_multiplier
    amplitude = config.fish_jitter_cells
    grid_w, grid_h = float(state.width), float(state.height)
    tick = state.tick

    kept_fishes = []
    kept_behaviors = []

    for fish, behavior in zip(state.fishes, state.fish_behaviors):
        fw, fh = footprint(assets, fish.art_index)
        x_before = float(fish.position[0])

        fish.position += fish.velocity * scale
        # Jitter perturbs position only; velocity is left untouched
        fish.position[0] += signed_jitter(amplitude, tick, fish.art_index, 0)
        fish.position[1] += signed_jitter(amplitude, tick, fish.art_index, 1)

        if behavior is FishBehavior.TRANSIT:
            if _transit_departed(fish, x_before, fw, grid_w):
                continue
        else:
            _bounce(fish, fw, fh, grid_w, grid_h, tick, config.bounce_flip_percent)

        kept_fishes.append(fish)
        kept_behaviors.append(behavior)

    state.fishes[:] = kept_fishes
    state.fish_behaviors[:] = kept_behaviors


def _transit_departed(fish, x_before: float, fw: int, grid_w: float) -> bool:
    """
    True when a TRANSIT fish should be removed.

    A fish that has been on the grid is removed if its box lay fully
    outside either horizontal edge before the move or does after it. A
    school fish still entering is kept while it approaches and removed
    only if it is outside and moving away (or not moving at all).
    """
    x, vx = float(fish.position[0]), float(fish.velocity[0])

    if fish.entering:
        if overlaps_span(x, fw, grid_w):
            fish.entering = False
            return False
        if vx == 0.0:
            return True
        return exited_toward(x, fw, vx, grid_w)

    return not (overlaps_span(x_before, fw, grid_w) and overlaps_span(x, fw, grid_w))


def _bounce(fish, fw: int, fh: int, grid_w: float, grid_h: float, tick: int, flip_percent: int):
    """
    Clamp a NORMAL fish inside the grid and reflect its velocity.

    x is resolved before y. A bounce on one axis may also flip the other
    axis' velocity (deterministic chance per tick, art index and side),
    but never an axis that itself bounced this tick.
    """
    x, vx, side_x = clamp_reflect(float(fish.position[0]), float(fish.velocity[0]), fw, grid_w)
    y, vy, side_y = clamp_reflect(float(fish.position[1]), float(fish.velocity[1]), fh, grid_h)

    if side_x and not side_y:
        tag = SIDE_LEFT if side_x < 0 else SIDE_RIGHT
        if chance_percent(flip_percent, tick, fish.art_index, tag):
            vy = -vy

    if side_y and not side_x:
        tag = SIDE_TOP if side_y < 0 else SIDE_BOTTOM
        if chance_percent(flip_percent, tick, fish.art_index, tag):
            vx = -vx

    fish.position[0], fish.position[1] = x, y
    fish.velocity[0], fish.velocity[1] = vx, vy


def _emit_bubbles(state: AquariumState, assets: Sequence, config: SimulationConfig):
    """
    Emit one bubble per fish whose staggered period comes due this tick.

    Fish i emits when (tick + i * stagger) % period == 0. The bubble starts
    at the mouth: just past the right edge when moving right, one cell left
    of the art otherwise, at mid-height of the footprint.
    """
    period = max(config.bubble_period_ticks, 1)
    rise = (0.0, -config.bubble_rise_speed)

    for i, fish in enumerate(state.fishes):
        if (state.tick + i * config.bubble_stagger_ticks) % period != 0:
            continue

        fw, fh = footprint(assets, fish.art_index)
        x, y = float(fish.position[0]), float(fish.position[1])
        mouth_x = x + fw if fish.velocity[0] > 0 else x - 1.0
        state.bubbles.append(Bubble(position=(mouth_x, y + fh // 2), velocity=rise))


def _integrate_bubbles(state: AquariumState, config: SimulationConfig):
    """Move bubbles and keep those still at or below row 0 (y >= 0)"""
    for bubble in state.bubbles:
        bubble.update_position(config.tick_delta_seconds)
    state.bubbles[:] = [b for b in state.bubbles if b.position[1] >= 0.0]


def _advance_creatures(state: AquariumState, config: SimulationConfig):
    """Move ships, sharks and whales; despawn and schedule cooldowns on exit"""
    env = state.environment
    grid_w = float(state.width)

    for species in SPECIES:
        slot = env.creatures(species)
        if not slot:
            continue

        art_width, _ = creature_size(species)
        kept = []
        for creature in slot:
            creature.update_position(config.tick_delta_seconds)
            if exited_toward(creature.x, art_width, creature.vx, grid_w):
                cooldown = config.species_cooldown(species)
                env.set_next_spawn_tick(species, (state.tick + cooldown) & TICK_MASK)
            else:
                kept.append(creature)
        slot[:] = kept


class AquariumSimulation:
    """
    Driver for one aquarium.

    Owns the state, asset table and config; ticks, renders, and keeps a
    rolling window of tick times for lightweight monitoring.
    """

    def __init__(
        self,
        size: Tuple[int, int] = (80, 24),
        assets: Optional[Sequence] = None,
        config: Optional[SimulationConfig] = None,
        fish_count: int = DEFAULT_FISH_COUNT,
        seed: int = 0,
        castle: bool = True
    ):
        """
        Initialize an aquarium.

        Args:
            size: Grid (width, height) in cells
            assets: Asset table (defaults to the curated fish set)
            config: Tuning constants (defaults from constants.py)
            fish_count: NORMAL fish to seed
            seed: Run seed for initial fish placement
            castle: Draw the castle
        """
        self.assets: List = list(assets) if assets is not None else get_fish_assets()
        self.config: SimulationConfig = config or SimulationConfig()
        self.seed = seed

        self.state = AquariumState(size=(int(size[0]), int(size[1])))
        self.state.environment.castle_enabled = castle
        sync_seaweed(self.state.environment, self.state.width, self.state.height)

        seeded = seed_fish(self.state, self.assets, fish_count, seed)
        if not self.assets and fish_count > 0:
            print("[WARN] Asset table is empty, no fish seeded")

        # Performance metrics
        self._tick_times: List[float] = []
        self._tick_time_sum: float = 0.0
        self._tick_time_window: int = TICK_TIME_WINDOW
        self._render_times: List[float] = []

        print(f"[OK] Aquarium initialized: {seeded} fish, "
              f"{len(self.state.environment.seaweed)} seaweed, "
              f"grid={self.state.width}x{self.state.height}, seed={seed}")

    @classmethod
    def from_config_file(cls, path: Path, schema_path: Optional[Path] = None, **kwargs) -> 'AquariumSimulation':
        """Build a simulation with tuning constants loaded from YAML"""
        from .loader import load_config

        print(f"Loading config from {path}...")
        return cls(config=load_config(path, schema_path), **kwargs)

    @property
    def tick_count(self) -> int:
        return self.state.tick

    def resize(self, width: int, height: int):
        """Change grid size; seaweed is regenerated on the next tick if needed"""
        self.state.size = (max(int(width), 0), max(int(height), 0))

    def tick(self):
        """Advance the aquarium by one tick, recording elapsed time"""
        start_time = time.perf_counter()

        update_aquarium(self.state, self.assets, self.config)

        self._record_tick_time(time.perf_counter() - start_time)

        # Debug invariant check (zero perf impact when env var not set)
        if os.getenv('ASCIIQUARIUM_DEBUG_INVARIANTS') == '1':
            assert len(self.state.fishes) == len(self.state.fish_behaviors), \
                f"fishes ({len(self.state.fishes)}) != behaviors ({len(self.state.fish_behaviors)})"

    def render(self) -> str:
        """Composite the current state into newline-joined text"""
        start_time = time.perf_counter()
        text = render_aquarium_to_string(self.state, self.assets)
        self._render_times.append(time.perf_counter() - start_time)
        if len(self._render_times) > self._tick_time_window:
            self._render_times.pop(0)
        return text

    def step(self) -> str:
        """Tick once and return the new frame"""
        self.tick()
        return self.render()

    def get_tick_stats(self) -> dict:
        """
        Get current tick timing statistics.

        Returns:
            Dict with tick_count, avg_tick_time_ms, last_tick_time_ms, avg_render_time_ms
        """
        if not self._tick_times:
            return {
                'tick_count': self.tick_count,
                'avg_tick_time_ms': 0.0,
                'last_tick_time_ms': 0.0,
                'avg_render_time_ms': 0.0
            }

        avg_time = self._tick_time_sum / len(self._tick_times)
        last_time = self._tick_times[-1]
        avg_render = sum(self._render_times) / len(self._render_times) if self._render_times else 0.0

        return {
            'tick_count': self.tick_count,
            'avg_tick_time_ms': avg_time * 1000.0,
            'last_tick_time_ms': last_time * 1000.0,
            'avg_render_time_ms': avg_render * 1000.0
        }

    def _record_tick_time(self, elapsed: float):
        """
        Record tick timing for rolling average.

        Args:
            elapsed: Tick time in seconds
        """
        self._tick_times.append(elapsed)
        self._tick_time_sum += elapsed

        # Maintain rolling window
        if len(self._tick_times) > self._tick_time_window:
            removed = self._tick_times.pop(0)
            self._tick_time_sum -= removed

    def get_snapshot(self) -> dict:
        """
        Get complete state snapshot.

        Returns:
            Dict with tick_count, fish_count, state, timing
        """
        return {
            'tick_count': self.tick_count,
            'fish_count': len(self.state.fishes),
            'state': self.state.to_dict(),
            'timing': self.get_tick_stats()
        }

    def print_tick_summary(self):
        """Print tick summary to console (lightweight monitoring)"""
        stats = self.get_tick_stats()
        env = self.state.environment
        creatures = sum(len(env.creatures(s)) for s in SPECIES)
        print(f"Tick {stats['tick_count']:5d} | "
              f"Avg: {stats['avg_tick_time_ms']:6.3f} ms | "
              f"Last: {stats['last_tick_time_ms']:6.3f} ms | "
              f"Fish: {len(self.state.fishes)} | "
              f"Bubbles: {len(self.state.bubbles)} | "
              f"Creatures: {creatures}")
