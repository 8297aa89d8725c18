"""
Entity spawning system.

Three spawners:
- Species spawns (ship, shark, whale): one slot per species, gated by a
  per-species cooldown tick, direction from the parity of the tick epoch.
- School spawns: a batch of TRANSIT fish entering from one side together.
- Initial seeding: caller-side population of NORMAL fish from a run seed.

Species and school spawns are driven only by the tick counter and grid
size so the same run replays identically.
"""

from typing import Optional, Sequence

from .entity import FishInstance, FishBehavior, Creature
from .data_types import AquariumState, SimulationConfig, SPECIES
from .art import creature_size
from .geometry import footprint, saturating_sub
from .rng import mix64, make_seed, random_index, random_cell, random_drift_velocity
from .constants import (
    SCHOOL_MIN_SIZE,
    SCHOOL_MAX_SIZE,
    TICK_MASK,
    DEFAULT_FISH_COUNT,
    SEED_MIN_VX,
    SEED_MIN_VY,
    SEED_MAX_VX,
    SEED_MAX_VY,
)


def _moving_right(tick: int, epoch: int) -> bool:
    return (tick // max(epoch, 1)) % 2 == 0


def spawn_row(species: str, grid_height: int, art_height: int) -> int:
    """
    Fixed row for a new creature.

    Ships ride the top row, whales sit in the upper third, sharks hug the
    bottom (one row of clearance when the grid allows it).
    """
    if species == 'ship':
        return 0
    if species == 'whale':
        return grid_height // 3
    return saturating_sub(grid_height, art_height + 1)


def maybe_spawn_creature(
    state: AquariumState,
    species: str,
    config: SimulationConfig
) -> Optional[Creature]:
    """
    Spawn a creature of one species if its slot is empty and due.

    The creature starts just outside the edge it enters from: left of
    column 0 when moving right, at column `width` when moving left.

    Returns:
        The new Creature, or None if nothing spawned
    """
    env = state.environment
    slot = env.creatures(species)
    if slot or state.tick < env.next_spawn_tick(species):
        return None
    if state.width == 0 or state.height == 0:
        return None

    art_width, art_height = creature_size(species)
    speed = config.species_speed(species)

    if _moving_right(state.tick, config.species_epoch(species)):
        x, vx = -float(art_width), speed
    else:
        x, vx = float(state.width), -speed

    creature = Creature(x=x, y=spawn_row(species, state.height, art_height), vx=vx)
    slot.append(creature)
    return creature


def spawn_creatures(state: AquariumState, config: SimulationConfig):
    """Run the spawn check for every species in fixed order"""
    for species in SPECIES:
        maybe_spawn_creature(state, species, config)


def school_size(tick: int) -> int:
    """Deterministic school size in [SCHOOL_MIN_SIZE, SCHOOL_MAX_SIZE]"""
    return SCHOOL_MIN_SIZE + tick % (SCHOOL_MAX_SIZE - SCHOOL_MIN_SIZE + 1)


def maybe_spawn_school(
    state: AquariumState,
    assets: Sequence,
    config: SimulationConfig
) -> int:
    """
    Insert a school of TRANSIT fish when the school tick is reached.

    All members share one direction and speed and sit in a row behind a
    common off-grid entry point, each separated by its own width plus
    config.school_spacing_cells. Art indices cycle through the asset
    table starting at tick % len(assets). Each member starts flagged as
    entering so it is not culled before it first reaches the grid.

    Returns:
        Number of fish inserted
    """
    env = state.environment
    if state.tick < env.next_school_tick or not assets:
        return 0
    if state.width == 0 or state.height == 0:
        return 0

    tick = state.tick
    count = school_size(tick)
    speed = config.school_speed
    moving_right = _moving_right(tick, config.school_direction_epoch)
    vx = speed if moving_right else -speed
    start = tick % len(assets)

    offset = 0.0
    for i in range(count):
        art_index = (start + i) % len(assets)
        fw, fh = footprint(assets, art_index)

        lanes = saturating_sub(state.height, fh) + 1
        y = float(mix64(tick, i, 0x5C) % lanes)

        if moving_right:
            x = -(offset + fw)
        else:
            x = state.width + offset
        offset += fw + config.school_spacing_cells

        fish = FishInstance(art_index=art_index, position=(x, y), velocity=(vx, 0.0), entering=True)
        state.add_fish(fish, FishBehavior.TRANSIT)

    env.next_school_tick = (tick + config.school_interval_ticks) & TICK_MASK
    return count


def seed_fish(
    state: AquariumState,
    assets: Sequence,
    count: int = DEFAULT_FISH_COUNT,
    seed: int = 0
) -> int:
    """
    Populate the tank with NORMAL fish from a run seed.

    Positions are whole cells inside the grid (the step clamps anything
    that does not fit); velocities have a minimum magnitude per axis so no
    fish stands still. The same (seed, existing fish count) always yields
    the same fish.

    Args:
        state: State to add fish to
        assets: Asset table (no-op when empty)
        count: Number of fish to add
        seed: Run seed

    Returns:
        Number of fish added
    """
    if not assets:
        return 0

    base = len(state.fishes)
    for i in range(count):
        fish_seed = make_seed(seed, "fish", base + i)
        art_index = random_index(make_seed(fish_seed, "art"), len(assets))
        position = random_cell(make_seed(fish_seed, "position"), state.width, state.height)
        velocity = random_drift_velocity(
            make_seed(fish_seed, "initial_velocity"),
            SEED_MAX_VX, SEED_MAX_VY, SEED_MIN_VX, SEED_MIN_VY
        )
        state.add_fish(FishInstance(art_index=art_index, position=position, velocity=velocity))

    return count
