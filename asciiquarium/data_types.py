"""
Aggregate state and configuration types.

AquariumState is owned by the caller; update_aquarium mutates it in place
and render_aquarium_to_string only reads it. SimulationConfig carries the
tuning constants and is populated by loader.py from YAML, or built from
the defaults in constants.py.
"""

from dataclasses import dataclass, field, fields
from typing import List, Tuple

from .entity import FishInstance, FishBehavior, Bubble, Seaweed, Creature
from . import constants as C


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class SimulationConfig:
    """Tuning constants for one simulation run"""
    tick_delta_seconds: float = C.TICK_DELTA_SECONDS
    fish_speed_multiplier: float = C.FISH_SPEED_MULTIPLIER
    fish_jitter_cells: float = C.FISH_JITTER_CELLS
    bounce_flip_percent: int = C.BOUNCE_FLIP_PERCENT

    bubble_period_ticks: int = C.BUBBLE_PERIOD_TICKS
    bubble_stagger_ticks: int = C.BUBBLE_STAGGER_TICKS
    bubble_rise_speed: float = C.BUBBLE_RISE_SPEED

    ship_speed: float = C.SHIP_SPEED
    shark_speed: float = C.SHARK_SPEED
    whale_speed: float = C.WHALE_SPEED
    ship_cooldown_ticks: int = C.SHIP_COOLDOWN_TICKS
    shark_cooldown_ticks: int = C.SHARK_COOLDOWN_TICKS
    whale_cooldown_ticks: int = C.WHALE_COOLDOWN_TICKS
    ship_direction_epoch: int = C.SHIP_DIRECTION_EPOCH
    shark_direction_epoch: int = C.SHARK_DIRECTION_EPOCH
    whale_direction_epoch: int = C.WHALE_DIRECTION_EPOCH

    school_interval_ticks: int = C.SCHOOL_INTERVAL_TICKS
    school_speed: float = C.SCHOOL_SPEED
    school_spacing_cells: int = C.SCHOOL_SPACING_CELLS
    school_direction_epoch: int = C.SCHOOL_DIRECTION_EPOCH

    water_phase_divisor: int = C.WATER_PHASE_DIVISOR

    def species_speed(self, species: str) -> float:
        return getattr(self, f"{species}_speed")

    def species_cooldown(self, species: str) -> int:
        return getattr(self, f"{species}_cooldown_ticks")

    def species_epoch(self, species: str) -> int:
        return getattr(self, f"{species}_direction_epoch")

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]


DEFAULT_CONFIG = SimulationConfig()


# ============================================================================
# Environment
# ============================================================================

SPECIES = ('ship', 'shark', 'whale')


@dataclass
class AquariumEnvironment:
    """
    Everything in the tank that is not a fish or a bubble.

    Attributes:
        water_phase: 8-bit wrapping animation counter
        seaweed: Stalks sorted by column
        castle_enabled: Draw the castle in the bottom-right corner
        ships/sharks/whales: Single-slot lists (0 or 1 element)
        next_*_tick: Tick at which the species (or a school) may next spawn
    """
    water_phase: int = 0
    seaweed: List[Seaweed] = field(default_factory=list)
    castle_enabled: bool = True
    ships: List[Creature] = field(default_factory=list)
    sharks: List[Creature] = field(default_factory=list)
    whales: List[Creature] = field(default_factory=list)
    next_ship_tick: int = C.INITIAL_SHIP_TICK
    next_shark_tick: int = C.INITIAL_SHARK_TICK
    next_whale_tick: int = C.INITIAL_WHALE_TICK
    next_school_tick: int = C.INITIAL_SCHOOL_TICK

    def creatures(self, species: str) -> List[Creature]:
        """Slot list for a species name ('ship', 'shark' or 'whale')"""
        return getattr(self, f"{species}s")

    def next_spawn_tick(self, species: str) -> int:
        return getattr(self, f"next_{species}_tick")

    def set_next_spawn_tick(self, species: str, tick: int):
        setattr(self, f"next_{species}_tick", tick)

    def to_dict(self) -> dict:
        data = {
            'water_phase': self.water_phase,
            'seaweed': [s.to_dict() for s in self.seaweed],
            'castle_enabled': self.castle_enabled,
            'next_school_tick': self.next_school_tick,
        }
        for species in SPECIES:
            data[f"{species}s"] = [c.to_dict() for c in self.creatures(species)]
            data[f"next_{species}_tick"] = self.next_spawn_tick(species)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'AquariumEnvironment':
        env = cls(
            water_phase=data.get('water_phase', 0),
            seaweed=[Seaweed(**s) for s in data.get('seaweed', [])],
            castle_enabled=data.get('castle_enabled', True),
            next_school_tick=data.get('next_school_tick', C.INITIAL_SCHOOL_TICK),
        )
        for species in SPECIES:
            env.creatures(species).extend(
                Creature.from_dict(c) for c in data.get(f"{species}s", [])
            )
            if f"next_{species}_tick" in data:
                env.set_next_spawn_tick(species, data[f"next_{species}_tick"])
        return env


# ============================================================================
# Aquarium State
# ============================================================================

@dataclass
class AquariumState:
    """
    Top-level aquarium state owned by the caller.

    Attributes:
        size: Grid (width, height) in cells; may change between ticks
        fishes: Fish instances
        fish_behaviors: Lifecycle per fish, kept the same length as fishes
        bubbles: Live bubbles
        environment: Water phase, seaweed, castle, creatures, spawn schedule
        tick: 64-bit wrapping tick counter
    """
    size: Tuple[int, int] = (0, 0)
    fishes: List[FishInstance] = field(default_factory=list)
    fish_behaviors: List[FishBehavior] = field(default_factory=list)
    bubbles: List[Bubble] = field(default_factory=list)
    environment: AquariumEnvironment = field(default_factory=AquariumEnvironment)
    tick: int = 0

    @property
    def width(self) -> int:
        return max(int(self.size[0]), 0)

    @property
    def height(self) -> int:
        return max(int(self.size[1]), 0)

    def add_fish(self, fish: FishInstance, behavior: FishBehavior = FishBehavior.NORMAL):
        """Append a fish and its behavior together"""
        self.fishes.append(fish)
        self.fish_behaviors.append(behavior)

    def sync_behaviors(self):
        """Pad with NORMAL or truncate so fish_behaviors matches fishes"""
        n = len(self.fishes)
        if len(self.fish_behaviors) < n:
            self.fish_behaviors.extend(
                [FishBehavior.NORMAL] * (n - len(self.fish_behaviors))
            )
        elif len(self.fish_behaviors) > n:
            del self.fish_behaviors[n:]

    def to_dict(self) -> dict:
        """
        Serialize state to a JSON-compatible dict.

        Returns:
            Dict with all state fields
        """
        return {
            'size': [self.width, self.height],
            'tick': self.tick,
            'fishes': [f.to_dict() for f in self.fishes],
            'fish_behaviors': [b.value for b in self.fish_behaviors],
            'bubbles': [b.to_dict() for b in self.bubbles],
            'environment': self.environment.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AquariumState':
        return cls(
            size=tuple(data['size']),
            fishes=[FishInstance.from_dict(f) for f in data.get('fishes', [])],
            fish_behaviors=[FishBehavior(b) for b in data.get('fish_behaviors', [])],
            bubbles=[Bubble.from_dict(b) for b in data.get('bubbles', [])],
            environment=AquariumEnvironment.from_dict(data.get('environment', {})),
            tick=data.get('tick', 0)
        )
