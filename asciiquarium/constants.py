"""
Central configuration constants for the aquarium engine.

Defines default values, thresholds, and tuning parameters used across
the simulation step, the spawners and the compositor. Every value here
can be overridden per run through SimulationConfig (see loader.py).
"""

# ============================================================================
# Time Integration
# ============================================================================

# Logical seconds advanced per tick (30 ticks per logical second)
TICK_DELTA_SECONDS = 1.0 / 30.0

# Fish velocities are authored in cells/tick at 1x; scaled by dt * multiplier
FISH_SPEED_MULTIPLIER = 30.0

# Maximum positional jitter (cells) added to a fish per tick
FISH_JITTER_CELLS = 0.02

# Percent chance (0-100) that a wall bounce also flips the orthogonal velocity
BOUNCE_FLIP_PERCENT = 12


# ============================================================================
# Bubbles
# ============================================================================

# Each fish emits one bubble every BUBBLE_PERIOD_TICKS (staggered per fish)
BUBBLE_PERIOD_TICKS = 90

# Per-fish stagger multiplier (fish i emits at tick offset i * stagger)
BUBBLE_STAGGER_TICKS = 7

# Rise speed in cells per logical second (applied as negative y velocity)
BUBBLE_RISE_SPEED = 3.0

BUBBLE_GLYPH = '.'


# ============================================================================
# Species (ships, sharks, whales)
# ============================================================================

# Horizontal speed in cells per logical second
SHIP_SPEED = 6.0
SHARK_SPEED = 9.0
WHALE_SPEED = 4.5

# Ticks to wait after a despawn before the species may appear again
SHIP_COOLDOWN_TICKS = 600
SHARK_COOLDOWN_TICKS = 900
WHALE_COOLDOWN_TICKS = 1200

# Direction alternates with parity of tick // epoch (even -> moving right)
SHIP_DIRECTION_EPOCH = 700
SHARK_DIRECTION_EPOCH = 1100
WHALE_DIRECTION_EPOCH = 1300

# First eligible spawn ticks for a fresh environment
INITIAL_SHIP_TICK = 120
INITIAL_SHARK_TICK = 480
INITIAL_WHALE_TICK = 900


# ============================================================================
# Schools (Transit fish)
# ============================================================================

INITIAL_SCHOOL_TICK = 600
SCHOOL_INTERVAL_TICKS = 1800
SCHOOL_MIN_SIZE = 5
SCHOOL_MAX_SIZE = 10

# Shared school speed in cells/tick at 1x (same units as fish velocity)
SCHOOL_SPEED = 0.3

# Empty columns between consecutive fish in a school
SCHOOL_SPACING_CELLS = 3

SCHOOL_DIRECTION_EPOCH = 3600


# ============================================================================
# Seaweed
# ============================================================================

# Fixed 64-bit seed constant mixed with grid size
SEAWEED_SEED = 0x9E3779B97F4A7C15

# One stalk per SEAWEED_COLUMNS_PER_STALK columns of grid width
SEAWEED_COLUMNS_PER_STALK = 15

SEAWEED_MIN_HEIGHT = 3
SEAWEED_MAX_HEIGHT = 6
SEAWEED_MAX_PHASE = 31

# Duplicate-column retries before a duplicate is accepted
SEAWEED_PLACEMENT_RETRIES = 4

# Water phase ticks per sway step
SEAWEED_SWAY_DIVISOR = 4


# ============================================================================
# Water / Animation
# ============================================================================

# Water phase advances once every WATER_PHASE_DIVISOR ticks
WATER_PHASE_DIVISOR = 4

# Wave period (columns) and the flat run length of each wave step
WATER_WAVE_PERIOD = 24
WATER_WAVE_STEP = 6

# Row of the first waterline pattern (ships sit above it)
WATERLINE_TOP_ROW = 5

# Ship/shark/whale bob toggles every BOB_PERIOD_TICKS ticks
BOB_PERIOD_TICKS = 8

# Whale spout frame advances every SPOUT_FRAME_TICKS ticks
SPOUT_FRAME_TICKS = 12


# ============================================================================
# Counters
# ============================================================================

TICK_MASK = 0xFFFFFFFFFFFFFFFF
WATER_PHASE_MASK = 0xFF


# ============================================================================
# Seeding (caller-side helpers)
# ============================================================================

# Minimum absolute seeded velocity so no fish stands still
SEED_MIN_VX = 0.08
SEED_MIN_VY = 0.03
SEED_MAX_VX = 0.5
SEED_MAX_VY = 0.25

DEFAULT_FISH_COUNT = 6


# ============================================================================
# Performance Configuration
# ============================================================================

# Tick timing window for rolling average
TICK_TIME_WINDOW = 100
