"""
Asciiquarium Engine

A deterministic, headless character-grid aquarium. Fish, bubbles, seaweed,
a castle, ships, sharks and whales advance one tick at a time and are
composited into a single block of text per frame.

Architecture: AquariumState is the source of truth and belongs to the
caller. update_aquarium() mutates it; render_aquarium_to_string() reads it.
Presentation (fonts, colors, widgets, frame pacing) is a consumer.
"""

__version__ = "0.1.0"

from .assets import FishArt, measure_art, get_fish_assets
from .entity import FishInstance, FishBehavior, Bubble, Seaweed, Creature
from .data_types import AquariumState, AquariumEnvironment, SimulationConfig
from .simulation import update_aquarium, AquariumSimulation
from .render import render_aquarium_to_string
from .seaweed import generate_seaweed

__all__ = [
    "FishArt",
    "measure_art",
    "get_fish_assets",
    "FishInstance",
    "FishBehavior",
    "Bubble",
    "Seaweed",
    "Creature",
    "AquariumState",
    "AquariumEnvironment",
    "SimulationConfig",
    "update_aquarium",
    "AquariumSimulation",
    "render_aquarium_to_string",
    "generate_seaweed",
]
