"""
Domain models and value objects.

Contains the game state aggregate and the enums naming resources,
automation units and upgrade categories.
"""

from src.core.domain.game_state import (
    DEFAULT_FRESH_BEANS,
    DEFAULT_MONEY,
    GameState,
    default_game_state,
)
from src.core.domain.resources import Resource, UnitKind, UpgradeCategory

__all__ = [
    # Game state
    "DEFAULT_MONEY",
    "DEFAULT_FRESH_BEANS",
    "GameState",
    "default_game_state",
    # Enums
    "Resource",
    "UnitKind",
    "UpgradeCategory",
]
