"""
PrimeFall models package.

This package contains the data models specific to PrimeFall: enums,
entity state records, draw commands and the configuration model.
"""

from .enums import (
    Direction,
    GameAction,
    GameState,  # Re-exported from primefall.game_state
)

from .models import (
    EnemyData,
    PlayerData,
    DrawImage,
    DrawText,
    DrawCommand,
)

from .config import (
    GameConfig,
    KeyBindings,
    DEFAULT_SPRITES,
)

__all__ = [
    'Direction',
    'GameAction',
    'GameState',
    'EnemyData',
    'PlayerData',
    'DrawImage',
    'DrawText',
    'DrawCommand',
    'GameConfig',
    'KeyBindings',
    'DEFAULT_SPRITES',
]
