"""
Unified models library for PrimeFall.

This package provides the Pydantic data models used across the project:
- Primitives: Basic geometric and color types (Point2D, Color)
- PrimeFall: Game-specific models (entity data, draw commands, GameConfig)

Usage:
    >>> from models import GameConfig, EnemyData
    >>> from models.primitives import Color
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Color,
    WHITE,
    BLACK,
)

# ============================================================================
# PrimeFall models
# ============================================================================
from .primefall import (
    Direction,
    GameAction,
    GameState,
    EnemyData,
    PlayerData,
    DrawImage,
    DrawText,
    DrawCommand,
    GameConfig,
    KeyBindings,
    DEFAULT_SPRITES,
)

__all__ = [
    # Primitives
    'Point2D',
    'Color',
    'WHITE',
    'BLACK',
    # PrimeFall
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
