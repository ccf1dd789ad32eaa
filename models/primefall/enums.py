"""
PrimeFall enumerations.

These enums define player directions and the input actions the game
recognizes.
"""

from enum import Enum

# Re-exported for convenience
from primefall.game_state import GameState


class Direction(str, Enum):
    """Horizontal direction the player can move in.

    Attributes:
        LEFT: One lane toward x=0
        RIGHT: One lane toward the right edge
    """
    LEFT = "left"
    RIGHT = "right"


class GameAction(str, Enum):
    """Actions produced by the input layer.

    Attributes:
        MOVE_LEFT: Shift the player one lane left
        MOVE_RIGHT: Shift the player one lane right
        RESTART: Start a fresh game
    """
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    RESTART = "restart"

    @property
    def direction(self):
        """Direction for a move action, None for RESTART."""
        if self is GameAction.MOVE_LEFT:
            return Direction.LEFT
        if self is GameAction.MOVE_RIGHT:
            return Direction.RIGHT
        return None
