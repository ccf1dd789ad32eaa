"""Standard GameState enum for PrimeFall.

The game has exactly two run states. There is no pause state: the frame
loop either steps every display refresh or is halted until a restart.
"""
from enum import Enum


class GameState(str, Enum):
    """Run state of a game session.

    States:
        RUNNING: Frames are being stepped and scheduled
        GAME_OVER: Player has no lives left; the loop is halted until restart
    """
    RUNNING = "running"
    GAME_OVER = "game_over"
