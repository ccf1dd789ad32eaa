"""
PrimeFall

Lane-based falling-number arcade game on pygame. Catch the primes,
dodge everything else.

Provides:
- base_game: BaseGame class the game mode inherits from
- game_state: GameState enum (RUNNING, GAME_OVER)
- input: Keyboard input events, sources and manager
- rendering: Draw-command renderer and sprite atlas
- logging: Per-module leveled logging and structured records
"""

__version__ = "1.0.0"

__all__ = ['__version__']
