"""
Player entity for PrimeFall.

The player sits on the bottom row and hops one lane at a time.
"""

from typing import List

from models import Direction, DrawCommand, DrawImage, GameConfig, PlayerData, Point2D


class Player:
    """
    The player's catcher sprite and lives counter.

    Wraps an immutable PlayerData; every change returns a new Player.
    """

    def __init__(self, data: PlayerData):
        self._data = data

    @classmethod
    def create(cls, config: GameConfig) -> 'Player':
        """Create a player in the starting lane with full lives."""
        return cls(PlayerData(
            x=config.lane_x(config.player_start_lane),
            y=config.player_y,
            lives=config.max_lives,
        ))

    @property
    def data(self) -> PlayerData:
        return self._data

    @property
    def x(self) -> float:
        return self._data.x

    @property
    def y(self) -> float:
        return self._data.y

    @property
    def lives(self) -> int:
        return self._data.lives

    @property
    def position(self) -> Point2D:
        return Point2D(x=self._data.x, y=self._data.y)

    @property
    def sprite(self) -> str:
        return self._data.sprite

    @property
    def is_dead(self) -> bool:
        return self._data.lives == 0

    def lane(self, config: GameConfig) -> int:
        """Lane index the player currently occupies."""
        return int(self._data.x // config.lane_width)

    def move(self, direction: Direction, config: GameConfig) -> 'Player':
        """
        Shift one lane left or right.

        Moving past the leftmost or rightmost lane is a no-op.

        Args:
            direction: Direction to move
            config: Game configuration

        Returns:
            Player in the new lane (self if the move was blocked)
        """
        if direction == Direction.LEFT and self._data.x > 0:
            new_x = self._data.x - config.lane_width
        elif direction == Direction.RIGHT and self._data.x < config.max_player_x:
            new_x = self._data.x + config.lane_width
        else:
            return self
        return Player(self._data.model_copy(update={'x': new_x}))

    def lose_life(self) -> 'Player':
        """Remove one life; lives never drop below zero."""
        return self.with_lives(max(self._data.lives - 1, 0))

    def with_lives(self, lives: int) -> 'Player':
        """Return a copy of this player with the given number of lives."""
        return Player(self._data.model_copy(update={'lives': lives}))

    def render(self, config: GameConfig) -> List[DrawCommand]:
        """Describe how to draw the player."""
        return [DrawImage(sprite=self._data.sprite, x=self._data.x, y=self._data.y)]

    def __repr__(self) -> str:
        return f"Player({self._data})"
