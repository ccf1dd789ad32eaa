"""
Enemy entity for PrimeFall.

Enemies fall straight down their lane carrying a number. Catching a prime
scores its value; catching anything else costs a life.
"""

import random
from typing import List

from models import DrawCommand, DrawImage, DrawText, EnemyData, GameConfig, Point2D


class Enemy:
    """
    A falling numbered enemy.

    Wraps an immutable EnemyData; update() returns a new Enemy rather than
    moving this one.
    """

    def __init__(self, data: EnemyData):
        self._data = data

    @classmethod
    def spawn(cls, lane: int, score: int, config: GameConfig,
              rng: random.Random) -> 'Enemy':
        """
        Create an enemy just above the playfield in the given lane.

        Speed grows with score. The number is drawn from [1, score], or is
        1 while the score is still 0.

        Args:
            lane: Lane index to spawn in
            score: Current score
            config: Game configuration
            rng: Random source

        Returns:
            New Enemy
        """
        speed = (rng.random() * config.speed_jitter
                 + score / config.speed_score_divisor
                 + config.speed_base)
        number = int(rng.random() * score) + 1
        return cls(EnemyData(
            lane=lane,
            x=config.lane_x(lane),
            y=-config.enemy_height,
            speed=speed,
            number=number,
        ))

    @property
    def data(self) -> EnemyData:
        """Get enemy data."""
        return self._data

    @property
    def lane(self) -> int:
        return self._data.lane

    @property
    def x(self) -> float:
        return self._data.x

    @property
    def y(self) -> float:
        return self._data.y

    @property
    def speed(self) -> float:
        return self._data.speed

    @property
    def number(self) -> int:
        return self._data.number

    @property
    def position(self) -> Point2D:
        return Point2D(x=self._data.x, y=self._data.y)

    @property
    def sprite(self) -> str:
        return self._data.sprite

    def update(self, time_diff: float) -> 'Enemy':
        """
        Move the enemy down by time_diff * speed.

        Args:
            time_diff: Elapsed time in milliseconds

        Returns:
            New Enemy instance with updated position
        """
        return Enemy(self._data.model_copy(update={'y': self._data.y + time_diff * self._data.speed}))

    def is_past_bottom(self, config: GameConfig) -> bool:
        """Check if the enemy's top edge has left the bottom of the screen."""
        return self._data.y > config.game_height

    def in_hit_band(self, config: GameConfig) -> bool:
        """
        Check if the enemy overlaps the player's row.

        The bottom edge must have entered the player's height band while
        the enemy's vertical midpoint is still on screen.
        """
        bottom = self._data.y + config.enemy_height
        return (config.game_height - bottom < config.player_height
                and self._data.y + config.rainbow_height < config.game_height)

    def render(self, config: GameConfig) -> List[DrawCommand]:
        """
        Describe how to draw the enemy: sprite, then its number.

        The number starts at the sprite's horizontal centre and shifts left
        by digit_shift pixels for every digit past the first.
        """
        shift = (self._data.digits - 1) * config.digit_shift
        return [
            DrawImage(sprite=self._data.sprite, x=self._data.x, y=self._data.y),
            DrawText(
                text=str(self._data.number),
                x=self._data.x + config.enemy_width / 2 - shift,
                y=self._data.y + config.number_offset_y,
                size=config.font_size,
                bold=config.font_bold,
                color=config.number_color,
            ),
        ]

    def __repr__(self) -> str:
        return f"Enemy({self._data})"
