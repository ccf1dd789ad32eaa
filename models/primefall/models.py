"""
PrimeFall data models.

Immutable state records for enemies and the player, and the draw commands
the engine hands to the renderer.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, ConfigDict

from ..primitives import Color, WHITE


class EnemyData(BaseModel):
    """Immutable enemy state data.

    Attributes:
        lane: Lane index the enemy falls in
        x: Left edge (fixed by the lane)
        y: Top edge; negative while still above the playfield
        speed: Fall speed in pixels per millisecond
        number: Value shown on the enemy, checked for primality on a hit
        sprite: Sprite name to draw

    Examples:
        >>> enemy = EnemyData(lane=3, x=225.0, y=-156.0, speed=0.4, number=7)
        >>> enemy.digits
        1
    """
    lane: int = Field(ge=0)
    x: float
    y: float
    speed: float
    number: int
    sprite: str = 'enemy'

    @field_validator('speed')
    @classmethod
    def validate_speed(cls, v: float) -> float:
        """Validate speed is positive."""
        if v <= 0:
            raise ValueError(f'Speed must be positive, got {v}')
        return v

    @field_validator('number')
    @classmethod
    def validate_number(cls, v: int) -> int:
        """Validate number is a positive integer."""
        if v < 1:
            raise ValueError(f'Number must be positive, got {v}')
        return v

    @property
    def digits(self) -> int:
        """Number of decimal digits in the enemy's number."""
        return len(str(self.number))

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"EnemyData(lane={self.lane}, y={self.y:.1f}, speed={self.speed:.3f}, number={self.number})"


class PlayerData(BaseModel):
    """Immutable player state data.

    Attributes:
        x: Left edge, always a multiple of the lane width
        y: Top edge, fixed for the whole session
        lives: Remaining lives (never negative)
        sprite: Sprite name to draw
    """
    x: float
    y: float
    lives: int
    sprite: str = 'player'

    @field_validator('lives')
    @classmethod
    def validate_lives(cls, v: int) -> int:
        """Validate lives are non-negative."""
        if v < 0:
            raise ValueError(f'Lives must be non-negative, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"PlayerData(x={self.x:.0f}, y={self.y:.0f}, lives={self.lives})"


class DrawImage(BaseModel):
    """Draw a named sprite with its top-left corner at (x, y).

    When width and height are given the sprite is scaled to that size,
    otherwise it is drawn at its natural size.
    """
    kind: Literal['image'] = 'image'
    sprite: str
    x: float
    y: float
    width: Optional[float] = None
    height: Optional[float] = None

    model_config = ConfigDict(frozen=True)


class DrawText(BaseModel):
    """Draw text whose baseline starts at (x, y)."""
    kind: Literal['text'] = 'text'
    text: str
    x: float
    y: float
    size: int = 30
    bold: bool = True
    color: Color = WHITE

    model_config = ConfigDict(frozen=True)


DrawCommand = Union[DrawImage, DrawText]
