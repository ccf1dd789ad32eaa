"""
Pydantic v2 models for PrimeFall game configuration.

GameConfig holds every gameplay and layout constant. It is frozen, validated
on construction and passed explicitly to the engine; YAML mode files and
environment overrides are both parsed into it.
"""

from typing import Dict

from pydantic import BaseModel, Field, model_validator

from ..primitives import Color, WHITE, BLACK


DEFAULT_SPRITES: Dict[str, str] = {
    'enemy': 'enemy.png',
    'background': 'stars.png',
    'player': 'player.png',
    'heart': 'heart.png',
}


class KeyBindings(BaseModel):
    """
    Key names for the three recognized keys.

    Names are pygame key constant suffixes: 'LEFT' means pygame.K_LEFT,
    'r' means pygame.K_r.
    """
    model_config = {"frozen": True}

    left: str = Field(default="LEFT", description="Key that moves the player left")
    right: str = Field(default="RIGHT", description="Key that moves the player right")
    restart: str = Field(default="r", description="Key that restarts the game")

    @model_validator(mode='after')
    def validate_distinct(self) -> 'KeyBindings':
        """Ensure each action has its own key."""
        keys = [self.left, self.right, self.restart]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Key bindings must be distinct, got {keys}")
        return self


class GameConfig(BaseModel):
    """
    Complete PrimeFall configuration.

    Defaults reproduce the classic game: a 525x700 playfield split into
    seven 75px lanes, at most five falling enemies, three lives.

    Speeds are in pixels per millisecond. A spawned enemy's speed is
    ``random(0, speed_jitter) + score / speed_score_divisor + speed_base``.

    Examples:
        >>> config = GameConfig()
        >>> config.lane_count
        7
        >>> config.player_y
        636
    """
    model_config = {"frozen": True}

    name: str = Field(default="Classic", description="Human-readable name of the mode")
    description: str = Field(default="", description="Short description of the mode")

    # Playfield
    game_width: int = Field(default=525, gt=0)
    game_height: int = Field(default=700, gt=0)
    fps: int = Field(default=60, gt=0, description="Target display refresh rate")

    # Enemies
    enemy_width: int = Field(default=75, gt=0)
    enemy_height: int = Field(default=156, gt=0)
    max_enemies: int = Field(default=5, ge=1)
    speed_base: float = Field(default=0.25, ge=0.0)
    speed_jitter: float = Field(default=0.5, ge=0.0)
    speed_score_divisor: float = Field(default=500.0, gt=0.0)

    # Player
    player_width: int = Field(default=75, gt=0)
    player_height: int = Field(default=54, gt=0)
    player_margin: int = Field(default=10, ge=0, description="Gap between player and bottom edge")
    player_start_lane: int = Field(default=2, ge=0)
    max_lives: int = Field(default=3, ge=1)

    # HUD
    heart_size: int = Field(default=35, gt=0)
    font_size: int = Field(default=30, gt=0)
    font_bold: bool = True
    hud_color: Color = WHITE
    number_color: Color = BLACK
    number_offset_y: int = Field(default=110, description="Baseline of the enemy number below the sprite top")
    digit_shift: int = Field(default=10, ge=0, description="Leftward shift per extra digit of the enemy number")

    # Assets and input
    sprites: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SPRITES))
    keys: KeyBindings = Field(default_factory=KeyBindings)

    @model_validator(mode='after')
    def validate_layout(self) -> 'GameConfig':
        """Ensure lanes, enemies and player fit the playfield."""
        if self.player_width != self.enemy_width:
            raise ValueError(
                f"player_width ({self.player_width}) must equal enemy_width "
                f"({self.enemy_width}) so both share lanes"
            )
        if self.lane_count < 1:
            raise ValueError(
                f"game_width ({self.game_width}) must fit at least one "
                f"{self.enemy_width}px lane"
            )
        if self.max_enemies > self.lane_count:
            raise ValueError(
                f"max_enemies ({self.max_enemies}) cannot exceed lane count ({self.lane_count})"
            )
        if self.player_start_lane >= self.lane_count:
            raise ValueError(
                f"player_start_lane ({self.player_start_lane}) must be below lane count ({self.lane_count})"
            )
        if self.player_height + self.player_margin > self.game_height:
            raise ValueError("Player does not fit inside the playfield height")
        missing = set(DEFAULT_SPRITES) - set(self.sprites)
        if missing:
            raise ValueError(f"Missing sprite entries: {sorted(missing)}")
        return self

    @property
    def lane_width(self) -> int:
        """Width of one lane in pixels."""
        return self.enemy_width

    @property
    def lane_count(self) -> int:
        """Number of lanes that fit in the playfield."""
        return self.game_width // self.enemy_width

    @property
    def player_y(self) -> int:
        """Fixed y coordinate of the player sprite."""
        return self.game_height - self.player_height - self.player_margin

    @property
    def max_player_x(self) -> int:
        """Largest x the player can occupy."""
        return (self.lane_count - 1) * self.lane_width

    @property
    def rainbow_height(self) -> float:
        """Offset of an enemy's vertical midpoint from its top edge."""
        return self.enemy_height / 2

    def lane_x(self, lane: int) -> int:
        """Left edge of a lane."""
        return lane * self.lane_width
