"""Sprite loading for PrimeFall.

Sprites are loaded once, keyed by name. A sprite whose file is missing or
unreadable is replaced by a flat placeholder of the entity's size so the
game stays playable without art.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple

import pygame

from models import GameConfig
from primefall.logging import get_logger

log = get_logger('assets')

# Placeholder fill colors by sprite name
PLACEHOLDER_COLORS: Dict[str, Tuple[int, int, int]] = {
    'enemy': (255, 182, 193),
    'background': (12, 12, 40),
    'player': (240, 240, 240),
    'heart': (220, 20, 60),
}
DEFAULT_PLACEHOLDER_COLOR = (255, 0, 255)


def sprite_sizes(config: GameConfig) -> Dict[str, Tuple[int, int]]:
    """Natural size of each sprite, used for placeholders."""
    return {
        'enemy': (config.enemy_width, config.enemy_height),
        'background': (config.game_width, config.game_height),
        'player': (config.player_width, config.player_height),
        'heart': (config.heart_size, config.heart_size),
    }


class SpriteAtlas:
    """Loads and provides access to named sprites.

    Handles:
    - File paths relative to an assets directory
    - Placeholder surfaces for missing files
    - Cached scaled copies for sized draws
    """

    def __init__(self, config: GameConfig, assets_dir: Path):
        self._config = config
        self._assets_dir = Path(assets_dir)
        self._sprites: Dict[str, pygame.Surface] = {}
        self._scaled: Dict[Tuple[str, int, int], pygame.Surface] = {}
        self._placeholders: set = set()
        self._loaded = False

    @property
    def assets_dir(self) -> Path:
        return self._assets_dir

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """Load every sprite named in the configuration."""
        self._sprites.clear()
        self._scaled.clear()
        self._placeholders.clear()
        sizes = sprite_sizes(self._config)
        for name, filename in self._config.sprites.items():
            self._sprites[name] = self._load_sprite(name, filename, sizes.get(name))
        self._loaded = True
        log.info("Loaded %d sprites from %s (%d placeholders)",
                 len(self._sprites), self._assets_dir, len(self._placeholders))

    def get(self, name: str) -> Optional[pygame.Surface]:
        """Get a loaded sprite by name."""
        return self._sprites.get(name)

    def has_sprite(self, name: str) -> bool:
        """Check if a sprite is loaded."""
        return name in self._sprites

    def is_placeholder(self, name: str) -> bool:
        """Check if a sprite was replaced by a placeholder."""
        return name in self._placeholders

    def get_scaled(self, name: str, width: int, height: int) -> Optional[pygame.Surface]:
        """Get a sprite scaled to width x height, cached per size."""
        sprite = self._sprites.get(name)
        if sprite is None:
            return None
        if sprite.get_size() == (width, height):
            return sprite
        key = (name, width, height)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.scale(sprite, (width, height))
        return self._scaled[key]

    def _load_sprite(self, name: str, filename: str,
                     size: Optional[Tuple[int, int]]) -> pygame.Surface:
        """Load a single sprite file, falling back to a placeholder."""
        sprite_path = Path(filename)
        if not sprite_path.is_absolute():
            sprite_path = self._assets_dir / filename

        if not sprite_path.exists():
            log.warning("Sprite file not found: %s (using placeholder for '%s')", sprite_path, name)
            return self._placeholder(name, size)

        try:
            surface = pygame.image.load(str(sprite_path))
        except pygame.error as e:
            log.warning("Failed to load sprite '%s' from %s: %s", name, sprite_path, e)
            return self._placeholder(name, size)

        # convert_alpha needs an active display mode
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return surface

    def _placeholder(self, name: str, size: Optional[Tuple[int, int]]) -> pygame.Surface:
        """Create a flat placeholder surface for a sprite."""
        self._placeholders.add(name)
        width, height = size or (32, 32)
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        surface.fill(PLACEHOLDER_COLORS.get(name, DEFAULT_PLACEHOLDER_COLOR))
        return surface
