"""Renderer that executes draw commands against a pygame surface."""

from typing import Dict, Iterable, Tuple

import pygame

from models import DrawCommand, DrawImage, DrawText
from primefall.rendering.assets import SpriteAtlas
from primefall.logging import get_logger

log = get_logger('renderer')

FONT_NAME = 'impact'


class Renderer:
    """Draws engine output onto a surface.

    Images are positioned by their top-left corner and text by the left
    end of its baseline. The renderer
    converts text positions to pygame's top-left blit origin.
    """

    def __init__(self, atlas: SpriteAtlas):
        self._atlas = atlas
        self._fonts: Dict[Tuple[int, bool], pygame.font.Font] = {}
        self._missing_logged: set = set()
        if not pygame.font.get_init():
            pygame.font.init()

    @property
    def atlas(self) -> SpriteAtlas:
        return self._atlas

    def draw(self, surface: pygame.Surface, commands: Iterable[DrawCommand]) -> int:
        """Execute draw commands in order.

        Args:
            surface: Target surface
            commands: Draw commands from the engine

        Returns:
            Number of commands drawn
        """
        drawn = 0
        for cmd in commands:
            if isinstance(cmd, DrawImage):
                if self._draw_image(surface, cmd):
                    drawn += 1
            elif isinstance(cmd, DrawText):
                self._draw_text(surface, cmd)
                drawn += 1
            else:
                raise TypeError(f"Unknown draw command: {cmd!r}")
        return drawn

    def _draw_image(self, surface: pygame.Surface, cmd: DrawImage) -> bool:
        """Blit a sprite, scaled when the command carries a size."""
        if cmd.width is not None and cmd.height is not None:
            sprite = self._atlas.get_scaled(cmd.sprite, int(cmd.width), int(cmd.height))
        else:
            sprite = self._atlas.get(cmd.sprite)

        if sprite is None:
            if cmd.sprite not in self._missing_logged:
                log.warning("No sprite named '%s'", cmd.sprite)
                self._missing_logged.add(cmd.sprite)
            return False

        surface.blit(sprite, (int(cmd.x), int(cmd.y)))
        return True

    def _draw_text(self, surface: pygame.Surface, cmd: DrawText) -> None:
        """Render text with its baseline at cmd.y."""
        font = self._get_font(cmd.size, cmd.bold)
        text_surface = font.render(cmd.text, True, cmd.color.as_rgb_tuple)
        surface.blit(text_surface, (int(cmd.x), int(cmd.y - font.get_ascent())))

    def _get_font(self, size: int, bold: bool) -> pygame.font.Font:
        """Get or create a font."""
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(FONT_NAME, size, bold=bold)
        return self._fonts[key]
