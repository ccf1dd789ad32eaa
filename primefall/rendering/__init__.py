"""
Rendering for PrimeFall: the drawable capability, sprite loading and
draw-command execution.
"""

from primefall.rendering.drawable import Drawable
from primefall.rendering.assets import SpriteAtlas, sprite_sizes
from primefall.rendering.renderer import Renderer

__all__ = ['Drawable', 'SpriteAtlas', 'Renderer', 'sprite_sizes']
