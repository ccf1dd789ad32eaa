"""Drawable capability shared by on-screen entities."""

from typing import List, Protocol, runtime_checkable

from models import DrawCommand, GameConfig, Point2D


@runtime_checkable
class Drawable(Protocol):
    """Anything with a position and a sprite that can describe how to draw itself."""

    @property
    def position(self) -> Point2D:
        ...

    @property
    def sprite(self) -> str:
        ...

    def render(self, config: GameConfig) -> List[DrawCommand]:
        ...
