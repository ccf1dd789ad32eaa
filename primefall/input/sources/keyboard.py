"""
Keyboard Input Source - Arrow keys and restart key.

Exactly three keys are recognized; every other key press is ignored.
"""
import time
from typing import Callable, Dict, List, Optional

import pygame

from models import GameAction, KeyBindings
from primefall.input.input_event import InputEvent
from primefall.input.sources.base import InputSource
from primefall.logging import get_logger

log = get_logger('input')


def resolve_key(name: str) -> int:
    """Resolve a key name to its pygame key code.

    Args:
        name: pygame constant suffix ('LEFT' for K_LEFT, 'r' for K_r)

    Returns:
        Integer key code

    Raises:
        ValueError: If pygame has no such key
    """
    code = getattr(pygame, f"K_{name}", None)
    if not isinstance(code, int):
        raise ValueError(f"Unknown key name '{name}' (expected a pygame K_* suffix)")
    return code


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Converts pygame KEYDOWN events for the bound keys into InputEvents.
    """

    def __init__(
        self,
        bindings: Optional[KeyBindings] = None,
        clock: Callable[[], float] = monotonic_ms,
    ):
        """Initialize the keyboard source.

        Args:
            bindings: Key names for left, right and restart
            clock: Millisecond timestamp source for event timestamps
        """
        bindings = bindings or KeyBindings()
        self._key_map: Dict[int, GameAction] = {
            resolve_key(bindings.left): GameAction.MOVE_LEFT,
            resolve_key(bindings.right): GameAction.MOVE_RIGHT,
            resolve_key(bindings.restart): GameAction.RESTART,
        }
        self._clock = clock
        self._event_queue: List[InputEvent] = []

    @property
    def key_map(self) -> Dict[int, GameAction]:
        """Key code to action mapping."""
        return dict(self._key_map)

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, events: list) -> None:
        """Collect key presses for bound keys."""
        for event in events:
            if event.type != pygame.KEYDOWN:
                continue
            action = self._key_map.get(event.key)
            if action is None:
                continue
            log.trace("key %d -> %s", event.key, action.value)
            self._event_queue.append(InputEvent(
                action=action,
                key=event.key,
                timestamp=self._clock(),
            ))
