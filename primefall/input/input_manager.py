"""
Input Manager - Collects input from the active source.
"""
from typing import List, Optional

from primefall.input.input_event import InputEvent
from primefall.input.sources.base import InputSource


class InputManager:
    """Manages an input source and collects its events.

    Lets the host loop swap input sources (keyboard, scripted replay in
    tests) without changing game logic.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def set_source(self, source: InputSource) -> None:
        """Set the input source."""
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def update(self, events: list) -> None:
        """Feed raw pygame events to the active source.

        Args:
            events: pygame events drained by the host loop this frame
        """
        if self._source is not None:
            self._source.update(events)

    def get_events(self) -> List[InputEvent]:
        """Get collected events since last update."""
        if self._source is None:
            return []
        return self._source.poll_events()

    def clear_events(self) -> None:
        """Clear any pending events from the active source."""
        if self._source is not None:
            self._source.poll_events()
