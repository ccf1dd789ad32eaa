"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import List

from primefall.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Poll for new input events.

        Returns:
            List of InputEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, events: list) -> None:
        """Consume raw events, collecting the recognized ones.

        Args:
            events: pygame events drained by the host loop.
        """
        pass
