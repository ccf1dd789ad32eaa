"""
Input Event - Represents a single recognized key press.

Uses dataclass for immutability.
"""
from dataclasses import dataclass

from models import GameAction


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Represents one recognized key press. Input sources drop keys that do
    not map to an action, so every event carries a valid action.

    Attributes:
        action: Game action the key maps to
        key: Raw key code that produced the action
        timestamp: Time when the event occurred (milliseconds, monotonic clock)
    """
    action: GameAction
    key: int
    timestamp: float

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"InputEvent(action={self.action.value}, key={self.key}, t={self.timestamp:.1f})"
