"""
Input abstraction layer for PrimeFall.

Turns raw key presses into game actions so the game mode never sees
pygame key codes.
"""

from primefall.input.input_event import InputEvent
from primefall.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
