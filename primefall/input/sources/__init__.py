"""
Input source implementations.
"""

from primefall.input.sources.base import InputSource
from primefall.input.sources.keyboard import KeyboardInputSource

__all__ = ['InputSource', 'KeyboardInputSource']
