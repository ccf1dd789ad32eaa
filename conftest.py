"""
Shared pytest setup.

pygame runs headless: the SDL dummy drivers must be selected before any
display or audio module initializes.
"""

import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')
