"""
Configuration for PrimeFall.

Loads settings from .env in the game directory, then .env.local on top of
it. Values are parsed when a config is built, not at import time.
"""

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from models import GameConfig

# Find the game directory (where this config.py lives)
GAME_DIR = Path(__file__).parent
MODES_DIR = GAME_DIR / "modes"


def load_env(game_dir: Path = GAME_DIR) -> None:
    """Load .env (real environment wins) and .env.local (overrides both)."""
    load_dotenv(Path(game_dir) / ".env")
    load_dotenv(Path(game_dir) / ".env.local", override=True)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes', 'on')


# Load environment on import
load_env()

# Assets
ASSETS_DIR = Path(os.getenv('PRIMEFALL_ASSETS_DIR', str(GAME_DIR / "assets")))


def default_config() -> GameConfig:
    """
    Build a GameConfig from the environment.

    Variables are read at call time, so tests and launchers can set them
    after import.

    Raises:
        ValidationError: If an environment value is out of range
        ValueError: If an environment value is not a number
    """
    defaults = GameConfig()
    return GameConfig(
        fps=_get_int('PRIMEFALL_FPS', defaults.fps),
        max_lives=_get_int('PRIMEFALL_MAX_LIVES', defaults.max_lives),
        max_enemies=_get_int('PRIMEFALL_MAX_ENEMIES', defaults.max_enemies),
        speed_base=_get_float('PRIMEFALL_SPEED_BASE', defaults.speed_base),
        speed_jitter=_get_float('PRIMEFALL_SPEED_JITTER', defaults.speed_jitter),
        font_bold=_get_bool('PRIMEFALL_FONT_BOLD', defaults.font_bold),
    )


def apply_overrides(config: GameConfig, **overrides: Any) -> GameConfig:
    """
    Return a validated copy of config with the given fields replaced.

    None values are skipped so unset CLI options leave the config alone.

    Raises:
        ValidationError: If the result is not a valid configuration
    """
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    data = config.model_dump()
    data.update(updates)
    return GameConfig.model_validate(data)
