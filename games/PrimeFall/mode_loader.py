"""
Mode Loader - YAML game modes validated into GameConfig.

A mode file lists only the fields it changes; everything else keeps the
classic defaults.

Examples:
    >>> loader = ModeLoader()
    >>> config = loader.load_mode("classic")
    >>> config.max_lives
    3
    >>> loader.list_available_modes()
    ['classic', 'gentle']
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from models import GameConfig
from games.PrimeFall.config import MODES_DIR
from primefall.logging import get_logger

log = get_logger('mode_loader')


class ModeLoader:
    """Loads and validates game modes from YAML files.

    Attributes:
        modes_dir: Path to the directory containing mode YAML files
    """

    def __init__(self, modes_dir: Optional[Path] = None):
        """Initialize the mode loader.

        Args:
            modes_dir: Optional custom path to the modes directory.
                      Defaults to the modes/ directory shipped with the game.
        """
        self.modes_dir = Path(modes_dir) if modes_dir is not None else MODES_DIR

    def load_mode(self, mode_id: str) -> GameConfig:
        """Load a mode by ID from the modes directory.

        Args:
            mode_id: The ID of the mode to load (without .yaml extension)

        Returns:
            Validated GameConfig

        Raises:
            FileNotFoundError: If the mode YAML file doesn't exist
            ValueError: If the YAML content is not a valid configuration
            yaml.YAMLError: If the YAML syntax is malformed
        """
        yaml_path = self.modes_dir / f"{mode_id}.yaml"

        if not yaml_path.exists():
            raise FileNotFoundError(
                f"Game mode '{mode_id}' not found. "
                f"Expected file: {yaml_path}"
            )
        return self.load_file(yaml_path)

    def load_file(self, yaml_path: Path) -> GameConfig:
        """Load a mode from an explicit YAML path.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML content is not a valid configuration
            yaml.YAMLError: If the YAML syntax is malformed
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Mode file not found: {yaml_path}")

        try:
            with open(yaml_path, 'r') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(
                f"Failed to parse YAML file '{yaml_path}': {e}"
            ) from e

        # An empty file means "all defaults"
        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ValueError(
                f"Invalid game mode configuration in '{yaml_path}': "
                f"expected a mapping, got {type(config_dict).__name__}"
            )

        try:
            config = GameConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(
                f"Invalid game mode configuration in '{yaml_path}':\n{e}"
            ) from e

        log.debug("Loaded mode '%s' from %s", config.name, yaml_path)
        return config

    def list_available_modes(self) -> List[str]:
        """List all available mode IDs, sorted alphabetically."""
        if not self.modes_dir.exists():
            return []
        return sorted(f.stem for f in self.modes_dir.glob("*.yaml"))

    def mode_exists(self, mode_id: str) -> bool:
        """Check if a mode file exists."""
        return (self.modes_dir / f"{mode_id}.yaml").exists()

    def get_mode_info(self, mode_id: str) -> dict:
        """Get a mode's name and description without full validation.

        Raises:
            FileNotFoundError: If the mode doesn't exist
            yaml.YAMLError: If the YAML is malformed
        """
        yaml_path = self.modes_dir / f"{mode_id}.yaml"

        if not yaml_path.exists():
            raise FileNotFoundError(f"Game mode '{mode_id}' not found")

        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}

        return {
            'name': config_dict.get('name', mode_id),
            'description': config_dict.get('description', ''),
        }
