"""
Tests for YAML game modes.
"""

import pytest
import yaml

from models import GameConfig
from games.PrimeFall.mode_loader import ModeLoader


@pytest.fixture
def loader():
    return ModeLoader()


@pytest.fixture
def tmp_loader(tmp_path):
    return ModeLoader(modes_dir=tmp_path)


class TestShippedModes:
    """The modes that ship with the game."""

    def test_lists_shipped_modes(self, loader):
        modes = loader.list_available_modes()
        assert 'classic' in modes
        assert 'gentle' in modes
        assert modes == sorted(modes)

    def test_classic_matches_defaults(self, loader):
        config = loader.load_mode('classic')
        defaults = GameConfig()
        assert config.name == "Classic"
        assert config.model_dump(exclude={'description'}) == \
            defaults.model_dump(exclude={'description'})

    def test_gentle(self, loader):
        config = loader.load_mode('gentle')
        assert config.name == "Gentle"
        assert config.max_enemies == 3
        assert config.max_lives == 5
        assert config.lane_count == 7

    def test_mode_exists(self, loader):
        assert loader.mode_exists('classic')
        assert not loader.mode_exists('nonexistent_mode')

    def test_mode_info(self, loader):
        info = loader.get_mode_info('gentle')
        assert info['name'] == "Gentle"
        assert info['description']


class TestModeErrors:
    """Errors raised for bad mode files."""

    def test_missing_mode(self, tmp_loader):
        with pytest.raises(FileNotFoundError, match="nope"):
            tmp_loader.load_mode('nope')

    def test_missing_file(self, tmp_loader, tmp_path):
        with pytest.raises(FileNotFoundError):
            tmp_loader.load_file(tmp_path / 'missing.yaml')

    def test_malformed_yaml(self, tmp_loader, tmp_path):
        (tmp_path / 'broken.yaml').write_text("max_lives: [1, 2\n")
        with pytest.raises(yaml.YAMLError, match="broken.yaml"):
            tmp_loader.load_mode('broken')

    def test_invalid_values(self, tmp_loader, tmp_path):
        (tmp_path / 'bad.yaml').write_text("max_lives: 0\n")
        with pytest.raises(ValueError, match="bad.yaml"):
            tmp_loader.load_mode('bad')

    def test_not_a_mapping(self, tmp_loader, tmp_path):
        (tmp_path / 'list.yaml').write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            tmp_loader.load_mode('list')

    def test_empty_file_is_defaults(self, tmp_loader, tmp_path):
        (tmp_path / 'empty.yaml').write_text("")
        assert tmp_loader.load_mode('empty') == GameConfig()

    def test_mode_info_missing(self, tmp_loader):
        with pytest.raises(FileNotFoundError):
            tmp_loader.get_mode_info('nope')

    def test_empty_directory(self, tmp_loader):
        assert tmp_loader.list_available_modes() == []

    def test_nonexistent_directory(self, tmp_path):
        assert ModeLoader(modes_dir=tmp_path / 'absent').list_available_modes() == []


class TestCustomModes:

    def test_partial_mode_keeps_defaults(self, tmp_loader, tmp_path):
        (tmp_path / 'fast.yaml').write_text(
            "name: Fast\nspeed_base: 0.6\nkeys:\n  restart: SPACE\n"
        )
        config = tmp_loader.load_mode('fast')
        assert config.speed_base == 0.6
        assert config.keys.restart == "SPACE"
        assert config.keys.left == "LEFT"
        assert config.max_enemies == 5
