"""
Tests for the Player entity.
"""

import pytest

from models import Direction, DrawImage, GameConfig
from games.PrimeFall.player import Player
from primefall.rendering import Drawable


@pytest.fixture
def config():
    return GameConfig()


class TestPlayerCreate:
    """Initial player placement."""

    def test_starts_in_lane_two(self, config):
        player = Player.create(config)
        assert player.x == 150
        assert player.lane(config) == 2

    def test_sits_above_bottom_margin(self, config):
        player = Player.create(config)
        assert player.y == 700 - 54 - 10

    def test_full_lives(self, config):
        assert Player.create(config).lives == 3


class TestPlayerMove:
    """Lane hopping and boundaries."""

    def test_move_left(self, config):
        player = Player.create(config).move(Direction.LEFT, config)
        assert player.x == 75

    def test_move_right(self, config):
        player = Player.create(config).move(Direction.RIGHT, config)
        assert player.x == 225

    def test_left_edge_is_a_wall(self, config):
        player = Player.create(config)
        for _ in range(5):
            player = player.move(Direction.LEFT, config)
            assert player.x >= 0
        assert player.x == 0

    def test_right_edge_is_a_wall(self, config):
        player = Player.create(config)
        for _ in range(10):
            player = player.move(Direction.RIGHT, config)
            assert player.x <= config.game_width - config.player_width
        assert player.x == 450
        assert player.lane(config) == 6

    def test_blocked_move_returns_same_player(self, config):
        player = Player.create(config)
        for _ in range(2):
            player = player.move(Direction.LEFT, config)
        assert player.move(Direction.LEFT, config) is player

    def test_move_keeps_lives(self, config):
        player = Player.create(config).lose_life().move(Direction.RIGHT, config)
        assert player.lives == 2


class TestPlayerLives:
    """Losing lives."""

    def test_lose_life(self, config):
        assert Player.create(config).lose_life().lives == 2

    def test_lives_clamped_at_zero(self, config):
        player = Player.create(config)
        for _ in range(5):
            player = player.lose_life()
        assert player.lives == 0
        assert player.is_dead

    def test_with_lives(self, config):
        player = Player.create(config).with_lives(1)
        assert player.lives == 1
        assert not player.is_dead


class TestPlayerRender:

    def test_single_sprite(self, config):
        commands = Player.create(config).render(config)
        assert commands == [DrawImage(sprite='player', x=150, y=636)]

    def test_is_drawable(self, config):
        assert isinstance(Player.create(config), Drawable)
