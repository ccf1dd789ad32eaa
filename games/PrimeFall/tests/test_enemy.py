"""
Tests for the Enemy entity.
"""

import random

import pytest
from pydantic import ValidationError

from models import DrawImage, DrawText, EnemyData, GameConfig, BLACK
from games.PrimeFall.enemy import Enemy
from primefall.rendering import Drawable


class FixedRandom(random.Random):
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def config():
    return GameConfig()


def make_enemy(**overrides) -> Enemy:
    data = dict(lane=0, x=0.0, y=0.0, speed=1.0, number=3)
    data.update(overrides)
    return Enemy(EnemyData(**data))


class TestEnemySpawn:
    """Tests for spawning new enemies."""

    def test_spawns_above_playfield(self, config):
        enemy = Enemy.spawn(3, 0, config, FixedRandom(0.0))
        assert enemy.lane == 3
        assert enemy.x == 225
        assert enemy.y == -config.enemy_height

    def test_speed_formula(self, config):
        """speed = random * 0.5 + score / 500 + 0.25"""
        enemy = Enemy.spawn(0, 100, config, FixedRandom(0.5))
        assert enemy.speed == pytest.approx(0.25 + 0.2 + 0.25)

    def test_number_is_one_at_zero_score(self, config):
        enemy = Enemy.spawn(0, 0, config, FixedRandom(0.99))
        assert enemy.number == 1

    def test_number_within_score(self, config):
        rng = random.Random(7)
        for _ in range(200):
            enemy = Enemy.spawn(0, 40, config, rng)
            assert 1 <= enemy.number <= 40

    def test_number_formula(self, config):
        enemy = Enemy.spawn(0, 100, config, FixedRandom(0.5))
        assert enemy.number == 51


class TestEnemyUpdate:
    """Tests for falling motion."""

    def test_moves_by_speed_times_elapsed(self):
        enemy = make_enemy(y=0.0, speed=1.0)
        moved = enemy.update(100)
        assert moved.y == 100

    def test_update_returns_new_instance(self):
        enemy = make_enemy(y=10.0, speed=0.5)
        moved = enemy.update(20)
        assert enemy.y == 10.0
        assert moved.y == 20.0
        assert moved.number == enemy.number
        assert moved.lane == enemy.lane

    def test_frame_rate_independent(self):
        """Two half steps land where one full step does."""
        enemy = make_enemy(y=0.0, speed=0.3)
        assert enemy.update(50).update(50).y == pytest.approx(enemy.update(100).y)


class TestEnemyBounds:
    """Tests for leaving the screen and reaching the player row."""

    def test_past_bottom(self, config):
        assert make_enemy(y=701).is_past_bottom(config)
        assert not make_enemy(y=700).is_past_bottom(config)

    @pytest.mark.parametrize("y", [491, 550, 621])
    def test_in_hit_band(self, config, y):
        assert make_enemy(y=y).in_hit_band(config)

    @pytest.mark.parametrize("y", [-156, 0, 490, 622, 700])
    def test_outside_hit_band(self, config, y):
        assert not make_enemy(y=y).in_hit_band(config)


class TestEnemyRender:
    """Tests for draw commands."""

    def test_sprite_then_number(self, config):
        commands = make_enemy(x=75, y=100, number=7).render(config)
        assert isinstance(commands[0], DrawImage)
        assert commands[0].sprite == 'enemy'
        assert (commands[0].x, commands[0].y) == (75, 100)
        assert isinstance(commands[1], DrawText)
        assert commands[1].text == '7'
        assert commands[1].color == BLACK

    def test_single_digit_at_centre(self, config):
        text = make_enemy(x=75, y=100, number=7).render(config)[1]
        assert text.x == pytest.approx(112.5)
        assert text.y == 210

    def test_multi_digit_shifted_left(self, config):
        two = make_enemy(x=75, number=13).render(config)[1]
        three = make_enemy(x=75, number=101).render(config)[1]
        assert two.x == pytest.approx(102.5)
        assert three.x == pytest.approx(92.5)

    def test_is_drawable(self):
        assert isinstance(make_enemy(), Drawable)


class TestEnemyData:
    """Validation of enemy data."""

    def test_rejects_zero_number(self):
        with pytest.raises(ValidationError):
            EnemyData(lane=0, x=0, y=0, speed=1.0, number=0)

    def test_rejects_non_positive_speed(self):
        with pytest.raises(ValidationError):
            EnemyData(lane=0, x=0, y=0, speed=0.0, number=1)

    def test_digits(self):
        assert EnemyData(lane=0, x=0, y=0, speed=1.0, number=1234).digits == 4
