"""
Tests for the PrimeFall game mode (session and frame scheduling).
"""

import pygame
import pytest

from models import EnemyData, GameAction, GameConfig, GameState
from games.PrimeFall.enemy import Enemy
from games.PrimeFall.engine import FrameState
from games.PrimeFall.game_mode import PrimeFallMode
from games.PrimeFall.player import Player
from primefall.input import InputEvent
from primefall.logging import LogSink, close_all_sinks, register_sink


class FakeClock:
    """Millisecond clock controlled by the test."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FirstChoiceRandom:
    """choice() picks the first item, random() returns 0."""

    def random(self):
        return 0.0

    def choice(self, seq):
        return seq[0]


class RecordingSink(LogSink):
    """Sink that keeps records in memory."""

    def __init__(self):
        self.records = []

    def emit(self, module, record):
        self.records.append((module, record))

    def flush(self):
        pass

    def close(self):
        pass


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game(clock, tmp_path):
    return PrimeFallMode(config=GameConfig(), rng=FirstChoiceRandom(), clock=clock,
                         assets_dir=tmp_path)


@pytest.fixture
def session_sink():
    sink = RecordingSink()
    register_sink('session', sink)
    yield sink
    close_all_sinks()


def key_event(action: GameAction, timestamp: float = 0.0) -> InputEvent:
    return InputEvent(action=action, key=0, timestamp=timestamp)


def doomed_state(game: PrimeFallMode) -> FrameState:
    """One life left and a non-prime about to land in the player's lane."""
    config = game.config
    lanes = [None] * config.lane_count
    lanes[2] = Enemy(EnemyData(lane=2, x=150, y=480, speed=1.0, number=4))
    return FrameState(score=12, lanes=tuple(lanes),
                      player=Player.create(config).with_lives(1))


class TestGameModeInit:
    """Tests for the initial session."""

    def test_metadata(self):
        info = PrimeFallMode.get_info()
        assert info['name'] == "PrimeFall"
        names = [arg['name'] for arg in info['arguments']]
        assert names == ['--mode', '--config', '--max-lives', '--assets-dir',
                         '--fps', '--log-level', '--seed']

    def test_starts_running(self, game, clock):
        assert game.state == GameState.RUNNING
        assert game.is_scheduled
        assert game.last_frame == clock.now
        assert game.get_score() == 0
        assert game.lives == 3

    def test_seeded_games_repeat(self, clock):
        first = PrimeFallMode(config=GameConfig(), seed=11, clock=clock)
        second = PrimeFallMode(config=GameConfig(), seed=11, clock=clock)
        first.update(1016.0)
        second.update(1016.0)
        assert ([e.data for e in first.frame_state.enemies]
                == [e.data for e in second.frame_state.enemies])


class TestGameModeUpdate:
    """Tests for frame stepping."""

    def test_update_steps_frame(self, game):
        assert game.update(1016.0) is True
        assert game.frame_state.enemy_count == 5
        assert game.last_frame == 1016.0
        assert game.commands

    def test_elapsed_since_last_frame(self, game):
        game.update(1016.0)
        game.update(1116.0)
        # speed 0.25 px/ms for 100 ms
        assert game.frame_state.enemies[0].y == pytest.approx(-156 + 25)

    def test_update_uses_clock_by_default(self, game, clock):
        clock.now = 1040.0
        game.update()
        assert game.last_frame == 1040.0

    def test_game_over_halts_loop(self, game):
        game._frame_state = doomed_state(game)
        assert game.update(1020.0) is True
        assert game.state == GameState.GAME_OVER
        assert not game.is_scheduled
        frozen = game.frame_state
        assert game.update(5000.0) is False
        assert game.frame_state is frozen

    def test_game_over_keeps_final_frame(self, game):
        game._frame_state = doomed_state(game)
        game.update(1020.0)
        assert game.commands[-1].text == "12 GAME OVER"
        game.update(5000.0)
        assert game.commands[-1].text == "12 GAME OVER"


class TestGameModeInput:
    """Tests for input handling and restart."""

    def test_moves(self, game):
        game.handle_input([key_event(GameAction.MOVE_RIGHT), key_event(GameAction.MOVE_RIGHT)])
        assert game.frame_state.player.x == 300

    def test_moves_ignored_when_over(self, game):
        game._frame_state = doomed_state(game)
        game.update(1020.0)
        game.handle_input([key_event(GameAction.MOVE_LEFT)])
        assert game.frame_state.player.x == 150

    def test_restart_resumes_loop(self, game, clock):
        game._frame_state = doomed_state(game)
        game.update(1020.0)
        clock.now = 9000.0
        game.handle_input([key_event(GameAction.RESTART)])
        assert game.state == GameState.RUNNING
        assert game.is_scheduled
        assert game.last_frame == 9000.0
        assert game.get_score() == 0
        assert game.lives == 3
        assert game.frame_state.enemy_count == 0

    def test_restart_ignores_time_spent_halted(self, game, clock):
        game._frame_state = doomed_state(game)
        game.update(1020.0)
        clock.now = 9000.0
        game.reset()
        game.update(9016.0)
        game.update(9116.0)
        assert game.frame_state.enemies[0].y == pytest.approx(-156 + 25)

    def test_restart_while_running(self, game, clock):
        game.handle_input([key_event(GameAction.MOVE_LEFT)])
        game.update(1016.0)
        clock.now = 2000.0
        game.reset()
        assert game.is_scheduled
        assert game.frame_state.player.x == 75
        assert game.update(2016.0) is True


class TestGameModeRender:
    """Tests for drawing onto a surface."""

    def test_blank_before_first_frame(self, game):
        screen = pygame.Surface((525, 700))
        screen.fill((255, 0, 0))
        game.render(screen)
        assert screen.get_at((10, 10))[:3] == (0, 0, 0)

    def test_draws_background_placeholder(self, game):
        screen = pygame.Surface((525, 700))
        game.update(1016.0)
        game.render(screen)
        # Empty assets dir: the background is a flat placeholder
        assert screen.get_at((500, 300))[:3] == (12, 12, 40)


class TestSessionRecords:
    """Tests for structured session records."""

    def test_start_restart_and_game_over(self, session_sink, clock, tmp_path):
        game = PrimeFallMode(config=GameConfig(), rng=FirstChoiceRandom(), clock=clock,
                             assets_dir=tmp_path)
        game._frame_state = doomed_state(game)
        game.update(1020.0)
        game.reset()

        events = [record['event'] for module, record in session_sink.records]
        assert events == ['start', 'game_over', 'restart']
        assert all(module == 'session' for module, _ in session_sink.records)
        game_over = session_sink.records[1][1]
        assert game_over['score'] == 12
        assert game_over['lives'] == 0
