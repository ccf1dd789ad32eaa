"""
PrimeFall game mode.

Numbered enemies fall down seven lanes. Move left and right to catch the
primes; catching any other number costs a life. Enemies that reach the
bottom uncaught are worth one point each.
"""

import random
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pygame

from models import GameAction, GameConfig, GameState
from primefall.base_game import BaseGame
from primefall.input.input_event import InputEvent
from primefall.input.sources.keyboard import monotonic_ms
from primefall.logging import emit_record, get_logger
from primefall.rendering import Renderer, SpriteAtlas
from games.PrimeFall.config import ASSETS_DIR, default_config
from games.PrimeFall.engine import FrameState, PrimeFallEngine

log = get_logger('game_mode')


class PrimeFallMode(BaseGame):
    """
    PrimeFall game mode.

    Owns the session: the current FrameState, the last frame timestamp and
    whether the frame loop is scheduled. The host loop calls handle_input,
    update and render once per display refresh.
    """

    # Game metadata
    NAME = "PrimeFall"
    DESCRIPTION = "Catch the falling primes, dodge everything else."
    VERSION = "1.0.0"
    AUTHOR = "PrimeFall Team"

    # CLI argument definitions
    ARGUMENTS = [
        {
            'name': '--mode',
            'type': str,
            'default': None,
            'help': 'Game mode name from the modes directory (e.g. classic, gentle)'
        },
        {
            'name': '--config',
            'type': str,
            'default': None,
            'help': 'Path to a YAML mode file (overrides --mode)'
        },
        {
            'name': '--max-lives',
            'type': int,
            'default': None,
            'help': 'Lives at the start of each game'
        },
        {
            'name': '--assets-dir',
            'type': str,
            'default': None,
            'help': 'Directory containing the sprite images'
        },
        {
            'name': '--fps',
            'type': int,
            'default': None,
            'help': 'Target frames per second'
        },
    ]

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        clock: Callable[[], float] = monotonic_ms,
        assets_dir: Optional[Path] = None,
    ):
        """
        Initialize the game mode and start the first game.

        Args:
            config: Game configuration (defaults from environment)
            rng: Random source for spawning (overrides seed)
            seed: Seed for a new random source, for repeatable games
            clock: Millisecond timestamp source
            assets_dir: Directory containing the sprite images
        """
        self._config = config or default_config()
        if rng is None:
            rng = random.Random(seed)
        self._engine = PrimeFallEngine(self._config, rng=rng)
        self._clock = clock
        self._assets_dir = Path(assets_dir) if assets_dir is not None else ASSETS_DIR

        self._frame_state: FrameState = self._engine.new_game()
        self._last_frame = 0.0
        self._scheduled = False
        self._commands: List = []
        self._games_started = 0

        # Renderer (initialized lazily, needs pygame)
        self._renderer: Optional[Renderer] = None

        self.reset()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def engine(self) -> PrimeFallEngine:
        return self._engine

    @property
    def frame_state(self) -> FrameState:
        return self._frame_state

    @property
    def last_frame(self) -> float:
        """Timestamp (ms) of the last stepped frame or restart."""
        return self._last_frame

    @property
    def is_scheduled(self) -> bool:
        """True while frames are being stepped."""
        return self._scheduled

    @property
    def commands(self) -> List:
        """Draw commands produced by the last stepped frame."""
        return list(self._commands)

    @property
    def lives(self) -> int:
        return self._frame_state.player.lives

    def get_score(self) -> int:
        return self._frame_state.score

    def _get_internal_state(self) -> GameState:
        return self._frame_state.state

    # =========================================================================
    # Session control
    # =========================================================================

    def reset(self) -> None:
        """Restart the game, keeping the player's lane.

        Records the current time as the last frame so the first step after
        a restart does not see the time spent on the game-over screen.
        """
        self._frame_state = self._engine.restart(self._frame_state)
        self._last_frame = self._clock()
        self._scheduled = True
        self._commands = []
        self._games_started += 1

        event = 'start' if self._games_started == 1 else 'restart'
        log.info("Game %s (mode '%s')", event, self._config.name)
        self._emit_session(event)

    def handle_input(self, events: List[InputEvent]) -> None:
        """
        Apply input events in arrival order.

        Args:
            events: List of input events
        """
        for event in events:
            if event.action == GameAction.RESTART:
                self.reset()
            else:
                self._frame_state = self._engine.apply_action(self._frame_state, event.action)

    def update(self, now: Optional[float] = None) -> bool:
        """
        Step one frame if the loop is scheduled.

        Args:
            now: Current timestamp in milliseconds (defaults to the clock)

        Returns:
            True if a frame was stepped
        """
        if not self._scheduled:
            return False
        if now is None:
            now = self._clock()

        elapsed = now - self._last_frame
        result = self._engine.step(self._frame_state, elapsed)
        self._frame_state = result.state
        self._commands = result.commands

        if result.state.state == GameState.GAME_OVER:
            self._scheduled = False
            log.info("Game over: score %d", result.state.score)
            self._emit_session('game_over')
        else:
            self._last_frame = now
        return True

    # =========================================================================
    # Rendering
    # =========================================================================

    def _get_renderer(self) -> Renderer:
        """Get or create the renderer, loading sprites on first use."""
        if self._renderer is None:
            atlas = SpriteAtlas(self._config, self._assets_dir)
            atlas.load()
            self._renderer = Renderer(atlas)
        return self._renderer

    def render(self, screen: pygame.Surface) -> None:
        """
        Draw the last stepped frame.

        After game over the final frame, including the GAME OVER line, stays
        on screen until restart.

        Args:
            screen: Pygame surface to draw on
        """
        if not self._commands:
            screen.fill((0, 0, 0))
            return
        self._get_renderer().draw(screen, self._commands)

    # =========================================================================
    # Session records
    # =========================================================================

    def _emit_session(self, event: str) -> None:
        record: Dict[str, Any] = {
            'event': event,
            'mode': self._config.name,
            'score': self._frame_state.score,
            'lives': self._frame_state.player.lives,
            'timestamp_ms': self._last_frame,
        }
        emit_record('session', record)
