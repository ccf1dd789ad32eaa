"""
PrimeFall rules engine.

The engine is a set of pure transitions over FrameState. Given the same
random source, step(state, elapsed) always yields the same new state and
the same draw commands, so gameplay can be tested without a display.

Examples:
    >>> engine = PrimeFallEngine(GameConfig(), rng=random.Random(1))
    >>> state = engine.new_game()
    >>> result = engine.step(state, 16.0)
    >>> result.state.enemy_count
    5
"""

import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from models import DrawCommand, DrawImage, DrawText, GameAction, GameConfig, GameState
from games.PrimeFall.enemy import Enemy
from games.PrimeFall.player import Player
from games.PrimeFall.primes import is_prime
from primefall.logging import get_logger

log = get_logger('engine')

Lanes = Tuple[Optional[Enemy], ...]


@dataclass(frozen=True)
class FrameState:
    """Complete game state between two frames.

    Attributes:
        score: Current score (non-negative)
        lanes: One slot per lane, None where the lane is empty
        player: The player
        state: RUNNING or GAME_OVER
    """
    score: int
    lanes: Lanes
    player: Player
    state: GameState = GameState.RUNNING

    @property
    def enemies(self) -> List[Enemy]:
        """Enemies currently in play, ordered by lane."""
        return [enemy for enemy in self.lanes if enemy is not None]

    @property
    def enemy_count(self) -> int:
        return len(self.enemies)

    @property
    def empty_lanes(self) -> List[int]:
        return [i for i, enemy in enumerate(self.lanes) if enemy is None]

    @property
    def is_running(self) -> bool:
        return self.state == GameState.RUNNING


@dataclass(frozen=True)
class FrameResult:
    """Output of one engine step: the next state and what to draw."""
    state: FrameState
    commands: List[DrawCommand] = field(default_factory=list)


@dataclass(frozen=True)
class HitOutcome:
    """What happened when an enemy reached the player."""
    number: int
    prime: bool


class PrimeFallEngine:
    """
    PrimeFall game rules.

    Holds only the configuration and the random source; all game state
    lives in FrameState values passed in and returned.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self._config = config
        self._rng = rng or random.Random()

    @property
    def config(self) -> GameConfig:
        return self._config

    # =========================================================================
    # State construction
    # =========================================================================

    def empty_lanes(self) -> Lanes:
        """A lane tuple with every slot empty."""
        return (None,) * self._config.lane_count

    def new_game(self, player: Optional[Player] = None) -> FrameState:
        """
        Fresh game state: score 0, no enemies, full lives.

        Args:
            player: Player to keep (its lane is preserved), or None for a new one
        """
        if player is None:
            player = Player.create(self._config)
        else:
            player = player.with_lives(self._config.max_lives)
        return FrameState(score=0, lanes=self.empty_lanes(), player=player)

    def restart(self, state: FrameState) -> FrameState:
        """Start over from any state, keeping the player's lane."""
        log.debug("Restart (previous score %d)", state.score)
        return self.new_game(player=state.player)

    # =========================================================================
    # Spawning
    # =========================================================================

    def add_enemy(self, lanes: Lanes, score: int) -> Lanes:
        """
        Spawn one enemy in a uniformly random empty lane.

        Raises:
            ValueError: If every lane is occupied
        """
        free = [i for i, enemy in enumerate(lanes) if enemy is None]
        if not free:
            raise ValueError("No empty lane to spawn an enemy in")
        lane = self._rng.choice(free)
        enemy = Enemy.spawn(lane, score, self._config, self._rng)
        log.trace("Spawned %s", enemy)
        updated = list(lanes)
        updated[lane] = enemy
        return tuple(updated)

    def setup_enemies(self, state: FrameState) -> FrameState:
        """Fill empty lanes until max_enemies are in play."""
        lanes = state.lanes
        while sum(1 for enemy in lanes if enemy is not None) < self._config.max_enemies:
            lanes = self.add_enemy(lanes, state.score)
        return replace(state, lanes=lanes)

    # =========================================================================
    # Input
    # =========================================================================

    def apply_action(self, state: FrameState, action: GameAction) -> FrameState:
        """
        Apply an input action.

        Moves are ignored once the game is over; only RESTART changes a
        finished game.
        """
        if action == GameAction.RESTART:
            return self.restart(state)
        if not state.is_running:
            return state
        return replace(state, player=state.player.move(action.direction, self._config))

    # =========================================================================
    # Collision
    # =========================================================================

    def resolve_collision(self, state: FrameState) -> Tuple[FrameState, Optional[HitOutcome]]:
        """
        Check the enemy in the player's lane and resolve a hit.

        A prime adds its value to the score; anything else costs a life.
        Either way the enemy leaves its lane.
        """
        lane = state.player.lane(self._config)
        enemy = state.lanes[lane]
        if enemy is None or not enemy.in_hit_band(self._config):
            return state, None

        outcome = HitOutcome(number=enemy.number, prime=is_prime(enemy.number))
        score = state.score
        player = state.player
        if outcome.prime:
            score += enemy.number
        else:
            player = player.lose_life()

        lanes = list(state.lanes)
        lanes[lane] = None
        log.debug("Caught %d in lane %d (%s)", enemy.number, lane,
                  "prime" if outcome.prime else "not prime")
        return replace(state, score=score, player=player, lanes=tuple(lanes)), outcome

    # =========================================================================
    # Frame step
    # =========================================================================

    def step(self, state: FrameState, elapsed: float) -> FrameResult:
        """
        Advance the game by one frame.

        1. Move every enemy by elapsed * speed.
        2. Draw background, enemies, player.
        3. Remove enemies past the bottom; each one scores 1.
        4. Refill empty lanes up to max_enemies.
        5. Resolve a collision in the player's lane.
        6. Draw the game-over line, or the score and hearts.

        A finished game is returned unchanged with no draw commands.

        Args:
            state: State after the previous frame
            elapsed: Milliseconds since the previous frame

        Returns:
            FrameResult with the new state and this frame's draw commands
        """
        if not state.is_running:
            return FrameResult(state=state)

        config = self._config
        lanes = tuple(enemy.update(elapsed) if enemy is not None else None
                      for enemy in state.lanes)

        commands: List[DrawCommand] = [
            DrawImage(sprite='background', x=0, y=0,
                      width=config.game_width, height=config.game_height),
        ]
        for enemy in lanes:
            if enemy is not None:
                commands.extend(enemy.render(config))
        commands.extend(state.player.render(config))

        score = state.score
        survivors = []
        for enemy in lanes:
            if enemy is not None and enemy.is_past_bottom(config):
                score += 1
                survivors.append(None)
            else:
                survivors.append(enemy)

        state = replace(state, lanes=tuple(survivors), score=score)
        state = self.setup_enemies(state)
        state, _ = self.resolve_collision(state)

        if state.player.is_dead:
            log.info("Game over with score %d", state.score)
            state = replace(state, state=GameState.GAME_OVER)
            commands.append(self._text(f"{state.score} GAME OVER", 5, 30))
        else:
            commands.extend(self.hud(state))

        return FrameResult(state=state, commands=commands)

    def hud(self, state: FrameState) -> List[DrawCommand]:
        """Score line, lives label and one heart per remaining life."""
        size = self._config.heart_size
        commands: List[DrawCommand] = [
            self._text(f"Score: {state.score}", 5, 30),
            self._text("Lives: ", 5, 60),
        ]
        for i in range(state.player.lives):
            commands.append(DrawImage(sprite='heart', x=80 + i * size, y=size,
                                      width=size, height=size))
        return commands

    def _text(self, text: str, x: float, y: float) -> DrawText:
        return DrawText(text=text, x=x, y=y, size=self._config.font_size,
                        bold=self._config.font_bold, color=self._config.hud_color)
