"""One playthrough: owns the boat, cannonballs, driftwood and the counters.

A session is created at game start and replaced wholesale on restart. It is
never reset in place.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from barco.constants import (
    INITIAL_LIVES, LEVEL_DURATION_S, LEVEL_TIME_EPSILON, PLAYER_SIZE,
    POINTS_PER_ENEMY
)
from barco.enemy import Enemy
from barco.friend import Friend
from barco.input_state import InputState
from barco.logger import GameLogger
from barco.models import overlaps
from barco.player import Player
from barco.spawner import Spawner

Rect = tuple[float, float, float, float]

ACTIVE = "active"
GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session, everything the renderer needs."""
    player: Rect
    enemies: tuple[Rect, ...]
    friends: tuple[Rect, ...]
    score: int
    lives: int
    level: int
    game_over: bool
    next_level_in: float  # seconds


class GameSession:
    """
    Game state and the per-frame update.

    Update order: level timer, boat, cannonballs (spawn, move, collide,
    score, purge), driftwood (spawn, move, collide, purge). Every live entity
    is advanced exactly once per update; removals are collected and purged
    after the pass.
    """

    def __init__(self, width: float, height: float,
                 rng: random.Random | None = None,
                 logger: GameLogger | None = None,
                 lives: int = INITIAL_LIVES,
                 input_state: InputState | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"playfield must have positive size, got {width}x{height}")

        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.logger = logger
        self.input = input_state if input_state is not None else InputState()

        if height < PLAYER_SIZE:
            raise ValueError(f"playfield height {height} is shorter than the boat")

        self.player = Player(height)
        self.spawner = Spawner(width, height, self.rng)
        self.enemies: list[Enemy] = []
        self.friends: list[Friend] = []

        self.starting_lives = lives
        self.score = 0
        self.lives = lives
        self.level = 1
        self.game_time = 0.0  # seconds since the last level-up
        self.game_over = False

        if self.logger:
            self.logger.log_session_start(self.lives)

    @property
    def state(self) -> str:
        return GAME_OVER if self.game_over else ACTIVE

    def restart(self) -> GameSession:
        """Return a brand-new session on the same playfield."""
        return GameSession(self.width, self.height, rng=self.rng,
                           logger=self.logger, lives=self.starting_lives,
                           input_state=self.input)

    # ------------------------------- Update & State ----------------------------------

    def update(self, dt: float) -> None:
        """
        Advance the game by ``dt`` seconds.

        Does nothing once the game is over, and skips frames with a negative
        or non-finite ``dt``.
        """
        if self.game_over:
            return
        if not math.isfinite(dt) or dt < 0:
            return

        self.game_time += dt
        if self.game_time >= LEVEL_DURATION_S - LEVEL_TIME_EPSILON:
            self.level_up()

        self.player.advance(self.input, dt)

        dt_ms = dt * 1000
        self.update_enemies(dt, dt_ms)
        if self.game_over:
            return
        self.update_friends(dt, dt_ms)

    def level_up(self) -> None:
        self.level += 1
        self.game_time = 0.0
        if self.logger:
            self.logger.log_level_up(self.level)

    def update_enemies(self, dt: float, dt_ms: float) -> None:
        self.spawner.maybe_spawn_enemy(dt_ms, self.enemies, self.level, self.player.y)

        for enemy in self.enemies:
            enemy.advance(dt)

        for enemy in self.enemies:
            if overlaps(self.player, enemy):
                enemy.marked_for_deletion = True
                self.lives -= 1
                if self.logger:
                    self.logger.log_hit(self.lives)
                if self.lives <= 0:
                    self.game_over = True
                    if self.logger:
                        self.logger.log_game_over(self.score, self.level)
                    break
            elif enemy.is_offscreen():
                self.score += POINTS_PER_ENEMY * self.level

        self.enemies = [e for e in self.enemies if not e.marked_for_deletion]

    def update_friends(self, dt: float, dt_ms: float) -> None:
        self.spawner.maybe_spawn_friend(dt_ms, self.friends, self.level)

        for friend in self.friends:
            friend.advance(dt)

        for friend in self.friends:
            if overlaps(self.player, friend):
                friend.marked_for_deletion = True
                self.lives += 1
                if self.logger:
                    self.logger.log_pickup(self.lives)

        self.friends = [f for f in self.friends if not f.marked_for_deletion]

    # ------------------------------- Rendering ---------------------------------------

    def snapshot(self) -> Snapshot:
        return Snapshot(
            player=self.player.rect,
            enemies=tuple(e.rect for e in self.enemies),
            friends=tuple(f.rect for f in self.friends),
            score=self.score,
            lives=self.lives,
            level=self.level,
            game_over=self.game_over,
            next_level_in=max(0.0, LEVEL_DURATION_S - self.game_time),
        )
