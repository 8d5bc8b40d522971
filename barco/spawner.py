from __future__ import annotations

import random

from barco.constants import (
    ENEMY_SPAWN_INTERVAL_MS, FRIEND_SPAWN_INTERVAL_MS, LEVEL_SPAWN_DECREASE,
    MIN_SPAWN_INTERVAL
)
from barco.enemy import Enemy
from barco.friend import Friend


class Spawner:
    """
    Responsible for firing cannonballs and releasing driftwood at
    level-dependent intervals.

    Notes
    - Timers accumulate simulated milliseconds and fire once they reach the
      interval, then keep whatever time ran past it. Spawn rate follows
      simulated time, not frame size.
    - Difficulty increases with level: cannonballs come faster, down to
      ``MIN_SPAWN_INTERVAL``. Driftwood keeps a fixed cadence.
    """

    def __init__(self, width: float, height: float,
                 rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.enemy_timer = 0.0   # ms since last cannonball
        self.friend_timer = 0.0  # ms since last driftwood

    def reset(self) -> None:
        self.enemy_timer = 0.0
        self.friend_timer = 0.0

    def get_enemy_interval(self, level: int) -> int:
        """
        Calculate cannonball spawn interval (milliseconds) based on level.
        """
        if level <= 1:
            return ENEMY_SPAWN_INTERVAL_MS
        return max(MIN_SPAWN_INTERVAL, ENEMY_SPAWN_INTERVAL_MS - level * LEVEL_SPAWN_DECREASE)

    def get_friend_interval(self, level: int) -> int:
        return FRIEND_SPAWN_INTERVAL_MS

    def maybe_spawn_enemy(self, dt_ms: float, enemies: list[Enemy], level: int,
                          player_y: float) -> Enemy | None:
        """
        Fire a cannonball if the enemy timer is due.

        Parameters
        ----------
        dt_ms : float
            Simulated time elapsed since the previous call, in milliseconds
        enemies : list[Enemy]
            Live cannonballs; the new one is appended here
        level : int
            Current game level
        player_y : float
            Boat position the new cannonball is aimed at

        Returns
        -------
        Enemy | None
            The cannonball fired this call, if any
        """
        self.enemy_timer += dt_ms
        interval = self.get_enemy_interval(level)
        if self.enemy_timer < interval:
            return None

        enemy = Enemy.spawn(self.width, self.height, player_y, self.rng)
        enemies.append(enemy)
        self.enemy_timer -= interval
        return enemy

    def maybe_spawn_friend(self, dt_ms: float, friends: list[Friend],
                           level: int) -> Friend | None:
        """Release a piece of driftwood if the friend timer is due."""
        self.friend_timer += dt_ms
        interval = self.get_friend_interval(level)
        if self.friend_timer < interval:
            return None

        friend = Friend.spawn(self.width, self.height, self.rng)
        friends.append(friend)
        self.friend_timer -= interval
        return friend
