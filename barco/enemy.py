"""Cannonball enemy, fired from the right edge at the boat.

Each cannonball is aimed once, when it is fired, at the boat's position at
that moment. It never re-aims, so a boat that moves afterwards dodges it.
"""

from __future__ import annotations

import math
import random

from barco.constants import ENEMY_MIN_SPEED, ENEMY_SIZE, ENEMY_SPEED_RANGE
from barco.models import Entity


def lead_velocity(x: float, y: float, hspeed: float, target_y: float) -> float:
    """
    Vertical speed that brings a projectile from ``y`` to ``target_y`` by the
    time it has travelled ``x`` pixels left at ``hspeed``.

    Raises
    ------
    ValueError
        If the horizontal speed or the crossing time is not positive, or the
        result is not a finite number.
    """
    if hspeed <= 0:
        raise ValueError(f"horizontal speed must be positive, got {hspeed}")
    time_to_cross = x / hspeed
    if time_to_cross <= 0:
        raise ValueError(f"cannot aim from x={x}: no time left to cross")
    vy = (target_y - y) / time_to_cross
    if not math.isfinite(vy):
        raise ValueError(f"aim produced a non-finite vertical speed ({vy})")
    return vy


class Enemy(Entity):
    """
    A cannonball crossing right to left on a straight line.

    Costs the player a life on contact. Scores points when it leaves the
    screen without having hit the boat.
    """

    def __init__(self, x: float, y: float, vx: float, vy: float = 0.0,
                 size: float = ENEMY_SIZE) -> None:
        super().__init__(x, y, size, size)
        self.vx = vx
        self.vy = vy

    @classmethod
    def spawn(cls, width: float, height: float, player_y: float,
              rng: random.Random | None = None) -> Enemy:
        """Fire a new cannonball from the right edge, aimed at ``player_y``."""
        rng = rng or random.Random()
        y = rng.random() * (height - ENEMY_SIZE)
        vx = ENEMY_MIN_SPEED + rng.random() * ENEMY_SPEED_RANGE
        vy = lead_velocity(width, y, vx, player_y)
        return cls(width, y, vx, vy)

    def advance(self, dt: float) -> None:
        self.x -= self.vx * dt
        self.y += self.vy * dt

        if self.is_offscreen():
            self.marked_for_deletion = True
