"""Driftwood friend: floats across on a wavy path and grants a life."""

from __future__ import annotations

import math
import random

from barco.constants import (
    FRIEND_AMPLITUDE, FRIEND_ANGULAR_RATE, FRIEND_MIN_SPEED, FRIEND_SIZE,
    FRIEND_SPEED_RANGE
)
from barco.models import Entity


class Friend(Entity):
    """
    A piece of driftwood. Never targets the player.

    The vertical wobble is ``sin(angle) * FRIEND_AMPLITUDE`` per update, with
    ``angle`` growing by ``FRIEND_ANGULAR_RATE`` radians per second.
    """

    def __init__(self, x: float, y: float, vx: float,
                 size: float = FRIEND_SIZE) -> None:
        super().__init__(x, y, size, size)
        self.vx = vx
        self.angle = 0.0

    @classmethod
    def spawn(cls, width: float, height: float,
              rng: random.Random | None = None) -> Friend:
        rng = rng or random.Random()
        y = rng.random() * (height - FRIEND_SIZE)
        vx = FRIEND_MIN_SPEED + rng.random() * FRIEND_SPEED_RANGE
        return cls(width, y, vx)

    def advance(self, dt: float) -> None:
        self.x -= self.vx * dt
        self.angle += FRIEND_ANGULAR_RATE * dt
        self.y += math.sin(self.angle) * FRIEND_AMPLITUDE

        if self.is_offscreen():
            self.marked_for_deletion = True
