"""Player boat: vertical-only movement driven by the held movement keys."""

from __future__ import annotations

from collections.abc import Container

from barco.constants import (
    MOVE_DOWN, MOVE_UP, PLAYER_SIZE, PLAYER_SPEED, PLAYER_X, PLAYER_Y
)
from barco.models import Entity


class Player(Entity):
    """
    The boat controlled with the arrow keys.

    Speed changes are instantaneous (no acceleration). Holding both keys moves
    the boat up. After every move the position is clamped to the playfield;
    the stored velocity is not touched by the clamp.
    """

    def __init__(self, field_height: float, speed: float = PLAYER_SPEED) -> None:
        super().__init__(PLAYER_X, PLAYER_Y, PLAYER_SIZE, PLAYER_SIZE)
        self.vy = 0.0
        self.speed = speed
        self.max_y = max(0.0, field_height - self.h)
        self.clamp()

    def clamp(self) -> None:
        if self.y < 0:
            self.y = 0
        elif self.y > self.max_y:
            self.y = self.max_y

    def advance(self, held_keys: Container[str], dt: float) -> None:
        """
        Move the boat for one frame.

        Parameters
        ----------
        held_keys : Container[str]
            Currently held movement keys (``MOVE_UP`` / ``MOVE_DOWN``).
        dt : float
            Elapsed time in seconds.
        """
        if MOVE_UP in held_keys:
            self.vy = -self.speed
        elif MOVE_DOWN in held_keys:
            self.vy = self.speed
        else:
            self.vy = 0.0

        self.y += self.vy * dt
        self.clamp()
