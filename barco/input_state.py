"""Held movement keys, written by key events and read by the player."""

from __future__ import annotations

from collections.abc import Iterator

from barco.constants import MOVE_DOWN, MOVE_UP

MOVEMENT_KEYS = frozenset({MOVE_UP, MOVE_DOWN})


class InputState:
    """Set of movement keys currently held down. Other keys are ignored."""

    def __init__(self) -> None:
        self.held: set[str] = set()

    def press(self, key: str) -> None:
        if key in MOVEMENT_KEYS:
            self.held.add(key)

    def release(self, key: str) -> None:
        self.held.discard(key)

    def clear(self) -> None:
        self.held.clear()

    def is_held(self, key: str) -> bool:
        return key in self.held

    def __contains__(self, key: object) -> bool:
        return key in self.held

    def __iter__(self) -> Iterator[str]:
        return iter(self.held)

    def __len__(self) -> int:
        return len(self.held)
