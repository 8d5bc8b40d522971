"""Lightweight data models used across the game."""


class Entity:
    """
    A movable axis-aligned rectangle: the boat, a cannonball or driftwood.

    Attributes
    ----------
    x, y : float
        Top-left corner on the playfield.
    w, h : float
        Width and height, both positive.
    marked_for_deletion : bool
        Set when the entity should be purged at the end of the update pass.
    """

    def __init__(self, x: float, y: float, w: float, h: float) -> None:
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.marked_for_deletion = False

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)

    def is_offscreen(self) -> bool:
        """True once the right edge has passed the left side of the field."""
        return self.x + self.w < 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x:.1f}, y={self.y:.1f}, w={self.w}, h={self.h})"


def overlaps(a: Entity, b: Entity) -> bool:
    """Return True if the two rectangles share a non-zero area."""
    return (
        a.x < b.x + b.w
        and a.x + a.w > b.x
        and a.y < b.y + b.h
        and a.y + a.h > b.y
    )
