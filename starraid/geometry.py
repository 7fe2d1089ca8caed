"""Screen size and the small geometric types the game works with."""

from __future__ import annotations

from dataclasses import dataclass

WIN_WIDTH = 1024
WIN_HEIGHT = 768


@dataclass
class Point:
    """A position or size on the screen."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def center(self) -> Point:
        """Return the middle of the rectangle."""
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def intersects(self, other: Rect) -> bool:
        """Tell whether the two rectangles overlap; touching edges do not count."""
        overlap_x = self.x + self.width > other.x and other.x + other.width > self.x
        overlap_y = self.y + self.height > other.y and other.y + other.height > self.y
        return overlap_x and overlap_y