"""Integer points and axis-aligned rectangles used for widget layout."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A 2D point, also used as a size (``x`` is width, ``y`` is height)."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def is_left(self, other: Point) -> bool:
        """True if this point lies left of ``other``."""
        return self.x < other.x

    def is_right(self, other: Point) -> bool:
        """True if this point lies right of ``other``."""
        return self.x > other.x

    def is_up(self, other: Point) -> bool:
        """True if this point lies above ``other``."""
        return self.y < other.y

    def is_down(self, other: Point) -> bool:
        """True if this point lies below ``other``."""
        return self.y > other.y


Size = Point


@dataclass
class Rect:
    """A rectangle given by its lowest corner and its extent."""

    position: Point = field(default_factory=Point)
    size: Point = field(default_factory=Point)

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> Rect:
        """Build a rectangle spanning two corner points."""
        return cls.from_coords(p1.x, p1.y, p2.x, p2.y)

    @classmethod
    def from_coords(cls, x1: int, y1: int, x2: int, y2: int) -> Rect:
        """Build a rectangle from the coordinates of two corners."""
        if x1 < x2:
            px, sx = x1, x2 - x1
        else:
            px, sx = x2, x1 - x2
        sy = 0
        if y1 < y2:
            py, sy = y1, y2 - y1
        else:
            # A rectangle whose first corner is not above the second keeps a
            # zero height and takes the vertical span as its width.
            py, sx = y2, y1 - y2
        return cls(Point(px, py), Point(sx, sy))

    def half_size(self) -> Point:
        return Point(self.size.x >> 1, self.size.y >> 1)

    def center_point(self) -> Point:
        return self.position + self.half_size()

    def is_above_and_below(self, p: Point) -> bool:
        """True if ``p`` lies between the horizontal edges (inclusive)."""
        return self.position.y <= p.y <= self.position.y + self.size.y

    def is_left_and_right_of(self, p: Point) -> bool:
        """True if ``p`` lies between the vertical edges (inclusive)."""
        return self.position.x <= p.x <= self.position.x + self.size.x

    def surrounds(self, p: Point) -> bool:
        """True if ``p`` lies within the rectangle's edges (inclusive)."""
        return self.is_above_and_below(p) and self.is_left_and_right_of(p)

    def min_x(self) -> int:
        return self.position.x

    def min_y(self) -> int:
        return self.position.y

    def max_x(self) -> int:
        return self.position.x + self.size.x

    def max_y(self) -> int:
        return self.position.y + self.size.y

    def top_left(self) -> Point:
        return self.position

    def top_right(self) -> Point:
        return Point(self.max_x(), self.min_y())

    def bottom_left(self) -> Point:
        return Point(self.min_x(), self.max_y())

    def bottom_right(self) -> Point:
        return self.position + self.size

    def set_position(self, p: Point) -> Rect:
        self.position = p
        return self

    def set_size(self, s: Point) -> Rect:
        self.size = s
        return self

    def translate_by(self, p: Point) -> Rect:
        self.position = self.position + p
        return self

    def expand_by(self, amount: int) -> Rect:
        """Grow in every direction by ``amount`` (negative shrinks)."""
        self.position = self.position - Point(amount, amount)
        self.size = self.size + Point(amount * 2, amount * 2)
        return self

    def expand_width_by(self, amount: int) -> Rect:
        """Grow horizontally on both sides by ``amount``."""
        self.position = self.position - Point(amount, 0)
        self.size = self.size + Point(amount * 2, 0)
        return self

    def expand_height_by(self, amount: int) -> Rect:
        """Grow vertically on both sides by ``amount``."""
        self.position = self.position - Point(0, amount)
        self.size = self.size + Point(0, amount * 2)
        return self

    def width(self) -> int:
        return self.size.x

    def height(self) -> int:
        return self.size.y