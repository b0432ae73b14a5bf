"""Rectangular game objects and objects that move across the grid."""

from __future__ import annotations

from .cell import RGB, WHITE

Vector = tuple[int, int]
Point = tuple[float, float]


class GameObject:
    """An axis-aligned rectangle placed at a pixel position."""

    def __init__(
        self, pos: Vector, pixel_size_x: int = 16, pixel_size_y: int = 16
    ) -> None:
        self.x = float(pos[0])
        self.y = float(pos[1])
        self.width = float(pixel_size_x)
        self.height = float(pixel_size_y)
        self.fill_color: RGB = WHITE

    def contains(self, point: Point) -> bool:
        """True if the point lies inside the rectangle (right/bottom edges excluded)."""
        px, py = point
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )

    def intersects(self, other: GameObject) -> bool:
        """True if the two rectangles overlap with positive area."""
        left = max(self.x, other.x)
        right = min(self.x + self.width, other.x + other.width)
        top = max(self.y, other.y)
        bottom = min(self.y + self.height, other.y + other.height)
        return left < right and top < bottom

    def pos(self) -> Point:
        """Pixel position of the top-left corner."""
        return (self.x, self.y)

    def update(self, elapsed: float) -> None:
        """Advance the object by one frame; static objects stay put."""


class MovingObject(GameObject):
    """A game object that steps one cell per update along its direction."""

    def __init__(
        self,
        position: Vector,
        speed: int = 0,
        pixel_size_x: int = 16,
        pixel_size_y: int = 16,
        direction: Vector = (1, 1),
    ) -> None:
        super().__init__(position, pixel_size_x, pixel_size_y)
        self.speed = speed
        self.direction: Vector = direction

    def update(self, elapsed: float) -> None:
        """Move one cell in the current direction."""
        dx, dy = self.direction
        self.x += dx * self.width
        self.y += dy * self.height

    def grid_pos(self) -> Vector:
        """Grid cell currently covered by the object."""
        return (int(self.x / self.width), int(self.y / self.height))

    def next_grid_pos(self) -> Vector:
        """Grid cell the object will reach on its next step."""
        gx, gy = self.grid_pos()
        dx, dy = self.direction
        return (gx + dx, gy + dy)