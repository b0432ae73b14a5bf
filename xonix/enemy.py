"""Enemies that bounce diagonally around the free area."""

from __future__ import annotations

from enum import Enum

from .cell import GREEN
from .objects import MovingObject, Vector


class CollisionType(Enum):
    """Which wall an enemy bounced off."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Enemy(MovingObject):
    """A bouncing enemy moving diagonally one cell per update."""

    def __init__(
        self,
        start_pos: Vector,
        pixel_size_x: int = 16,
        pixel_size_y: int = 16,
        direction: Vector = (1, 1),
    ) -> None:
        super().__init__(
            start_pos, pixel_size_x=pixel_size_x, pixel_size_y=pixel_size_y,
            direction=direction,
        )
        self.fill_color = GREEN

    def change_direction(self, collision: CollisionType) -> None:
        """Reflect the horizontal or vertical component of the direction."""
        dx, dy = self.direction
        if collision is CollisionType.VERTICAL:
            self.direction = (-dx, dy)
        elif collision is CollisionType.HORIZONTAL:
            self.direction = (dx, -dy)
        else:
            raise ValueError("Invalid collision type")