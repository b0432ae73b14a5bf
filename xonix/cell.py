"""Grid dimensions and the cells that make up the playing field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ROWS = 50
COLUMNS = 80

RGB = tuple[int, int, int]

RED: RGB = (255, 0, 0)
BLUE: RGB = (0, 0, 255)
BLACK: RGB = (0, 0, 0)
GREEN: RGB = (0, 255, 0)
WHITE: RGB = (255, 255, 255)


class CellType(Enum):
    """State of a single grid cell."""

    TRAIL = "trail"
    OCCUPIED = "occupied"
    UNOCCUPIED = "unoccupied"


_CELL_COLORS: dict[CellType, RGB] = {
    CellType.TRAIL: RED,
    CellType.OCCUPIED: BLUE,
    CellType.UNOCCUPIED: BLACK,
}


@dataclass
class Cell:
    """A grid cell at a grid position, drawn as a square of pixels."""

    type: CellType
    pos: tuple[int, int]
    pixel_size_x: int = 16
    pixel_size_y: int = 16

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Pixel rectangle as (left, top, width, height)."""
        x, y = self.pos
        return (
            float(x * self.pixel_size_x),
            float(y * self.pixel_size_y),
            float(self.pixel_size_x),
            float(self.pixel_size_y),
        )

    def color(self) -> RGB:
        """Fill colour for the cell's current type."""
        return _CELL_COLORS[self.type]