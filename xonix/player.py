"""The player-controlled cursor that cuts trails across the field."""

from __future__ import annotations

from .cell import WHITE
from .objects import MovingObject, Vector

PLAYER_SPEED = 3


class Player(MovingObject):
    """Player piece; moves one step per update and then stops."""

    def __init__(
        self, start_pos: Vector, pixel_size_x: int = 16, pixel_size_y: int = 16
    ) -> None:
        super().__init__(start_pos, PLAYER_SPEED, pixel_size_x, pixel_size_y)
        self.fill_color = WHITE
        self.start_pos = start_pos
        self.life = 3
        self.score = 0
        self.occupied_area_percent = 0
        self._occupying = False
        self._trail: list[Vector] = []

    @property
    def is_occupying(self) -> bool:
        """True while the player is drawing a trail through free space."""
        return self._occupying

    def fail(self) -> int:
        """Lose a life (never below zero) and return the lives left."""
        self.life = max(self.life - 1, 0)
        return self.life

    def start_occupying(self) -> None:
        self._occupying = True

    def stop_occupying(self) -> None:
        self._occupying = False

    def update(self, elapsed: float) -> None:
        """Take one step, then wait for the next direction."""
        super().update(elapsed)
        self.direction = (0, 0)

    def add_trail_point(self, x: int, y: int) -> None:
        self._trail.append((x, y))

    def trail(self) -> list[Vector]:
        """Copy of the grid points on the current trail, in order."""
        return list(self._trail)

    def clear_trail(self) -> None:
        self._trail.clear()