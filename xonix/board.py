"""The playing field: the cell grid, the enemies and the player."""

from __future__ import annotations

import random
from collections import deque

from .cell import COLUMNS, ROWS, Cell, CellType
from .enemy import CollisionType, Enemy
from .objects import Vector
from .player import Player

_ENEMY_SEED = 17

# Neighbour offsets in the order the fill explores them.
_NEIGHBOURS: tuple[Vector, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

_CELL_CHARS = {
    CellType.OCCUPIED: "#",
    CellType.UNOCCUPIED: ".",
    CellType.TRAIL: "*",
}


class Board:
    """Grid of cells with a player cutting trails and enemies bouncing inside."""

    def __init__(
        self,
        pixel_size_x: int = 0,
        pixel_size_y: int = 0,
        num_of_enemies: int = 1,
        required_percent_win: int = 80,
    ) -> None:
        self.pixel_size: Vector = (pixel_size_x, pixel_size_y)
        self.required_percent_win = required_percent_win
        self._matrix: list[list[Cell]] = [
            [
                Cell(
                    CellType.OCCUPIED if _is_border(x, y) else CellType.UNOCCUPIED,
                    (x, y),
                    pixel_size_x,
                    pixel_size_y,
                )
                for y in range(ROWS)
            ]
            for x in range(COLUMNS)
        ]
        self.enemies: list[Enemy] = self._spawn_enemies(num_of_enemies)
        self.player = Player((0, 0), pixel_size_x, pixel_size_y)

    def _spawn_enemies(self, count: int) -> list[Enemy]:
        rng = random.Random(_ENEMY_SEED)
        px, py = self.pixel_size
        enemies = []
        for _ in range(count):
            x = rng.randrange(COLUMNS - 2) + 1
            y = rng.randrange(ROWS - 2) + 1
            enemies.append(Enemy((x * px, y * py), px, py))
        return enemies

    def cell_type(self, x: int, y: int) -> CellType:
        """Type of the cell at grid column x, row y."""
        return self._matrix[x][y].type

    def _set_type(self, x: int, y: int, cell_type: CellType) -> None:
        self._matrix[x][y].type = cell_type

    def update(self, elapsed: float) -> None:
        """Move every enemy, then the player."""
        for enemy in self.enemies:
            enemy.update(elapsed)
        self.player.update(elapsed)

    def handle_collisions(self) -> None:
        """Resolve what the enemies and the player are about to run into."""
        self._handle_enemy_collisions()
        self._handle_player_collision()

    @staticmethod
    def is_in_grid(point: Vector) -> bool:
        """True if the grid point lies inside the board."""
        x, y = point
        return 0 <= x < COLUMNS and 0 <= y < ROWS

    def _handle_player_collision(self) -> None:
        player = self.player
        if not self.is_in_grid(player.next_grid_pos()):
            player.direction = (0, 0)

        nx, ny = player.next_grid_pos()
        cell_type = self.cell_type(nx, ny)
        if cell_type is CellType.UNOCCUPIED:
            self._set_type(nx, ny, CellType.TRAIL)
            player.start_occupying()
            player.add_trail_point(nx, ny)
        elif cell_type is CellType.TRAIL:
            player.fail()
        elif player.is_occupying:
            player.stop_occupying()
            cx, cy = player.grid_pos()
            for tx, ty in player.trail():
                self._set_type(tx, ty, CellType.OCCUPIED)
            player.clear_trail()
            self._fill_from(cx, cy)

    def _handle_enemy_collisions(self) -> None:
        for enemy in self.enemies:
            nx, ny = enemy.next_grid_pos()
            cell_type = self.cell_type(nx, ny)
            if cell_type is CellType.TRAIL:
                self.player.fail()
            elif cell_type is CellType.OCCUPIED:
                self._bounce(enemy)

    def _bounce(self, enemy: Enemy) -> None:
        x, y = enemy.grid_pos()
        nx, ny = enemy.next_grid_pos()
        if self.cell_type(x, ny) is CellType.OCCUPIED:
            enemy.change_direction(CollisionType.HORIZONTAL)
        if self.cell_type(nx, y) is CellType.OCCUPIED:
            enemy.change_direction(CollisionType.VERTICAL)

    def _fill_from(self, x: int, y: int) -> None:
        """Occupy the first enemy-free region next to (x, y)."""
        for sx, sy in ((x + 1, y), (x, y + 1), (x - 1, y), (x, y - 1)):
            region = self._enemy_free_region(sx, sy)
            if region is not None:
                for cx, cy in region:
                    self._set_type(cx, cy, CellType.OCCUPIED)
                return

    def _enemy_free_region(self, x: int, y: int) -> list[Vector] | None:
        """Free cells reachable from (x, y), or None if none or an enemy borders them."""
        if not self._is_free(x, y):
            return None
        visited = {(x, y)}
        region = [(x, y)]
        queue = deque(region)
        while queue:
            cx, cy = queue.popleft()
            for dx, dy in _NEIGHBOURS:
                adj = (cx + dx, cy + dy)
                if adj not in visited and self._is_free(*adj):
                    visited.add(adj)
                    region.append(adj)
                    queue.append(adj)
                if self._is_enemy(*adj):
                    return None
        return region

    def _is_free(self, x: int, y: int) -> bool:
        if _is_border(x, y):
            return False
        return self.cell_type(x, y) is CellType.UNOCCUPIED

    def _is_enemy(self, x: int, y: int) -> bool:
        return any(enemy.grid_pos() == (x, y) for enemy in self.enemies)

    def render_text(self) -> str:
        """Board as text, one line per row; enemies 'E' and player 'P' on top."""
        rows = [
            [_CELL_CHARS[self._matrix[x][y].type] for x in range(COLUMNS)]
            for y in range(ROWS)
        ]
        marks = [(enemy, "E") for enemy in self.enemies] + [(self.player, "P")]
        for obj, char in marks:
            gx, gy = obj.grid_pos()
            if self.is_in_grid((gx, gy)):
                rows[gy][gx] = char
        return "\n".join("".join(row) for row in rows)


def _is_border(x: int, y: int) -> bool:
    return y <= 1 or y >= ROWS - 2 or x <= 1 or x >= COLUMNS - 2