"""Reading the level description file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple


@dataclass(frozen=True)
class Level:
    """Goal and enemy count for one level."""

    area_to_occupy: int
    enemy_num: int


class GameConfig(NamedTuple):
    """Window size, starting lives and the list of levels."""

    width: int
    height: int
    life: int
    levels: list[Level]


def _leading_ints(tokens: list[str]) -> list[int]:
    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def parse_levels(text: str) -> GameConfig:
    """Parse width, height and lives followed by (area, enemies) pairs.

    Reading of pairs stops at the first token that is not an integer;
    an unpaired trailing value is ignored.
    """
    values = _leading_ints(text.split())
    if len(values) < 3:
        raise ValueError("level file must start with width, height and life")
    width, height, life = values[:3]
    rest = values[3:]
    levels = [Level(area, enemies) for area, enemies in zip(rest[::2], rest[1::2])]
    return GameConfig(width, height, life, levels)


class ResourceManager:
    """Game settings loaded from a level file."""

    def __init__(self, path: str | Path = "levels.txt") -> None:
        try:
            text = Path(path).read_text()
        except OSError as exc:
            raise FileNotFoundError(f"Failed to open file: {path}") from exc
        self.width, self.height, self.life, self._levels = parse_levels(text)

    def _level(self, level: int) -> Level:
        if not 0 <= level < len(self._levels):
            raise IndexError(f"no level {level}")
        return self._levels[level]

    def area_to_occupy(self, level: int) -> int:
        return self._level(level).area_to_occupy

    def enemy_num(self, level: int) -> int:
        return self._level(level).enemy_num

    def level_count(self) -> int:
        return len(self._levels)