import pytest

from xonix.cell import GREEN
from xonix.enemy import CollisionType, Enemy


def test_enemy_defaults():
    enemy = Enemy((32, 32))
    assert enemy.direction == (1, 1)
    assert enemy.fill_color == GREEN
    assert enemy.grid_pos() == (2, 2)


def test_vertical_collision_flips_x():
    enemy = Enemy((32, 32), direction=(1, -1))
    enemy.change_direction(CollisionType.VERTICAL)
    assert enemy.direction == (-1, -1)


def test_horizontal_collision_flips_y():
    enemy = Enemy((32, 32), direction=(1, -1))
    enemy.change_direction(CollisionType.HORIZONTAL)
    assert enemy.direction == (1, 1)


@pytest.mark.parametrize("collision", list(CollisionType))
def test_double_bounce_restores_direction(collision):
    enemy = Enemy((0, 0), direction=(-1, 1))
    enemy.change_direction(collision)
    enemy.change_direction(collision)
    assert enemy.direction == (-1, 1)


def test_invalid_collision_raises():
    enemy = Enemy((0, 0))
    with pytest.raises(ValueError):
        enemy.change_direction("diagonal")


def test_enemy_moves_after_bounce():
    enemy = Enemy((32, 32))
    enemy.change_direction(CollisionType.VERTICAL)
    expected = enemy.next_grid_pos()
    enemy.update(0.0)
    assert enemy.grid_pos() == expected