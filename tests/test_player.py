from xonix.cell import WHITE
from xonix.player import PLAYER_SPEED, Player


def test_initial_state():
    player = Player((0, 0))
    assert player.speed == PLAYER_SPEED
    assert player.life == 3
    assert player.fill_color == WHITE
    assert not player.is_occupying
    assert player.trail() == []


def test_update_moves_once_then_stops():
    player = Player((16, 16))
    player.direction = (1, 0)
    player.update(0.0)
    assert player.grid_pos() == (2, 1)
    assert player.direction == (0, 0)
    player.update(0.0)
    assert player.grid_pos() == (2, 1)


def test_occupying_toggle():
    player = Player((0, 0))
    player.start_occupying()
    assert player.is_occupying
    player.stop_occupying()
    assert not player.is_occupying


def test_trail_keeps_order_and_clears():
    player = Player((0, 0))
    player.add_trail_point(3, 4)
    player.add_trail_point(3, 5)
    assert player.trail() == [(3, 4), (3, 5)]
    player.clear_trail()
    assert player.trail() == []


def test_trail_returns_copy():
    player = Player((0, 0))
    player.add_trail_point(1, 2)
    snapshot = player.trail()
    snapshot.append((9, 9))
    assert player.trail() == [(1, 2)]


def test_fail_loses_life_but_not_below_zero():
    player = Player((0, 0))
    assert player.fail() == 2
    player.fail()
    player.fail()
    assert player.fail() == 0
    assert player.life == 0