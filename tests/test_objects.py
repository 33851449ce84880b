import pygame
import pytest

from spaceshoot.objects import (
    Background,
    Enemy,
    Explosion,
    Item,
    ItemType,
    Player,
    PlayerProjectile,
    intersects,
)


def at(x, y, width, height):
    return Enemy(position=pygame.Vector2(x, y), width=width, height=height)


def test_overlapping_rectangles_intersect():
    assert intersects(at(0, 0, 10, 10), at(5, 5, 10, 10)) is True


def test_touching_edges_do_not_intersect():
    assert intersects(at(0, 0, 10, 10), at(10, 0, 10, 10)) is False
    assert intersects(at(0, 0, 10, 10), at(0, 10, 10, 10)) is False


def test_empty_rectangle_never_intersects():
    assert intersects(at(0, 0, 0, 10), at(0, 0, 10, 10)) is False
    assert intersects(at(0, 0, 10, 10), at(0, 0, 10, 0)) is False


def test_positions_are_truncated_before_testing():
    a = PlayerProjectile(position=pygame.Vector2(9.9, 0), width=1, height=1)
    b = at(10, 0, 5, 5)
    assert intersects(a, b) is False


def test_intersection_is_symmetric():
    a = Player(position=pygame.Vector2(3, 4), width=8, height=8)
    b = Item(position=pygame.Vector2(10, 11), width=5, height=5)
    assert intersects(a, b) == intersects(b, a)


def test_background_wraps_within_one_tile():
    background = Background(height=100, speed=30)
    offset = background.advance(1.0)
    assert -background.height <= offset < 0
    assert background.offset == offset


def test_background_without_wrap_keeps_negative_offset():
    background = Background(offset=-50.0, height=100, speed=30)
    background.advance(1.0)
    assert background.offset == pytest.approx(-20.0)


def test_player_trail_keeps_last_eight_positions():
    player = Player()
    for step in range(12):
        player.trail.append(pygame.Vector2(step, 0))
    assert len(player.trail) == 8
    assert player.trail[-1].x == 11


def test_entities_get_independent_positions():
    first, second = Explosion(), Explosion()
    first.position.x = 5
    assert second.position.x == 0


def test_item_defaults_to_life():
    assert Item().type is ItemType.LIFE