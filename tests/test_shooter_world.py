import math

import pygame
import pytest

from spaceshoot.objects import (
    Enemy,
    EnemyProjectile,
    Explosion,
    Item,
    ItemType,
    Player,
    PlayerProjectile,
)
from spaceshoot.shooter_world import Controls, Templates, World


class ScriptedRandom:
    def __init__(self, values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0) if self._values else 1.0


def make_world(values=()):
    templates = Templates(
        player=Player(width=50, height=50),
        enemy=Enemy(width=40, height=40),
        enemy_projectile=EnemyProjectile(width=10, height=10),
        player_projectile=PlayerProjectile(width=10, height=20),
        explosion=Explosion(width=64, height=64, total_frames=4),
        item=Item(width=20, height=20),
    )
    return World(600, 800, templates, ScriptedRandom(values))


def enemy_at(x, y):
    return Enemy(position=pygame.Vector2(x, y), width=40, height=40)


def test_player_starts_bottom_centre():
    world = make_world()
    player = world.player
    assert player.position.y == world.height - player.height
    assert player.position.x + player.width / 2 == world.width / 2


def test_steer_clamps_to_window():
    world = make_world()
    world.steer(Controls(left=True, up=True), 10.0, 0)
    assert (world.player.position.x, world.player.position.y) == (0, 0)
    world.steer(Controls(right=True, down=True), 10.0, 0)
    assert world.player.position.x == world.width - world.player.width
    assert world.player.position.y == world.height - world.player.height


def test_fire_respects_cool_down():
    world = make_world()
    fire = Controls(fire=True)
    world.steer(fire, 0.0, 1000)
    assert len(world.player_projectiles) == 1
    world.steer(fire, 0.0, 1100)
    assert len(world.player_projectiles) == 1
    world.steer(fire, 0.0, 1201)
    assert len(world.player_projectiles) == 2
    assert world.sounds.count("player_shoot") == 2


def test_projectile_leaves_from_player_centre():
    world = make_world()
    projectile = world.shoot_player()
    player = world.player
    assert projectile.position.x + projectile.width / 2 == player.position.x + player.width / 2
    assert projectile.position.y + projectile.height == player.position.y


def test_trail_is_bounded():
    world = make_world()
    for _ in range(12):
        world.steer(Controls(), 0.0, 0)
    assert len(world.player.trail) == 8


def test_spawn_enemy_rolls_chance():
    world = make_world([0.5])
    assert world.spawn_enemy() is None
    assert world.enemies == []


def test_spawn_enemy_above_window():
    world = make_world([0.0, 0.5])
    enemy = world.spawn_enemy()
    assert world.enemies == [enemy]
    assert enemy.position.x == pytest.approx(0.5 * (world.width - enemy.width))
    assert enemy.position.y == -enemy.height


def test_player_projectile_hits_enemy():
    world = make_world()
    enemy = enemy_at(290, 700)
    world.enemies.append(enemy)
    world.shoot_player()
    world.update_player_projectiles(0.01)
    assert world.player_projectiles == []
    assert enemy.current_health == Enemy().current_health - PlayerProjectile().damage
    assert "hit" in world.sounds


def test_player_projectile_removed_off_screen():
    world = make_world()
    world.player_projectiles.append(PlayerProjectile(position=pygame.Vector2(0, -40), width=5, height=5))
    world.update_player_projectiles(0.0)
    assert world.player_projectiles == []


def test_destroyed_enemy_explodes_scores_and_drops():
    world = make_world([0.1, 0.25])
    enemy = enemy_at(100, 100)
    enemy.current_health = 0
    world.enemies.append(enemy)
    world.update_enemies(0.0, 0)
    assert world.enemies == []
    assert len(world.explosions) == 1
    assert world.score == 20
    assert len(world.items) == 1
    assert world.items[0].direction.length() == pytest.approx(1.0)


def test_rammed_enemy_drops_nothing():
    world = make_world([0.1])
    enemy = enemy_at(world.player.position.x, world.player.position.y)
    world.enemies.append(enemy)
    world.update_player(0)
    assert world.player.current_health == Player().health - Enemy().damage
    world.update_enemies(0.0, 0)
    assert world.enemies == []
    assert world.items == []


def test_enemy_fires_after_cool_down():
    world = make_world()
    enemy = enemy_at(100, 100)
    world.enemies.append(enemy)
    world.update_enemies(0.0, 3000)
    assert len(world.enemy_projectiles) == 1
    assert enemy.last_shoot_time == 3000
    assert "enemy_shoot" in world.sounds


def test_enemy_below_window_is_removed():
    world = make_world()
    world.enemies.append(enemy_at(100, world.height + 1))
    world.update_enemies(0.0, 0)
    assert world.enemies == []
    assert world.explosions == []


def test_player_dies_at_zero_health():
    world = make_world()
    world.player.current_health = 0
    world.update_player(500)
    assert world.is_dead is True
    explosion = world.explosions[0]
    assert explosion.start_time == 500
    player = world.player
    assert explosion.position.x + explosion.width / 2 == player.position.x + player.width / 2
    assert "player_explode" in world.sounds


def test_life_item_caps_health():
    world = make_world()
    world.player.current_health = world.player.health - 1
    world.player_get_item(Item(type=ItemType.LIFE))
    assert world.player.current_health == world.player.health
    assert world.score == 10


def test_shield_item_leaves_health():
    world = make_world()
    world.player.current_health = 30
    world.player_get_item(Item(type=ItemType.SHIELD))
    assert world.player.current_health == 30


def test_item_bounces_off_left_edge():
    world = make_world()
    item = Item(position=pygame.Vector2(-1, 100), direction=pygame.Vector2(-1, 0), width=20, height=20)
    world.items.append(item)
    world.update_items(0.0)
    assert world.items == [item]
    assert item.direction.x == 1
    assert item.speed == Item().speed + 100
    assert item.bounce_count == Item().bounce_count - 1


def test_item_without_bounces_leaves_window():
    world = make_world()
    item = Item(position=pygame.Vector2(-30, 100), direction=pygame.Vector2(-1, 0),
                width=20, height=20, bounce_count=0)
    world.items.append(item)
    world.update_items(0.0)
    assert world.items == []


def test_item_picked_up_by_player():
    world = make_world()
    item = Item(position=pygame.Vector2(world.player.position), width=20, height=20)
    world.items.append(item)
    world.update_items(0.0)
    assert world.items == []
    assert "get_item" in world.sounds


def test_explosion_expires_after_its_frames():
    world = make_world()
    world.explosions.append(Explosion(total_frames=4, start_time=0))
    world.update_explosions(100)
    assert world.explosions[0].current_frame == 1
    world.update_explosions(400)
    assert world.explosions == []


def test_enemy_projectile_hits_player():
    world = make_world()
    world.enemy_projectiles.append(
        EnemyProjectile(position=pygame.Vector2(world.player.position), width=10, height=10)
    )
    world.update_enemy_projectiles(0.0)
    assert world.enemy_projectiles == []
    assert world.player.current_health == Player().health - EnemyProjectile().damage


def test_enemy_projectile_leaving_window_is_removed():
    world = make_world()
    world.enemy_projectiles.append(
        EnemyProjectile(position=pygame.Vector2(world.width + 40, 10), width=10, height=10)
    )
    world.update_enemy_projectiles(0.0)
    assert world.enemy_projectiles == []
    assert world.player.current_health == world.player.health


def test_direction_to_player_is_unit_vector():
    world = make_world()
    direction = world.direction_to_player(enemy_at(10, 10))
    assert math.hypot(direction.x, direction.y) == pytest.approx(1.0)
    assert direction.y > 0


def test_step_counts_time_after_death():
    world = make_world()
    world.player.current_health = 0
    world.step(Controls(), 0.5, 0)
    assert world.is_dead is True
    assert world.death_timer == pytest.approx(0.5)
    world.step(Controls(), 0.5, 16)
    assert world.death_timer == pytest.approx(1.0)