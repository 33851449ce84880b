"""Simulation of one round of the arcade shooter, free of drawing and audio."""

import math
import random
from dataclasses import dataclass, field, replace
from collections import deque

import pygame

from .objects import (
    TRAIL_LENGTH,
    Enemy,
    EnemyProjectile,
    Explosion,
    Item,
    ItemType,
    Player,
    PlayerProjectile,
    intersects,
)

SPAWN_CHANCE = 1 / 60.0
DROP_CHANCE = 0.5
OFFSCREEN_MARGIN = 32
KILL_SCORE = 20
ITEM_SCORE = 10
LIFE_BONUS = 50
BOUNCE_SPEEDUP = 100


@dataclass
class Controls:
    """Keys held during one frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False


@dataclass
class Templates:
    """Prototypes the world copies when it creates entities."""

    player: Player = field(default_factory=Player)
    enemy: Enemy = field(default_factory=Enemy)
    enemy_projectile: EnemyProjectile = field(default_factory=EnemyProjectile)
    player_projectile: PlayerProjectile = field(default_factory=PlayerProjectile)
    explosion: Explosion = field(default_factory=Explosion)
    item: Item = field(default_factory=Item)


def _center_on(entity, source):
    entity.position.x = source.position.x + source.width // 2 - entity.width // 2
    entity.position.y = source.position.y + source.height // 2 - entity.height // 2


class World:
    """Player, enemies, projectiles, explosions and items of one round.

    Sound effects the round triggers are appended by name to ``sounds``.
    Times ``now`` are in milliseconds, ``delta_time`` in seconds.
    """

    def __init__(self, width, height, templates=None, rng=None):
        self.width = width
        self.height = height
        self.templates = templates if templates is not None else Templates()
        self.rng = rng if rng is not None else random.Random()
        template = self.templates.player
        self.player = replace(
            template,
            position=pygame.Vector2(width / 2 - template.width / 2, height - template.height),
            trail=deque(maxlen=TRAIL_LENGTH),
        )
        self.enemies = []
        self.enemy_projectiles = []
        self.player_projectiles = []
        self.explosions = []
        self.items = []
        self.score = 0
        self.is_dead = False
        self.death_timer = 0.0
        self.sounds = []
        self._crashed = set()

    def steer(self, controls, delta_time, now):
        """Move the player, keep it inside the window, fire and record the trail."""
        if self.is_dead:
            return
        player = self.player
        step = delta_time * player.speed
        if controls.up:
            player.position.y -= step
        if controls.down:
            player.position.y += step
        if controls.left:
            player.position.x -= step
        if controls.right:
            player.position.x += step

        player.position.x = max(player.position.x, 0)
        player.position.x = min(player.position.x, self.width - player.width)
        player.position.y = max(player.position.y, 0)
        player.position.y = min(player.position.y, self.height - player.height)

        if controls.fire and now - player.last_shoot_time > player.cool_down:
            self.shoot_player()
            player.last_shoot_time = now
        player.trail.append(pygame.Vector2(player.position))

    def update_player(self, now):
        """Kill the player at zero health, otherwise resolve ramming enemies."""
        if self.is_dead:
            return
        player = self.player
        if player.current_health <= 0:
            self.is_dead = True
            self._explode_at(player, now)
            self.sounds.append("player_explode")
            player.score = self.score
            return
        for enemy in self.enemies:
            if intersects(player, enemy):
                player.current_health -= enemy.damage
                self._crashed.add(enemy)
                enemy.current_health = 0

    def shoot_player(self):
        """Fire a projectile from the nose of the player's ship."""
        player = self.player
        projectile = replace(self.templates.player_projectile, position=pygame.Vector2())
        projectile.position.x = player.position.x + player.width // 2 - projectile.width // 2
        projectile.position.y = player.position.y - projectile.height
        self.player_projectiles.append(projectile)
        self.sounds.append("player_shoot")
        return projectile

    def update_player_projectiles(self, delta_time):
        remaining = []
        for projectile in self.player_projectiles:
            projectile.position.y -= delta_time * projectile.speed
            if projectile.position.y + OFFSCREEN_MARGIN < 0:
                continue
            target = next((e for e in self.enemies if intersects(e, projectile)), None)
            if target is not None:
                target.current_health -= projectile.damage
                self.sounds.append("hit")
            else:
                remaining.append(projectile)
        self.player_projectiles = remaining

    def player_get_item(self, item):
        """Apply a collected item and score it."""
        self.score += ITEM_SCORE
        if item.type is ItemType.LIFE:
            self.player.current_health = min(
                self.player.current_health + LIFE_BONUS, self.player.health
            )
        self.sounds.append("get_item")

    def spawn_enemy(self):
        """Sometimes create an enemy just above the window; return it or None."""
        if self.rng.random() > SPAWN_CHANCE:
            return None
        enemy = replace(self.templates.enemy, position=pygame.Vector2())
        enemy.position.x = self.rng.random() * (self.width - enemy.width)
        enemy.position.y = -enemy.height
        self.enemies.append(enemy)
        return enemy

    def _may_shoot(self, enemy, safe_distance):
        player = self.player
        above = enemy.position.y < player.position.y + player.height
        if above and enemy.position.y < safe_distance:
            return True
        if enemy.position.y > safe_distance:
            overlaps = not (
                player.position.x + player.width < enemy.position.x
                or enemy.position.x + enemy.width < player.position.x
            )
            return overlaps and above
        return False

    def update_enemies(self, delta_time, now):
        """Move enemies, let them fire, and explode the destroyed ones."""
        safe_distance = self.height - 4 * self.player.height
        remaining = []
        for enemy in self.enemies:
            if not self.is_dead:
                enemy.position.y += delta_time * enemy.speed
            if enemy.position.y > self.height:
                self._crashed.discard(enemy)
                continue
            if (
                self._may_shoot(enemy, safe_distance)
                and now - enemy.last_shoot_time > enemy.cool_down
                and not self.is_dead
            ):
                self.shoot_enemy(enemy)
                enemy.last_shoot_time = now
            if enemy.current_health <= 0:
                self.enemy_explode(enemy, now)
            else:
                remaining.append(enemy)
        self.enemies = remaining

    def shoot_enemy(self, enemy):
        """Fire a projectile from the enemy's centre towards the player."""
        projectile = replace(
            self.templates.enemy_projectile,
            position=pygame.Vector2(),
            direction=self.direction_to_player(enemy),
        )
        _center_on(projectile, enemy)
        self.enemy_projectiles.append(projectile)
        self.sounds.append("enemy_shoot")
        return projectile

    def update_enemy_projectiles(self, delta_time):
        remaining = []
        for projectile in self.enemy_projectiles:
            projectile.position += projectile.direction * (projectile.speed * delta_time)
            if (
                projectile.position.x > self.width + OFFSCREEN_MARGIN
                or projectile.position.x < -OFFSCREEN_MARGIN
                or projectile.position.y > self.height + OFFSCREEN_MARGIN
            ):
                continue
            if intersects(self.player, projectile) and not self.is_dead:
                self.player.current_health -= projectile.damage
            else:
                remaining.append(projectile)
        self.enemy_projectiles = remaining

    def _explode_at(self, entity, now):
        explosion = replace(self.templates.explosion, position=pygame.Vector2(), start_time=now)
        _center_on(explosion, entity)
        self.explosions.append(explosion)
        return explosion

    def enemy_explode(self, enemy, now):
        """Blow up an enemy, maybe dropping an item unless it rammed the player."""
        self._explode_at(enemy, now)
        self.sounds.append("enemy_explode")
        if self.rng.random() < DROP_CHANCE and enemy not in self._crashed:
            self.drop_item(enemy)
        self._crashed.discard(enemy)
        self.score += KILL_SCORE

    def update_explosions(self, now):
        remaining = []
        for explosion in self.explosions:
            explosion.current_frame = int((now - explosion.start_time) * explosion.fps / 1000.0)
            if explosion.current_frame < explosion.total_frames:
                remaining.append(explosion)
        self.explosions = remaining

    def drop_item(self, enemy):
        """Release an item from the enemy's centre in a random direction."""
        angle = self.rng.random() * 2 * math.pi
        item = replace(
            self.templates.item,
            position=pygame.Vector2(),
            direction=pygame.Vector2(math.cos(angle), math.sin(angle)),
        )
        _center_on(item, enemy)
        self.items.append(item)
        return item

    def _bounce(self, item):
        if item.position.x < 0 or item.position.x + item.width > self.width:
            item.direction.x = -item.direction.x
        elif item.position.y < 0 or item.position.y + item.height > self.height:
            item.direction.y = -item.direction.y
        else:
            return
        item.speed += BOUNCE_SPEEDUP
        item.bounce_count -= 1

    def update_items(self, delta_time):
        remaining = []
        for item in self.items:
            item.position += item.direction * (item.speed * delta_time)
            if item.bounce_count > 0:
                self._bounce(item)
            if (
                item.position.x + item.width < 0
                or item.position.x > self.width
                or item.position.y + item.height < 0
                or item.position.y > self.height
            ):
                continue
            if intersects(self.player, item):
                self.player_get_item(item)
            else:
                remaining.append(item)
        self.items = remaining

    def direction_to_player(self, enemy):
        """Unit vector an enemy fires along; zero when there is no distance."""
        player = self.player
        x = (player.position.x + player.width // 2) - (enemy.position.x - enemy.width // 2)
        y = (player.position.y + player.height // 2) - (enemy.position.y + enemy.height // 2)
        length = math.hypot(x, y)
        if length == 0:
            return pygame.Vector2()
        return pygame.Vector2(x / length, y / length)

    def step(self, controls, delta_time, now):
        """Advance the whole round by one frame."""
        self.steer(controls, delta_time, now)
        self.update_player(now)
        self.update_player_projectiles(delta_time)
        self.spawn_enemy()
        self.update_enemies(delta_time, now)
        self.update_enemy_projectiles(delta_time)
        self.update_explosions(now)
        self.update_items(delta_time)
        if self.is_dead:
            self.death_timer += delta_time