"""Game entities of the arcade shooter and the rectangle test they share."""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

import pygame

TRAIL_LENGTH = 8


class ItemType(Enum):
    LIFE = auto()
    SHIELD = auto()
    TIME = auto()


class FontType(Enum):
    SILVER = auto()
    VONWAON = auto()


@dataclass(eq=False)
class Item:
    """A power-up that drifts and bounces off the window edges."""

    texture: Any = None
    position: pygame.Vector2 = field(default_factory=pygame.Vector2)
    direction: pygame.Vector2 = field(default_factory=pygame.Vector2)
    width: int = 0
    height: int = 0
    speed: int = 200
    bounce_count: int = 3
    type: ItemType = ItemType.LIFE


@dataclass(eq=False)
class Player:
    """The player's ship with its recent positions kept as a trail."""

    texture: Any = None
    position: pygame.Vector2 = field(default_factory=pygame.Vector2)
    width: int = 0
    height: int = 0
    speed: int = 300
    cool_down: int = 200
    last_shoot_time: int = 0
    health: int = 100
    current_health: int = 100
    score: int = 0
    trail: deque = field(default_factory=lambda: deque(maxlen=TRAIL_LENGTH))


@dataclass(eq=False)
class Enemy:
    texture: Any = None
    position: pygame.Vector2 = field(default_factory=pygame.Vector2)
    width: int = 0
    height: int = 0
    speed: int = 200
    cool_down: int = 2000
    last_shoot_time: int = 0
    health: int = 100
    current_health: int = 100
    damage: int = 20


@dataclass(eq=False)
class EnemyProjectile:
    texture: Any = None
    position: pygame.Vector2 = field(default_factory=pygame.Vector2)
    direction: pygame.Vector2 = field(default_factory=pygame.Vector2)
    width: int = 0
    height: int = 0
    speed: int = 400
    damage: int = 10


@dataclass(eq=False)
class PlayerProjectile:
    texture: Any = None
    position: pygame.Vector2 = field(default_factory=pygame.Vector2)
    width: int = 0
    height: int = 0
    speed: int = 500
    damage: int = 80


@dataclass(eq=False)
class Explosion:
    """A sprite-sheet explosion; ``fps`` frames are shown per second."""

    texture: Any = None
    position: pygame.Vector2 = field(default_factory=pygame.Vector2)
    width: int = 0
    height: int = 0
    current_frame: int = 0
    total_frames: int = 0
    start_time: int = 0
    fps: int = 10


@dataclass(eq=False)
class Background:
    """A vertically scrolling, tiled star layer."""

    texture: Any = None
    position: pygame.Vector2 = field(default_factory=pygame.Vector2)
    offset: float = 0.0
    width: int = 0
    height: int = 0
    speed: int = 30

    def advance(self, delta_time):
        """Scroll by ``delta_time`` seconds, wrapping back one tile height."""
        self.offset += self.speed * delta_time
        if self.offset >= 0:
            self.offset -= self.height
        return self.offset


def _rect(entity):
    return int(entity.position.x), int(entity.position.y), entity.width, entity.height


def intersects(a, b):
    """Whether the integer rectangles of two entities overlap with positive area."""
    ax, ay, aw, ah = _rect(a)
    bx, by, bw, bh = _rect(b)
    if aw <= 0 or ah <= 0 or bw <= 0 or bh <= 0:
        return False
    return max(ax, bx) < min(ax + aw, bx + bw) and max(ay, by) < min(ay + ah, by + bh)