"""Entity records for the playfield.

All coordinates are logical pixels with the origin at the top-left
corner and y growing downward.
"""

from dataclasses import dataclass

from pixelstrike.config import (
    BULLET_H,
    BULLET_W,
    ENEMY_H,
    ENEMY_W,
    H,
    PLAYER_H,
    PLAYER_HP,
    PLAYER_W,
    W,
)


@dataclass
class Player:
    """The player ship; one per session."""
    x: float
    y: float
    w: int = PLAYER_W
    h: int = PLAYER_H
    hp: int = PLAYER_HP

    @classmethod
    def spawn(cls):
        # bottom center, 20px above the bottom edge
        return cls(x=W / 2 - PLAYER_W / 2, y=H - 20)


@dataclass
class Bullet:
    x: float
    y: float
    w: int = BULLET_W
    h: int = BULLET_H


@dataclass
class Enemy:
    x: float
    y: float
    speed: float
    w: int = ENEMY_W
    h: int = ENEMY_H

    @property
    def center(self):
        return (self.x + self.w / 2, self.y + self.h / 2)


@dataclass
class Particle:
    """Explosion fragment with a frame countdown."""
    x: float
    y: float
    vx: float
    vy: float
    life: int
    color: str


@dataclass
class Star:
    """Background star. Wraps instead of dying."""
    x: float
    y: float
    speed: float


def clamp(v, lo, hi):
    """Clamp value v into the inclusive range [lo, hi].

    Used for keeping the player inside the playfield.
    """
    return lo if v < lo else hi if v > hi else v


def aabb(ax, ay, aw, ah, bx, by, bw, bh):
    """Axis-aligned bounding box collision test.

    Returns True when rectangle A (ax,ay,aw,ah) overlaps
    rectangle B (bx,by,bw,bh). Rectangles that only touch
    along an edge do not overlap.
    """
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def overlaps(a, b):
    """aabb() for two entities carrying x, y, w and h."""
    return aabb(a.x, a.y, a.w, a.h, b.x, b.y, b.w, b.h)
