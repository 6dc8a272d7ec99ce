"""Session state owned by the game loop.

A single GameState is created per process. The simulation step is
the only writer; the renderer only reads it.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from pixelstrike.config import (
    BASE_SPAWN_INTERVAL,
    FIRE_INTERVAL,
    H,
    STAR_COUNT,
    STAR_MIN_SPEED,
    STAR_SPEED_RANGE,
    W,
)
from pixelstrike.entities import Bullet, Enemy, Particle, Player, Star


def make_stars(rng, count=STAR_COUNT):
    """Scatter ``count`` stars over the whole playfield."""
    return [
        Star(
            x=rng.random() * W,
            y=rng.random() * H,
            speed=STAR_MIN_SPEED + rng.random() * STAR_SPEED_RANGE,
        )
        for _ in range(count)
    ]


@dataclass
class GameState:
    running: bool = False
    score: int = 0
    frames: int = 0
    player: Player = field(default_factory=Player.spawn)
    bullets: List[Bullet] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)
    # frames left until the next shot / enemy
    fire_timer: int = FIRE_INTERVAL
    spawn_timer: int = BASE_SPAWN_INTERVAL
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def create(cls, seed: Optional[int] = None):
        """Build an idle state with a fresh starfield."""
        rng = random.Random(seed)
        return cls(stars=make_stars(rng), rng=rng)

    def reset(self):
        """Start a new session. Stars survive, everything else is reset."""
        self.running = True
        self.score = 0
        self.frames = 0
        self.player = Player.spawn()
        self.bullets = []
        self.enemies = []
        self.particles = []
        self.fire_timer = FIRE_INTERVAL
        self.spawn_timer = BASE_SPAWN_INTERVAL
