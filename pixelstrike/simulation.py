"""One fixed simulation step: advances a GameState from frame n to n+1.

The sub-steps always run in the same order because later ones rely
on the positions produced by earlier ones:

    frame counter -> player -> auto-fire -> bullets -> spawn
    -> enemies & collisions -> particles -> stars

Entities destroyed during a scan are only marked; each collection is
compacted once after its scan, so nothing is removed while it is
being iterated and nothing destroyed survives into the next frame.
"""

import logging
import math

from pixelstrike.config import (
    BASE_SPAWN_INTERVAL,
    BULLET_SPEED,
    ENEMY_BASE_SPEED,
    ENEMY_SPAWN_Y,
    ENEMY_SPEED_SCORE_DIVISOR,
    ENEMY_W,
    EXPLOSION_COLOR,
    FIRE_INTERVAL,
    H,
    KILL_REWARD,
    MIN_SPAWN_INTERVAL,
    MUZZLE_OFFSET,
    PARTICLE_COUNT,
    PARTICLE_LIFE,
    PARTICLE_MAX_SPEED,
    PLAYER_SPEED,
    SPAWN_SCORE_STEP,
    W,
)
from pixelstrike.entities import Bullet, Enemy, Particle, clamp, overlaps
from pixelstrike.presenter import Presenter

logger = logging.getLogger(__name__)

_NO_PRESENTER = Presenter()


def spawn_interval(score):
    """Frames between enemy spawns; shrinks with score, never below 20."""
    return max(MIN_SPAWN_INTERVAL, BASE_SPAWN_INTERVAL - score // SPAWN_SCORE_STEP)


def enemy_speed(score):
    """Fall speed given to enemies spawned at this score."""
    return ENEMY_BASE_SPEED + score / ENEMY_SPEED_SCORE_DIVISOR


def step(state, intent, presenter=None):
    """Advance ``state`` by one frame.

    ``intent`` is the input snapshot for this frame. Score changes are
    reported to ``presenter``. When an enemy touched the player this
    frame, returns the score at the moment of the first impact, else
    None; ending the session is left to the caller.
    """
    presenter = presenter or _NO_PRESENTER

    state.frames += 1
    _move_player(state, intent)
    fired = _auto_fire(state)
    _advance_bullets(state)
    # fresh shots sit at the muzzle until the next frame
    state.bullets.extend(fired)
    _spawn_enemies(state)
    impact_score = _advance_enemies(state, presenter)
    _advance_particles(state)
    _advance_stars(state)

    _check_finite(state)
    return impact_score


def _move_player(state, intent):
    player = state.player
    if intent.pointer_x is not None:
        # absolute pointer wins and centers the ship under it
        player.x = intent.pointer_x - player.w / 2
    else:
        if intent.move_left:
            player.x -= PLAYER_SPEED
        if intent.move_right:
            player.x += PLAYER_SPEED
    player.x = clamp(player.x, 0, W - player.w)


def _auto_fire(state):
    state.fire_timer -= 1
    if state.fire_timer > 0:
        return []
    state.fire_timer = FIRE_INTERVAL
    player = state.player
    return [Bullet(x=player.x + MUZZLE_OFFSET, y=player.y)]


def _advance_bullets(state):
    for b in state.bullets:
        b.y -= BULLET_SPEED
    state.bullets = [b for b in state.bullets if b.y >= 0]


def _spawn_enemies(state):
    state.spawn_timer -= 1
    if state.spawn_timer > 0:
        return
    state.spawn_timer = spawn_interval(state.score)
    enemy = Enemy(
        x=state.rng.random() * (W - ENEMY_W),
        y=ENEMY_SPAWN_Y,
        speed=enemy_speed(state.score),
    )
    state.enemies.append(enemy)
    logger.debug(f"Frame {state.frames}: enemy spawned at x={enemy.x:.1f} speed={enemy.speed:.3f}")


def _advance_enemies(state, presenter):
    player = state.player
    dead_enemies = set()
    dead_bullets = set()
    impact_score = None

    for ei, e in enumerate(state.enemies):
        e.y += e.speed

        # Bullet-enemy: the first unused bullet that overlaps wins.
        # A bullet is consumed at most once and an enemy dies at most once.
        for bi, b in enumerate(state.bullets):
            if bi in dead_bullets or not overlaps(b, e):
                continue
            dead_enemies.add(ei)
            dead_bullets.add(bi)
            cx, cy = e.center
            explode(state, cx, cy, EXPLOSION_COLOR)
            state.score += KILL_REWARD
            presenter.on_score_changed(state.score)
            logger.debug(f"Frame {state.frames}: enemy destroyed, score {state.score}")
            break

        # Player-enemy: checked even for an enemy shot down above.
        # The session ends at the first impact; later kills don't count.
        if overlaps(player, e):
            player.hp = max(0, player.hp - 1)
            if impact_score is None:
                impact_score = state.score

        if e.y > H:
            dead_enemies.add(ei)

    state.enemies = [e for i, e in enumerate(state.enemies) if i not in dead_enemies]
    state.bullets = [b for i, b in enumerate(state.bullets) if i not in dead_bullets]
    return impact_score


def explode(state, x, y, color):
    """Append a burst of PARTICLE_COUNT fragments flying out of (x, y)."""
    rng = state.rng
    for _ in range(PARTICLE_COUNT):
        state.particles.append(
            Particle(
                x=x,
                y=y,
                vx=(rng.random() - 0.5) * 2 * PARTICLE_MAX_SPEED,
                vy=(rng.random() - 0.5) * 2 * PARTICLE_MAX_SPEED,
                life=PARTICLE_LIFE,
                color=color,
            )
        )


def _advance_particles(state):
    for p in state.particles:
        p.x += p.vx
        p.y += p.vy
        p.life -= 1
    state.particles = [p for p in state.particles if p.life > 0]


def _advance_stars(state):
    for s in state.stars:
        s.y += s.speed
        if s.y > H:
            s.y = 0
            s.x = state.rng.random() * W


def _check_finite(state):
    for group in ((state.player,), state.bullets, state.enemies, state.particles, state.stars):
        for entity in group:
            assert math.isfinite(entity.x) and math.isfinite(entity.y), (
                f"non-finite position after frame {state.frames}: {entity!r}"
            )
