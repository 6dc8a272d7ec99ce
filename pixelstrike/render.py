"""Paints a GameState onto the 160x240 surface.

Pure read of the state. Draw order is the z-order: stars at the
back, particles on top of everything.
"""

import pygame

from pixelstrike.config import BACKGROUND_COLOR, BULLET_COLOR, PARTICLE_SIZE, STAR_COLOR
from pixelstrike.sprites import ENEMY_COLORS, PLAYER_COLORS, draw_sprite, get_sprite


def draw(surface, state):
    # Use integer positions so nothing blurs when scaled up.
    surface.fill(pygame.Color(BACKGROUND_COLOR))

    star_color = pygame.Color(STAR_COLOR)
    for s in state.stars:
        surface.fill(star_color, (int(s.x), int(s.y), 1, 1))

    player = state.player
    draw_sprite(surface, get_sprite("player"), player.x, player.y, PLAYER_COLORS)

    enemy_sprite = get_sprite("enemy")
    for e in state.enemies:
        draw_sprite(surface, enemy_sprite, e.x, e.y, ENEMY_COLORS)

    bullet_color = pygame.Color(BULLET_COLOR)
    for b in state.bullets:
        pygame.draw.rect(surface, bullet_color, (int(b.x), int(b.y), b.w, b.h))

    for p in state.particles:
        pygame.draw.rect(
            surface, pygame.Color(p.color), (int(p.x), int(p.y), PARTICLE_SIZE, PARTICLE_SIZE)
        )
