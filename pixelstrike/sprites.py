"""Indexed pixel-art sprites and their palettes.

Every sprite is a grid of small integers: 0 is transparent and
1..N pick a logical color slot. The same grid can be recolored per
caller by passing a different color map to :func:`draw_sprite`.
"""

import pygame

# Sprite art. Rows are tuples so the shared data can't be edited.
# 1 = main color, 2 = secondary color, 3 = engine glow
SPRITES = {
    "player": (
        (0, 0, 0, 1, 1, 0, 0, 0),
        (0, 0, 1, 2, 2, 1, 0, 0),
        (0, 0, 1, 2, 2, 1, 0, 0),
        (0, 1, 1, 2, 2, 1, 1, 0),
        (1, 2, 2, 2, 2, 2, 2, 1),
        (1, 0, 1, 2, 2, 1, 0, 1),
        (1, 0, 1, 0, 0, 1, 0, 1),
        (0, 0, 3, 0, 0, 3, 0, 0),  # engines
    ),
    "enemy": (
        (1, 0, 1, 1, 1, 1, 0, 1),
        (0, 1, 1, 2, 2, 1, 1, 0),
        (1, 1, 2, 0, 0, 2, 1, 1),
        (1, 1, 2, 2, 2, 2, 1, 1),
        (0, 1, 0, 1, 1, 0, 1, 0),
        (0, 1, 0, 0, 0, 0, 1, 0),
    ),
    "bullet": (
        (1,),
        (2,),
        (1,),
    ),
    "explosion": (
        (1, 0, 0, 1),
        (0, 2, 2, 0),
        (0, 2, 2, 0),
        (1, 0, 0, 1),
    ),
}

# Default palette (slot 0 is transparent and never looked up)
PALETTE = {
    1: "#ffffff",  # white outline
    2: "#3b8dbc",  # blue
    3: "#ff6b6b",  # red glow
    4: "#feca57",  # yellow
}

# Per-entity recolors
PLAYER_COLORS = {1: "#ecf0f1", 2: "#3498db", 3: "#e67e22"}  # white, sky blue, orange flame
ENEMY_COLORS = {1: "#ecf0f1", 2: "#c0392b"}  # white, dark red

# Fallback for slots a color map doesn't cover
DEFAULT_COLOR = "#ffffff"


def get_sprite(name):
    """Return the immutable pixel grid for sprite ``name``."""
    return SPRITES[name]


def sprite_size(grid):
    """Return (width, height) of a pixel grid."""
    return (len(grid[0]) if grid else 0, len(grid))


def resolve_color(color_map, slot):
    """Look up ``slot`` in ``color_map`` as a pygame Color.

    Missing slots and values pygame can't parse fall back to
    DEFAULT_COLOR instead of failing mid-frame.
    """
    value = color_map.get(slot)
    if value is None:
        return pygame.Color(DEFAULT_COLOR)
    try:
        return pygame.Color(value)
    except (ValueError, TypeError):
        return pygame.Color(DEFAULT_COLOR)


def draw_sprite(surface, grid, x, y, color_map):
    """Paint every non-zero cell of ``grid`` as one pixel.

    The sprite's top-left corner lands on the integer offset
    (int(x), int(y)); pixels outside the surface are clipped.
    """
    ox, oy = int(x), int(y)
    for r, row in enumerate(grid):
        for c, val in enumerate(row):
            if val != 0:
                surface.fill(resolve_color(color_map, val), (ox + c, oy + r, 1, 1))
