import argparse
from dataclasses import dataclass
from typing import Optional

# Gameplay constants for the 160x240 shooter.
# The simulation runs entirely in this logical resolution and the
# window is only a scaled view of it. Speeds are in logical pixels
# per frame, intervals and lifetimes in frames.

# --- Strict 160x240 internal resolution ---
W, H = 160, 240  # logical "real" pixels
SCALE = 3  # default window scale factor (display-only)
FPS = 60

# Sprite / collision sizes (in logical pixels)
PLAYER_W, PLAYER_H = 8, 8
ENEMY_W, ENEMY_H = 8, 6
BULLET_W, BULLET_H = 1, 3
PARTICLE_SIZE = 2

# Player tuning
PLAYER_SPEED = 1.5  # px/frame per held direction
PLAYER_HP = 1
# Offset of the muzzle from the player's left edge
MUZZLE_OFFSET = 3

# Auto-fire: one bullet every FIRE_INTERVAL frames
FIRE_INTERVAL = 15
BULLET_SPEED = 3  # px/frame upward

# Enemy spawning and difficulty.
# The spawn interval shrinks by one frame per SPAWN_SCORE_STEP points
# down to MIN_SPAWN_INTERVAL, enemy speed grows linearly with score.
BASE_SPAWN_INTERVAL = 60
MIN_SPAWN_INTERVAL = 20
SPAWN_SCORE_STEP = 100
ENEMY_BASE_SPEED = 0.5
ENEMY_SPAWN_Y = -8  # just above the top edge
ENEMY_SPEED_SCORE_DIVISOR = 1000
KILL_REWARD = 10

# Explosion particle bursts
PARTICLE_COUNT = 8
PARTICLE_LIFE = 20  # frames
PARTICLE_MAX_SPEED = 1.0  # each velocity component in [-max, max)

# Background starfield (decorative, persists across sessions)
STAR_COUNT = 30
STAR_MIN_SPEED = 0.5
STAR_SPEED_RANGE = 1.0

# Colors
BACKGROUND_COLOR = "#202028"
STAR_COLOR = "#555555"
BULLET_COLOR = "#f1c40f"
EXPLOSION_COLOR = "#ff4d4d"
HUD_COLOR = (236, 240, 241)


@dataclass(frozen=True)
class Settings:
    """Runtime options for the pygame host.

    Gameplay tuning stays in the module constants above; these only
    affect how the game is presented and seeded.
    """

    scale: int = SCALE
    fps: int = FPS
    seed: Optional[int] = None
    log_level: str = "INFO"

    @property
    def window_size(self):
        return (W * self.scale, H * self.scale)


def _positive_int(value):
    """argparse type for options that must be >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pixelstrike",
        description="160x240 vertical arcade shooter (pygame).",
    )
    parser.add_argument(
        "--scale",
        type=_positive_int,
        default=SCALE,
        help="window scale factor (default: %(default)s)",
    )
    parser.add_argument(
        "--fps",
        type=_positive_int,
        default=FPS,
        help="display frames per second; one simulation step per frame (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for spawn positions, stars and particles",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    return parser


def parse_args(argv=None):
    """Parse command line options into a :class:`Settings`."""
    args = build_parser().parse_args(argv)
    return Settings(
        scale=args.scale,
        fps=args.fps,
        seed=args.seed,
        log_level=args.log_level,
    )
