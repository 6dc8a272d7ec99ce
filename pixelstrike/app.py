"""pygame host: window, event pump and presentation of the 160x240 game.

The game logic runs at an internal 160x240 resolution and is scaled
up for display. One simulation step runs per displayed frame.
"""

import logging

import pygame

from pixelstrike.config import H, HUD_COLOR, W, parse_args
from pixelstrike.controls import InputState
from pixelstrike.loop import FrameScheduler, GameLoop
from pixelstrike.presenter import ScreenPresenter
from pixelstrike.render import draw
from pixelstrike.state import GameState

logger = logging.getLogger(__name__)

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


def wants_start(event, presenter):
    """True for a start/retry action while an overlay is visible."""
    if presenter.overlay is None:
        return False
    if event.type == pygame.KEYDOWN:
        return event.key in START_KEYS
    if event.type == pygame.MOUSEBUTTONDOWN:
        # left button only; right click and the wheel don't start a game
        return event.button == 1
    return event.type == pygame.FINGERDOWN


def main(argv=None):
    settings = parse_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    pygame.display.set_caption("Pixel Strike")

    # Window is just a scaled view; the *game* is 160x240.
    window = pygame.display.set_mode(settings.window_size)
    clock = pygame.time.Clock()
    logger.info(f"Window {settings.window_size[0]}x{settings.window_size[1]} at {settings.fps} FPS")

    # This is the only surface the game draws onto.
    screen = pygame.Surface((W, H))
    font = pygame.font.Font(None, 8 * settings.scale)

    state = GameState.create(seed=settings.seed)
    controls = InputState(scale=settings.scale)
    presenter = ScreenPresenter()
    scheduler = FrameScheduler()
    game = GameLoop(state, scheduler, screen, controls, presenter)

    # idle backdrop until the first start
    draw(screen, state)

    running = True
    while running:
        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif wants_start(event, presenter):
                controls.drop_pointer()
                game.start()
            else:
                controls.handle_event(event)

        # --- Update + render (at most one tick per frame) ---
        scheduler.run_pending()

        # --- Present: scale up without adding new detail ---
        scaled = pygame.transform.scale(screen, settings.window_size)
        window.blit(scaled, (0, 0))
        presenter.draw(window, font, HUD_COLOR)
        pygame.display.flip()
        clock.tick(settings.fps)

    pygame.quit()
