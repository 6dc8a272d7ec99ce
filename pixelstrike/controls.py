"""Keyboard / mouse / touch input reduced to movement intents.

Events may arrive at any time between ticks; the simulation only
ever sees an immutable :class:`Intent` taken with
:meth:`InputState.snapshot` at the start of its step.
"""

from dataclasses import dataclass
from typing import Optional

import pygame

from pixelstrike.config import SCALE, W

# Arrow keys or A/D both work.
LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


@dataclass(frozen=True)
class Intent:
    move_left: bool = False
    move_right: bool = False
    # absolute x in logical pixels, overrides the keys for one frame
    pointer_x: Optional[float] = None


class InputState:
    """Current intent flags, written by the event pump."""

    def __init__(self, scale=SCALE):
        self.scale = scale
        self.held = set()
        self.pointer_x = None

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            self.held.add(event.key)
        elif event.type == pygame.KEYUP:
            self.held.discard(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.pointer_x = event.pos[0] / self.scale
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self.pointer_x = event.pos[0] / self.scale
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            # finger coordinates are normalized to 0..1
            self.pointer_x = event.x * W

    def snapshot(self):
        """Return the intent for this frame and drop the pointer override."""
        intent = Intent(
            move_left=any(k in self.held for k in LEFT_KEYS),
            move_right=any(k in self.held for k in RIGHT_KEYS),
            pointer_x=self.pointer_x,
        )
        self.pointer_x = None
        return intent

    def drop_pointer(self):
        """Forget a pending pointer position; held keys stay held."""
        self.pointer_x = None
