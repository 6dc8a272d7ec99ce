"""Notifications from the simulation to whatever shows the score."""

import logging

logger = logging.getLogger(__name__)


def format_score(score):
    """Zero-padded 4 digit score, e.g. 0040."""
    return str(score).zfill(4)


class Presenter:
    """Receives score and session events. Does nothing by default."""

    def on_session_started(self):
        pass

    def on_score_changed(self, score):
        pass

    def on_game_over(self, final_score):
        pass


class ScreenPresenter(Presenter):
    """Tracks the HUD text and which overlay is visible.

    ``overlay`` is "start" before the first session, None while
    playing and "game_over" once the player is hit. Drawing is done
    by the pygame host with :meth:`draw`.
    """

    def __init__(self):
        self.score_text = format_score(0)
        self.overlay = "start"
        self.final_score = None

    def on_session_started(self):
        self.overlay = None
        self.final_score = None

    def on_score_changed(self, score):
        self.score_text = format_score(score)

    def on_game_over(self, final_score):
        self.final_score = final_score
        self.overlay = "game_over"
        logger.info(f"Final score: {final_score}")

    def overlay_lines(self):
        if self.overlay == "start":
            return ["PIXEL STRIKE", "SPACE / CLICK TO START"]
        if self.overlay == "game_over":
            return ["GAME OVER", f"SCORE {self.final_score}", "SPACE / CLICK TO RETRY"]
        return []

    def draw(self, window, font, color):
        # score in the top-left corner, overlay text centered
        hud = font.render(self.score_text, False, color)
        window.blit(hud, (8, 8))

        lines = self.overlay_lines()
        if not lines:
            return
        ww, wh = window.get_size()
        line_h = font.get_linesize()
        top = wh // 2 - line_h * len(lines) // 2
        for i, text in enumerate(lines):
            label = font.render(text, False, color)
            window.blit(label, (ww // 2 - label.get_width() // 2, top + i * line_h))
