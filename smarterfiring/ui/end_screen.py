"""Game over screen with final score and sharing."""

import logging
import pygame
from typing import Optional
import smarterfiring.constants as constants
from smarterfiring.constants import (
    COLOR_TEXT, COLOR_TEXT_DIM, SHARE_MESSAGE,
    COLOR_BUTTON_GO, COLOR_BUTTON_GO_HOVER
)
from smarterfiring.utils import wrap_text

logger = logging.getLogger(__name__)

SHARE_DISPLAY_MS = 4000


def share_message(score: int) -> str:
    """Text offered to the player for sharing their result."""
    return SHARE_MESSAGE.format(score=score)


class EndScreen:
    """Final score with Play Again and Share Score buttons."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.score = 0

        # Last shared message and when it was shared
        self.shared_text: Optional[str] = None
        self.shared_at = 0

        # Buttons will be created dynamically
        self.play_again_button = None
        self.share_button = None

    def set_results(self, score: int):
        """Set the results to display."""
        self.score = score
        self.shared_text = None

    def share(self, current_time: int) -> str:
        """Prepare the share message and keep it on screen for a while."""
        self.shared_text = share_message(self.score)
        self.shared_at = current_time
        logger.info("Share: %s", self.shared_text)
        return self.shared_text

    def _create_buttons(self):
        """Create buttons based on current window size."""
        w = constants.WINDOW_WIDTH
        h = constants.WINDOW_HEIGHT

        button_width = int(w * 0.38)
        button_height = constants.MENU_BUTTON_HEIGHT
        button_y = h - button_height - 40
        gap = 20

        self.play_again_button = pygame.Rect(
            w // 2 - gap // 2 - button_width,
            button_y,
            button_width,
            button_height
        )

        self.share_button = pygame.Rect(
            w // 2 + gap // 2,
            button_y,
            button_width,
            button_height
        )

    def handle_event(self, event: pygame.event.Event, current_time: int) -> Optional[str]:
        """Handle input events. Returns 'play_again' or 'share'."""
        # Ensure buttons are created with current dimensions
        self._create_buttons()

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.play_again_button.collidepoint(event.pos):
                return "play_again"

            if self.share_button.collidepoint(event.pos):
                self.share(current_time)
                return "share"

        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_r):
            return "play_again"

        return None

    def draw(self, current_time: int):
        """Draw the game over screen."""
        w = constants.WINDOW_WIDTH
        h = constants.WINDOW_HEIGHT

        self.renderer.draw_background()

        self.renderer.draw_text("GAME OVER", (w // 2, int(h * 0.3)), COLOR_TEXT,
                                font_size="large", center=True)
        self.renderer.draw_text(f"Your Score: {self.score}", (w // 2, int(h * 0.42)), COLOR_TEXT,
                                font_size="medium", center=True)

        if self.shared_text and current_time - self.shared_at < SHARE_DISPLAY_MS:
            self.renderer.draw_text_lines(
                wrap_text(self.shared_text, 36),
                w // 2,
                int(h * 0.55),
                COLOR_TEXT_DIM,
                font_size="small"
            )

        self._create_buttons()

        mouse_pos = pygame.mouse.get_pos()

        hovered = self.play_again_button.collidepoint(mouse_pos)
        self.renderer.draw_button(
            self.play_again_button, "Play Again", hovered,
            color=COLOR_BUTTON_GO,
            hover_color=COLOR_BUTTON_GO_HOVER
        )

        hovered = self.share_button.collidepoint(mouse_pos)
        self.renderer.draw_button(self.share_button, "Share Score", hovered)
