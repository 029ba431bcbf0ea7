"""In-game HUD (Heads-Up Display)."""

import pygame
from typing import Optional
import smarterfiring.constants as constants
from smarterfiring.constants import (
    COLOR_TEXT, COLOR_BUTTON_DANGER, COLOR_BUTTON_DANGER_HOVER
)
from smarterfiring.game_session import SessionSnapshot


class HUD:
    """In-game HUD showing score, time left and the restart button."""

    def __init__(self, renderer):
        self.renderer = renderer

        # HUD area and buttons will be created dynamically
        self.rect = None
        self.restart_button = None
        self.info_button = None

    def _create_layout(self):
        """Create HUD layout based on current window size."""
        w = constants.WINDOW_WIDTH
        hud_h = constants.HUD_HEIGHT
        pad = constants.HUD_PADDING

        self.rect = pygame.Rect(pad, pad, w - 2 * pad, hud_h - pad)

        btn_h = int(hud_h * 0.4)
        self.info_button = pygame.Rect(w - pad - btn_h, pad, btn_h, btn_h)
        self.restart_button = pygame.Rect(
            self.info_button.left - 130 - pad // 2,
            self.rect.centery - btn_h // 2,
            130, btn_h
        )

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """Handle input events. Returns 'restart' or 'info'."""
        # Ensure layout is created with current dimensions
        self._create_layout()

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.restart_button.collidepoint(event.pos):
                return "restart"
            if self.info_button.collidepoint(event.pos):
                return "info"
        return None

    def draw(self, snapshot: SessionSnapshot):
        """Draw the HUD."""
        # Recreate layout each frame to handle dynamic sizing
        self._create_layout()

        pad = constants.HUD_PADDING

        self.renderer.draw_text(
            f"Score: {snapshot.score}",
            (self.rect.left + pad, self.rect.top + 8),
            COLOR_TEXT,
            font_size="medium"
        )
        self.renderer.draw_text(
            f"Time: {snapshot.time_remaining}s",
            (self.rect.left + pad, self.rect.top + 48),
            COLOR_TEXT,
            font_size="medium"
        )

        mouse_pos = pygame.mouse.get_pos()
        hovered = self.restart_button.collidepoint(mouse_pos)
        self.renderer.draw_button(
            self.restart_button, "Restart", hovered,
            color=COLOR_BUTTON_DANGER,
            hover_color=COLOR_BUTTON_DANGER_HOVER,
            font_size="small"
        )

        hovered = self.info_button.collidepoint(mouse_pos)
        self.renderer.draw_button(self.info_button, "i", hovered, font_size="small")
