"""About / rules overlay."""

import pygame
from typing import Optional
import smarterfiring.constants as constants
from smarterfiring.constants import (
    INFO_TITLE, INFO_ABOUT, INFO_RULES, INFO_TIPS, COLOR_TEXT
)
from smarterfiring.utils import wrap_text


class InfoOverlay:
    """Modal sheet with the game rules. Returns 'close' when dismissed."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.visible = False

        # Buttons will be created dynamically
        self.close_button = None

    def toggle(self):
        self.visible = not self.visible

    def _create_buttons(self):
        w = constants.WINDOW_WIDTH
        h = constants.WINDOW_HEIGHT
        btn_w = constants.MENU_BUTTON_WIDTH // 2

        self.close_button = pygame.Rect(w // 2 - btn_w // 2, h - constants.MENU_BUTTON_HEIGHT - 40,
                                        btn_w, constants.MENU_BUTTON_HEIGHT)

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        self._create_buttons()

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.close_button.collidepoint(event.pos):
                self.visible = False
                return "close"
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_i):
            self.visible = False
            return "close"
        return None

    def draw(self):
        self._create_buttons()

        w = constants.WINDOW_WIDTH
        h = constants.WINDOW_HEIGHT

        self.renderer.draw_background(top=(0, 90, 255), bottom=(128, 0, 128))

        y = self.renderer.draw_text_lines([INFO_TITLE], w // 2, int(h * 0.06), COLOR_TEXT, font_size="large")
        y = self.renderer.draw_text_lines(wrap_text(INFO_ABOUT, 44), w // 2, y + 20, COLOR_TEXT)

        y = self.renderer.draw_text_lines(["Game Rules:"], w // 2, y + 25, COLOR_TEXT, font_size="medium")
        y = self.renderer.draw_text_lines([f"- {rule}" for rule in INFO_RULES], w // 2, y + 5, COLOR_TEXT)

        y = self.renderer.draw_text_lines(["Tips:"], w // 2, y + 25, COLOR_TEXT, font_size="medium")
        self.renderer.draw_text_lines([f"- {tip}" for tip in INFO_TIPS], w // 2, y + 5, COLOR_TEXT)

        hovered = self.close_button.collidepoint(pygame.mouse.get_pos())
        self.renderer.draw_button(self.close_button, "Close", hovered)
