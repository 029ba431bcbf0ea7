"""How-to-play pages shown before the first game."""

import math
import pygame
from typing import Optional
import smarterfiring.constants as constants
from smarterfiring.constants import (
    INSTRUCTION_PAGES, COLOR_TEXT, COLOR_BURST,
    COLOR_BUTTON_GO, COLOR_BUTTON_GO_HOVER
)
from smarterfiring.models import Direction
from smarterfiring.utils import clamp, ease_out_quad, wrap_text

PAGE_FADE_MS = 500


class Instructions:
    """Paged intro. Returns 'start' once the last page is confirmed."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.current_page = 0
        self.total_pages = len(INSTRUCTION_PAGES)
        self.page_changed_at = 0

        # Buttons will be created dynamically
        self.next_button = None

    @property
    def on_last_page(self) -> bool:
        return self.current_page >= self.total_pages - 1

    def _create_buttons(self):
        """Create navigation button based on current window size."""
        w = constants.WINDOW_WIDTH
        h = constants.WINDOW_HEIGHT
        btn_w = constants.MENU_BUTTON_WIDTH
        btn_h = constants.MENU_BUTTON_HEIGHT

        self.next_button = pygame.Rect(w // 2 - btn_w // 2, h - btn_h - 40, btn_w, btn_h)

    def advance(self, current_time: int) -> Optional[str]:
        """Go to the next page, or report 'start' from the last one."""
        if self.on_last_page:
            return "start"
        self.current_page += 1
        self.page_changed_at = current_time
        return None

    def handle_event(self, event: pygame.event.Event, current_time: int) -> Optional[str]:
        """Handle input events. Returns 'start' when the player is done reading."""
        self._create_buttons()

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.next_button.collidepoint(event.pos):
                return self.advance(current_time)

        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_RIGHT):
                return self.advance(current_time)
            if event.key == pygame.K_LEFT and self.current_page > 0:
                self.current_page -= 1
                self.page_changed_at = current_time

        return None

    def draw(self, current_time: int):
        """Draw the current page."""
        self._create_buttons()

        w = constants.WINDOW_WIDTH
        h = constants.WINDOW_HEIGHT

        self.renderer.draw_background()

        self.renderer.draw_text("HOW TO PLAY", (w // 2, int(h * 0.2)), COLOR_TEXT,
                                font_size="large", center=True)

        icon, text = INSTRUCTION_PAGES[self.current_page]
        t = ease_out_quad(clamp((current_time - self.page_changed_at) / PAGE_FADE_MS, 0.0, 1.0))

        icon_center = (w // 2, int(h * 0.4))
        self._draw_icon(icon, icon_center, 40 * (0.6 + 0.4 * t) * h / 900.0)

        self.renderer.draw_text_lines(
            wrap_text(text, 30),
            w // 2,
            int(h * 0.52),
            COLOR_TEXT,
            font_size="medium"
        )

        self.renderer.draw_page_dots((w // 2, int(h * 0.68)), self.total_pages, self.current_page)

        mouse_pos = pygame.mouse.get_pos()
        hovered = self.next_button.collidepoint(mouse_pos)
        label = "START GAME" if self.on_last_page else "NEXT"
        self.renderer.draw_button(
            self.next_button, label, hovered,
            color=COLOR_BUTTON_GO,
            hover_color=COLOR_BUTTON_GO_HOVER
        )

    def _draw_icon(self, icon: str, center, size: float):
        screen = self.renderer.screen
        cx, cy = center
        if icon == "flame":
            self.renderer.draw_flame(center, size * 1.4)
        elif icon == "burst":
            self.renderer.draw_burst(center, size, COLOR_BURST)
        elif icon == "arrows":
            for direction in Direction:
                dx, dy = direction.delta
                self.renderer.draw_arrow((cx + dx * size, cy + dy * size), direction, size * 0.7)
        elif icon == "star":
            self.renderer.draw_burst(center, size, COLOR_TEXT, spikes=5)
        elif icon == "clock":
            pygame.draw.circle(screen, COLOR_TEXT, (int(cx), int(cy)), int(size), 4)
            pygame.draw.line(screen, COLOR_TEXT, center, (cx, cy - size * 0.7), 4)
            pygame.draw.line(screen, COLOR_TEXT, center, (cx + size * 0.5, cy), 4)
        else:
            # Controller: rounded body, d-pad and two buttons
            body = pygame.Rect(0, 0, int(size * 2.4), int(size * 1.3))
            body.center = (int(cx), int(cy))
            pygame.draw.rect(screen, COLOR_TEXT, body, 4, border_radius=int(size * 0.5))
            pad_x = cx - size * 0.6
            pygame.draw.line(screen, COLOR_TEXT, (pad_x - size * 0.3, cy), (pad_x + size * 0.3, cy), 5)
            pygame.draw.line(screen, COLOR_TEXT, (pad_x, cy - size * 0.3), (pad_x, cy + size * 0.3), 5)
            for i in range(2):
                angle = math.pi / 4 + i * math.pi
                bx = cx + size * 0.6 + math.cos(angle) * size * 0.2
                by = cy + math.sin(angle) * size * 0.2
                pygame.draw.circle(screen, COLOR_TEXT, (int(bx), int(by)), max(2, int(size * 0.12)))
