"""Main rendering logic for the game."""

import math
import pygame
from typing import Tuple, Optional, List
import smarterfiring.constants as constants
from smarterfiring.constants import (
    COLOR_BACKGROUND_TOP, COLOR_BACKGROUND_BOTTOM, COLOR_TEXT,
    COLOR_FLAME, COLOR_FLAME_CORE, COLOR_BURST, COLOR_DOT_ACTIVE, COLOR_DOT_IDLE
)
from smarterfiring.models import Direction
from smarterfiring.utils import lerp_color


class Renderer:
    """Handles all rendering for the game."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._last_height = 0
        self._background: Optional[pygame.Surface] = None
        self._update_fonts()

    def _update_fonts(self):
        """Update font sizes based on current window height."""
        h = constants.WINDOW_HEIGHT
        if h == self._last_height:
            return  # No change needed

        self._last_height = h
        self._background = None
        # Scale fonts relative to a reference height of 900px
        scale = h / 900.0
        self.font_large = pygame.font.Font(None, max(28, int(56 * scale)))
        self.font_medium = pygame.font.Font(None, max(20, int(36 * scale)))
        self.font_small = pygame.font.Font(None, max(16, int(28 * scale)))

    def draw_background(self, top=COLOR_BACKGROUND_TOP, bottom=COLOR_BACKGROUND_BOTTOM):
        """Fill the screen with a vertical gradient."""
        self._update_fonts()
        w, h = self.screen.get_size()
        if self._background is None or self._background.get_size() != (w, h):
            self._background = pygame.Surface((w, h))
            for y in range(h):
                color = lerp_color(top, bottom, y / max(1, h - 1))
                pygame.draw.line(self._background, color, (0, y), (w, y))
        self.screen.blit(self._background, (0, 0))

    def _font(self, font_size: str) -> pygame.font.Font:
        if font_size == "large":
            return self.font_large
        elif font_size == "small":
            return self.font_small
        return self.font_medium

    def draw_text(
        self,
        text: str,
        position: Tuple[float, float],
        color: Tuple[int, int, int] = COLOR_TEXT,
        font_size: str = "medium",
        center: bool = False
    ) -> pygame.Rect:
        """Draw text on the screen."""
        # Update fonts if window size changed
        self._update_fonts()

        text_surface = self._font(font_size).render(text, True, color)

        if center:
            rect = text_surface.get_rect(center=(int(position[0]), int(position[1])))
        else:
            rect = text_surface.get_rect(topleft=(int(position[0]), int(position[1])))
        self.screen.blit(text_surface, rect)
        return rect

    def draw_text_lines(
        self,
        lines: List[str],
        center_x: float,
        top: float,
        color: Tuple[int, int, int] = COLOR_TEXT,
        font_size: str = "small",
        line_gap: int = 6
    ) -> float:
        """Draw centered lines below each other. Returns the y after the last one."""
        self._update_fonts()
        font = self._font(font_size)
        y = top
        for line in lines:
            surface = font.render(line, True, color)
            rect = surface.get_rect(midtop=(int(center_x), int(y)))
            self.screen.blit(surface, rect)
            y += surface.get_height() + line_gap
        return y

    def draw_button(
        self,
        rect: pygame.Rect,
        text: str,
        hovered: bool = False,
        color: Tuple[int, int, int] = None,
        hover_color: Tuple[int, int, int] = None,
        font_size: str = "medium"
    ):
        """Draw a button."""
        from smarterfiring.constants import COLOR_BUTTON, COLOR_BUTTON_HOVER, COLOR_BUTTON_TEXT

        # Update fonts if window size changed
        self._update_fonts()

        if color is None:
            color = COLOR_BUTTON
        if hover_color is None:
            hover_color = COLOR_BUTTON_HOVER

        current_color = hover_color if hovered else color

        # Draw button background
        pygame.draw.rect(self.screen, current_color, rect, border_radius=10)

        # Draw button border
        border_color = tuple(min(255, c + 30) for c in current_color)
        pygame.draw.rect(self.screen, border_color, rect, 2, border_radius=10)

        # Draw text
        if text:
            text_surface = self._font(font_size).render(text, True, COLOR_BUTTON_TEXT)
            text_rect = text_surface.get_rect(center=rect.center)
            self.screen.blit(text_surface, text_rect)

    def draw_arrow(
        self,
        center: Tuple[float, float],
        direction: Direction,
        size: float,
        color: Tuple[int, int, int] = COLOR_TEXT
    ):
        """Draw a filled triangle pointing in `direction`."""
        dx, dy = direction.delta
        cx, cy = center
        half = size / 2
        tip = (cx + dx * half, cy + dy * half)
        # Perpendicular to the pointing axis
        px, py = -dy, dx
        base_a = (cx - dx * half + px * half, cy - dy * half + py * half)
        base_b = (cx - dx * half - px * half, cy - dy * half - py * half)
        pygame.draw.polygon(self.screen, color, [tip, base_a, base_b])

    def draw_flame(
        self,
        center: Tuple[float, float],
        size: float,
        alpha: int = 255
    ):
        """Draw a stylised flame: a teardrop with a hot core."""
        w, h = max(2, int(size)), max(2, int(size * 1.3))
        flame = pygame.Surface((w, h), pygame.SRCALPHA)
        outer = [
            (w * 0.5, 0),
            (w * 0.9, h * 0.55),
            (w * 0.75, h * 0.9),
            (w * 0.5, h),
            (w * 0.25, h * 0.9),
            (w * 0.1, h * 0.55),
        ]
        pygame.draw.polygon(flame, (*COLOR_FLAME, alpha), outer)
        pygame.draw.ellipse(
            flame, (*COLOR_FLAME_CORE, alpha),
            (int(w * 0.3), int(h * 0.5), int(w * 0.4), int(h * 0.45))
        )
        self.screen.blit(flame, flame.get_rect(center=(int(center[0]), int(center[1]))))

    def draw_burst(
        self,
        center: Tuple[float, float],
        radius: float,
        color: Tuple[int, int, int] = COLOR_BURST,
        spikes: int = 8
    ):
        """Draw a star-shaped explosion."""
        points = []
        for i in range(spikes * 2):
            r = radius if i % 2 == 0 else radius * 0.45
            angle = math.pi * i / spikes - math.pi / 2
            points.append((center[0] + r * math.cos(angle), center[1] + r * math.sin(angle)))
        pygame.draw.polygon(self.screen, color, points)

    def draw_page_dots(self, center: Tuple[float, float], count: int, current: int, radius: int = 5):
        """Draw the page indicator row."""
        spacing = radius * 4
        start_x = center[0] - spacing * (count - 1) / 2
        for i in range(count):
            color = COLOR_DOT_ACTIVE if i == current else COLOR_DOT_IDLE
            pygame.draw.circle(self.screen, color, (int(start_x + i * spacing), int(center[1])), radius)
