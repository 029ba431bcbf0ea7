"""On-screen fire and arrow buttons, plus their keyboard bindings."""

import pygame
from typing import Optional, Dict, Tuple
import smarterfiring.constants as constants
from smarterfiring.constants import (
    ARROW_BUTTON_WIDTH, ARROW_BUTTON_HEIGHT, FIRE_BUTTON_RADIUS,
    COLOR_BUTTON_DANGER, COLOR_BUTTON_DANGER_HOVER, COLOR_TEXT
)
from smarterfiring.board import board_area
from smarterfiring.models import Direction

KEY_BINDINGS = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_SPACE: "fire",
    pygame.K_RETURN: "fire",
    pygame.K_r: "restart",
}


class Controls:
    """Fire button on the left, arrow cross on the right, below the board."""

    def __init__(self, renderer):
        self.renderer = renderer

        # Buttons will be created dynamically
        self.fire_center: Tuple[int, int] = (0, 0)
        self.fire_radius = FIRE_BUTTON_RADIUS
        self.arrow_buttons: Dict[Direction, pygame.Rect] = {}

    def _create_buttons(self):
        """Create buttons based on current window size."""
        w = constants.WINDOW_WIDTH
        h = constants.WINDOW_HEIGHT
        scale = h / 900.0

        board = board_area()
        mid_y = (board.bottom + h) // 2

        self.fire_radius = int(FIRE_BUTTON_RADIUS * scale)
        self.fire_center = (int(w * 0.27), mid_y)

        btn_w = int(ARROW_BUTTON_WIDTH * scale)
        btn_h = int(ARROW_BUTTON_HEIGHT * scale)
        gap = int(5 * scale)
        cross_x = int(w * 0.66)

        self.arrow_buttons = {
            Direction.UP: pygame.Rect(cross_x - btn_w // 2, mid_y - btn_h // 2 - gap - btn_h, btn_w, btn_h),
            Direction.DOWN: pygame.Rect(cross_x - btn_w // 2, mid_y + btn_h // 2 + gap, btn_w, btn_h),
            Direction.LEFT: pygame.Rect(cross_x - btn_w // 2 - gap - btn_w, mid_y - btn_h // 2, btn_w, btn_h),
            Direction.RIGHT: pygame.Rect(cross_x + btn_w // 2 + gap, mid_y - btn_h // 2, btn_w, btn_h),
        }

    def _over_fire(self, pos: Tuple[int, int]) -> bool:
        dx = pos[0] - self.fire_center[0]
        dy = pos[1] - self.fire_center[1]
        return dx * dx + dy * dy <= self.fire_radius * self.fire_radius

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """Handle input events. Returns 'fire', 'restart' or a direction value."""
        self._create_buttons()

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._over_fire(event.pos):
                return "fire"
            for direction, rect in self.arrow_buttons.items():
                if rect.collidepoint(event.pos):
                    return direction.value

        elif event.type == pygame.KEYDOWN:
            return KEY_BINDINGS.get(event.key)

        return None

    def draw(self):
        """Draw the fire button and the arrow cross."""
        # Recreate buttons each frame to handle dynamic sizing
        self._create_buttons()

        mouse_pos = pygame.mouse.get_pos()
        screen = self.renderer.screen

        # Fire button
        color = COLOR_BUTTON_DANGER_HOVER if self._over_fire(mouse_pos) else COLOR_BUTTON_DANGER
        pygame.draw.circle(screen, color, self.fire_center, self.fire_radius)
        pygame.draw.circle(screen, COLOR_TEXT, self.fire_center, self.fire_radius, 2)
        self.renderer.draw_flame(self.fire_center, self.fire_radius * 0.8)

        # Direction controls
        for direction, rect in self.arrow_buttons.items():
            hovered = rect.collidepoint(mouse_pos)
            self.renderer.draw_button(rect, "", hovered)
            self.renderer.draw_arrow(rect.center, direction, rect.height * 0.45, COLOR_TEXT)
