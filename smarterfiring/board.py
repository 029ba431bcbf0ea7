"""Game board: grid layout, occupancy and drawing."""

import pygame
import numpy as np
from typing import List, Tuple
import smarterfiring.constants as constants
from smarterfiring.constants import (
    BOARD_SIZE_RATIO, BOARD_TOP_RATIO, COLOR_BOARD, COLOR_GRID_LINE,
    COLOR_CELL_DRAGON, COLOR_CELL_HIT,
    COLOR_PLAYER, COLOR_DRAGON, COLOR_DRAGON_ARROW, COLOR_TEXT,
    FIRE_OFFSET, REFERENCE_BOARD_SIZE
)
from smarterfiring.game_session import SessionSnapshot
from smarterfiring.models import DragonView, Position
from smarterfiring.utils import clamp, ease_out_quad

# Occupancy codes
CELL_EMPTY = 0
CELL_PLAYER = 1
CELL_DRAGON = 2
CELL_HIT = 3

CELL_TINTS = {
    CELL_DRAGON: COLOR_CELL_DRAGON,
    CELL_HIT: COLOR_CELL_HIT,
}


def occupancy(snapshot: SessionSnapshot) -> np.ndarray:
    """Grid of cell codes indexed [row, col] == [y, x].

    Dragons are written in spawn order, so a later dragon on the same cell
    wins; the player is written last and always shows.
    """
    grid = np.full((snapshot.grid_size, snapshot.grid_size), CELL_EMPTY, dtype=np.int8)
    for dragon in snapshot.dragons:
        grid[dragon.position.y, dragon.position.x] = CELL_HIT if dragon.is_hit else CELL_DRAGON
    grid[snapshot.position.y, snapshot.position.x] = CELL_PLAYER
    return grid


def burst_scale(dragon: DragonView, current_time: int, removal_delay: int) -> float:
    """Size of a hit dragon's burst: grows from 1x to 1.5x over the removal delay."""
    hit_time = dragon.hit_time if dragon.hit_time is not None else current_time
    if removal_delay <= 0:
        return 1.5
    t = ease_out_quad(clamp((current_time - hit_time) / removal_delay, 0.0, 1.0))
    return 1.0 + 0.5 * t


class Board:
    """Square grid drawn around a screen-space center."""

    def __init__(self, grid_size: int, center: Tuple[float, float], cell_size: float):
        self.grid_size = grid_size
        self.center = center
        self.cell_size = cell_size

        # Calculate top-left corner
        total_size = grid_size * cell_size
        self.top_left = (
            center[0] - total_size / 2,
            center[1] - total_size / 2
        )

    @property
    def size(self) -> float:
        return self.grid_size * self.cell_size

    @property
    def scale(self) -> float:
        """Board size relative to the original 300 px layout."""
        return self.size / REFERENCE_BOARD_SIZE

    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.top_left[0]), int(self.top_left[1]), int(self.size), int(self.size))

    def cell_to_screen(self, position: Position) -> Tuple[float, float]:
        """Convert grid cell to screen coordinates (center of cell)."""
        x = self.top_left[0] + position.x * self.cell_size + self.cell_size / 2
        y = self.top_left[1] + position.y * self.cell_size + self.cell_size / 2
        return (x, y)

    def cell_tints(self, grid: np.ndarray) -> List[Tuple[Position, Tuple[int, int, int, int]]]:
        """Cells to tint for an occupancy grid, row by row."""
        tints = []
        for row, col in np.argwhere(np.isin(grid, list(CELL_TINTS))):
            tints.append((Position(int(col), int(row)), CELL_TINTS[int(grid[row, col])]))
        return tints

    def fire_offset(self, snapshot: SessionSnapshot) -> Tuple[float, float]:
        """Offset of the flame indicator from the player, toward the facing."""
        dx, dy = snapshot.direction.delta
        offset = FIRE_OFFSET * self.scale
        return (dx * offset, dy * offset)

    def draw(self, surface: pygame.Surface, renderer, snapshot: SessionSnapshot, current_time: int):
        """Draw grid, occupied cells, player, flame indicator and dragons."""
        board_rect = self.rect()
        grid = occupancy(snapshot)

        # Board background
        panel = pygame.Surface(board_rect.size, pygame.SRCALPHA)
        pygame.draw.rect(panel, COLOR_BOARD, panel.get_rect(), border_radius=10)

        # Occupied cells
        cell = int(self.cell_size)
        for position, color in self.cell_tints(grid):
            cell_rect = pygame.Rect(int(position.x * self.cell_size), int(position.y * self.cell_size), cell, cell)
            pygame.draw.rect(panel, color, cell_rect)

        # Grid lines
        for i in range(self.grid_size + 1):
            offset = int(i * self.cell_size)
            offset = min(offset, board_rect.width - 1)
            pygame.draw.line(panel, COLOR_GRID_LINE, (offset, 0), (offset, board_rect.height))
            pygame.draw.line(panel, COLOR_GRID_LINE, (0, offset), (board_rect.width, offset))
        surface.blit(panel, board_rect.topleft)

        self._draw_player(surface, renderer, snapshot)

        for dragon in snapshot.dragons:
            self._draw_dragon(surface, renderer, dragon, current_time, snapshot.removal_delay)

    def _draw_player(self, surface: pygame.Surface, renderer, snapshot: SessionSnapshot):
        center = self.cell_to_screen(snapshot.position)
        radius = int(15 * self.scale)

        pygame.draw.circle(surface, COLOR_PLAYER, (int(center[0]), int(center[1])), radius)
        pygame.draw.circle(surface, COLOR_TEXT, (int(center[0]), int(center[1])), radius, 2)
        renderer.draw_arrow(center, snapshot.direction, radius * 1.1, COLOR_TEXT)

        # Fire direction indicator
        ox, oy = self.fire_offset(snapshot)
        renderer.draw_flame((center[0] + ox, center[1] + oy), 15 * self.scale, alpha=180)

    def _draw_dragon(self, surface: pygame.Surface, renderer, dragon: DragonView, current_time: int, removal_delay: int):
        center = self.cell_to_screen(dragon.position)
        size = 20 * self.scale

        if dragon.is_hit:
            renderer.draw_burst(center, size * 0.6 * burst_scale(dragon, current_time, removal_delay))
            return

        renderer.draw_flame(center, size)
        pygame.draw.circle(surface, COLOR_DRAGON, (int(center[0]), int(center[1] - size * 0.1)), int(size * 0.2))
        renderer.draw_arrow(
            (center[0], center[1] + 15 * self.scale),
            dragon.direction,
            10 * self.scale,
            COLOR_DRAGON_ARROW
        )


def board_area() -> pygame.Rect:
    """Screen rectangle for the board at the current window size."""
    w = constants.WINDOW_WIDTH
    h = constants.WINDOW_HEIGHT
    size = int(min(w * BOARD_SIZE_RATIO, h * 0.5))
    top = int(h * BOARD_TOP_RATIO)
    return pygame.Rect((w - size) // 2, top, size, size)
