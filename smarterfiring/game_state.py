"""Main game window, event loop and screen switching."""

import logging
import pygame
from typing import Optional

import smarterfiring.constants as constants
from smarterfiring.constants import FPS, WINDOW_SCALE, GRID_SIZE
from smarterfiring.board import Board, board_area
from smarterfiring.game_session import GameSession, Phase, SessionSnapshot
from smarterfiring.models import Direction
from smarterfiring.renderer import Renderer
from smarterfiring.scheduler import Scheduler
from smarterfiring.spawner import RandomEdgePicker
from smarterfiring.ui.controls import Controls
from smarterfiring.ui.end_screen import EndScreen
from smarterfiring.ui.hud import HUD
from smarterfiring.ui.info import InfoOverlay
from smarterfiring.ui.instructions import Instructions

logger = logging.getLogger(__name__)

MOVE_ACTIONS = {direction.value: direction for direction in Direction}


class Game:
    """Main game class: owns the window and feeds input into the session."""

    def __init__(self, seed: Optional[int] = None):
        pygame.init()
        pygame.display.set_caption("Smarterfiring")

        # Calculate window size based on screen resolution
        display_info = pygame.display.Info()
        screen_h = display_info.current_h
        if screen_h <= 0:
            # Headless or unknown display: keep the default height at full size
            screen_h = int(constants.WINDOW_HEIGHT / WINDOW_SCALE)

        # Portrait 2:3 window scaled to the screen height
        window_height = int(screen_h * WINDOW_SCALE)
        window_width = int(window_height * 2 / 3)

        # Update constants module so UI components use correct sizes
        constants.WINDOW_WIDTH = window_width
        constants.WINDOW_HEIGHT = window_height
        constants.HUD_HEIGHT = int(window_height * 0.12)
        constants.HUD_PADDING = int(window_height * 0.02)
        constants.MENU_BUTTON_WIDTH = int(window_width * 0.45)
        constants.MENU_BUTTON_HEIGHT = int(window_height * 0.065)

        self.screen = pygame.display.set_mode((window_width, window_height))
        self.clock = pygame.time.Clock()
        self.running = True

        self.renderer = Renderer(self.screen)

        # Initialize UI components
        self.instructions = Instructions(self.renderer)
        self.hud = HUD(self.renderer)
        self.controls = Controls(self.renderer)
        self.end_screen = EndScreen(self.renderer)
        self.info = InfoOverlay(self.renderer)

        # Core game
        self.scheduler = Scheduler(pygame.time.get_ticks())
        self.session = GameSession(self.scheduler, picker=RandomEdgePicker(seed))
        self.snapshot: SessionSnapshot = self.session.snapshot()
        self.session.add_listener(self._on_session_change)

        area = board_area()
        self.board = Board(GRID_SIZE, area.center, area.width / GRID_SIZE)

    def _on_session_change(self, snapshot: SessionSnapshot):
        """Keep the latest snapshot and react to phase changes."""
        previous = self.snapshot.phase
        self.snapshot = snapshot
        if snapshot.phase is Phase.GAME_OVER and previous is not Phase.GAME_OVER:
            self.end_screen.set_results(snapshot.score)

    def start_session(self):
        """Start a new game. Entering the board view opens with one shot."""
        entering_board = not self.session.is_active
        self.session.start()
        if entering_board:
            self.session.fire()

    def dispatch(self, action: Optional[str]):
        """Route a UI action to the session."""
        if action is None:
            return
        if action in MOVE_ACTIONS:
            self.session.move(MOVE_ACTIONS[action])
        elif action == "fire":
            self.session.fire()
        elif action in ("restart", "play_again", "start"):
            self.start_session()
        elif action == "info":
            self.info.toggle()

    def handle_events(self):
        """Handle pygame events."""
        now = pygame.time.get_ticks()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if self.info.visible:
                self.info.handle_event(event)
                continue

            if event.type == pygame.KEYDOWN and event.key == pygame.K_i:
                self.info.toggle()
                continue

            phase = self.snapshot.phase
            if phase is Phase.INTRO:
                self.dispatch(self.instructions.handle_event(event, now))

            elif phase is Phase.ACTIVE:
                action = self.hud.handle_event(event)
                if action is None:
                    action = self.controls.handle_event(event)
                self.dispatch(action)

            elif phase is Phase.GAME_OVER:
                action = self.end_screen.handle_event(event, now)
                if action == "play_again":
                    self.dispatch(action)

    def update(self):
        """Advance the session clock and any pending removals."""
        self.scheduler.update(pygame.time.get_ticks())

    def draw(self):
        """Draw the current screen."""
        now = pygame.time.get_ticks()

        if self.info.visible:
            self.info.draw()
        elif self.snapshot.phase is Phase.INTRO:
            self.instructions.draw(now)
        elif self.snapshot.phase is Phase.GAME_OVER:
            self.end_screen.draw(now)
        else:
            self.renderer.draw_background()
            self.hud.draw(self.snapshot)
            self.board.draw(self.screen, self.renderer, self.snapshot, self.scheduler.current_time)
            self.controls.draw()

        pygame.display.flip()

    def run(self):
        """Main game loop."""
        logger.info("Window %dx%d", constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT)
        while self.running:
            self.handle_events()
            self.update()
            self.draw()
            self.clock.tick(FPS)

        pygame.quit()
