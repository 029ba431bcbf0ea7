import numpy as np
import pygame
import pytest

from smarterfiring.board import (
    Board, CELL_DRAGON, CELL_EMPTY, CELL_HIT, CELL_PLAYER, burst_scale, occupancy
)
from smarterfiring.constants import COLOR_CELL_DRAGON, COLOR_CELL_HIT
from smarterfiring.game_session import GameSession
from smarterfiring.models import Direction, Position
from smarterfiring.scheduler import Scheduler
from smarterfiring.spawner import Edge

from conftest import ScriptedPicker


def test_occupancy_marks_player_and_dragons(active_session: GameSession, picker: ScriptedPicker) -> None:
    picker.queue(Edge.RIGHT, 2)
    picker.queue(Edge.TOP, 1)
    active_session.fire()
    active_session.fire()

    grid = occupancy(active_session.snapshot())

    assert grid.shape == (5, 5)
    assert grid[2, 2] == CELL_PLAYER
    assert grid[2, 4] == CELL_HIT
    assert grid[0, 1] == CELL_DRAGON
    assert np.count_nonzero(grid != CELL_EMPTY) == 3


def test_cell_tints_follow_occupancy(active_session: GameSession, picker: ScriptedPicker) -> None:
    picker.queue(Edge.RIGHT, 2)
    picker.queue(Edge.TOP, 1)
    active_session.fire()
    active_session.fire()

    board = Board(5, (150, 150), 60)
    tints = board.cell_tints(occupancy(active_session.snapshot()))

    assert tints == [
        (Position(1, 0), COLOR_CELL_DRAGON),
        (Position(4, 2), COLOR_CELL_HIT),
    ]


def test_cell_to_screen() -> None:
    board = Board(5, (250, 250), 60)

    assert board.top_left == (100, 100)
    assert board.cell_to_screen(Position(0, 0)) == (130, 130)
    assert board.cell_to_screen(Position(4, 2)) == (370, 250)


def test_burst_grows_over_session_removal_delay(scheduler: Scheduler, picker: ScriptedPicker) -> None:
    session = GameSession(scheduler, picker=picker, removal_delay=600)
    session.start()
    picker.queue(Edge.RIGHT, 2)
    session.fire()

    snapshot = session.snapshot()
    dragon = snapshot.dragons[0]
    assert snapshot.removal_delay == 600
    assert dragon.hit_time == 0

    assert burst_scale(dragon, 0, snapshot.removal_delay) == pytest.approx(1.0)
    assert burst_scale(dragon, 300, snapshot.removal_delay) == pytest.approx(1.375)
    assert burst_scale(dragon, 600, snapshot.removal_delay) == pytest.approx(1.5)
    assert burst_scale(dragon, 900, snapshot.removal_delay) == pytest.approx(1.5)


def test_fire_offset_points_at_facing(active_session: GameSession) -> None:
    board = Board(5, (150, 150), 60)  # 300 px board, scale 1
    assert board.fire_offset(active_session.snapshot()) == (30, 0)

    active_session.move(Direction.UP)
    assert board.fire_offset(active_session.snapshot()) == (0, -30)


def test_board_draws_headless(active_session: GameSession, picker: ScriptedPicker) -> None:
    from smarterfiring.renderer import Renderer

    pygame.init()
    try:
        screen = pygame.display.set_mode((600, 900))
        renderer = Renderer(screen)
        picker.queue(Edge.RIGHT, 2)
        active_session.fire()
        active_session.fire()

        Board(5, (300, 350), 84).draw(screen, renderer, active_session.snapshot(), 150)
    finally:
        pygame.quit()
