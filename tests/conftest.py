"""Pytest fixtures for Smarterfiring tests."""
import os

# Headless pygame for the UI tests; must be set before pygame is imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from typing import Iterable, List, Tuple

import pytest

from smarterfiring.game_session import GameSession
from smarterfiring.scheduler import Scheduler
from smarterfiring.spawner import Edge


class ScriptedPicker:
    """Edge picker that replays a fixed list of (edge, offset) spawns."""

    def __init__(self, picks: Iterable[Tuple[Edge, int]] = ()):
        self.picks: List[Tuple[Edge, int]] = list(picks)
        self.calls = 0

    def queue(self, edge: Edge, offset: int) -> None:
        self.picks.append((edge, offset))

    def pick(self, grid_size: int) -> Tuple[Edge, int]:
        self.calls += 1
        if self.picks:
            return self.picks.pop(0)
        # Top-left corner, heading down: never in line with a centred player facing right
        return Edge.TOP, 0


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def picker() -> ScriptedPicker:
    return ScriptedPicker()


@pytest.fixture
def session(scheduler: Scheduler, picker: ScriptedPicker) -> GameSession:
    """A fresh session still on the intro screen."""
    return GameSession(scheduler, picker=picker)


@pytest.fixture
def active_session(session: GameSession) -> GameSession:
    """A session that has been started."""
    session.start()
    return session
