"""Game session: the timed play-through and its rules.

The session owns all mutable game state and changes it only through the
intents ``start``, ``move``, ``fire`` and ``tick``. It never touches pygame;
timing comes from a :class:`~smarterfiring.scheduler.Scheduler` advanced by
the host, and observers receive immutable snapshots.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from smarterfiring.constants import (
    GRID_SIZE, SESSION_DURATION, HIT_REWARD, REMOVAL_DELAY, TICK_INTERVAL
)
from smarterfiring.models import Direction, Dragon, DragonView, Position
from smarterfiring.scheduler import ScheduledTask, Scheduler
from smarterfiring.spawner import EdgePicker, Spawner

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Which view the session currently drives."""
    INTRO = auto()
    ACTIVE = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable copy of the session state for the presentation layer."""
    position: Position
    direction: Direction
    dragons: Tuple[DragonView, ...]
    score: int
    time_remaining: int
    is_active: bool
    is_over: bool
    is_showing_intro: bool
    grid_size: int
    removal_delay: int

    @property
    def phase(self) -> Phase:
        if self.is_showing_intro:
            return Phase.INTRO
        if self.is_over:
            return Phase.GAME_OVER
        return Phase.ACTIVE


Listener = Callable[[SessionSnapshot], None]


def is_in_line_of_fire(player: Position, facing: Direction, dragon: Dragon) -> bool:
    """Whether firing from `player` toward `facing` hits `dragon`.

    The dragon has to share the player's column (up/down) or row
    (left/right), sit strictly beyond the player in the facing direction,
    and be heading back toward the player.
    """
    if dragon.direction is not facing.opposite:
        return False

    target = dragon.position
    if facing is Direction.UP:
        return target.x == player.x and target.y < player.y
    if facing is Direction.DOWN:
        return target.x == player.x and target.y > player.y
    if facing is Direction.LEFT:
        return target.y == player.y and target.x < player.x
    return target.y == player.y and target.x > player.x


class GameSession:
    """State machine for one timed game: intro -> active -> game over."""

    def __init__(
        self,
        scheduler: Scheduler,
        picker: Optional[EdgePicker] = None,
        grid_size: int = GRID_SIZE,
        session_duration: int = SESSION_DURATION,
        hit_reward: int = HIT_REWARD,
        removal_delay: int = REMOVAL_DELAY,
        tick_interval: int = TICK_INTERVAL,
    ):
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1")
        if session_duration < 0:
            raise ValueError("session_duration cannot be negative")
        if hit_reward < 0:
            raise ValueError("hit_reward cannot be negative")
        if removal_delay < 0:
            raise ValueError("removal_delay cannot be negative")
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")

        self.scheduler = scheduler
        self.spawner = Spawner(grid_size, picker)

        self.grid_size = grid_size
        self.session_duration = session_duration
        self.hit_reward = hit_reward
        self.removal_delay = removal_delay
        self.tick_interval = tick_interval

        # Game state
        self._position = self.start_position
        self._direction = Direction.RIGHT
        self._dragons: List[Dragon] = []
        self._score = 0
        self._time_remaining = session_duration
        self._is_active = False
        self._is_over = False
        self._is_showing_intro = True

        self._timer: Optional[ScheduledTask] = None
        self._generation = 0
        self._listeners: List[Listener] = []

    # -- Observable state -------------------------------------------------

    @property
    def start_position(self) -> Position:
        """Grid centre, where every session begins."""
        center = self.grid_size // 2
        return Position(center, center)

    @property
    def position(self) -> Position:
        return self._position

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def dragons(self) -> Tuple[DragonView, ...]:
        return tuple(DragonView.of(dragon) for dragon in self._dragons)

    @property
    def score(self) -> int:
        return self._score

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def is_showing_intro(self) -> bool:
        return self._is_showing_intro

    @property
    def phase(self) -> Phase:
        return self.snapshot().phase

    @property
    def generation(self) -> int:
        """Number of sessions started so far."""
        return self._generation

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            position=self._position,
            direction=self._direction,
            dragons=self.dragons,
            score=self._score,
            time_remaining=self._time_remaining,
            is_active=self._is_active,
            is_over=self._is_over,
            is_showing_intro=self._is_showing_intro,
            grid_size=self.grid_size,
            removal_delay=self.removal_delay,
        )

    def add_listener(self, listener: Listener):
        """Call `listener` with a fresh snapshot after every state change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _publish(self):
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # -- Intents ----------------------------------------------------------

    def start(self):
        """Begin a fresh session from any state."""
        self._cancel_timer()
        self._generation += 1

        self._score = 0
        self._time_remaining = self.session_duration
        self._is_over = False
        self._is_active = True
        self._is_showing_intro = False
        self._position = self.start_position
        self._direction = Direction.RIGHT
        self._dragons.clear()

        self._timer = self.scheduler.call_every(self.tick_interval, self.tick)
        logger.info("Session %d started (%ds)", self._generation, self.session_duration)
        self._publish()

    def tick(self):
        """Advance the session clock by one second."""
        if not self._is_active:
            return

        if self._time_remaining > 0:
            self._time_remaining -= 1

        if self._time_remaining == 0:
            self._is_over = True
            self._is_active = False
            self._cancel_timer()
            logger.info("Session %d over, final score %d", self._generation, self._score)

        self._publish()

    def move(self, direction: Direction):
        """Face `direction` and step one cell that way if the grid allows."""
        if not self._is_active:
            return

        self._direction = direction
        new_position = self._position.step(direction, self.grid_size)
        if new_position != self._position:
            self._position = new_position

        self._publish()

    def fire(self):
        """Spawn a dragon, then shoot along the current facing."""
        if not self._is_active:
            return

        dragon = self.spawner.spawn()
        self._dragons.append(dragon)
        logger.debug("Dragon spawned at (%d, %d) heading %s",
                     dragon.position.x, dragon.position.y, dragon.direction.value)

        now = self.scheduler.current_time
        hits = 0
        for target in self._dragons:
            if target.is_hit:
                continue
            if is_in_line_of_fire(self._position, self._direction, target):
                target.mark_hit(now)
                self._score += self.hit_reward
                hits += 1

        if hits:
            logger.debug("Fired %s: %d hit(s), score %d", self._direction.value, hits, self._score)

        generation = self._generation
        self.scheduler.call_later(
            self.removal_delay,
            lambda: self._remove_hit_dragons(generation)
        )
        self._publish()

    # -- Internals --------------------------------------------------------

    def _remove_hit_dragons(self, generation: int):
        """Drop dragons that have been flagged for the full removal delay."""
        if generation != self._generation:
            return

        cutoff = self.scheduler.current_time - self.removal_delay
        remaining = [
            dragon for dragon in self._dragons
            if not (dragon.is_hit and dragon.hit_time is not None and dragon.hit_time <= cutoff)
        ]
        if len(remaining) != len(self._dragons):
            self._dragons = remaining
            self._publish()

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
