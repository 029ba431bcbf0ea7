"""Grid positions, directions and dragons."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    """Cardinal direction used for movement, facing and dragon travel."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy). Screen convention: up is y - 1."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Position:
    """Cell on the square grid, (0, 0) is the top-left corner."""
    x: int
    y: int

    def step(self, direction: Direction, grid_size: int) -> "Position":
        """Neighbouring cell in `direction`, clamped to the grid.

        Each axis is clamped on its own, so walking into a wall leaves the
        position unchanged rather than wrapping around.
        """
        dx, dy = direction.delta
        return Position(
            max(0, min(grid_size - 1, self.x + dx)),
            max(0, min(grid_size - 1, self.y + dy)),
        )

    def in_bounds(self, grid_size: int) -> bool:
        return 0 <= self.x < grid_size and 0 <= self.y < grid_size


def _new_dragon_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Dragon:
    """An enemy sitting on the grid, pointed along its direction of travel."""
    position: Position
    direction: Direction
    id: str = field(default_factory=_new_dragon_id)
    is_hit: bool = False
    hit_time: Optional[int] = None  # scheduler time (ms) when flagged

    def mark_hit(self, current_time: int) -> bool:
        """Flag the dragon as hit. Returns False if it was already hit."""
        if self.is_hit:
            return False
        self.is_hit = True
        self.hit_time = current_time
        return True


@dataclass(frozen=True)
class DragonView:
    """Read-only copy of a dragon handed to observers."""
    id: str
    position: Position
    direction: Direction
    is_hit: bool
    hit_time: Optional[int] = None

    @classmethod
    def of(cls, dragon: Dragon) -> "DragonView":
        return cls(
            id=dragon.id,
            position=dragon.position,
            direction=dragon.direction,
            is_hit=dragon.is_hit,
            hit_time=dragon.hit_time,
        )
