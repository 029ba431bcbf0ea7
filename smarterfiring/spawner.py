"""Dragon spawn policy."""

import random
from enum import Enum
from typing import Optional, Protocol, Tuple

from smarterfiring.models import Direction, Dragon, Position


class Edge(Enum):
    """Grid edge a dragon can appear on."""
    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3


# Dragons always point into the board from the edge they spawn on
EDGE_HEADINGS = {
    Edge.TOP: Direction.DOWN,
    Edge.BOTTOM: Direction.UP,
    Edge.LEFT: Direction.RIGHT,
    Edge.RIGHT: Direction.LEFT,
}


class EdgePicker(Protocol):
    """Source of spawn locations: an edge and an offset along it."""

    def pick(self, grid_size: int) -> Tuple[Edge, int]:
        ...


class RandomEdgePicker:
    """Uniform edge and offset, backed by random.Random."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def pick(self, grid_size: int) -> Tuple[Edge, int]:
        edge = self._random.choice(list(Edge))
        offset = self._random.randrange(grid_size)
        return edge, offset


class Spawner:
    """Places new dragons on the grid edges."""

    def __init__(self, grid_size: int, picker: Optional[EdgePicker] = None):
        self.grid_size = grid_size
        self.picker = picker if picker is not None else RandomEdgePicker()

    def spawn(self) -> Dragon:
        edge, offset = self.picker.pick(self.grid_size)
        return spawn_at(edge, offset, self.grid_size)


def spawn_at(edge: Edge, offset: int, grid_size: int) -> Dragon:
    """Create a dragon on `edge`, `offset` cells along it, heading inward."""
    last = grid_size - 1
    if edge is Edge.TOP:
        position = Position(offset, 0)
    elif edge is Edge.BOTTOM:
        position = Position(offset, last)
    elif edge is Edge.LEFT:
        position = Position(0, offset)
    else:
        position = Position(last, offset)

    if not position.in_bounds(grid_size):
        raise ValueError(f"offset {offset} outside grid of size {grid_size}")

    return Dragon(position=position, direction=EDGE_HEADINGS[edge])
