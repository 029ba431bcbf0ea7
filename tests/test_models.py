import pytest

from smarterfiring.models import Direction, Dragon, DragonView, Position


def test_position_equality_is_componentwise() -> None:
    assert Position(1, 2) == Position(1, 2)
    assert Position(1, 2) != Position(2, 1)


@pytest.mark.parametrize("direction, expected", [
    (Direction.UP, Position(0, 0)),
    (Direction.LEFT, Position(0, 0)),
    (Direction.DOWN, Position(0, 1)),
    (Direction.RIGHT, Position(1, 0)),
])
def test_step_from_corner_clamps(direction: Direction, expected: Position) -> None:
    assert Position(0, 0).step(direction, 5) == expected


def test_step_on_single_cell_grid_never_moves() -> None:
    for direction in Direction:
        assert Position(0, 0).step(direction, 1) == Position(0, 0)


def test_opposites_pair_up() -> None:
    for direction in Direction:
        assert direction.opposite.opposite is direction
        assert direction.opposite is not direction
        dx, dy = direction.delta
        assert direction.opposite.delta == (-dx, -dy)


def test_in_bounds() -> None:
    assert Position(4, 4).in_bounds(5)
    assert not Position(5, 0).in_bounds(5)
    assert not Position(0, -1).in_bounds(5)


def test_mark_hit_only_once() -> None:
    dragon = Dragon(position=Position(0, 0), direction=Direction.DOWN)

    assert dragon.mark_hit(100)
    assert not dragon.mark_hit(200)
    assert dragon.is_hit
    assert dragon.hit_time == 100


def test_dragons_get_unique_ids() -> None:
    ids = {Dragon(position=Position(0, 0), direction=Direction.DOWN).id for _ in range(50)}
    assert len(ids) == 50


def test_dragon_view_copies_fields() -> None:
    dragon = Dragon(position=Position(4, 1), direction=Direction.LEFT)
    view = DragonView.of(dragon)
    dragon.mark_hit(10)

    assert view.id == dragon.id
    assert view.position == Position(4, 1)
    assert view.direction is Direction.LEFT
    assert not view.is_hit
