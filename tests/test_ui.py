import pygame
import pytest

from smarterfiring.constants import INFO_TIPS
from smarterfiring.game_session import Phase
from smarterfiring.game_state import Game
from smarterfiring.models import Direction, Position
from smarterfiring.ui.controls import KEY_BINDINGS
from smarterfiring.ui.end_screen import share_message


@pytest.fixture
def game():
    game = Game(seed=3)
    yield game
    pygame.quit()


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="", scancode=0)


def test_share_message() -> None:
    assert share_message(120) == "I scored 120 points in Smarterfiring! Can you beat my score?"


def test_info_tips() -> None:
    assert INFO_TIPS == [
        "Position yourself in the center for better coverage",
        "Watch the dragons' directions carefully",
        "Time your shots to hit multiple dragons",
    ]


def test_key_bindings_cover_all_directions() -> None:
    assert {KEY_BINDINGS[k] for k in (pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT)} == {
        direction.value for direction in Direction
    }
    assert KEY_BINDINGS[pygame.K_SPACE] == "fire"


def test_game_opens_on_intro(game: Game) -> None:
    assert game.snapshot.phase is Phase.INTRO
    game.draw()


def test_starting_from_intro_opens_with_one_shot(game: Game) -> None:
    game.dispatch("start")

    assert game.snapshot.phase is Phase.ACTIVE
    assert len(game.session.dragons) == 1


def test_restart_while_playing_does_not_fire(game: Game) -> None:
    game.dispatch("start")
    game.dispatch("restart")

    assert game.session.dragons == ()
    assert game.snapshot.score == 0


def test_dispatch_routes_moves_and_fire(game: Game) -> None:
    game.dispatch("start")
    game.dispatch("up")
    game.dispatch("left")
    game.dispatch("fire")
    game.dispatch(None)

    assert game.snapshot.position == Position(1, 1)
    assert game.snapshot.direction is Direction.LEFT
    assert len(game.snapshot.dragons) == 2


def test_keyboard_drives_session(game: Game) -> None:
    game.dispatch("start")
    pygame.event.clear()
    pygame.event.post(_key(pygame.K_DOWN))
    pygame.event.post(_key(pygame.K_SPACE))

    game.handle_events()

    assert game.snapshot.position == Position(2, 3)
    assert len(game.snapshot.dragons) == 2
    game.draw()


def test_game_over_screen_gets_final_score(game: Game) -> None:
    game.dispatch("start")
    for _ in range(120):
        game.session.tick()

    assert game.snapshot.phase is Phase.GAME_OVER
    assert game.end_screen.score == game.session.score
    game.draw()


def test_info_overlay_toggles(game: Game) -> None:
    game.dispatch("info")
    assert game.info.visible
    game.draw()

    pygame.event.clear()
    pygame.event.post(_key(pygame.K_ESCAPE))
    game.handle_events()
    assert not game.info.visible
