import io

from heliresgate.game import Game, GameStatus, SCREEN_HEIGHT, SCREEN_WIDTH
from heliresgate.interface import CLEAR_SCREEN, render_screen, run_interface
from heliresgate.rockets import spawn_rocket


def _game():
    return Game(notify=lambda message: None)


def _grid(text):
    return text.splitlines()[:SCREEN_HEIGHT]


def test_grid_dimensions():
    grid = _grid(render_screen(_game()))
    assert len(grid) == SCREEN_HEIGHT
    assert all(len(row) == SCREEN_WIDTH for row in grid)


def test_borders():
    grid = _grid(render_screen(_game()))
    assert set(grid[0]) == {"-"}
    assert set(grid[SCREEN_HEIGHT - 1]) == {"-"}
    assert grid[5][0] == "|" and grid[5][SCREEN_WIDTH - 1] == "|"


def test_entities_drawn():
    game = _game()
    grid = _grid(render_screen(game))
    assert grid[game.helicopter.y][game.helicopter.x] == "H"
    soldier = game.soldiers[0]
    assert grid[soldier.y][soldier.x] == "S"
    battery = game.batteries[1]
    assert grid[battery.y][battery.x] == "B"
    assert grid[SCREEN_HEIGHT // 2][SCREEN_WIDTH - 2] == "P"


def test_scenery_drawn():
    grid = _grid(render_screen(_game()))
    assert grid[SCREEN_HEIGHT - 3][2] == "D"
    assert grid[SCREEN_HEIGHT - 3][10] == "="
    assert grid[SCREEN_HEIGHT - 4][8] == "I"
    assert grid[SCREEN_HEIGHT - 4][1] == "|"


def test_rescued_soldier_hidden():
    game = _game()
    soldier = game.soldiers[0]
    soldier.rescued = True
    grid = _grid(render_screen(game))
    assert grid[soldier.y][soldier.x] == " "


def test_rocket_drawn():
    game = _game()
    spawn_rocket(game, 0, 30, 5, -1)
    grid = _grid(render_screen(game))
    assert grid[5][30] == "*"


def test_status_lines():
    lines = render_screen(_game()).splitlines()[SCREEN_HEIGHT:]
    assert lines == [
        "Soldados resgatados: 0/10",
        f"Foguetes B0: {_game().batteries[0].rockets_left} | B1: {_game().batteries[1].rockets_left}",
        "Fase 1 - Dificuldade: Fácil",
        "Status: Em andamento",
    ]


def test_final_status_texts():
    game = _game()
    game.status = GameStatus.VICTORY
    assert render_screen(game).splitlines()[-1] == (
        "Status: VITÓRIA TOTAL - Todas as fases completadas!"
    )
    game.status = GameStatus.DEFEAT
    assert render_screen(game).splitlines()[-1] == "Status: DERROTA!"


def test_run_interface_single_frame_when_over():
    game = _game()
    game.status = GameStatus.DEFEAT
    out = io.StringIO()
    slept = []
    run_interface(game, out, slept.append)
    assert out.getvalue().count(CLEAR_SCREEN) == 1
    assert slept == []
    assert "Status: DERROTA!" in out.getvalue()


def test_run_interface_redraws_until_game_ends():
    game = _game()
    out = io.StringIO()
    slept = []

    def sleep(seconds):
        slept.append(seconds)
        if len(slept) == 2:
            game.status = GameStatus.VICTORY

    run_interface(game, out, sleep)
    assert out.getvalue().count(CLEAR_SCREEN) == 3
    assert len(slept) == 2
    assert out.getvalue().rstrip().endswith("Todas as fases completadas!")