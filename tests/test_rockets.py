from heliresgate.game import MAX_ROCKETS, Game, GameStatus
from heliresgate.rockets import advance_rockets, run_rockets, spawn_rocket


def make_game():
    return Game(notify=lambda message: None)


def test_spawn_uses_first_free_slot():
    game = make_game()
    first = spawn_rocket(game, 0, 30, 18, -1)
    second = spawn_rocket(game, 1, 40, 18, -1)
    assert first is game.rockets[0]
    assert second is game.rockets[1]
    assert (first.x, first.y, first.direction, first.active) == (30, 18, -1, True)


def test_spawn_when_full_returns_none():
    game = make_game()
    for _ in range(MAX_ROCKETS):
        assert spawn_rocket(game, 0, 30, 18, -1) is not None
    assert spawn_rocket(game, 0, 31, 18, -1) is None
    assert all(rocket.x == 30 for rocket in game.rockets)


def test_advance_moves_by_direction():
    game = make_game()
    rocket = spawn_rocket(game, 0, 30, 18, -1)
    advance_rockets(game)
    assert rocket.y == 17
    assert rocket.active


def test_inactive_rockets_do_not_move():
    game = make_game()
    advance_rockets(game)
    assert all(rocket.y == 0 and not rocket.active for rocket in game.rockets)


def test_rocket_leaving_screen_is_deactivated():
    game = make_game()
    rocket = spawn_rocket(game, 0, 30, 0, -1)
    advance_rockets(game)
    assert not rocket.active
    assert game.status is GameStatus.RUNNING


def test_rocket_hitting_helicopter_defeats():
    game = make_game()
    heli = game.helicopter
    rocket = spawn_rocket(game, 0, heli.x, heli.y + 1, -1)
    advance_rockets(game)
    assert game.status is GameStatus.DEFEAT
    assert not rocket.active


def test_run_rockets_stops_when_game_ends():
    game = make_game()
    rocket = spawn_rocket(game, 0, 30, 18, -1)
    delays = []

    def sleep(seconds):
        delays.append(seconds)
        if len(delays) == 3:
            game.status = GameStatus.VICTORY

    run_rockets(game, sleep)
    assert delays == [0.06, 0.06, 0.06]
    assert rocket.y == 15