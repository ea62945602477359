"""Rocket spawning and the rocket movement loop."""

from __future__ import annotations

import time
from typing import Callable

from heliresgate.game import SCREEN_HEIGHT, Game, GameStatus, Rocket

ROCKET_TICK = 0.06


def spawn_rocket(
    game: Game, battery_id: int, x: int, y: int, direction: int
) -> Rocket | None:
    """Activate the first free rocket slot at (x, y).

    The battery id only identifies the shooter. Returns the rocket, or
    None when every slot is already in flight.
    """
    with game.sync.rockets_lock:
        for rocket in game.rockets:
            if not rocket.active:
                rocket.x = x
                rocket.y = y
                rocket.direction = direction
                rocket.active = True
                return rocket
    return None


def advance_rockets(game: Game) -> None:
    """Move every active rocket one step and resolve helicopter hits."""
    with game.sync.rockets_lock:
        for rocket in game.rockets:
            if not rocket.active:
                continue
            rocket.y += rocket.direction
            if not 0 <= rocket.y < SCREEN_HEIGHT:
                rocket.active = False
            with game.sync.helicopter_lock:
                heli = game.helicopter
                if rocket.x == heli.x and rocket.y == heli.y:
                    game.status = GameStatus.DEFEAT
                    rocket.active = False


def run_rockets(game: Game, sleep: Callable[[float], None] = time.sleep) -> None:
    """Advance the rockets on a fixed tick until the game is over."""
    while game.status is GameStatus.RUNNING:
        advance_rockets(game)
        sleep(ROCKET_TICK)