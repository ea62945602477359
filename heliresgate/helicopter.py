"""Helicopter movement, collisions, soldier pickup and the input loop."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import Callable

from heliresgate.game import (
    MAX_SOLDIERS_ON_BOARD,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOTAL_SOLDIERS,
    Direction,
    Game,
    GameStatus,
)

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None  # type: ignore[assignment]

HELICOPTER_TICK = 0.08
PLATFORM = (SCREEN_WIDTH - 2, SCREEN_HEIGHT // 2)
DEPOT = (3, SCREEN_HEIGHT // 4)

_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def read_key() -> str:
    """Read one key from standard input without echo or line buffering.

    Returns an empty string once input is exhausted.
    """
    stream = sys.stdin
    if termios is None or not stream.isatty():
        return stream.read(1)
    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        return os.read(fd, 1).decode(errors="replace")
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def key_to_direction(key: str) -> Direction | None:
    """Map the w/a/s/d keys to a direction; anything else gives None."""
    return _KEYS.get(key)


def move_helicopter(game: Game, direction: Direction) -> None:
    """Move the helicopter one cell; the caller holds the helicopter lock."""
    heli = game.helicopter
    if direction is Direction.UP:
        heli.y -= 1
    elif direction is Direction.DOWN:
        heli.y += 1
    elif direction is Direction.LEFT:
        heli.x -= 1
    elif direction is Direction.RIGHT:
        heli.x += 1


def check_collision(game: Game) -> bool:
    """True if the helicopter has crashed into an edge, a battery or the depot."""
    heli = game.helicopter
    if heli.y <= 0 or heli.y >= SCREEN_HEIGHT - 1:
        return True
    if heli.x <= 0 or heli.x >= SCREEN_WIDTH - 1:
        return True
    for battery_id, battery in enumerate(game.batteries):
        with game.sync.battery_lock(battery_id):
            if heli.x == battery.x and heli.y == battery.y:
                return True
    return (heli.x, heli.y) == DEPOT


@dataclass
class RescueTracker:
    """Remembers where the last pickup happened so one spot yields one soldier."""

    last_x: int = -1
    last_y: int = -1
    picked_here: bool = False

    def process(self, game: Game) -> None:
        """Deliver soldiers at the platform and pick up one under the helicopter."""
        heli = game.helicopter
        if (heli.x, heli.y) != (self.last_x, self.last_y):
            self.last_x, self.last_y = heli.x, heli.y
            self.picked_here = False

        if (heli.x, heli.y) == PLATFORM and heli.soldiers_on_board > 0:
            with game.sync.soldiers_lock:
                game.rescued += heli.soldiers_on_board
                heli.soldiers_on_board = 0
                game.notify("RESGATOU soldados na plataforma!")
                game.check_phase_victory()
            heli = game.helicopter

        found = next(
            (
                (index, soldier)
                for index, soldier in enumerate(game.soldiers)
                if not soldier.rescued and soldier.x == heli.x and soldier.y == heli.y
            ),
            None,
        )

        if not self.picked_here and heli.soldiers_on_board < MAX_SOLDIERS_ON_BOARD:
            if found is None:
                return
            index, soldier = found
            with game.sync.soldiers_lock:
                soldier.rescued = True
                heli.soldiers_on_board += 1
                self.picked_here = True
                game.notify(
                    f"*** PEGOU soldado {index} na posição ({heli.x},{heli.y})!"
                    f" Total a bordo: {heli.soldiers_on_board} ***"
                )
                if heli.soldiers_on_board >= MAX_SOLDIERS_ON_BOARD:
                    game.notify(
                        "Helicóptero cheio! Volte para a plataforma para resgatar os soldados."
                    )
        elif heli.soldiers_on_board >= MAX_SOLDIERS_ON_BOARD:
            if found is not None:
                game.notify(
                    f"*** HELICÓPTERO LOTADO ({heli.soldiers_on_board}/"
                    f"{MAX_SOLDIERS_ON_BOARD})! Entregue na plataforma primeiro! ***"
                )
        elif self.picked_here and found is not None:
            game.notify("*** JÁ PEGOU soldado nesta posição! Mova-se primeiro! ***")


def run_helicopter(
    game: Game,
    read: Callable[[], str] = read_key,
    sleep: Callable[[float], None] = time.sleep,
) -> GameStatus:
    """Steer the helicopter from keyboard input until it crashes, wins or input ends."""
    tracker = RescueTracker()
    lock = game.sync.helicopter_lock
    while True:
        key = read()
        if not key:
            break
        direction = key_to_direction(key)
        with lock:
            if direction is not None:
                move_helicopter(game, direction)
            if check_collision(game):
                game.status = GameStatus.DEFEAT
                break
        with lock:
            tracker.process(game)
            if game.rescued >= TOTAL_SOLDIERS:
                game.status = GameStatus.VICTORY
                break
        if game.status is not GameStatus.RUNNING:
            break
        sleep(HELICOPTER_TICK)
    return game.status