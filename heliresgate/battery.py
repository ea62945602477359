"""Anti-aircraft batteries: firing, moving and the bridge/depot reload trip."""

from __future__ import annotations

import random
import time
from typing import Callable

from heliresgate.game import SCREEN_WIDTH, Battery, Game, GameStatus
from heliresgate.rockets import spawn_rocket

ROCKET_DIRECTION = -1
LEFT_MARGIN = 17
RIGHT_MARGIN = SCREEN_WIDTH - 5
BRIDGE_EXIT = 16
_INITIAL_HEADINGS = (1, -1)

Sleep = Callable[[float], None]


def _heading(battery: Battery, battery_id: int) -> int:
    return getattr(battery, "heading", _INITIAL_HEADINGS[battery_id])


def fire_rocket(game: Game, battery_id: int) -> bool:
    """Fire one rocket and step the battery sideways.

    Returns False without firing when the battery is empty or reloading.
    """
    lock = game.sync.battery_lock(battery_id)
    with lock:
        battery = game.batteries[battery_id]
        if battery.rockets_left <= 0 or battery.reloading:
            return False
        x, y = battery.x, battery.y
        battery.rockets_left -= 1
        left = battery.rockets_left
        heading = _heading(battery, battery_id)
        battery.x += heading * game.progression.config.movement_speed
        if battery.x <= LEFT_MARGIN:
            heading = 1
        elif battery.x >= RIGHT_MARGIN:
            heading = -1
        battery.heading = heading  # type: ignore[attr-defined]
    spawn_rocket(game, battery_id, x, y, ROCKET_DIRECTION)
    game.notify(f"Bateria {battery_id} disparou! Foguetes restantes: {left}")
    return True


def _walk(
    game: Game,
    battery_id: int,
    step: int,
    keep_going: Callable[[int], bool],
    delay: float,
    sleep: Sleep,
) -> None:
    lock = game.sync.battery_lock(battery_id)
    battery = game.batteries[battery_id]
    while True:
        with lock:
            if not keep_going(battery.x):
                return
            battery.x += step
        sleep(delay)


def recharge(
    game: Game, battery_id: int, rng: random.Random, sleep: Sleep = time.sleep
) -> None:
    """Cross the bridge to the depot, reload, and come back over the bridge."""
    sync = game.sync
    lock = sync.battery_lock(battery_id)
    battery = game.batteries[battery_id]
    game.notify(f"Bateria {battery_id} indo para recarga...")

    _walk(game, battery_id, -2, lambda x: x > LEFT_MARGIN, 0.05, sleep)

    if sync.bridge_occupied:
        game.notify(f"Bateria {battery_id} esperando ponte ficar livre...")
    sync.occupy_bridge()
    game.notify(f"Bateria {battery_id} atravessando a ponte...")

    _walk(game, battery_id, -1, lambda x: x > 0, 0.1, sleep)

    if sync.depot_occupied:
        game.notify(f"Bateria {battery_id} esperando depósito ficar livre...")
    sync.occupy_depot()
    with lock:
        battery.reloading = True
        game.notify(f"Bateria {battery_id} recarregando no depósito...")

    config = game.progression.config
    sleep(rng.randint(config.reload_time_min, config.reload_time_max) / 1_000_000)

    with lock:
        battery.rockets_left = game.progression.config.rockets_per_battery
        battery.reloading = False
        game.notify(f"Bateria {battery_id} recarga completa! Voltando...")

    sync.release_depot()

    _walk(game, battery_id, 1, lambda x: x < BRIDGE_EXIT, 0.1, sleep)

    sync.release_bridge()
    game.notify(f"Bateria {battery_id} liberou a ponte e voltou ao combate!")
    sleep(0.2)


def run_battery(
    game: Game,
    battery_id: int,
    rng: random.Random | None = None,
    sleep: Sleep = time.sleep,
) -> None:
    """Fire at the configured rate, reloading when empty, until the game ends."""
    game.sync.battery_lock(battery_id)
    rng = rng if rng is not None else random.Random()
    while game.status is GameStatus.RUNNING:
        if fire_rocket(game, battery_id):
            config = game.progression.config
            interval = rng.randint(config.fire_interval_min, config.fire_interval_max)
            sleep(interval / 1_000_000)
        else:
            recharge(game, battery_id, rng, sleep)