"""ASCII rendering of the battlefield and the screen refresh loop."""

from __future__ import annotations

import sys
import time
from typing import Callable, Iterable, TextIO

from heliresgate.game import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOTAL_SOLDIERS,
    Game,
    GameStatus,
)

CLEAR_SCREEN = "\033[2J\033[H"
INTERFACE_TICK = 0.1

_STATUS_TEXT = {
    GameStatus.RUNNING: "Em andamento",
    GameStatus.VICTORY: "VITÓRIA TOTAL - Todas as fases completadas!",
    GameStatus.DEFEAT: "DERROTA!",
}


def _depot_char(x: int, y: int) -> str:
    if x in (1, 4) and y in (SCREEN_HEIGHT // 4 - 1, SCREEN_HEIGHT // 4 + 1):
        return "+"
    if x in (1, 4):
        return "|"
    if y in (SCREEN_HEIGHT - 4, SCREEN_HEIGHT - 2):
        return "-"
    if x == 2 and y == SCREEN_HEIGHT - 3:
        return "D"
    return " "


def _blank_grid() -> list[list[str]]:
    rows = []
    for y in range(SCREEN_HEIGHT):
        if y in (0, SCREEN_HEIGHT - 1):
            rows.append(["-"] * SCREEN_WIDTH)
        else:
            rows.append(["|"] + [" "] * (SCREEN_WIDTH - 2) + ["|"])
    return rows


def _paint(grid: list[list[str]], cells: Iterable[tuple[int, int]], char: str) -> None:
    for x, y in cells:
        if 0 <= y < SCREEN_HEIGHT and 0 <= x < SCREEN_WIDTH:
            grid[y][x] = char


def render_screen(game: Game) -> str:
    """Draw the scene and the status lines as one block of text."""
    sync = game.sync
    with sync.helicopter_lock:
        heli = [(game.helicopter.x, game.helicopter.y)]
    with sync.soldiers_lock:
        soldiers = [(s.x, s.y) for s in game.soldiers if not s.rescued]
    batteries = []
    for battery_id, battery in enumerate(game.batteries):
        with sync.battery_lock(battery_id):
            batteries.append((battery.x, battery.y))
    with sync.rockets_lock:
        rockets = [(r.x, r.y) for r in game.rockets if r.active]

    grid = _blank_grid()
    _paint(grid, heli, "H")
    _paint(grid, soldiers, "S")
    _paint(grid, batteries, "B")
    _paint(grid, [(SCREEN_WIDTH - 2, SCREEN_HEIGHT // 2)], "P")
    for y in range(SCREEN_HEIGHT - 4, SCREEN_HEIGHT - 1):
        for x in range(1, 5):
            grid[y][x] = _depot_char(x, y)
    _paint(grid, ((x, SCREEN_HEIGHT - 3) for x in range(8, 16)), "=")
    _paint(
        grid,
        ((x, y) for x in (8, 15) for y in range(SCREEN_HEIGHT - 4, SCREEN_HEIGHT - 1)),
        "I",
    )
    _paint(grid, rockets, "*")

    lines = ["".join(row) for row in grid]
    lines.append(f"Soldados resgatados: {game.rescued}/{TOTAL_SOLDIERS}")
    lines.append(
        f"Foguetes B0: {game.batteries[0].rockets_left}"
        f" | B1: {game.batteries[1].rockets_left}"
    )
    lines.append(
        f"Fase {game.progression.phase} - Dificuldade: {game.progression.level.label}"
    )
    lines.append(f"Status: {_STATUS_TEXT[game.status]}")
    return "\n".join(lines) + "\n"


def run_interface(
    game: Game,
    out: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Redraw the screen while the game runs, then draw the final frame."""
    stream = out if out is not None else sys.stdout

    def draw() -> None:
        stream.write(CLEAR_SCREEN + render_screen(game))
        stream.flush()

    while game.status is GameStatus.RUNNING:
        draw()
        sleep(INTERFACE_TICK)
    draw()