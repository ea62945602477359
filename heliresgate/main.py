"""Command entry point: sets up the game and runs all of its threads."""

from __future__ import annotations

import argparse
import threading

from heliresgate.battery import run_battery
from heliresgate.difficulty import Level
from heliresgate.game import Game, GameStatus
from heliresgate.helicopter import run_helicopter
from heliresgate.interface import run_interface
from heliresgate.rockets import run_rockets


def main(argv: list[str] | None = None) -> int:
    """Run the rescue game from the easy level through to the hard one."""
    parser = argparse.ArgumentParser(
        prog="heliresgate",
        description="Rescue the soldiers with the helicopter (keys w/a/s/d).",
    )
    parser.parse_args(argv)

    print("Iniciando jogo! Progressão automática: Fácil → Médio → Difícil")

    game = Game()
    game.start(Level.EASY)

    helicopter = threading.Thread(target=run_helicopter, args=(game,), name="helicopter")
    others = [
        threading.Thread(target=run_battery, args=(game, 0), name="battery-0"),
        threading.Thread(target=run_battery, args=(game, 1), name="battery-1"),
        threading.Thread(target=run_rockets, args=(game,), name="rockets"),
        threading.Thread(target=run_interface, args=(game,), name="interface"),
    ]
    helicopter.start()
    for thread in others:
        thread.start()

    helicopter.join()
    if game.status is GameStatus.RUNNING:
        # Input ran out: the pilot abandoned the mission.
        game.status = GameStatus.DEFEAT
    for thread in others:
        thread.join()
    return 0