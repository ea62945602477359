"""Game state: helicopter, soldiers, batteries, rockets and phase changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable

from heliresgate.difficulty import Level, Progression
from heliresgate.sync import SyncPrimitives

SCREEN_HEIGHT = 20
SCREEN_WIDTH = 60
TOTAL_SOLDIERS = 10
MAX_SOLDIERS_ON_BOARD = 1
MAX_ROCKETS = 32
DEFAULT_BATTERY_ROCKETS = 5


class Direction(IntEnum):
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class GameStatus(Enum):
    RUNNING = "running"
    VICTORY = "victory"
    DEFEAT = "defeat"


@dataclass
class Helicopter:
    x: int
    y: int
    soldiers_on_board: int = 0


@dataclass
class Soldier:
    x: int
    y: int
    rescued: bool = False


@dataclass
class Battery:
    x: int
    y: int
    rockets_left: int = DEFAULT_BATTERY_ROCKETS
    reloading: bool = False


@dataclass
class Rocket:
    x: int = 0
    y: int = 0
    active: bool = False
    direction: int = 0


def initial_soldiers() -> list[Soldier]:
    """Soldiers lined up on the left edge, spaced vertically."""
    spacing = (SCREEN_HEIGHT - 4) // TOTAL_SOLDIERS
    return [Soldier(x=1, y=2 + i * spacing) for i in range(TOTAL_SOLDIERS)]


def _initial_batteries() -> list[Battery]:
    return [
        Battery(x=SCREEN_WIDTH // 4, y=SCREEN_HEIGHT - 2),
        Battery(x=(SCREEN_WIDTH // 4) * 3, y=SCREEN_HEIGHT - 2),
    ]


@dataclass
class Game:
    """The whole shared world that the threads read and modify."""

    progression: Progression = field(default_factory=Progression)
    sync: SyncPrimitives = field(default_factory=SyncPrimitives)
    notify: Callable[[str], None] = print
    helicopter: Helicopter = field(init=False)
    soldiers: list[Soldier] = field(init=False)
    batteries: list[Battery] = field(init=False)
    rescued: int = field(init=False, default=0)
    status: GameStatus = field(init=False, default=GameStatus.RUNNING)
    rockets: list[Rocket] = field(init=False)

    def __post_init__(self) -> None:
        self.rockets = [Rocket() for _ in range(MAX_ROCKETS)]
        self.reset()

    def reset(self) -> None:
        """Put helicopter, soldiers and batteries at their starting places."""
        self.helicopter = Helicopter(x=5, y=SCREEN_HEIGHT // 2)
        self.soldiers = initial_soldiers()
        self.batteries = _initial_batteries()
        self.rescued = 0
        self.status = GameStatus.RUNNING

    def start(self, level: Level) -> None:
        """Set the difficulty and start fresh with its rocket supply."""
        self.progression.set_level(level)
        self.reset()
        for battery in self.batteries:
            battery.rockets_left = self.progression.config.rockets_per_battery

    def check_phase_victory(self) -> None:
        """Win the game or move to the next phase once all soldiers are rescued."""
        if self.rescued < TOTAL_SOLDIERS:
            return
        if self.progression.is_complete():
            self.status = GameStatus.VICTORY
            return
        self.progression.advance()
        self.notify(
            f"*** FASE COMPLETADA! Avançando para Fase {self.progression.phase}"
            f" - {self.progression.level.label} ***"
        )
        self.rescued = 0
        self.soldiers = initial_soldiers()
        for battery in self.batteries:
            battery.rockets_left = self.progression.config.rockets_per_battery
            battery.reloading = False
        self.helicopter = Helicopter(x=2, y=SCREEN_HEIGHT // 2)