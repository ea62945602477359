"""Difficulty levels and the automatic phase progression."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Level(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {Level.EASY: "Fácil", Level.MEDIUM: "Médio", Level.HARD: "Difícil"}


@dataclass(frozen=True)
class DifficultyConfig:
    """Tuning for one level; times are in microseconds."""

    rockets_per_battery: int
    reload_time_min: int
    reload_time_max: int
    fire_interval_min: int
    fire_interval_max: int
    movement_speed: int


_CONFIGS = {
    Level.EASY: DifficultyConfig(10, 1_500_000, 2_000_000, 800_000, 1_200_000, 3),
    Level.MEDIUM: DifficultyConfig(20, 800_000, 1_200_000, 400_000, 700_000, 5),
    Level.HARD: DifficultyConfig(30, 300_000, 600_000, 200_000, 400_000, 8),
}


def config_for(level: int) -> DifficultyConfig:
    """Return the configuration of a level; unknown levels raise ValueError."""
    try:
        return _CONFIGS[Level(level)]
    except ValueError:
        raise ValueError(f"unknown difficulty level: {level!r}") from None


@dataclass
class Progression:
    """Current level, its configuration and the phase number."""

    level: Level = Level.EASY
    phase: int = 1
    config: DifficultyConfig = field(init=False)

    def __post_init__(self) -> None:
        self.level = Level(self.level)
        self.load_config()

    def set_level(self, level: int) -> None:
        """Switch to a level; values outside the known levels are ignored."""
        if Level.EASY <= level <= Level.HARD:
            self.level = Level(level)
            self.load_config()

    def load_config(self) -> None:
        self.config = config_for(self.level)

    def advance(self) -> None:
        """Move to the next level and phase, unless already at the hardest."""
        if self.level < Level.HARD:
            self.level = Level(self.level + 1)
            self.phase += 1
            self.load_config()

    def is_complete(self) -> bool:
        """True once the hardest level is in play."""
        return self.level == Level.HARD