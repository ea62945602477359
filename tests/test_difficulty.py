import pytest

from heliresgate.difficulty import DifficultyConfig, Level, Progression, config_for


def test_easy_config_matches_table():
    assert config_for(Level.EASY) == DifficultyConfig(
        10, 1500000, 2000000, 800000, 1200000, 3
    )


def test_hard_config_matches_table():
    assert config_for(Level.HARD).rockets_per_battery == 30
    assert config_for(Level.HARD).movement_speed == 8


@pytest.mark.parametrize("level", list(Level))
def test_config_ranges_are_ordered(level):
    config = config_for(level)
    assert config.reload_time_min <= config.reload_time_max
    assert config.fire_interval_min <= config.fire_interval_max


def test_levels_get_harder():
    easy, medium, hard = (config_for(level) for level in Level)
    assert easy.rockets_per_battery < medium.rockets_per_battery < hard.rockets_per_battery
    assert easy.reload_time_max > medium.reload_time_max > hard.reload_time_max


@pytest.mark.parametrize("bad", [0, 4, -1])
def test_config_for_unknown_level(bad):
    with pytest.raises(ValueError):
        config_for(bad)


@pytest.mark.parametrize(
    "value, label", [(1, "Fácil"), (2, "Médio"), (3, "Difícil")]
)
def test_labels(value, label):
    assert Level(value).label == label


def test_labels_follow_progression():
    progression = Progression()
    labels = [progression.level.label]
    progression.advance()
    labels.append(progression.level.label)
    progression.advance()
    labels.append(progression.level.label)
    assert labels == ["Fácil", "Médio", "Difícil"]


def test_progression_starts_easy():
    progression = Progression()
    assert progression.level is Level.EASY
    assert progression.phase == 1
    assert progression.config == config_for(Level.EASY)
    assert progression.is_complete() is False


def test_advance_through_all_levels():
    progression = Progression()
    progression.advance()
    assert (progression.level, progression.phase) == (Level.MEDIUM, 2)
    assert progression.config == config_for(Level.MEDIUM)
    progression.advance()
    assert (progression.level, progression.phase) == (Level.HARD, 3)
    assert progression.is_complete() is True
    progression.advance()
    assert (progression.level, progression.phase) == (Level.HARD, 3)


def test_set_level_changes_config_not_phase():
    progression = Progression()
    progression.set_level(Level.HARD)
    assert progression.level is Level.HARD
    assert progression.config == config_for(Level.HARD)
    assert progression.phase == 1


@pytest.mark.parametrize("bad", [0, 4])
def test_set_level_ignores_unknown(bad):
    progression = Progression()
    progression.set_level(Level.MEDIUM)
    progression.set_level(bad)
    assert progression.level is Level.MEDIUM
    assert progression.config == config_for(Level.MEDIUM)