# heliresgate

A small terminal arcade game. You fly a helicopter `H` across a 60×20 ASCII
battlefield, pick up soldiers `S` stranded along the left wall, and deliver
them one at a time to the rescue platform `P` on the right. Two anti-aircraft
batteries `B` patrol the ground and fire rockets `*` upward. When a battery
runs out of rockets it drives left, crosses a one-lane bridge to the depot,
reloads, and drives back. Only one battery can be on the bridge at a time, and
only one can use the depot at a time.

The game's messages and status lines are in Portuguese.

## Running

```
pip install .
heliresgate
```

On a terminal, keys are read one at a time without waiting for Enter and
without echo (this uses `termios`, so it needs a POSIX system). When standard
input is not a terminal, keys are read from it one character at a time. When
input runs out, the helicopter stops and the game ends in defeat.

`heliresgate --help` shows the command's usage; it takes no other options.

## Controls

| Key | Action     |
|-----|------------|
| `w` | move up    |
| `s` | move down  |
| `a` | move left  |
| `d` | move right |

Any other key leaves the helicopter where it is.

The helicopter carries one soldier at a time. Fly onto an `S` to pick a
soldier up, then fly to `P` to drop them off. Only one soldier can be picked
up on a given cell until the helicopter moves. The helicopter is destroyed if
it touches the top row, the ground row, either side wall, a battery or the
depot cell at column 3, row 5, or if a rocket hits it.

## Phases

The game always starts on **Easy**. When all 10 soldiers are rescued it moves
on to the next phase. The soldiers are put back along the left wall, the
helicopter returns to the left side of the screen with nobody on board, and
both batteries are restocked for the new level.

| Phase | Level  | Rockets per battery | Battery step per shot |
|-------|--------|---------------------|-----------------------|
| 1     | Easy   | 10                  | 3                     |
| 2     | Medium | 20                  | 5                     |
| 3     | Hard   | 30                  | 8                     |

Harder levels also fire faster and reload faster. Rescuing all soldiers in the
Hard phase wins the game.

## Using it as a library

- `heliresgate.game.Game` holds the shared state: `helicopter`, `soldiers`,
  `batteries`, `rockets`, `rescued`, `status` (a `GameStatus`) and
  `progression`. `Game.start(level)` starts fresh at a `Level`, and
  `Game.check_phase_victory()` advances the phase or declares victory. Game
  messages go to the `notify` callable, which defaults to `print`.
- `heliresgate.difficulty` has `Level`, `DifficultyConfig`, `config_for(level)`
  and `Progression`.
- `heliresgate.sync.SyncPrimitives` holds the locks and the bridge and depot
  occupancy.
- Each actor has its own module with a loop that takes its time and input
  sources as arguments:
  - `heliresgate.rockets.run_rockets(game, sleep)`, with `spawn_rocket` and
    `advance_rockets`;
  - `heliresgate.helicopter.run_helicopter(game, read, sleep)`, with
    `move_helicopter`, `check_collision`, `key_to_direction`, `read_key` and
    `RescueTracker`;
  - `heliresgate.battery.run_battery(game, battery_id, rng, sleep)`, with
    `fire_rocket` and `recharge`;
  - `heliresgate.interface.run_interface(game, out, sleep)`.
- `heliresgate.interface.render_screen(game)` returns the current frame and
  status lines as a string.

`heliresgate.main.main(argv)` sets up a game at Easy and runs all five loops
in threads until the game is over.

## What it does not do

There is no way to pick a starting level, pause, quit from the keyboard, or
save a game; a game always runs from Easy until it is won or lost.

## Development

```
pip install .[test]
pytest
```