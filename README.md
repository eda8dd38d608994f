# graphquest

A console text adventure. The map is a graph of scenarios read from a CSV
file. You start in scenario 1 with 10 units of time. Each scenario may hold
items, and each item has a value in points and a weight in kilograms. The
game's menus and messages are in Spanish.

- Picking up an item costs 1 unit of time.
- Discarding an item costs 1 unit of time.
- Moving costs `ceil((total weight + 1) / 10)` units of time.

You win when you reach a final scenario. You lose when your time reaches 0.

## Installing

```
pip install .
```

## Playing

```
graphquest [DATA]
```

`DATA` is the scenario CSV file; it defaults to `data/graphquest.csv`,
relative to the current directory. The same command can be started with
`python -m graphquest.game`.

The main menu offers:

1. Load the maze: reads the scenario file. If it cannot be opened or a line
   is malformed, an error is printed and no scenarios are loaded.
2. Start a game: needs a loaded maze with a scenario of id 1.
3. Quit.

In a game the menu offers: pick up an item (by exact name), discard an item
(by exact name), move (1 up, 2 down, 3 left, 4 right), restart, and quit.
Restarting gives a new player in scenario 1 with full time and an empty
inventory; items already picked up are not put back in their scenarios.
When standard input ends, the game and the main menu stop.

## The scenario file

Each line describes one scenario, with fields separated by commas. A field
can be put in double quotes so that it may contain commas.

```
id,name,description,items,up,down,left,right,final
```

- `items` is a `;`-separated list of `name,value,weight` entries.
- Each exit gives the id of a neighbouring scenario, or `-1` where there is none.
- `final` is `Si` for a final scenario.
- Empty lines, and lines whose first field is not a number (such as a header
  row), are skipped. Any other line with fewer than 9 fields is an error.

## Using it as a library

```python
from graphquest.game import Game, load_scenarios

scenarios = load_scenarios("data/graphquest.csv")
game = Game(scenarios)          # reads sys.stdin, writes sys.stdout by default
print(game.status())
game.pick_up("llave")           # raises ItemNotFoundError if absent
game.move(1)                    # or Direction.UP; raises InvalidMoveError
game.play()
```

`graphquest.game` also has `Item`, `Scenario`, `Player` (with
`total_weight()`, `total_score()` and `movement_cost()`), `Direction` and
`find_scenario(scenarios, scenario_id)`. `Game(...)` raises `ValueError` when
there is no scenario with id 1.

The package also holds small helpers:

- `graphquest.textutil`: `parse_csv_line`, `read_csv`, `split_string`,
  `clear_screen` (runs the terminal's `clear` or `cls` command) and
  `wait_for_key`.
- `graphquest.linkedlist`: `CursorList`, a sequence with a traversal cursor
  (`first`, `next`, `pop_current`, `sorted_insert`, ...), plus `Stack` and
  `Queue`, whose empty reads return `None`.
- `graphquest.heap`: `Heap`, a max-priority queue; `top()` returns `None`
  when empty and `pop()` raises `IndexError`.
- `graphquest.mapping`: `Map` (unique keys), `MultiMap` (duplicate keys
  kept) and `KeySet`, each taking an `is_equal` or a `lower_than`
  comparison; with `lower_than` entries are kept sorted by key.

## What it does not do

No scenario file comes with the package: you have to supply one. There is
no saving or loading of a game in progress.

## Running the tests

```
pip install ".[test]"
pytest
```