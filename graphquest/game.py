"""GraphQuest: walk a graph of scenarios collecting items against the clock."""

from __future__ import annotations

import argparse
import enum
import math
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from graphquest.textutil import read_csv, split_string

MAX_TIME = 10
DEFAULT_DATA_PATH = "data/graphquest.csv"
START_SCENARIO_ID = 1

GAME_MENU = (
    "\n1. Recoger item\n2. Descartar item\n3. Mover\n4. Reiniciar\n5. Salir\nOpcion: "
)
DIRECTION_PROMPT = "Direccion (1. Arriba, 2. Abajo, 3. Izquierda, 4. Derecha): "
MAIN_MENU = "\n=== GraphQuest ===\n1. Cargar Laberinto\n2. Iniciar Partida\n3. Salir\nOpcion: "

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ItemNotFoundError(LookupError):
    """No item with the requested name is at hand."""


class InvalidMoveError(ValueError):
    """The requested direction leads nowhere."""


class Direction(enum.IntEnum):
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

    @property
    def label(self) -> str:
        return _DIRECTION_LABELS[self]


_DIRECTION_LABELS = {
    Direction.UP: "Arriba",
    Direction.DOWN: "Abajo",
    Direction.LEFT: "Izquierda",
    Direction.RIGHT: "Derecha",
}


@dataclass
class Item:
    name: str
    value: int
    weight: int

    def describe(self) -> str:
        return f"- {self.name} ({self.value} pts, {self.weight} kg)"


@dataclass
class Scenario:
    id: int
    name: str
    description: str
    items: list[Item] = field(default_factory=list)
    up: int | None = None
    down: int | None = None
    left: int | None = None
    right: int | None = None
    is_final: bool = False

    def exit_to(self, direction: Direction) -> int | None:
        """Id of the scenario reached in ``direction``, or None if there is none."""
        return {
            Direction.UP: self.up,
            Direction.DOWN: self.down,
            Direction.LEFT: self.left,
            Direction.RIGHT: self.right,
        }[direction]


@dataclass
class Player:
    scenario: Scenario
    inventory: list[Item] = field(default_factory=list)
    time: int = MAX_TIME

    def total_weight(self) -> int:
        return sum(item.weight for item in self.inventory)

    def total_score(self) -> int:
        return sum(item.value for item in self.inventory)

    def movement_cost(self) -> int:
        """Time a move costs: one unit per started ten kilograms, plus one."""
        return math.ceil((self.total_weight() + 1) / 10)


def _atoi(text: str | None) -> int:
    if text is None:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _exit(text: str) -> int | None:
    value = _atoi(text)
    return None if value == -1 else value


def _parse_item(raw: str) -> Item:
    parts = split_string(raw, ",")
    name = parts[0] if parts else ""
    value = _atoi(parts[1]) if len(parts) > 1 else 0
    weight = _atoi(parts[2]) if len(parts) > 2 else 0
    return Item(name, value, weight)


def load_scenarios(path: str | Path = DEFAULT_DATA_PATH) -> list[Scenario]:
    """Read the scenario graph from a CSV file.

    Columns: id, name, description, items ("name,value,weight;..."), up, down,
    left, right, final ("Si" when final). An exit of -1 means none. A line
    whose id is not a number, such as a header, is skipped.
    """
    scenarios: list[Scenario] = []
    with open(path, encoding="utf-8", newline="") as stream:
        for line_number, fields in enumerate(read_csv(stream, ","), start=1):
            if fields == [""]:
                continue
            if not _LEADING_INT.match(fields[0]):
                continue
            if len(fields) < 9:
                raise ValueError(
                    f"line {line_number}: expected 9 fields, found {len(fields)}"
                )
            scenarios.append(
                Scenario(
                    id=_atoi(fields[0]),
                    name=fields[1],
                    description=fields[2],
                    items=[_parse_item(raw) for raw in split_string(fields[3], ";")],
                    up=_exit(fields[4]),
                    down=_exit(fields[5]),
                    left=_exit(fields[6]),
                    right=_exit(fields[7]),
                    is_final=fields[8] == "Si",
                )
            )
    return scenarios


def find_scenario(scenarios: list[Scenario], scenario_id: int) -> Scenario | None:
    return next((s for s in scenarios if s.id == scenario_id), None)


def _read_line(stream: TextIO) -> str | None:
    line = stream.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


class Game:
    """One play session over a loaded scenario graph."""

    def __init__(
        self,
        scenarios: list[Scenario],
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.scenarios = scenarios
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.player = self._new_player()

    def _new_player(self) -> Player:
        start = find_scenario(self.scenarios, START_SCENARIO_ID)
        if start is None:
            raise ValueError(f"no scenario with id {START_SCENARIO_ID} to start from")
        return Player(start)

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def status(self) -> str:
        """Describe the current scenario, the inventory and the exits."""
        player = self.player
        scenario = player.scenario
        lines = [
            "",
            f"== {scenario.name} ==",
            scenario.description,
            "",
            "Items disponibles:",
            *(item.describe() for item in scenario.items),
            f"Tiempo restante: {player.time}",
            "Inventario:",
            *(item.describe() for item in player.inventory),
            f"Peso total: {player.total_weight()} kg | "
            f"Puntaje: {player.total_score()}",
            "",
            "Opciones de movimiento:",
            *(
                f"{direction.value}. {direction.label}"
                for direction in Direction
                if scenario.exit_to(direction) is not None
            ),
        ]
        return "\n".join(lines) + "\n"

    def pick_up(self, name: str) -> Item:
        """Move the named item from the scenario into the inventory; costs one unit."""
        items = self.player.scenario.items
        item = next((i for i in items if i.name == name), None)
        if item is None:
            raise ItemNotFoundError(name)
        items.remove(item)
        self.player.inventory.append(item)
        self.player.time -= 1
        self._write(f"{name} agregado al inventario.\n")
        return item

    def discard(self, name: str) -> Item:
        """Drop the named item from the inventory; costs one unit."""
        inventory = self.player.inventory
        item = next((i for i in inventory if i.name == name), None)
        if item is None:
            raise ItemNotFoundError(name)
        inventory.remove(item)
        self.player.time -= 1
        self._write(f"{name} descartado del inventario.\n")
        return item

    def move(self, direction: int | Direction) -> Scenario:
        """Walk to the neighbouring scenario, paying the movement cost."""
        try:
            direction = Direction(direction)
        except ValueError:
            raise InvalidMoveError(f"unknown direction {direction}") from None
        target_id = self.player.scenario.exit_to(direction)
        if target_id is None:
            raise InvalidMoveError(f"no exit towards {direction.label}")
        target = find_scenario(self.scenarios, target_id)
        if target is None:
            raise InvalidMoveError(f"no scenario with id {target_id}")
        cost = self.player.movement_cost()
        self.player.time -= cost
        self.player.scenario = target
        self._write(f"Te has movido a {target.name}. (-{cost} tiempo)\n")
        return target

    def play(self) -> None:
        """Run the interactive loop until the game ends, the user quits or input ends."""
        while True:
            if self.player.time <= 0:
                self._write("\nSe acabo el tiempo. Has perdido.\n")
                return
            if self.player.scenario.is_final:
                self._write("\nLlegaste al escenario final\n")
                self._write(self.status())
                return

            self._write(self.status())
            self._write(GAME_MENU)
            line = _read_line(self.stdin)
            if line is None:
                return
            option = _atoi(line)

            if option == 1:
                self._write("Nombre del item a recoger: ")
                name = _read_line(self.stdin)
                if name is None:
                    return
                try:
                    self.pick_up(name)
                except ItemNotFoundError:
                    self._write("Item no encontrado.\n")
            elif option == 2:
                self._write("Nombre del item a descartar: ")
                name = _read_line(self.stdin)
                if name is None:
                    return
                try:
                    self.discard(name)
                except ItemNotFoundError:
                    self._write("Item no encontrado.\n")
            elif option == 3:
                self._write(DIRECTION_PROMPT)
                answer = _read_line(self.stdin)
                if answer is None:
                    return
                try:
                    self.move(_atoi(answer))
                except InvalidMoveError:
                    self._write("Movimiento invalido.\n")
            elif option == 4:
                self.player = self._new_player()
            elif option == 5:
                return
            else:
                self._write("Opción invalida.\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="graphquest", description="GraphQuest game.")
    parser.add_argument(
        "data", nargs="?", default=DEFAULT_DATA_PATH, help="scenario CSV file"
    )
    args = parser.parse_args(argv)

    scenarios: list[Scenario] = []
    while True:
        out = sys.stdout
        out.write(MAIN_MENU)
        out.flush()
        line = _read_line(sys.stdin)
        if line is None:
            out.write("Error al leer entrada.\n")
            return 0
        option = _atoi(line)

        if option == 1:
            try:
                scenarios = load_scenarios(args.data)
            except OSError as error:
                print(f"Error al abrir el archivo: {error}", file=sys.stderr)
                scenarios = []
                continue
            except ValueError as error:
                print(f"Error al leer el archivo: {error}", file=sys.stderr)
                scenarios = []
                continue
            out.write("Archivo abierto correctamente\n")
            out.write("Escenarios cargados correctamente\n")
        elif option == 2:
            try:
                game = Game(scenarios, sys.stdin, sys.stdout)
            except ValueError as error:
                print(f"No se puede iniciar la partida: {error}", file=sys.stderr)
                continue
            game.play()
        elif option == 3:
            return 0
        else:
            out.write("Opcion invalida.\n")


if __name__ == "__main__":
    raise SystemExit(main())