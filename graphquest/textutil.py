"""CSV line parsing, token splitting and small console helpers."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterator
from typing import TextIO

MAX_FIELDS = 300
CONTINUE_PROMPT = "Presione una tecla para continuar..."


def parse_csv_line(line: str, separator: str = ",") -> list[str]:
    """Split one CSV line into fields.

    Separators inside double quotes do not split. A field wrapped in double
    quotes loses the outer pair; inner quotes are kept. Anything from the
    first newline on is ignored. At most ``MAX_FIELDS`` fields are produced;
    once that many exist, the last one ends at the next unquoted separator.
    """
    line = line.split("\n", 1)[0]
    fields: list[str] = []
    current: list[str] = []
    inside_quotes = False
    truncated = False

    for char in line:
        if char == '"':
            inside_quotes = not inside_quotes
        elif char == separator and not inside_quotes:
            if len(fields) + 1 < MAX_FIELDS:
                fields.append("".join(current))
                current = []
            else:
                truncated = True
            continue
        if not truncated:
            current.append(char)
    fields.append("".join(current))

    return [_strip_outer_quotes(field) for field in fields]


def _strip_outer_quotes(field: str) -> str:
    if field and field[0] == '"' and field[-1] == '"':
        return field[1:-1]
    return field


def read_csv(stream: TextIO, separator: str = ",") -> Iterator[list[str]]:
    """Yield the fields of every line read from ``stream``."""
    for line in stream:
        yield parse_csv_line(line, separator)


def split_string(text: str, delimiters: str) -> list[str]:
    """Split on any of ``delimiters``, dropping empty tokens and trimming spaces."""
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return [token.strip(" ") for token in tokens]


def clear_screen() -> None:
    """Clear the terminal."""
    command = "cls" if os.name == "nt" else "clear"
    subprocess.run(command, shell=True, check=False)


def wait_for_key(stream: TextIO | None = None, output: TextIO | None = None) -> None:
    """Prompt and wait: consume the pending newline, then one more character."""
    stream = sys.stdin if stream is None else stream
    output = sys.stdout if output is None else output
    print(CONTINUE_PROMPT, file=output)
    output.flush()
    stream.read(1)
    stream.read(1)