import os
import typing as t

from pydantic import ValidationError

from mazesolver.data_models import MazeDescription
from mazesolver.exceptions import MalformedMazeError, MazeFileNotFoundError
from mazesolver.world.types import TOKEN_STATES

HEADER_LINES = 3


def load_maze_file(path: str) -> t.List[str]:
    """Reads a maze file and returns its lines without line terminators."""
    path = os.path.expanduser(path.strip())
    if not os.path.isfile(path):
        raise MazeFileNotFoundError(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except UnicodeDecodeError as e:
        raise MalformedMazeError(f"{path} is not a UTF-8 text file") from e
    except OSError as e:
        raise MazeFileNotFoundError(path) from e


def _parse_int_pair(lines: t.Sequence[str], index: int, what: str) -> t.Tuple[int, int]:
    if index >= len(lines):
        raise MalformedMazeError(f"missing {what}", index + 1)
    fields = lines[index].split()
    if len(fields) != 2:
        raise MalformedMazeError(
            f"expected two integers for {what}, found {len(fields)} fields", index + 1
        )
    try:
        return int(fields[0]), int(fields[1])
    except ValueError:
        raise MalformedMazeError(f"{what} must be integers: {lines[index]!r}", index + 1)


def _parse_row(line: str, line_number: int) -> t.List[int]:
    row = []
    for token in line.split():
        if token not in TOKEN_STATES:
            raise MalformedMazeError(f"unexpected cell token {token!r}", line_number)
        row.append(int(TOKEN_STATES[token]))
    return row


def parse_maze_properties(lines: t.Sequence[str]) -> MazeDescription:
    """Parses the lines of a maze file.

    The header holds `width height`, `startColumn startRow` and
    `exitColumn exitRow`, followed by `height` rows of `width` tokens where
    `0` is open and `1` is a wall. Trailing blank lines are ignored.
    """
    lines = list(lines)
    while lines and not lines[-1].strip():
        lines.pop()

    width, height = _parse_int_pair(lines, 0, "maze size")
    start_col, start_row = _parse_int_pair(lines, 1, "start position")
    exit_col, exit_row = _parse_int_pair(lines, 2, "exit position")

    cells = [
        _parse_row(line, i + 1)
        for i, line in enumerate(lines[HEADER_LINES:], start=HEADER_LINES)
    ]

    try:
        return MazeDescription(
            width=width,
            height=height,
            start=(start_row, start_col),
            exit=(exit_row, exit_col),
            cells=cells,
        )
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise MalformedMazeError(messages) from e


def load_maze(path: str) -> MazeDescription:
    return parse_maze_properties(load_maze_file(path))
