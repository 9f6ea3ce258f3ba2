import typing as t
from enum import IntEnum

GridCell = t.Tuple[int, int]


class CellState(IntEnum):
    OPEN = 0
    WALL = 1
    START = 2
    EXIT = 3
    ON_PATH = 4


TRAVERSABLE_STATES = frozenset({CellState.OPEN, CellState.START, CellState.EXIT})

# Tokens accepted in the matrix section of a maze file
TOKEN_STATES: t.Dict[str, CellState] = {"0": CellState.OPEN, "1": CellState.WALL}
