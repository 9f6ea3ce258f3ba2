import copy
import typing as t

import numpy as np
import numpy.typing as npt
from typing_extensions import Self

from mazesolver.data_models import MazeDescription
from mazesolver.exceptions import OutOfRangeError
from mazesolver.world.types import TRAVERSABLE_STATES, CellState, GridCell


class MazeGrid:
    """A rectangular maze of cells indexed by (row, col).

    The grid never wraps coordinates: every accessor raises `OutOfRangeError`
    for cells outside of [0, height) x [0, width). Wrap-around is the solver's
    business.
    """

    def __init__(
        self,
        *,
        cells: npt.NDArray[np.int8],
        start: GridCell,
        exit: GridCell,
    ):
        self.cells = cells.astype(np.int8)
        self.height, self.width = self.cells.shape
        self.start = start
        self.exit = exit
        self.stamp_endpoints()

    @classmethod
    def from_rows(
        cls, rows: t.Sequence[t.Sequence[int]], start: GridCell, exit: GridCell
    ) -> Self:
        return cls(cells=np.array(rows, dtype=np.int8), start=start, exit=exit)

    @classmethod
    def from_description(cls, description: MazeDescription) -> Self:
        return cls.from_rows(
            description.cells, start=description.start, exit=description.exit
        )

    @property
    def shape(self) -> t.Tuple[int, int]:
        return self.height, self.width

    def stamp_endpoints(self):
        # The exit goes last so that it wins if both endpoints share a cell
        self.set(self.start[0], self.start[1], CellState.START)
        self.set(self.exit[0], self.exit[1], CellState.EXIT)

    def in_range(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def _check_range(self, row: int, col: int):
        if not self.in_range(row, col):
            raise OutOfRangeError(row, col, self.height, self.width)

    def at(self, row: int, col: int) -> CellState:
        self._check_range(row, col)
        return CellState(int(self.cells[row, col]))

    def set(self, row: int, col: int, state: CellState):
        self._check_range(row, col)
        self.cells[row, col] = state

    def is_traversable(self, row: int, col: int) -> bool:
        return self.at(row, col) in TRAVERSABLE_STATES

    def is_exit(self, row: int, col: int) -> bool:
        return self.at(row, col) == CellState.EXIT

    def mark_path(self, row: int, col: int):
        self.set(row, col, CellState.ON_PATH)

    def unmark_path(self, row: int, col: int):
        self.set(row, col, CellState.OPEN)

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == state))

    def path_cells(self) -> t.Set[GridCell]:
        rows, cols = np.where(self.cells == CellState.ON_PATH)
        return set(zip(rows.tolist(), cols.tolist()))

    def copy(self) -> Self:
        return copy.deepcopy(self)

    def __repr__(self):
        return f"MazeGrid(height={self.height}, width={self.width}, start={self.start}, exit={self.exit})"
