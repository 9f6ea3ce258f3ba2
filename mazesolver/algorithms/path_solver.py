"""
Depth-first maze solver with backtracking over a torus.

Moving past any edge of the grid re-enters it on the opposite edge. Neighbours
are always tried in the order South, East, West, North and the first branch
reaching the exit wins. Cells of the current candidate path are marked
`ON_PATH` in the grid and unmarked again when their branch is abandoned, so on
success the grid holds exactly the solution path and on failure it holds no
marks at all.

Two executions of the same search are available:
- "recursive": one call per visited cell.
- "iterative": an explicit stack of frames, for mazes too large for the
  interpreter's recursion limit. Visit order and marks are identical.
"""

import sys
import typing as t

from mazesolver import config
from mazesolver.utils import utils
from mazesolver.world.maze_grid import MazeGrid
from mazesolver.world.types import GridCell

Execution = t.Literal["recursive", "iterative"]


class PathSolver:
    def __init__(
        self,
        grid: MazeGrid,
        *,
        execution: Execution = config.DEFAULT_EXECUTION,
        recursion_limit: int = config.RECURSION_LIMIT,
        logger: utils.MazeLogger | None = None,
    ):
        if execution not in ("recursive", "iterative"):
            raise ValueError(f"Unknown solver execution: {execution}")
        self.grid = grid
        self.execution = execution
        self.recursion_limit = recursion_limit
        self.logger = logger if logger is not None else utils.MazeLogger()
        self.path: t.List[GridCell] = []
        self.n_calls = 0
        self.solved = False

    def normalize(self, row: int, col: int) -> GridCell:
        """Wraps a cell at most one step outside of the grid back onto the opposite edge."""
        if row < 0:
            row = self.grid.height - 1
        elif row >= self.grid.height:
            row = 0
        if col < 0:
            col = self.grid.width - 1
        elif col >= self.grid.width:
            col = 0
        return row, col

    def solve(self, row: int | None = None, col: int | None = None) -> bool:
        if row is None or col is None:
            row, col = self.grid.start
        self.path = []
        self.n_calls = 0

        execution = self.execution
        if execution == "recursive" and not self._fits_recursion_limit():
            self.logger.info(
                f"Maze of {self.grid.height}x{self.grid.width} cells exceeds the recursion limit, using iterative search",
            )
            execution = "iterative"

        self.logger.info(f"Solving maze from cell ({row}, {col}) with {execution} search")
        if execution == "recursive":
            if sys.getrecursionlimit() < self.recursion_limit:
                sys.setrecursionlimit(self.recursion_limit)
            self.solved = self._solve_recursive(row, col)
        else:
            self.solved = self._solve_iterative(row, col)

        if self.solved:
            self.logger.info(
                f"Exit reached through a path of {len(self.path)} cells", self.n_calls
            )
        else:
            self.logger.info("No solution found", self.n_calls)
        return self.solved

    def _fits_recursion_limit(self) -> bool:
        return self.grid.height * self.grid.width + config.RECURSION_MARGIN <= self.recursion_limit

    def _enter(self, row: int, col: int) -> bool | None:
        """Checks a normalized cell and marks it when the search has to continue from it.

        Returns False for a wall or a cell already on the path, True for the
        exit, and None once the cell has been marked.
        """
        self.n_calls += 1
        if not self.grid.is_traversable(row, col):
            return False
        if self.grid.is_exit(row, col):
            return True
        self.grid.mark_path(row, col)
        self.path.append((row, col))
        return None

    def _leave(self, row: int, col: int):
        self.grid.unmark_path(row, col)
        self.path.pop()

    def _solve_recursive(self, row: int, col: int) -> bool:
        row, col = self.normalize(row, col)
        status = self._enter(row, col)
        if status is not None:
            return status

        for d_row, d_col in utils.SEARCH_DIRECTIONS:
            if self._solve_recursive(row + d_row, col + d_col):
                return True

        self._leave(row, col)
        return False

    def _solve_iterative(self, row: int, col: int) -> bool:
        row, col = self.normalize(row, col)
        status = self._enter(row, col)
        if status is not None:
            return status

        # Frames are [row, col, index of the next direction to try]
        stack: t.List[t.List[int]] = [[row, col, 0]]
        while stack:
            frame = stack[-1]
            f_row, f_col, direction = frame
            if direction == len(utils.SEARCH_DIRECTIONS):
                stack.pop()
                self._leave(f_row, f_col)
                continue

            frame[2] += 1
            d_row, d_col = utils.SEARCH_DIRECTIONS[direction]
            n_row, n_col = self.normalize(f_row + d_row, f_col + d_col)
            status = self._enter(n_row, n_col)
            if status is True:
                return True
            if status is None:
                stack.append([n_row, n_col, 0])

        return False


def solve_maze(
    grid: MazeGrid,
    *,
    execution: Execution = config.DEFAULT_EXECUTION,
    logger: utils.MazeLogger | None = None,
) -> bool:
    """Solves `grid` in place from its start cell."""
    return PathSolver(grid, execution=execution, logger=logger).solve()
