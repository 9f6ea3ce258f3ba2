import typing as t

import typer

from mazesolver.world.maze_grid import MazeGrid
from mazesolver.world.types import CellState

GLYPHS: t.Dict[CellState, str] = {
    CellState.WALL: "#",
    CellState.OPEN: " ",
    CellState.ON_PATH: "X",
    CellState.START: "S",
    CellState.EXIT: "E",
}


def glyph_rows(grid: MazeGrid) -> t.List[t.List[str]]:
    rows = [[GLYPHS[CellState(int(v))] for v in r] for r in grid.cells]
    # The start cell loses its state once the search marks it
    rows[grid.start[0]][grid.start[1]] = GLYPHS[CellState.START]
    rows[grid.exit[0]][grid.exit[1]] = GLYPHS[CellState.EXIT]
    return rows


def render_grid(grid: MazeGrid) -> str:
    return "\n".join(" ".join(row) for row in glyph_rows(grid)) + "\n\n"


def print_grid(grid: MazeGrid):
    typer.echo(render_grid(grid), nl=False)
