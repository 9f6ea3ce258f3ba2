import sys
import typing as t

import typer
import yaml
from pydantic import ValidationError

from mazesolver.algorithms.path_solver import PathSolver
from mazesolver.data_models import (
    MazeDescription,
    SolverConfigYamlModel,
    solver_config_from_yaml,
)
from mazesolver.display import render
from mazesolver.exceptions import MalformedMazeError, MazeFileNotFoundError
from mazesolver.utils import utils
from mazesolver.world.maze_file import load_maze
from mazesolver.world.maze_grid import MazeGrid
from mazesolver.world.types import CellState

app = typer.Typer()

BANNER = "MAZE SOLVER - recursive backtracking over a wrap-around grid"


def ask_for_maze(logger: utils.MazeLogger) -> MazeDescription:
    """Prompts for a maze file until one loads and parses."""
    while True:
        path = typer.prompt(
            "Please specify path to maze file (i.e. /home/user/input.txt)"
        )
        try:
            description = load_maze(path)
        except MazeFileNotFoundError as e:
            logger.info(str(e))
            typer.echo(
                "\n[ERROR]  The file specified cannot be found."
                "\n[INFO]  Please check that the path you entered is correct and that the file exists.\n"
            )
            continue
        except MalformedMazeError as e:
            logger.info(f"Malformed maze file {path}: {e}")
            typer.echo(
                "\n[ERROR]  Specified file is not a maze or does not follow the predefined format."
                f"\n[INFO]  {e}\n"
            )
            continue

        logger.info(
            f"Loaded {description.height}x{description.width} maze from {path}"
        )
        return description


@app.command()
def run(
    config_file: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
):
    try:
        cfg = (
            solver_config_from_yaml(config_file)
            if config_file
            else SolverConfigYamlModel()
        )
    except (OSError, yaml.YAMLError, ValidationError) as e:
        raise typer.BadParameter(str(e), param_hint="--config") from e
    logger = utils.MazeLogger(printout=cfg.verbose)
    typer.echo(BANNER)

    grid = MazeGrid.from_description(ask_for_maze(logger))
    height, width = grid.shape
    logger.info(
        f"Maze of {height}x{width} cells with {grid.count(CellState.WALL)} walls"
    )
    solver = PathSolver(
        grid,
        execution=cfg.execution,
        recursion_limit=cfg.recursion_limit,
        logger=logger,
    )

    if solver.solve():
        typer.echo("Maze Solution:")
        render.print_grid(grid)
    else:
        typer.echo("[INFO]  No Solution Found")

    if cfg.wait_for_keypress:
        typer.echo("[INFO]  Press any key to exit.")
        # No key can be read from piped or redirected input
        if sys.stdin.isatty():
            typer.getchar()


if __name__ == "__main__":
    app()
