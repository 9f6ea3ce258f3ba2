import json
import typing as t
from datetime import datetime

import typer

from mazesolver.world.types import GridCell

# Search order of the solver: South, East, West, North
SOUTH = (1, 0)
EAST = (0, 1)
WEST = (0, -1)
NORTH = (-1, 0)
SEARCH_DIRECTIONS: t.Tuple[GridCell, ...] = (SOUTH, EAST, WEST, NORTH)


def timestamp_string():
    return datetime.now().strftime("%Y-%m-%d-%Hh%Mm%Ss_%f")


class MazeLog:
    def __init__(self, message: str, step: int, timestamp: str | None = None):
        self.message = message
        self.step = step
        self.timestamp = timestamp or timestamp_string()

    def __str__(self):
        return "At step {}: '{}'".format(self.step, self.message)

    def toJSON(self):
        return json.dumps(self, default=lambda o: o.__dict__, sort_keys=True, indent=4)


class MazeLogger(list[MazeLog]):
    def __init__(self, printout: bool = False):
        super(MazeLogger, self).__init__()
        self.printout = printout

    def append(self, log: MazeLog):
        super(MazeLogger, self).append(log)
        if self.printout:
            typer.echo(str(log), err=True)

    def info(self, message: str, step: int = 0):
        self.append(MazeLog(message, step))

    def messages(self) -> t.List[str]:
        return [log.message for log in self]
