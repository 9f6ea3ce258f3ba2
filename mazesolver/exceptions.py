import typing as t


class MazeError(Exception):
    pass


class MazeFileNotFoundError(MazeError):
    def __init__(self, path: str, *args: object):
        super().__init__(f"Maze file not found: {path}", *args)
        self.path = path


class MalformedMazeError(MazeError):
    def __init__(self, message: str, line_number: t.Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class OutOfRangeError(MazeError, IndexError):
    def __init__(self, row: int, col: int, height: int, width: int):
        super().__init__(
            f"Cell ({row}, {col}) is outside of the {height}x{width} grid"
        )
        self.cell = (row, col)
