import os

import pytest

from mazesolver.exceptions import MalformedMazeError, MazeFileNotFoundError
from mazesolver.world.maze_file import load_maze, load_maze_file, parse_maze_properties

dirname = os.path.dirname(os.path.abspath(__file__))

VALID_LINES = ["4 3", "0 1", "3 2", "0 0 0 0", "0 1 1 0", "0 0 0 0"]


class TestParseMazeProperties:
    def test_valid(self):
        description = parse_maze_properties(VALID_LINES)
        assert description.width == 4
        assert description.height == 3
        # Header coordinates are column first, the description is (row, col)
        assert description.start == (1, 0)
        assert description.exit == (2, 3)
        assert description.cells == [[0, 0, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0]]

    def test_trailing_blank_lines(self):
        description = parse_maze_properties(VALID_LINES + ["", "  "])
        assert description.height == 3

    def test_non_numeric_header(self):
        lines = ["four 3"] + VALID_LINES[1:]
        with pytest.raises(MalformedMazeError) as e:
            parse_maze_properties(lines)
        assert e.value.line_number == 1

    def test_missing_header_field(self):
        lines = VALID_LINES[:1] + ["0"] + VALID_LINES[2:]
        with pytest.raises(MalformedMazeError) as e:
            parse_maze_properties(lines)
        assert e.value.line_number == 2

    def test_missing_header_line(self):
        with pytest.raises(MalformedMazeError) as e:
            parse_maze_properties(["4 3", "0 1"])
        assert e.value.line_number == 3

    def test_empty_file(self):
        with pytest.raises(MalformedMazeError):
            parse_maze_properties([])

    def test_too_few_rows(self):
        with pytest.raises(MalformedMazeError, match="expected 3 rows"):
            parse_maze_properties(VALID_LINES[:-1])

    def test_too_many_rows(self):
        with pytest.raises(MalformedMazeError, match="expected 3 rows"):
            parse_maze_properties(VALID_LINES + ["0 0 0 0"])

    def test_short_row(self):
        lines = VALID_LINES[:4] + ["0 1 1"] + VALID_LINES[5:]
        with pytest.raises(MalformedMazeError, match="row 1 has 3 cells"):
            parse_maze_properties(lines)

    def test_unknown_token(self):
        lines = VALID_LINES[:4] + ["0 2 1 0"] + VALID_LINES[5:]
        with pytest.raises(MalformedMazeError) as e:
            parse_maze_properties(lines)
        assert e.value.line_number == 5

    def test_start_outside_of_grid(self):
        lines = VALID_LINES[:1] + ["4 1"] + VALID_LINES[2:]
        with pytest.raises(MalformedMazeError, match="start cell"):
            parse_maze_properties(lines)

    def test_start_equals_exit(self):
        lines = VALID_LINES[:2] + ["0 1"] + VALID_LINES[3:]
        with pytest.raises(MalformedMazeError, match="different cells"):
            parse_maze_properties(lines)

    def test_non_positive_size(self):
        with pytest.raises(MalformedMazeError):
            parse_maze_properties(["0 0", "0 0", "0 0"])


class TestLoadMazeFile:
    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "missing.txt")
        with pytest.raises(MazeFileNotFoundError) as e:
            load_maze_file(path)
        assert e.value.path == path

    def test_directory(self, tmp_path):
        with pytest.raises(MazeFileNotFoundError):
            load_maze_file(str(tmp_path))

    def test_binary_file(self, tmp_path):
        path = tmp_path / "maze.bin"
        path.write_bytes(b"\xff\xfe\x00\x81maze")
        with pytest.raises(MalformedMazeError, match="not a UTF-8 text file"):
            load_maze_file(str(path))

    def test_reads_lines(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_text("\n".join(VALID_LINES) + "\n")
        assert load_maze_file(f"  {path}\n") == VALID_LINES

    def test_load_maze(self):
        description = load_maze(f"{dirname}/../scenarios/l_corridor.txt")
        assert description.width == 5
        assert description.start == (0, 0)
        assert description.exit == (4, 4)

    def test_load_malformed_maze(self):
        with pytest.raises(MalformedMazeError):
            load_maze(f"{dirname}/../scenarios/short_row.txt")
