from mazesolver.algorithms.path_solver import PathSolver, solve_maze
from mazesolver.display.render import print_grid
from mazesolver.world.maze_file import load_maze
from mazesolver.world.maze_grid import MazeGrid


grid = MazeGrid.from_description(load_maze("tests/scenarios/l_corridor.txt"))
recursive = grid.copy()

solver = PathSolver(grid, execution="iterative")
assert solver.solve()
assert solver.path[0] == grid.start
assert len(solver.path) == 8

assert solve_maze(recursive, execution="recursive")
assert recursive.path_cells() == grid.path_cells()
print_grid(grid)
