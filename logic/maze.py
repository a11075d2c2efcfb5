"""logic/maze.py — Perfect-maze generation and wall queries.

The dream world is a grid maze carved with a randomized depth-first
"recursive backtracker":

    * Path cells live on odd coordinates, two apart.  Even coordinates
      are walls between them and are only ever opened as a midpoint.
    * Start at (1, 1).  Look at the top of the stack; if it has unvisited
      neighbours two cells away (up, down, left, right, in that order),
      pick one with ``rng.randrange``, open the wall between, push it.
      Otherwise pop.

Every reachable odd cell is visited exactly once, so generation is
bounded by the grid size and always terminates.  The carved passages
form a spanning tree: one simple path between any two path cells.

``is_wall`` treats everything outside the grid as solid, so the maze is
a closed world even when the player's wall-test point leaves the screen.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from core.rng import RandomSource
from core.tuning import get as _tun


class Cell(Enum):
    WALL = 0
    PATH = 1


START = (1, 1)

# Neighbour order offered to the rng: up, down, left, right.
_STEPS = ((0, -2), (0, 2), (-2, 0), (2, 0))


@dataclass
class MazeGrid:
    width: int
    height: int
    cell_size: float
    cells: list[list[Cell]] = field(repr=False, default_factory=list)

    def __post_init__(self):
        if not self.cells:
            self.cells = [[Cell.WALL] * self.width for _ in range(self.height)]

    def at(self, cx: int, cy: int) -> Cell:
        return self.cells[cy][cx]

    def in_bounds(self, cx: int, cy: int) -> bool:
        return 0 <= cx < self.width and 0 <= cy < self.height

    def is_path(self, cx: int, cy: int) -> bool:
        return self.in_bounds(cx, cy) and self.cells[cy][cx] is Cell.PATH

    @property
    def world_size(self) -> tuple[float, float]:
        return self.width * self.cell_size, self.height * self.cell_size

    def cell_centre(self, cx: int, cy: int) -> tuple[float, float]:
        return (cx + 0.5) * self.cell_size, (cy + 0.5) * self.cell_size


# ── Generation ──────────────────────────────────────────────────────

def generate(width: int, height: int, rng: RandomSource,
             cell_size: float | None = None) -> MazeGrid:
    """Carve a perfect maze of ``width × height`` cells.

    Grids too small to hold the start cell come back all wall.
    """
    if cell_size is None:
        cell_size = float(_tun("maze", "cell_size", 40.0))
    grid = MazeGrid(width=width, height=height, cell_size=cell_size)
    if not grid.in_bounds(*START):
        return grid

    visited = {START}
    grid.cells[START[1]][START[0]] = Cell.PATH
    stack = [START]

    while stack:
        cx, cy = stack[-1]
        options = [
            (cx + dx, cy + dy) for dx, dy in _STEPS
            if grid.in_bounds(cx + dx, cy + dy)
            and (cx + dx, cy + dy) not in visited
        ]
        if not options:
            stack.pop()
            continue
        nx, ny = options[rng.randrange(len(options))]
        grid.cells[(cy + ny) // 2][(cx + nx) // 2] = Cell.PATH
        grid.cells[ny][nx] = Cell.PATH
        visited.add((nx, ny))
        stack.append((nx, ny))

    return grid


def generate_default(rng: RandomSource) -> MazeGrid:
    """Generate with the ``[maze]`` dimensions from tuning."""
    return generate(
        int(_tun("maze", "width", 19)),
        int(_tun("maze", "height", 15)),
        rng,
        float(_tun("maze", "cell_size", 40.0)),
    )


# ── Queries ─────────────────────────────────────────────────────────

def world_to_cell(grid: MazeGrid, x: float, y: float) -> tuple[int, int]:
    return (math.floor(x / grid.cell_size), math.floor(y / grid.cell_size))


def is_wall(grid: MazeGrid, x: float, y: float) -> bool:
    """True if world point ``(x, y)`` is inside a wall or off the grid."""
    if not (math.isfinite(x) and math.isfinite(y)):
        return True
    cx, cy = world_to_cell(grid, x, y)
    if not grid.in_bounds(cx, cy):
        return True
    return grid.cells[cy][cx] is Cell.WALL


def path_cells(grid: MazeGrid) -> Iterator[tuple[int, int]]:
    for cy, row in enumerate(grid.cells):
        for cx, cell in enumerate(row):
            if cell is Cell.PATH:
                yield cx, cy


def neighbours(grid: MazeGrid, cell: tuple[int, int]) -> list[tuple[int, int]]:
    """Orthogonally adjacent path cells (one step, not two)."""
    cx, cy = cell
    return [
        (cx + dx, cy + dy)
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0))
        if grid.is_path(cx + dx, cy + dy)
    ]
