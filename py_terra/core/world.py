"""
World state: the cell grid, the spark frontier, and the World aggregate.

The grid is a dense row-major NumPy array of CellType codes. The frontier
is the unordered working list of sparks waiting to be expanded. Both are
owned by a single World and only the terrain generator mutates them.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

import numpy as np

from .cell_types import CellType, Coordinate
from ..config.world_config import WorldConfig
from ..utils.random import RandomSource


class Grid:
    """Fixed-size height x width array of cell types, all Unassigned at start."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells = np.full((height, width), CellType.UNASSIGNED, dtype=np.int8)

    @property
    def shape(self):
        return self.cells.shape

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> CellType:
        return CellType(int(self.cells[y, x]))

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        self.cells[y, x] = cell_type

    def paint_square(
        self, origin: Coordinate, size: int, cell_type: CellType
    ) -> List[Coordinate]:
        """
        Paint a size x size square with ``origin`` as its upper-left corner.

        Cells falling outside the grid are skipped.

        Returns:
            Coordinates that were painted, in column-major order
        """
        painted = []
        for dx in range(size):
            for dy in range(size):
                x = origin.x + dx
                y = origin.y + dy
                if self.in_bounds(x, y):
                    self.cells[y, x] = cell_type
                    painted.append(Coordinate(x, y))
        return painted

    def fill(self, from_type: CellType, to_type: CellType) -> int:
        """Replace every ``from_type`` cell with ``to_type``. Returns the count."""
        mask = self.cells == from_type
        self.cells[mask] = to_type
        return int(mask.sum())

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self.cells == cell_type))


class Frontier:
    """
    Working list of sparks.

    Order carries no meaning; sparks are removed at a uniformly random
    index. Out-of-bounds coordinates are rejected on the way in.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._sparks: List[Coordinate] = []

    def _check(self, coord: Coordinate) -> Coordinate:
        x, y = coord
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(
                f"Spark ({x}, {y}) outside {self.width}x{self.height} grid"
            )
        return Coordinate(x, y)

    def append(self, coord: Coordinate) -> None:
        self._sparks.append(self._check(coord))

    def extend(self, coords: Iterable[Coordinate]) -> None:
        self._sparks.extend(self._check(c) for c in coords)

    def pop_random(self, random_source: RandomSource) -> Coordinate:
        if not self._sparks:
            raise IndexError("pop from empty frontier")
        index = random_source.uniform(len(self._sparks))
        return self._sparks.pop(index)

    def __len__(self) -> int:
        return len(self._sparks)

    def __iter__(self):
        return iter(self._sparks)


@dataclass
class World:
    """A map under construction or finished: grid, frontier and config."""

    height: int
    width: int
    config: WorldConfig
    grid: Grid = field(init=False)
    frontier: Frontier = field(init=False)

    def __post_init__(self):
        self.grid = Grid(self.width, self.height)
        self.frontier = Frontier(self.width, self.height)

    def cell_counts(self) -> Dict[CellType, int]:
        """Number of cells of each type."""
        return {cell_type: self.grid.count(cell_type) for cell_type in CellType}
