"""
Neighbor lookup on the cell grid.

A cell's neighborhood is the full 3x3 block around it, the cell itself
included, so interior cells have nine neighbors and corner cells four.
Growth rules rely on this: a spark filtered by type can select itself.
"""

from typing import Iterable, List, Optional

from .cell_types import CellType, Coordinate
from .world import Grid


def neighbors_of(
    grid: Grid, coord: Coordinate, cell_type: Optional[CellType] = None
) -> List[Coordinate]:
    """
    Coordinates in the 3x3 block centered on ``coord`` that lie on the grid.

    Args:
        grid: Grid to query
        coord: Center of the block
        cell_type: If given, keep only cells currently of this type

    Returns:
        Coordinates ordered row by row, top to bottom, left to right
    """
    neighbors = []
    for y in range(coord.y - 1, coord.y + 2):
        for x in range(coord.x - 1, coord.x + 2):
            if not grid.in_bounds(x, y):
                continue
            if cell_type is not None and grid.cells[y, x] != cell_type:
                continue
            neighbors.append(Coordinate(x, y))
    return neighbors


def all_neighbors_are(
    grid: Grid, coords: Iterable[Coordinate], cell_type: CellType
) -> bool:
    """Check that every coordinate in ``coords`` holds ``cell_type``."""
    return all(grid.cells[c.y, c.x] == cell_type for c in coords)
