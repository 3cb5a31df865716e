"""Cell type codes and grid coordinates."""

from enum import IntEnum
from typing import NamedTuple


class CellType(IntEnum):
    """Terrain stored in each grid cell. Values are the grid storage codes."""

    UNASSIGNED = 0
    LAND = 1
    MOUNTAIN = 2
    SEA = 3
    ICE = 4


class Coordinate(NamedTuple):
    """Grid position; x is the column, y the row."""
    x: int
    y: int
