"""
Plain-text rendering of finished worlds.

One character per cell, one line per row. With ``color`` each cell gets an
ANSI background so the map reads at a glance in a terminal.
"""

import io
import sys
from typing import Optional, TextIO

from .cell_types import CellType
from .world import World

SYMBOLS = {
    CellType.MOUNTAIN: "^",
    CellType.LAND: "-",
    CellType.SEA: "~",
    CellType.ICE: "*",
}
UNKNOWN_SYMBOL = "?"

# ANSI background colors
COLORS = {
    CellType.MOUNTAIN: "\x1b[43m",
    CellType.LAND: "\x1b[42m",
    CellType.SEA: "\x1b[44m",
    CellType.ICE: "\x1b[46m",
}
RESET = "\x1b[0m"


def draw_world(world: World, stream: Optional[TextIO] = None, color: bool = False) -> None:
    """
    Write the world map to a text stream.

    Args:
        world: World to draw
        stream: Destination, stdout by default
        color: Wrap each cell in its ANSI background color
    """
    stream = stream or sys.stdout
    for y in range(world.height):
        for x in range(world.width):
            cell_type = world.grid.get(x, y)
            symbol = SYMBOLS.get(cell_type, UNKNOWN_SYMBOL)
            if color and cell_type in COLORS:
                stream.write(f"{COLORS[cell_type]}{symbol}{RESET}")
            else:
                stream.write(symbol)
        stream.write("\n")


def render_world(world: World, color: bool = False) -> str:
    """Return the map as a string, as ``draw_world`` would print it."""
    buffer = io.StringIO()
    draw_world(world, buffer, color=color)
    return buffer.getvalue()
