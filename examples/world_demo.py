#!/usr/bin/env python3
"""
Demo script growing a 200x200 world and printing it in color.
"""

import sys

from py_terra.config import settings
from py_terra.core import CellType, draw_world, generate
from py_terra.utils.logging import configure_logging


def main():
    """Generate and draw the demo world."""
    configure_logging(settings)
    seed = sys.argv[1] if len(sys.argv) > 1 else "demo123"

    world = generate(
        {
            "height": 200,
            "width": 200,
            "geography": {"islands": {"number": 10, "maxSize": 2}},
        },
        seed=seed,
    )

    draw_world(world, color=sys.stdout.isatty())

    counts = world.cell_counts()
    total = world.width * world.height
    print(f"\nSeed: {seed}")
    for cell_type in (CellType.MOUNTAIN, CellType.LAND, CellType.SEA, CellType.ICE):
        n = counts[cell_type]
        print(f"  {cell_type.name.title():<9} {n:6d} ({n / total * 100:.1f}%)")


if __name__ == "__main__":
    main()
