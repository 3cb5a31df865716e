"""
py-terra: procedural terrain maps grown from random sparks.
"""

from .core import CellType, Coordinate, World, generate

__version__ = "0.1.0"

__all__ = ["CellType", "Coordinate", "World", "generate", "__version__"]
