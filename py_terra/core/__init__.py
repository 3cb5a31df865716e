"""
Core terrain generation functionality.
"""

from .cell_types import CellType, Coordinate
from .errors import (
    ConfigurationError,
    InvariantViolation,
    SamplingExhaustedError,
    TargetUnreachableError,
    TerrainGenerationError,
)
from .world import Frontier, Grid, World
from .neighbors import all_neighbors_are, neighbors_of
from .terrain_generator import TerrainGenerator, base_ice_chance, generate
from .rendering import draw_world, render_world

__all__ = ['CellType', 'Coordinate', 'Grid', 'Frontier', 'World',
           'neighbors_of', 'all_neighbors_are',
           'TerrainGenerator', 'generate', 'base_ice_chance',
           'draw_world', 'render_world',
           'TerrainGenerationError', 'ConfigurationError', 'InvariantViolation',
           'TargetUnreachableError', 'SamplingExhaustedError']
