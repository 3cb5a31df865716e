"""Tests for text rendering of worlds."""

import io

import pytest

from py_terra.config import resolve_config
from py_terra.core import CellType, World, draw_world, render_world, generate


class TestRenderWorld:
    """Test the character map output."""

    @pytest.fixture
    def world(self):
        world = World(height=2, width=3, config=resolve_config({"height": 2, "width": 3}))
        grid = world.grid
        grid.set(0, 0, CellType.MOUNTAIN)
        grid.set(1, 0, CellType.LAND)
        grid.set(2, 0, CellType.SEA)
        grid.set(0, 1, CellType.ICE)
        # (1, 1) and (2, 1) stay Unassigned
        return world

    def test_symbols(self, world):
        assert render_world(world) == "^-~\n*??\n"

    def test_draw_to_stream(self, world):
        stream = io.StringIO()
        draw_world(world, stream)
        assert stream.getvalue() == render_world(world)

    def test_color(self, world):
        lines = render_world(world, color=True).splitlines()
        assert lines[0] == "\x1b[43m^\x1b[0m\x1b[42m-\x1b[0m\x1b[44m~\x1b[0m"
        # Unassigned cells are never colored
        assert lines[1] == "\x1b[46m*\x1b[0m??"

    def test_generated_world_shape(self):
        world = generate({"height": 30, "width": 40}, seed="render")
        lines = render_world(world).splitlines()
        assert len(lines) == 30
        assert all(len(line) == 40 for line in lines)
        assert "?" not in "".join(lines)
