"""Tests for neighbor lookup."""

from py_terra.core import CellType, Coordinate, Grid, all_neighbors_are, neighbors_of


class TestNeighborsOf:
    """Test 3x3 neighborhood enumeration."""

    def test_interior_includes_center(self):
        grid = Grid(5, 5)
        neighbors = neighbors_of(grid, Coordinate(2, 2))
        assert len(neighbors) == 9
        assert Coordinate(2, 2) in neighbors

    def test_row_major_order(self):
        grid = Grid(5, 5)
        neighbors = neighbors_of(grid, Coordinate(2, 2))
        assert neighbors[0] == Coordinate(1, 1)
        assert neighbors[1] == Coordinate(2, 1)
        assert neighbors[3] == Coordinate(1, 2)
        assert neighbors[-1] == Coordinate(3, 3)

    def test_corner_is_clipped(self):
        grid = Grid(5, 5)
        assert set(neighbors_of(grid, Coordinate(0, 0))) == {
            Coordinate(0, 0), Coordinate(1, 0), Coordinate(0, 1), Coordinate(1, 1)
        }
        assert len(neighbors_of(grid, Coordinate(4, 4))) == 4

    def test_edge_is_clipped(self):
        grid = Grid(5, 3)
        assert len(neighbors_of(grid, Coordinate(2, 0))) == 6
        assert len(neighbors_of(grid, Coordinate(4, 1))) == 6

    def test_type_filter(self):
        grid = Grid(5, 5)
        grid.set(2, 2, CellType.MOUNTAIN)
        grid.set(3, 3, CellType.SEA)

        unassigned = neighbors_of(grid, Coordinate(2, 2), CellType.UNASSIGNED)
        assert len(unassigned) == 7
        assert Coordinate(2, 2) not in unassigned

        assert neighbors_of(grid, Coordinate(2, 2), CellType.SEA) == [Coordinate(3, 3)]
        assert neighbors_of(grid, Coordinate(2, 2), CellType.MOUNTAIN) == [Coordinate(2, 2)]

    def test_single_cell_grid(self):
        grid = Grid(1, 1)
        assert neighbors_of(grid, Coordinate(0, 0)) == [Coordinate(0, 0)]

    def test_does_not_mutate(self):
        grid = Grid(4, 4)
        before = grid.cells.copy()
        neighbors_of(grid, Coordinate(1, 1), CellType.LAND)
        assert (grid.cells == before).all()


def test_all_neighbors_are():
    grid = Grid(5, 5)
    grid.fill(CellType.UNASSIGNED, CellType.SEA)
    center = Coordinate(2, 2)
    assert all_neighbors_are(grid, neighbors_of(grid, center), CellType.SEA)

    grid.set(1, 1, CellType.LAND)
    assert not all_neighbors_are(grid, neighbors_of(grid, center), CellType.SEA)
    assert all_neighbors_are(grid, neighbors_of(grid, Coordinate(4, 4)), CellType.SEA)
