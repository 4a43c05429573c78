import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from levelgen.articulation import is_articulation_point, is_chokepoint, room_still_connected_if_block
from world.furniture import Furniture
from world.grid import Grid
from map_fixtures import line_grid


def _grid(rows, cols, rooms):
    grid = Grid(rows, cols)
    for (row, col), name in rooms.items():
        grid.MarkAsRoom(row, col, name)
    grid.BuildAllCellConnections()
    return grid


@pytest.fixture
def two_doorway_room():
    """Corridor over a three-cell room whose middle cell joins its two doorways."""
    return _grid(2, 3, {
        (0, 0): "Corridor", (0, 1): "Corridor", (0, 2): "Corridor",
        (1, 0): "R", (1, 1): "R", (1, 2): "R",
    })


@pytest.fixture
def square_room():
    """Corridor over a 2x2 room; the back row is not needed to join the doorways."""
    return _grid(3, 2, {
        (0, 0): "Corridor", (0, 1): "Corridor",
        (1, 0): "R", (1, 1): "R",
        (2, 0): "R", (2, 1): "R",
    })


def test_blocking_only_path_between_doorways(two_doorway_room):
    grid = two_doorway_room
    entries = [grid.GetCell(0, 0), grid.GetCell(0, 2)]
    assert not room_still_connected_if_block(grid, "R", entries, grid.GetCell(1, 1))


def test_blocking_cell_off_the_path(square_room):
    grid = square_room
    entries = [grid.GetCell(0, 0), grid.GetCell(0, 1)]
    assert room_still_connected_if_block(grid, "R", entries, grid.GetCell(2, 0))


def test_no_entries_is_trivially_connected():
    grid = _grid(1, 1, {(0, 0): "R"})
    assert room_still_connected_if_block(grid, "R", None, None)
    assert room_still_connected_if_block(grid, "R", [], None)


def test_existing_entities_count_as_blocked(square_room):
    """Content already in the room is treated as solid."""
    grid = square_room
    entries = [grid.GetCell(0, 0), grid.GetCell(0, 1)]
    grid.GetCell(1, 1).Place(Furniture("Crate", "A crate.", "#"))
    assert not room_still_connected_if_block(grid, "R", entries, None)


def test_blocking_a_doorway_disconnects(square_room):
    grid = square_room
    entries = [grid.GetCell(0, 0), grid.GetCell(0, 1)]
    assert not room_still_connected_if_block(grid, "R", entries, grid.GetCell(1, 0))


def test_articulation_point_in_corridor():
    grid = line_grid(["Corridor", "Corridor", "Corridor"])
    start = grid.GetCell(0, 0)
    assert is_articulation_point(grid, start, grid.GetCell(0, 1))
    assert not is_articulation_point(grid, start, grid.GetCell(0, 2)), \
        "Removing a dead end only loses the cell itself"


def test_articulation_point_outside_reachable_set():
    grid = line_grid(["Corridor", None, "Corridor", "Corridor", "Corridor"])
    start = grid.GetCell(0, 0)
    assert not is_articulation_point(grid, start, grid.GetCell(0, 3))


def test_articulation_point_respects_blocked_cells():
    """With the far end already sealed, the middle cell no longer cuts anything off."""
    grid = line_grid(["Corridor", "Corridor", "Corridor", "Corridor"])
    start = grid.GetCell(0, 0)
    assert is_articulation_point(grid, start, grid.GetCell(0, 2))
    assert not is_articulation_point(grid, start, grid.GetCell(0, 2), {grid.GetCell(0, 3)})


def test_articulation_point_missing_inputs():
    grid = line_grid(["Corridor", "Corridor"])
    assert not is_articulation_point(None, grid.GetCell(0, 0), grid.GetCell(0, 1))
    assert not is_articulation_point(grid, None, grid.GetCell(0, 1))
    assert not is_articulation_point(grid, grid.GetCell(0, 0), None)


def test_chokepoint_heuristic_ignores_small_losses():
    """Cutting off two cells of twenty is under the 10% bar; cutting off half is not."""
    grid = line_grid(["Corridor"] * 20)
    start = grid.GetCell(0, 0)
    assert not is_chokepoint(grid, grid.GetCell(0, 18), start)
    assert not is_chokepoint(grid, grid.GetCell(0, 19), start)
    assert is_chokepoint(grid, grid.GetCell(0, 10), start)
    assert is_chokepoint(grid, grid.GetCell(0, 18), start, threshold_percent=5)


def test_chokepoint_missing_inputs():
    grid = line_grid(["Corridor", "Corridor"])
    assert not is_chokepoint(None, grid.GetCell(0, 1), grid.GetCell(0, 0))
    assert not is_chokepoint(grid, None, grid.GetCell(0, 0))
