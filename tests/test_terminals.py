import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from levelgen.cctv import get_num_cctv_terminals, place_cctv_terminals
from levelgen.maintenance import is_edge_cell, is_wall_cell, place_maintenance_terminals
from levelgen.topology import collect_room_names
from rng.random_number_generator import RandomNumberGenerator
from world.entities import ContentKind
from map_fixtures import bundled_grid, new_state


@pytest.mark.parametrize("level, expected", [
    (1, 0), (2, 1), (3, 1), (4, 2), (7, 3), (20, 3),
])
def test_num_cctv_terminals(level, expected):
    assert get_num_cctv_terminals(level) == expected


def test_no_cctv_on_first_level():
    grid = bundled_grid("outpost")
    state, config = new_state(grid, level=1)
    assert place_cctv_terminals(state, config, RandomNumberGenerator(1)) == 0


@pytest.mark.parametrize("seed", [2, 22, 222])
def test_cctv_terminals_watch_different_rooms(seed):
    grid = bundled_grid("outpost")
    state, config = new_state(grid, level=4, seed=seed)
    assert place_cctv_terminals(state, config, RandomNumberGenerator(seed)) == 2

    terminals = [cell.entity for cell in grid.Cells() if cell.Has(ContentKind.CCTV_TERMINAL)]
    targets = [terminal.target_room for terminal in terminals]
    assert len(set(targets)) == 2
    assert set(targets) <= set(collect_room_names(grid))
    assert sorted(terminal.name for terminal in terminals) == ["CCTV Terminal #1", "CCTV Terminal #2"]


def test_wall_and_edge_cells():
    grid = bundled_grid("outpost")
    corner = grid.GetCell(1, 1)
    middle = grid.GetCell(2, 2)
    assert is_wall_cell(corner)
    assert is_edge_cell(corner)
    assert not is_wall_cell(middle)
    assert not is_edge_cell(middle)


@pytest.mark.parametrize("name", ["outpost", "relay_station"])
def test_one_maintenance_terminal_per_room(name):
    grid = bundled_grid(name)
    state, config = new_state(grid, level=2, seed=9)
    rooms = collect_room_names(grid)
    assert place_maintenance_terminals(state, config, RandomNumberGenerator(9)) == len(rooms)

    for room in rooms:
        cells = [cell for cell in grid.Cells()
                 if cell.Has(ContentKind.MAINTENANCE_TERMINAL) and cell.name == room]
        assert len(cells) == 1, f"{room} has {len(cells)} maintenance terminals"
        terminal = cells[0].entity
        assert terminal.name == f"Maintenance Terminal - {room}"
        assert not state.IsDoorwayCell(cells[0])
        assert is_wall_cell(cells[0])
