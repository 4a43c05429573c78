import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from levelgen.articulation import room_still_connected_if_block
from levelgen.doors import place_locked_rooms
from levelgen.furniture import hide_items_in_furniture, is_hideable, place_furniture
from levelgen.reachability import blocked_by, get_reachable_cells
from levelgen.topology import collect_room_names
from rng.random_number_generator import RandomNumberGenerator
from world.entities import BATTERY, PATCH_KIT, ContentKind, Item
from world.furniture import Furniture, get_furniture_templates_for_room
from map_fixtures import bundled_grid, dead_end_grid, new_state


def test_templates_match_room_keyword():
    templates = get_furniture_templates_for_room("Aft Cargo Bay")
    assert templates, "Cargo Bay keyword should match"
    assert templates == get_furniture_templates_for_room("cargo bay")
    assert get_furniture_templates_for_room("Broom Closet") == []


def test_templates_are_copies():
    templates = get_furniture_templates_for_room("Bridge")
    templates.clear()
    assert get_furniture_templates_for_room("Bridge")


def test_furniture_hands_out_item_once():
    furniture = Furniture("Footlocker", "Lock broken.", "#")
    furniture.contained_item = Item("Bridge Keycard")
    assert furniture.HasItem()
    assert furniture.Check().name == "Bridge Keycard"
    assert furniture.checked
    assert furniture.Check() is None


def test_every_known_room_gets_furniture():
    grid = bundled_grid("outpost")
    state, config = new_state(grid, level=1, seed=21)
    placed = place_furniture(state, config, RandomNumberGenerator(21))

    furniture_cells = [cell for cell in grid.Cells() if cell.Has(ContentKind.FURNITURE)]
    assert placed == len(furniture_cells)
    furnished = {cell.name for cell in furniture_cells}
    assert furnished == set(collect_room_names(grid))
    for cell in furniture_cells:
        assert not state.IsDoorwayCell(cell), f"Furniture on doorway {cell.position}"
        assert cell is not grid.StartCell() and cell is not grid.ExitCell()


def test_furniture_keeps_two_doorway_room_connected():
    for seed in range(10):
        grid = bundled_grid("relay_station")
        state, config = new_state(grid, level=1, seed=seed)
        place_furniture(state, config, RandomNumberGenerator(seed))
        assert room_still_connected_if_block(
            grid, "Reactor Core", state.GetEntryCells("Reactor Core"), None), \
            f"Seed {seed}: furniture split the Reactor Core"


def test_is_hideable():
    assert is_hideable(Item("Bridge Keycard"))
    assert is_hideable(Item(PATCH_KIT))
    assert not is_hideable(Item(BATTERY))


def _locked_and_furnished(seed):
    grid = dead_end_grid()
    state, config = new_state(grid, level=2, seed=seed)
    rng = RandomNumberGenerator(seed)
    place_locked_rooms(state, config, rng)
    place_furniture(state, config, rng)
    return grid, state, config, rng


def _floor_rooms(grid):
    return {item.name: cell.name for cell in grid.Cells()
            for item in cell.items_on_floor if is_hideable(item)}


def test_hiding_keycard_in_reachable_furniture():
    grid, state, config, rng = _locked_and_furnished(8)
    floor_room = _floor_rooms(grid)["Bridge Keycard"]
    assert hide_items_in_furniture(state, config, rng, chance_percent=100) == 1

    assert not any(item.IsKeycard() for cell in grid.Cells() for item in cell.items_on_floor)
    holders = [cell for cell in grid.Cells()
               if cell.Has(ContentKind.FURNITURE) and cell.entity.HasItem()]
    assert len(holders) == 1
    holder = holders[0]
    assert holder.entity.contained_item.name == "Bridge Keycard"
    assert holder.name == floor_room
    assert holder in get_reachable_cells(grid, grid.StartCell(), blocked_by(config.locked_door_cells))
    assert holder in config.solution_cells
    assert (f"The Bridge Keycard is hidden in the {holder.entity.name} in {floor_room}"
            in state.hints)
    assert not any(hint.startswith("The Bridge Keycard is in ") for hint in state.hints)


def test_hidden_items_stay_in_their_room():
    """Hiding never carries an item into another room's furniture."""
    for seed in range(20):
        grid = bundled_grid("outpost")
        state, config = new_state(grid, level=4, seed=seed)
        rng = RandomNumberGenerator(seed)
        place_locked_rooms(state, config, rng)
        place_furniture(state, config, rng)
        floor_rooms = _floor_rooms(grid)
        hide_items_in_furniture(state, config, rng, chance_percent=100)

        for cell in grid.Cells():
            if cell.Has(ContentKind.FURNITURE) and cell.entity.HasItem():
                name = cell.entity.contained_item.name
                assert cell.name == floor_rooms[name], \
                    f"Seed {seed}: {name} moved from {floor_rooms[name]} to {cell.name}"


def test_zero_chance_hides_nothing():
    grid, state, config, rng = _locked_and_furnished(8)
    assert hide_items_in_furniture(state, config, rng, chance_percent=0) == 0
    assert any(item.IsKeycard() for cell in grid.Cells() for item in cell.items_on_floor)
