"""Plain-text dump of a populated deck for debugging and bug reports."""

from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

import pytz

from levelgen.state import LevelState
from world.entities import ContentKind
from world.grid import Cell

DEFAULT_TIMEZONE = 'US/Eastern'

LEGEND = [
    ". floor",
    "# wall",
    "S start",
    "E exit",
    "D door",
    "G generator",
    "T CCTV terminal",
    "P puzzle terminal",
    "M maintenance terminal",
    "F furniture",
    "! blocking hazard",
    "C hazard control",
    "i item on floor",
]

_SYMBOLS = {
    ContentKind.DOOR: "D",
    ContentKind.GENERATOR: "G",
    ContentKind.CCTV_TERMINAL: "T",
    ContentKind.PUZZLE: "P",
    ContentKind.MAINTENANCE_TERMINAL: "M",
    ContentKind.FURNITURE: "F",
    ContentKind.HAZARD_CONTROL: "C",
}


def cell_symbol(state: LevelState, cell: Cell) -> str:
    if not cell.room:
        return "#"
    if cell is state.StartCell():
        return "S"
    if cell is state.ExitCell():
        return "E"
    if cell.Has(ContentKind.HAZARD):
        return "!" if cell.entity.IsBlocking() else "."
    if cell.kind in _SYMBOLS:
        return _SYMBOLS[cell.kind]
    if cell.items_on_floor:
        return "i"
    return "."


def render_map(state: LevelState) -> List[str]:
    grid = state.grid
    return ["".join(cell_symbol(state, grid.GetCell(row, col)) for col in range(grid.cols))
            for row in range(grid.rows)]


def _position(cell: Cell) -> str:
    return f"  row: {cell.row} col: {cell.col}"


def _entity_section(state: LevelState, title: str, kind: ContentKind,
                    describe: Callable) -> List[str]:
    lines = [f"{title}:"]
    for cell in state.grid.Cells():
        if cell.Has(kind):
            lines.append(f"{_position(cell)} room: {cell.name} {describe(cell.entity)}")
    if len(lines) == 1:
        lines.append("  (none)")
    return lines


def dump_level(state: LevelState, timezone: str = DEFAULT_TIMEZONE,
               now: Optional[datetime] = None) -> str:
    """Render the deck, its entities, hints and power state as text.

    Raises:
        pytz.UnknownTimeZoneError: If timezone is not a known zone name
    """
    zone = pytz.timezone(timezone)
    generated = (now or datetime.now(zone)).astimezone(zone).strftime('%Y-%m-%d %I:%M:%S %p %Z')
    grid = state.grid
    start = state.StartCell()
    exit_cell = state.ExitCell()

    lines = [f"=== MAP DUMP DEBUG (generated {generated}) ===", "", "--- Metadata ---"]
    lines.append(f"level: {state.level}")
    lines.append(f"level_seed: {state.seed}")
    lines.append(f"grid_rows: {grid.rows}")
    lines.append(f"grid_cols: {grid.cols}")
    lines.append(f"start_cell: row: {start.row} col: {start.col} room: {start.name}")
    lines.append(f"exit_cell: row: {exit_cell.row} col: {exit_cell.col} room: {exit_cell.name} "
                 f"locked: {exit_cell.locked}")

    lines += ["", "--- Legend ---"] + [f"  {entry}" for entry in LEGEND]
    lines += ["", "--- Map ---"] + render_map(state)

    lines += [""] + _entity_section(
        state, "Doors", ContentKind.DOOR,
        lambda door: f"for: {door.room_name} locked: {door.locked}")
    lines += _entity_section(
        state, "Generators", ContentKind.GENERATOR,
        lambda gen: f"name: {gen.name} batteries: {gen.batteries_inserted}/{gen.batteries_required}")
    lines += _entity_section(
        state, "Hazards", ContentKind.HAZARD,
        lambda hazard: f"type: {hazard.name} blocking: {hazard.IsBlocking()}")
    lines += _entity_section(
        state, "Hazard controls", ContentKind.HAZARD_CONTROL,
        lambda control: f"name: {control.name} fixes: {control.hazard.name}")
    lines += _entity_section(
        state, "Puzzle terminals", ContentKind.PUZZLE,
        lambda puzzle: f"name: {puzzle.name} solution: {puzzle.solution} reward: {puzzle.reward.value}")
    lines += _entity_section(
        state, "CCTV terminals", ContentKind.CCTV_TERMINAL,
        lambda terminal: f"name: {terminal.name} target: {terminal.target_room}")
    lines += _entity_section(
        state, "Maintenance terminals", ContentKind.MAINTENANCE_TERMINAL,
        lambda terminal: f"name: {terminal.name} powered: {terminal.powered}")
    lines += _entity_section(
        state, "Furniture", ContentKind.FURNITURE,
        lambda furniture: f"name: {furniture.name}"
                          + (f" contains: {furniture.contained_item.name}" if furniture.HasItem() else ""))

    lines.append("Items on floor:")
    items = [f"{_position(cell)} room: {cell.name} item: {item.name}"
             for cell in grid.Cells() for item in cell.items_on_floor]
    lines += items or ["  (none)"]

    lines.append("Hints:")
    lines += [f"  {hint}" for hint in state.hints] or ["  (none)"]

    lines.append("Room power state:")
    for room in state.room_doors_powered:
        lines.append(f"  {room}: doors: {state.room_doors_powered[room]} "
                     f"cctv: {state.room_cctv_powered.get(room, False)} "
                     f"lights: {state.room_lights_powered.get(room, False)}")

    lines += ["", "=== END MAP DUMP ==="]
    return "\n".join(lines) + "\n"


def write_map_dump(state: LevelState, path: Union[str, Path],
                   timezone: str = DEFAULT_TIMEZONE) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_level(state, timezone), encoding="utf-8")
    return path
