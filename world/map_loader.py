"""Load pre-carved decks from a small ASCII map format.

A map file has a header and a body separated by a line holding only "---":

    ; comments start with a semicolon
    start = 1,2
    exit = 3,9
    B = Bridge
    C = Cargo Bay
    ---
    ###########
    #BBB...CCC#
    #BBB#.#CCC#

Header lines are `start = row,col`, `exit = row,col` and `<symbol> = <room
name>` for single-character symbols. In the body `#` and spaces are walls
and `.` is corridor unless the header redefines it. Rows may be ragged; short
rows are padded with wall.
"""

from pathlib import Path
from typing import Dict, List, Tuple, Union

from .grid import CORRIDOR, Grid

SEPARATOR = "---"
WALL_SYMBOLS = ("#", " ")


def _parse_position(value: str, line_num: int) -> Tuple[int, int]:
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
        raise ValueError(f"Line {line_num}: expected 'row,col', got '{value}'")
    return int(parts[0]), int(parts[1])


def _parse_header(lines: List[str]) -> Tuple[Dict[str, str], Dict[str, Tuple[int, int]]]:
    symbols = {".": CORRIDOR}
    positions = {}
    for line_num, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(";"):
            continue
        if "=" not in line:
            raise ValueError(f"Line {line_num}: expected 'key = value', got '{line}'")
        key, value = (part.strip() for part in line.split("=", 1))
        if key in ("start", "exit"):
            positions[key] = _parse_position(value, line_num)
        elif len(key) == 1:
            if key in WALL_SYMBOLS:
                raise ValueError(f"Line {line_num}: '{key}' is reserved for walls")
            if not value:
                raise ValueError(f"Line {line_num}: symbol '{key}' has no room name")
            symbols[key] = value
        else:
            raise ValueError(f"Line {line_num}: unknown header key '{key}'")
    return symbols, positions


def load_map(text: str) -> Grid:
    """Build a grid with neighbour links from map text."""
    lines = text.splitlines()
    try:
        separator_index = [line.strip() for line in lines].index(SEPARATOR)
    except ValueError:
        raise ValueError(f"Map has no '{SEPARATOR}' line between header and body") from None

    symbols, positions = _parse_header(lines[:separator_index])
    body = [line.rstrip("\n") for line in lines[separator_index + 1:]]
    while body and not body[-1].strip():
        body.pop()
    if not body:
        raise ValueError("Map body is empty")

    rows = len(body)
    cols = max(len(line) for line in body)
    grid = Grid(rows, cols)
    for row, line in enumerate(body):
        for col, symbol in enumerate(line):
            if symbol in WALL_SYMBOLS:
                continue
            if symbol not in symbols:
                raise ValueError(f"Map row {row}, col {col}: undefined symbol '{symbol}'")
            grid.MarkAsRoom(row, col, symbols[symbol])

    for key in ("start", "exit"):
        if key not in positions:
            raise ValueError(f"Map header is missing '{key} = row,col'")
        row, col = positions[key]
        if grid.GetCell(row, col) is None:
            raise ValueError(f"Map {key} position ({row}, {col}) is outside the grid")
    grid.SetStartCell(*positions["start"])
    grid.SetExitCell(*positions["exit"])
    grid.BuildAllCellConnections()
    return grid


def load_map_file(path: Union[str, Path]) -> Grid:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Map file not found: {path}") from exc
    return load_map(text)
