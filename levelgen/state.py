"""Level state handed from the generator to the runtime game layer."""

from typing import Dict, Iterable, List, Optional, Set

from world.entities import Generator
from world.grid import Cell, Grid
from .hint_writer import HintWriter
from .topology import find_room_entry_points, get_doorway_cells


class SetupConfig:
    """The running sets threaded through every placement stage.

    avoid: cells already carrying content. Only ever grows.
    locked_door_cells: cells the player cannot pass until they clear them
        (locked doors and live hazards).
    solution_cells: cells holding what clears a gate (keycards, patch kits,
        hazard controls). Gates may never cut these off.
    """

    def __init__(self, avoid: Optional[Iterable[Cell]] = None,
                 locked_door_cells: Optional[Iterable[Cell]] = None,
                 solution_cells: Optional[Iterable[Cell]] = None):
        self.avoid: Set[Cell] = set(avoid or ())
        self.locked_door_cells: Set[Cell] = set(locked_door_cells or ())
        self.solution_cells: Set[Cell] = set(solution_cells or ())

    @classmethod
    def ForGrid(cls, grid: Grid) -> "SetupConfig":
        """Start-of-setup config: only the start and exit cells are taken."""
        return cls(avoid=[c for c in (grid.StartCell(), grid.ExitCell()) if c is not None])


class LevelState:
    """A populated deck: grid, hints, generators and per-room power.

    Room topology does not change during setup, so entry and doorway cells
    are indexed once here.
    """

    def __init__(self, grid: Optional[Grid], level: int, seed: int):
        self.grid = grid
        self.level = level
        self.seed = seed
        self.hint_writer = HintWriter()
        self.generators: List[Generator] = []
        self.room_doors_powered: Dict[str, bool] = {}
        self.room_cctv_powered: Dict[str, bool] = {}
        self.room_lights_powered: Dict[str, bool] = {}
        self.config: Optional[SetupConfig] = None

        self.room_entry_points = find_room_entry_points(grid)
        self._doorways: Dict[str, List[Cell]] = {
            room: get_doorway_cells(grid, room, entries)
            for room, entries in self.room_entry_points.items()
        }
        self._entry_cells = {cell for entries in self.room_entry_points.values() for cell in entries}
        self._doorway_cells = {cell for doorways in self._doorways.values() for cell in doorways}

    @property
    def hints(self) -> List[str]:
        return self.hint_writer.GetHints()

    def AddHint(self, text: str) -> None:
        self.hint_writer.AddHint(text)

    def StartCell(self) -> Optional[Cell]:
        return self.grid.StartCell() if self.grid is not None else None

    def ExitCell(self) -> Optional[Cell]:
        return self.grid.ExitCell() if self.grid is not None else None

    def StartRoomName(self) -> str:
        start = self.StartCell()
        return start.name if start is not None else ""

    def GetEntryCells(self, room_name: str) -> List[Cell]:
        return self.room_entry_points.get(room_name, [])

    def GetDoorwayCells(self, room_name: str) -> List[Cell]:
        return self._doorways.get(room_name, [])

    def IsEntryCell(self, cell: Cell) -> bool:
        return cell in self._entry_cells

    def IsDoorwayCell(self, cell: Cell) -> bool:
        return cell in self._doorway_cells

    def IsFinalDeck(self, total_decks: int) -> bool:
        return self.level >= total_decks
