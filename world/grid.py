"""Grid and cell data structures for a pre-carved station deck."""

from typing import Dict, Iterator, List, Optional, Tuple

from .direction import CARDINAL_DIRECTIONS, Direction
from .entities import (
    CCTVTerminal, ContentKind, Door, Generator, Hazard, HazardControl, Item,
    MaintenanceTerminal, PuzzleTerminal,
)
from .furniture import Furniture

CORRIDOR = "Corridor"

_KIND_BY_TYPE = {
    Door: ContentKind.DOOR,
    Generator: ContentKind.GENERATOR,
    Hazard: ContentKind.HAZARD,
    HazardControl: ContentKind.HAZARD_CONTROL,
    PuzzleTerminal: ContentKind.PUZZLE,
    MaintenanceTerminal: ContentKind.MAINTENANCE_TERMINAL,
    CCTVTerminal: ContentKind.CCTV_TERMINAL,
    Furniture: ContentKind.FURNITURE,
}


class Cell:
    """One grid square.

    A cell holds at most one entity in its content slot; `kind` says which
    sort of entity that is. Items on the floor do not use the slot.
    """

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.room = False
        self.name = ""
        self.locked = False
        self.neighbors: Dict[Direction, Optional["Cell"]] = {
            direction: None for direction in CARDINAL_DIRECTIONS
        }
        self.items_on_floor: List[Item] = []
        self.kind = ContentKind.NONE
        self.entity = None

    @property
    def north(self) -> Optional["Cell"]:
        return self.neighbors[Direction.NORTH]

    @property
    def east(self) -> Optional["Cell"]:
        return self.neighbors[Direction.EAST]

    @property
    def south(self) -> Optional["Cell"]:
        return self.neighbors[Direction.SOUTH]

    @property
    def west(self) -> Optional["Cell"]:
        return self.neighbors[Direction.WEST]

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def GetNeighbors(self) -> List["Cell"]:
        """Existing neighbours in north, east, south, west order."""
        return [n for n in (self.neighbors[d] for d in CARDINAL_DIRECTIONS) if n is not None]

    def IsCorridor(self) -> bool:
        return self.room and self.name == CORRIDOR

    def IsNamedRoom(self) -> bool:
        """True for room cells that belong to a named (non-corridor) room."""
        return self.room and self.name not in ("", CORRIDOR)

    def HasEntity(self) -> bool:
        return self.kind != ContentKind.NONE

    def Has(self, kind: ContentKind) -> bool:
        return self.kind == kind

    def Get(self, kind: ContentKind):
        """Return the entity if the slot holds `kind`, otherwise None."""
        if self.kind == kind:
            return self.entity
        return None

    def Place(self, entity, kind: Optional[ContentKind] = None) -> None:
        if kind is None:
            kind = _KIND_BY_TYPE[type(entity)]
        if self.kind != ContentKind.NONE:
            raise ValueError(
                f"Cell ({self.row}, {self.col}) already holds {self.kind.name}; "
                f"cannot place {kind.name}")
        self.kind = kind
        self.entity = entity

    def Clear(self) -> None:
        self.kind = ContentKind.NONE
        self.entity = None

    def HasLockedDoor(self) -> bool:
        door = self.Get(ContentKind.DOOR)
        return door is not None and door.locked

    def HasBlockingHazard(self) -> bool:
        hazard = self.Get(ContentKind.HAZARD)
        return hazard is not None and hazard.IsBlocking()

    def IsImpassable(self) -> bool:
        """Locked doors and live hazards stop the player until cleared."""
        return self.HasLockedDoor() or self.HasBlockingHazard()

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, {self.name!r})"


class Grid:
    """A rows x cols grid of cells with a start cell and an exit cell."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._cells = [[Cell(row, col) for col in range(max(cols, 0))]
                       for row in range(max(rows, 0))]
        self._start_cell: Optional[Cell] = None
        self._exit_cell: Optional[Cell] = None

    def GetCell(self, row: int, col: int) -> Optional[Cell]:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self._cells[row][col]
        return None

    def Cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self._cells:
            yield from row

    def RoomCells(self) -> Iterator[Cell]:
        return (cell for cell in self.Cells() if cell.room)

    def MarkAsRoom(self, row: int, col: int, name: str) -> Optional[Cell]:
        cell = self.GetCell(row, col)
        if cell is not None:
            cell.room = True
            cell.name = name
        return cell

    def StartCell(self) -> Optional[Cell]:
        return self._start_cell

    def ExitCell(self) -> Optional[Cell]:
        return self._exit_cell

    def SetStartCell(self, row: int, col: int) -> None:
        self._start_cell = self.GetCell(row, col)

    def SetExitCell(self, row: int, col: int) -> None:
        self._exit_cell = self.GetCell(row, col)

    def BuildAllCellConnections(self) -> None:
        for cell in self.Cells():
            for direction in CARDINAL_DIRECTIONS:
                d_row, d_col = direction.delta
                cell.neighbors[direction] = self.GetCell(cell.row + d_row, cell.col + d_col)

    def Validate(self) -> str:
        """Check structural preconditions. Returns "" when the grid is usable."""
        if self.rows <= 0 or self.cols <= 0:
            return "Grid has invalid dimensions"
        if self._start_cell is None:
            return "Grid has no start cell"
        if self._exit_cell is None:
            return "Grid has no exit cell"
        if not self._start_cell.room:
            return "Start cell is not marked as a room"
        if not self._exit_cell.room:
            return "Exit cell is not marked as a room"
        return ""

    def GetGenerators(self) -> List[Generator]:
        return [cell.entity for cell in self.Cells() if cell.Has(ContentKind.GENERATOR)]

    def GetDoors(self) -> List[Door]:
        return [cell.entity for cell in self.Cells() if cell.Has(ContentKind.DOOR)]

    def GetHazards(self) -> List[Hazard]:
        hazards = []
        for cell in self.Cells():
            hazard = cell.Get(ContentKind.HAZARD)
            if hazard is not None and hazard not in hazards:
                hazards.append(hazard)
        return hazards
