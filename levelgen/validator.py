"""Post-generation checks that a populated deck is actually solvable."""

import logging as log
from typing import List

from world.entities import KEYCARD_SUFFIX, PATCH_KIT, ContentKind
from .articulation import room_still_connected_if_block
from .power import find_power_deadlocks
from .reachability import get_reachable_cells, is_impassable
from .state import LevelState


class LevelValidator:

    def __init__(self, state: LevelState) -> None:
        self.state = state

    def _ReachableWithGatesShut(self):
        return get_reachable_cells(self.state.grid, self.state.StartCell(), is_impassable)

    def IsExitReachable(self) -> bool:
        """The exit can be reached with every locked door and hazard still in place."""
        return self.state.ExitCell() in self._ReachableWithGatesShut()

    def GetDisconnectedRooms(self) -> List[str]:
        return [room for room, entries in self.state.room_entry_points.items()
                if not room_still_connected_if_block(self.state.grid, room, entries, None)]

    def AreRoomsConnected(self) -> bool:
        return not self.GetDisconnectedRooms()

    def GetUnreachableSolutions(self) -> List[str]:
        """Gate solutions the player cannot get to before opening any gate.

        Covers every locked door's keycard (on the floor or in furniture),
        every patch kit and every hazard control.
        """
        grid = self.state.grid
        reachable = self._ReachableWithGatesShut()
        problems = []
        found_keycards = set()
        for cell in grid.Cells():
            items = list(cell.items_on_floor)
            furniture = cell.Get(ContentKind.FURNITURE)
            if furniture is not None and furniture.HasItem():
                items.append(furniture.contained_item)
            solutions = [item.name for item in items if item.IsKeycard() or item.name == PATCH_KIT]
            control = cell.Get(ContentKind.HAZARD_CONTROL)
            if control is not None:
                solutions.append(control.name)

            for name in solutions:
                if name.endswith(KEYCARD_SUFFIX):
                    found_keycards.add(name)
                if cell not in reachable:
                    problems.append(f"{name} at ({cell.row}, {cell.col}) is behind a gate")

        missing = {door.keycard_name for door in grid.GetDoors()
                   if door.locked and door.keycard_name not in found_keycards}
        problems.extend(f"{name} is missing" for name in sorted(missing))
        return problems

    def AreKeycardsReachable(self) -> bool:
        return not self.GetUnreachableSolutions()

    def GetProblems(self) -> List[str]:
        problems = []
        if self.state.grid is None or self.state.StartCell() is None:
            return ["Level has no grid"]
        if not self.IsExitReachable():
            problems.append("Exit is not reachable from the start")
        for room in self.GetDisconnectedRooms():
            problems.append(f"Doorways of {room} are not connected")
        problems.extend(self.GetUnreachableSolutions())
        for room in find_power_deadlocks(self.state):
            problems.append(f"{room} gates the exit but its doors can never be powered")
        return problems

    def IsLevelValid(self) -> bool:
        problems = self.GetProblems()
        for problem in problems:
            log.warning(f"Level {self.state.level} invalid: {problem}")
        if not problems:
            log.debug(f"Level {self.state.level} passed validation")
        return not problems

    def HasNoPowerDeadlock(self) -> bool:
        return not find_power_deadlocks(self.state)
