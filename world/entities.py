"""Entities the level generator places into grid cells.

These are plain value objects. The generator constructs and places them; the
runtime game layer later mutates them (unlocking doors, inserting batteries,
activating hazard controls and so on).
"""

from collections import namedtuple
from enum import Enum, IntEnum
from typing import Optional

KEYCARD_SUFFIX = " Keycard"
BATTERY = "Battery"
PATCH_KIT = "Patch Kit"


class ContentKind(IntEnum):
    """What occupies a cell's single content slot."""
    NONE = 0
    DOOR = 1
    GENERATOR = 2
    HAZARD = 3
    HAZARD_CONTROL = 4
    PUZZLE = 5
    MAINTENANCE_TERMINAL = 6
    CCTV_TERMINAL = 7
    FURNITURE = 8


class Item:
    """An item lying on the floor or hidden inside furniture."""

    def __init__(self, name: str):
        self.name = name

    def IsKeycard(self) -> bool:
        return self.name.endswith(KEYCARD_SUFFIX)

    def __repr__(self) -> str:
        return f"Item({self.name!r})"


def keycard_name_for_room(room_name: str) -> str:
    return room_name + KEYCARD_SUFFIX


class Door:
    """A door on a room's entry cell. Doors are created locked."""

    def __init__(self, room_name: str, locked: bool = True):
        self.room_name = room_name
        self.locked = locked

    @property
    def keycard_name(self) -> str:
        return keycard_name_for_room(self.room_name)

    @property
    def door_name(self) -> str:
        return self.room_name + " Door"

    def Unlock(self) -> None:
        self.locked = False


class Generator:
    """A power generator that needs a number of batteries to run."""

    def __init__(self, name: str, batteries_required: int):
        self.name = name
        self.batteries_required = batteries_required
        self.batteries_inserted = 0

    def IsPowered(self) -> bool:
        return self.batteries_inserted >= self.batteries_required

    def BatteriesNeeded(self) -> int:
        return max(0, self.batteries_required - self.batteries_inserted)

    def InsertBatteries(self, count: int) -> int:
        """Insert up to `count` batteries and return how many were used."""
        used = min(max(0, count), self.BatteriesNeeded())
        self.batteries_inserted += used
        return used


class HazardType(Enum):
    VACUUM = "vacuum"
    COOLANT = "coolant"
    ELECTRICAL = "electrical"
    GAS = "gas"
    RADIATION = "radiation"


HazardInfo = namedtuple("HazardInfo", [
    "name",             # Display name
    "blocked_message",  # Shown when the player runs into the hazard
    "fixed_message",    # Shown once the hazard is cleared
    "control_name",     # Control that clears it (None for item fixes)
    "item_name",        # Item that clears it (None for control fixes)
])

HAZARD_TYPES = {
    HazardType.VACUUM: HazardInfo(
        "Vacuum",
        "This section is depressurized. You need a Patch Kit to seal the breach.",
        "You seal the breach with the Patch Kit. Atmosphere restored.",
        None, PATCH_KIT),
    HazardType.COOLANT: HazardInfo(
        "Coolant Leak",
        "Supercooled coolant sprays across the passage. Find the Shutoff Valve.",
        "The coolant flow stops. Passage is clear.",
        "Coolant Shutoff", None),
    HazardType.ELECTRICAL: HazardInfo(
        "Electrical Fault",
        "Sparks arc across the corridor. Find the Circuit Breaker.",
        "Power rerouted. The sparking stops.",
        "Circuit Breaker", None),
    HazardType.GAS: HazardInfo(
        "Gas Leak",
        "Toxic gas fills the area. Find the Vent Control.",
        "Vents engage. The gas dissipates.",
        "Vent Control", None),
    HazardType.RADIATION: HazardInfo(
        "Radiation Leak",
        "Dangerous radiation levels detected. Find the Containment Control.",
        "Containment field activated. Radiation contained.",
        "Containment Control", None),
}


class Hazard:

    def __init__(self, hazard_type: HazardType):
        info = HAZARD_TYPES[hazard_type]
        self.hazard_type = hazard_type
        self.name = info.name
        self.description = info.blocked_message
        self.fixed = False
        self.control: Optional["HazardControl"] = None

    def IsBlocking(self) -> bool:
        return not self.fixed

    def RequiresItem(self) -> bool:
        return HAZARD_TYPES[self.hazard_type].item_name is not None

    def RequiredItemName(self) -> Optional[str]:
        return HAZARD_TYPES[self.hazard_type].item_name

    def Fix(self) -> None:
        self.fixed = True


class HazardControl:

    def __init__(self, hazard_type: HazardType, hazard: Hazard):
        info = HAZARD_TYPES[hazard_type]
        self.hazard_type = hazard_type
        self.name = info.control_name
        self.description = info.fixed_message
        self.activated = False
        self.hazard = hazard
        hazard.control = self

    def Activate(self) -> None:
        if self.activated:
            return
        self.activated = True
        self.hazard.Fix()


class PuzzleType(Enum):
    SEQUENCE = "sequence"
    PATTERN = "pattern"


class PuzzleReward(Enum):
    BATTERY = "battery"
    KEYCARD = "keycard"
    MAP = "map"


class PuzzleTerminal:

    def __init__(self, name: str, puzzle_type: PuzzleType, solution: str,
                 hint: str, reward: PuzzleReward, description: str):
        self.name = name
        self.puzzle_type = puzzle_type
        self.solution = solution
        self.hint = hint
        self.reward = reward
        self.description = description
        self.solved = False

    def CheckSolution(self, answer: str) -> bool:
        return answer.strip().lower() == self.solution.lower()


class MaintenanceTerminal:

    def __init__(self, room_name: str):
        self.name = f"Maintenance Terminal - {room_name}"
        self.room_name = room_name
        self.used = False
        self.powered = False


class CCTVTerminal:

    def __init__(self, name: str, target_room: str):
        self.name = name
        self.target_room = target_room
        self.used = False
