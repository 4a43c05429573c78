"""Furniture and the per-room-type furniture templates."""

from collections import namedtuple
from typing import List, Optional

from .entities import Item

FurnitureTemplate = namedtuple("FurnitureTemplate", ["name", "description", "icon"])


class Furniture:

    def __init__(self, name: str, description: str, icon: str):
        self.name = name
        self.description = description
        self.icon = icon
        self.checked = False
        self.contained_item: Optional[Item] = None

    def HasItem(self) -> bool:
        return self.contained_item is not None

    def Check(self) -> Optional[Item]:
        """Search the furniture. A hidden item is handed out only once."""
        self.checked = True
        item = self.contained_item
        self.contained_item = None
        return item

    @classmethod
    def FromTemplate(cls, template: FurnitureTemplate) -> "Furniture":
        return cls(template.name, template.description, template.icon)


# Keyed by a room-type keyword that appears in the room name.
ROOM_FURNITURE = {
    "Bridge": [
        FurnitureTemplate("Captain's Chair", "A worn command chair faces the main viewscreen.", "Ω"),
        FurnitureTemplate("Navigation Console", "Star charts flicker on a dusty display.", "≡"),
        FurnitureTemplate("Helm Station", "Manual flight controls, covered in emergency overrides.", "∩"),
    ],
    "Command Center": [
        FurnitureTemplate("Tactical Display", "A holographic map table, now dark.", "◈"),
        FurnitureTemplate("Communications Array", "Banks of switches and indicator lights.", "≡"),
        FurnitureTemplate("Status Board", "Crew assignments, most names crossed out.", "▤"),
    ],
    "Communications": [
        FurnitureTemplate("Radio Equipment", "Long-range transmitters, all frequencies silent.", "≋"),
        FurnitureTemplate("Signal Decoder", "Encrypted message logs scroll endlessly.", "≡"),
        FurnitureTemplate("Antenna Controls", "Dish alignment controls, slightly off-calibration.", "¥"),
    ],
    "Security": [
        FurnitureTemplate("Weapons Locker", "Reinforced cabinet, lock has been forced.", "▥"),
        FurnitureTemplate("Monitoring Station", "Camera feeds cycle through empty corridors.", "◫"),
        FurnitureTemplate("Detention Cell", "A small holding area, door hanging open.", "▦"),
    ],
    "Engineering": [
        FurnitureTemplate("Computer Console", "Diagnostic readouts scroll past warnings.", "≡"),
        FurnitureTemplate("Tool Rack", "Wrenches and plasma cutters, some missing.", "╦"),
        FurnitureTemplate("Schematic Display", "Station blueprints, several sections highlighted red.", "▤"),
    ],
    "Reactor Core": [
        FurnitureTemplate("Control Rods", "Emergency dampeners, partially deployed.", "╫"),
        FurnitureTemplate("Coolant Pipes", "Thick tubes hum with circulating fluid.", "═"),
        FurnitureTemplate("Radiation Monitor", "Geiger counter clicks occasionally.", "☢"),
    ],
    "Server Room": [
        FurnitureTemplate("Server Rack", "Blinking lights indicate partial functionality.", "▥"),
        FurnitureTemplate("Terminal Bank", "Multiple screens display scrolling logs.", "≡"),
        FurnitureTemplate("Cooling Unit", "Industrial fans spin slowly.", "※"),
    ],
    "Maintenance Bay": [
        FurnitureTemplate("Workbench", "Scattered parts and half-finished repairs.", "╤"),
        FurnitureTemplate("Parts Bin", "Salvaged components, poorly organized.", "▤"),
        FurnitureTemplate("Diagnostic Station", "Equipment testing rig, currently idle.", "◫"),
    ],
    "Life Support": [
        FurnitureTemplate("Air Recycler", "Filters wheeze with each cycle.", "◎"),
        FurnitureTemplate("Water Reclamation", "Condensation drips into collection tanks.", "≋"),
        FurnitureTemplate("Oxygen Tanks", "Emergency reserves, gauges show half-full.", "○"),
    ],
    "Cargo Bay": [
        FurnitureTemplate("Shipping Container", "Dented metal crate, manifest unreadable.", "▣"),
        FurnitureTemplate("Cargo Crane", "Overhead lifting mechanism, chains dangling.", "╥"),
        FurnitureTemplate("Loading Dolly", "Wheeled cart, one wheel broken.", "□"),
    ],
    "Storage": [
        FurnitureTemplate("Supply Shelf", "Canned goods and emergency rations.", "▤"),
        FurnitureTemplate("Equipment Locker", "Personal effects, owners unknown.", "▥"),
        FurnitureTemplate("Crate Stack", "Boxes piled haphazardly.", "▣"),
    ],
    "Hangar": [
        FurnitureTemplate("Landing Pad", "Scorch marks indicate recent departures.", "▭"),
        FurnitureTemplate("Fuel Pump", "Emergency shutoff engaged.", "╪"),
        FurnitureTemplate("Tool Cart", "Maintenance equipment for spacecraft.", "╤"),
    ],
    "Armory": [
        FurnitureTemplate("Weapon Rack", "Empty slots where rifles once hung.", "╫"),
        FurnitureTemplate("Ammo Crate", "Heavy box, lid pried open.", "▣"),
        FurnitureTemplate("Body Armor Stand", "A single damaged suit remains.", "╥"),
    ],
    "Med Bay": [
        FurnitureTemplate("Medical Bed", "Sterile sheets, hastily stripped.", "╦"),
        FurnitureTemplate("Medicine Cabinet", "Pharmaceutical supplies, mostly depleted.", "▥"),
        FurnitureTemplate("Diagnostic Scanner", "Handheld medical tricorder on the counter.", "◫"),
    ],
    "Lab": [
        FurnitureTemplate("Microscope Station", "Slides still loaded, samples dried.", "◎"),
        FurnitureTemplate("Chemical Hood", "Fume extractor hums softly.", "╥"),
        FurnitureTemplate("Specimen Jars", "Preserved samples float in murky liquid.", "○"),
    ],
    "Hydroponics": [
        FurnitureTemplate("Growth Bed", "Wilted plants in nutrient solution.", "≋"),
        FurnitureTemplate("UV Lamps", "Artificial sunlight, flickering.", "¤"),
        FurnitureTemplate("Seed Storage", "Labeled drawers of genetic samples.", "▤"),
    ],
    "Observatory": [
        FurnitureTemplate("Telescope Mount", "Lens pointed at infinite darkness.", "◎"),
        FurnitureTemplate("Star Chart", "Constellations marked with navigation routes.", "✦"),
        FurnitureTemplate("Recording Equipment", "Astronomical data, decades of observations.", "◫"),
    ],
    "Crew Quarters": [
        FurnitureTemplate("Bunk Bed", "Personal effects scattered on unmade sheets.", "╦"),
        FurnitureTemplate("Footlocker", "Lock broken, contents rifled through.", "▣"),
        FurnitureTemplate("Photo Display", "Faded images of distant families.", "▤"),
    ],
    "Mess Hall": [
        FurnitureTemplate("Dining Table", "Trays of food, long since spoiled.", "╤"),
        FurnitureTemplate("Food Dispenser", "Vending machine, selections limited.", "▥"),
        FurnitureTemplate("Coffee Machine", "The pot is cold and empty.", "○"),
    ],
    "Airlock": [
        FurnitureTemplate("Pressure Door", "Heavy bulkhead, seals intact.", "▥"),
        FurnitureTemplate("EVA Suit Rack", "Emergency spacesuits, some missing.", "╫"),
        FurnitureTemplate("Decompression Controls", "Warning lights flash intermittently.", "◈"),
    ],
}


def get_furniture_templates_for_room(room_name: str) -> List[FurnitureTemplate]:
    """Return the templates for the first room-type keyword found in the name.

    Matching is case-insensitive, so "Aft Cargo Bay" picks up the Cargo Bay
    set. Unknown room types get no furniture.
    """
    lowered = room_name.lower()
    for room_type, templates in ROOM_FURNITURE.items():
        if room_type.lower() in lowered:
            return list(templates)
    return []
