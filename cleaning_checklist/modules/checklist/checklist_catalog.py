"""Static checklist definitions, one per property slug."""
from typing import Dict, List, Optional, Tuple

from cleaning_checklist.modules.checklist.checklist_schema import Checklist, ChecklistSection


def _section(name: str, *items: str) -> ChecklistSection:
    return ChecklistSection(name=name, items=items)


_KITCHEN = _section(
    "Kitchen",
    "Wipe counters and backsplash",
    "Clean stovetop and oven front",
    "Clean inside microwave",
    "Empty and wipe refrigerator of guest food",
    "Run and empty dishwasher",
    "Put away all dishes",
    "Empty trash and replace liner",
    "Restock dish soap, sponges and paper towels",
    "Sweep and mop floor",
)

_LIVING = _section(
    "Living Room",
    "Dust all surfaces",
    "Vacuum couch and cushions",
    "Straighten pillows and throws",
    "Wipe remotes and light switches",
    "Vacuum floor",
)

_LAUNDRY = _section(
    "Laundry",
    "Start linens and towels",
    "Clean lint trap",
    "Fold and store clean linens",
)

_OUTDOOR = _section(
    "Patio & Outdoor",
    "Sweep patio",
    "Wipe outdoor table and chairs",
    "Empty outdoor trash",
    "Check grill is clean and off",
)

_CHECKOUT = _section(
    "Final Walkthrough",
    "All lights off",
    "Thermostat set to 78",
    "Windows and doors locked",
    "Report any damage or missing items",
)


def _bedroom(name: str) -> ChecklistSection:
    return _section(
        name,
        "Strip and remake bed with fresh linens",
        "Dust nightstands and dressers",
        "Check under bed and in drawers",
        "Vacuum floor",
    )


def _bathroom(name: str) -> ChecklistSection:
    return _section(
        name,
        "Clean toilet inside and out",
        "Scrub shower and tub",
        "Clean sink and mirror",
        "Replace towels",
        "Restock toilet paper and toiletries",
        "Empty trash",
        "Mop floor",
    )


CHECKLISTS: Dict[str, Checklist] = {
    "canyon-view": Checklist(
        name="Canyon View",
        sections=(
            _KITCHEN,
            _LIVING,
            _bedroom("Primary Bedroom"),
            _bedroom("Guest Bedroom"),
            _bathroom("Primary Bathroom"),
            _bathroom("Guest Bathroom"),
            _LAUNDRY,
            _OUTDOOR,
            _CHECKOUT,
        ),
    ),
    "diamond": Checklist(
        name="Diamond",
        sections=(
            _KITCHEN,
            _LIVING,
            _bedroom("Bedroom"),
            _bathroom("Bathroom"),
            _LAUNDRY,
            _CHECKOUT,
        ),
    ),
    "panorama": Checklist(
        name="Panorama",
        sections=(
            _KITCHEN,
            _LIVING,
            _bedroom("Primary Bedroom"),
            _bedroom("Bunk Room"),
            _bathroom("Primary Bathroom"),
            _bathroom("Hall Bathroom"),
            _LAUNDRY,
            _OUTDOOR,
            _section(
                "Hot Tub",
                "Remove debris and skim water",
                "Check chemical levels",
                "Wipe cover and secure it",
            ),
            _CHECKOUT,
        ),
    ),
}


def get_checklist(slug: str) -> Optional[Checklist]:
    return CHECKLISTS.get(slug)


def list_checklists() -> List[Tuple[str, Checklist]]:
    return list(CHECKLISTS.items())
