"""Value types shared by the inventory grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

INDEX_NONE = -1


class ItemCategory(Enum):
    """Which grid of the inventory an item belongs to."""

    EQUIPABLE = "Equipable"
    CONSUMABLE = "Consumable"
    CRAFTABLE = "Craftable"
    NONE = "None"


@dataclass
class SlotAvailability:
    """Room found at one grid index."""

    index: int = INDEX_NONE
    amount_to_fill: int = 0
    item_at_index: bool = False


@dataclass
class SlotAvailabilityResult:
    """Outcome of searching a grid for room for an item."""

    item: Any = None
    total_room_to_fill: int = 0
    remainder: int = 0
    stackable: bool = False
    slot_availabilities: list[SlotAvailability] = field(default_factory=list)


class TileQuadrant(Enum):
    """Quarter of a tile the cursor is over."""

    TOP_LEFT = "TopLeft"
    TOP_RIGHT = "TopRight"
    BOTTOM_LEFT = "BottomLeft"
    BOTTOM_RIGHT = "BottomRight"
    NONE = "None"


@dataclass
class TileParameters:
    """The tile under the cursor."""

    tile_coordinates: tuple[int, int] = (0, 0)
    tile_index: int = INDEX_NONE
    tile_quadrant: TileQuadrant = TileQuadrant.NONE


@dataclass
class SpaceQueryResult:
    """Outcome of checking the area under a hovered item."""

    has_space: bool = False
    valid_item: Any = None
    upper_left_index: int = INDEX_NONE