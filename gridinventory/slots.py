"""Grid slots: the tiles an inventory grid is made of."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gridinventory.types import INDEX_NONE


class GridSlotState(Enum):
    """How a grid slot is currently drawn."""

    UNOCCUPIED = "Unoccupied"
    OCCUPIED = "Occupied"
    SELECTED = "Selected"
    GRAYED_OUT = "GrayedOut"


@dataclass(eq=False)
class GridSlot:
    """One tile of an inventory grid and what occupies it."""

    tile_index: int = INDEX_NONE
    stack_count: int = 0
    upper_left_index: int = INDEX_NONE
    available: bool = True
    inventory_item: Any = None
    state: GridSlotState = GridSlotState.UNOCCUPIED
    brushes: dict[GridSlotState, Any] = field(default_factory=dict)

    @property
    def brush(self) -> Any:
        """The brush drawn for the current state, if one is configured."""
        return self.brushes.get(self.state)

    def set_state(self, state: GridSlotState) -> None:
        """Switch the slot to state, drawing it with that state's brush."""
        self.state = GridSlotState(state)

    def clear(self) -> None:
        """Empty the slot and mark it available again."""
        self.inventory_item = None
        self.upper_left_index = INDEX_NONE
        self.set_state(GridSlotState.UNOCCUPIED)
        self.available = True
        self.stack_count = 0