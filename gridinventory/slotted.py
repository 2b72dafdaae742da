"""Item icons placed on an inventory grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gridinventory.events import Event
from gridinventory.types import INDEX_NONE


@dataclass(eq=False)
class SlottedItem:
    """An item drawn on the grid at grid_index; clicking it fires on_clicked."""

    grid_index: int = INDEX_NONE
    grid_dimensions: tuple[int, int] = (1, 1)
    inventory_item: Any = None
    stackable: bool = False
    image_brush: Any = None
    stack_text: str = ""
    stack_text_visible: bool = False
    on_clicked: Event = field(default_factory=Event)

    def click(self, mouse_event: Any) -> bool:
        """Broadcast (grid_index, mouse_event) to on_clicked; the click is always handled."""
        self.on_clicked.broadcast(self.grid_index, mouse_event)
        return True

    def update_stack_count(self, stack_count: int) -> None:
        """Show stack_count on the label, or hide it when not positive."""
        if stack_count > 0:
            self.stack_text_visible = True
            self.stack_text = f"{stack_count:,}"
        else:
            self.stack_text_visible = False