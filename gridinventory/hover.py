"""The item that follows the cursor after being picked up from a grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gridinventory.tags import GameplayTag
from gridinventory.types import INDEX_NONE


@dataclass(eq=False)
class HoverItem:
    """An item held by the cursor, with its icon and stack label."""

    inventory_item: Any = None
    grid_dimensions: tuple[int, int] = (0, 0)
    previous_grid_index: int = INDEX_NONE
    image_brush: Any = None
    stackable: bool = False
    stack_count: int = 0
    stack_text: str = ""
    stack_text_visible: bool = field(default=False)

    def update_stack_count(self, count: int) -> None:
        """Show count on the stack label, or hide the label when count is not positive."""
        if count > 0:
            self.stack_text = f"{count:,}"
            self.stack_text_visible = True
        else:
            self.stack_text_visible = False

    def set_stackable(self, stacks: bool) -> None:
        """Record whether the item stacks; a non-stacking item hides its label."""
        self.stackable = stacks
        if not stacks:
            self.stack_text_visible = False

    def item_type(self) -> GameplayTag:
        """The held item's type, or the empty tag when nothing is held."""
        if self.inventory_item is not None:
            return self.inventory_item.item_manifest.item_type
        return GameplayTag.EMPTY