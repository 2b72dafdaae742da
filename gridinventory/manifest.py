"""Item manifests and the inventory items made from them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TypeVar

from gridinventory.fragments import ItemFragment
from gridinventory.tags import GameplayTag
from gridinventory.types import ItemCategory

F = TypeVar("F", bound=ItemFragment)


@dataclass
class ItemManifest:
    """Everything needed to create an inventory item."""

    fragments: list[ItemFragment] = field(default_factory=list)
    item_category: ItemCategory = ItemCategory.NONE
    item_type: GameplayTag = GameplayTag.EMPTY

    def manifest(self) -> InventoryItem:
        """Create a new inventory item holding its own copy of this manifest."""
        return InventoryItem(item_manifest=copy.deepcopy(self))

    def fragment_of_type(self, fragment_type: type[F]) -> F | None:
        """Return the first fragment that is an instance of fragment_type."""
        return next((f for f in self.fragments if isinstance(f, fragment_type)), None)

    def fragment_of_type_with_tag(self, fragment_type: type[F], tag: GameplayTag) -> F | None:
        """Return the first fragment of fragment_type whose tag matches tag exactly."""
        return next(
            (
                f
                for f in self.fragments
                if isinstance(f, fragment_type) and f.fragment_tag.matches_tag_exact(tag)
            ),
            None,
        )


@dataclass(eq=False)
class InventoryItem:
    """An item held in an inventory."""

    item_manifest: ItemManifest = field(default_factory=ItemManifest)
    total_stack_count: int = 0

    def is_stackable(self) -> bool:
        """True when the item's manifest has a stackable fragment."""
        from gridinventory.fragments import StackableFragment

        return self.item_manifest.fragment_of_type(StackableFragment) is not None


def get_fragment(
    item: InventoryItem | None, fragment_type: type[F], tag: GameplayTag
) -> F | None:
    """Return the item's fragment of fragment_type carrying tag, or None."""
    if item is None:
        return None
    return item.item_manifest.fragment_of_type_with_tag(fragment_type, tag)