"""The replicated list of items an inventory holds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from gridinventory.manifest import InventoryItem
from gridinventory.tags import GameplayTag


@dataclass(eq=False)
class InventoryList:
    """Items held by an inventory, reporting replicated changes to its owner.

    The owner is expected to offer on_item_added and on_item_removed events.
    """

    owner: Any = None
    authority: bool = True
    entries: list[InventoryItem | None] = field(default_factory=list)
    replication_key: int = 0

    def _mark_dirty(self) -> None:
        self.replication_key += 1

    def _require_authority(self) -> None:
        if self.owner is None:
            raise RuntimeError("inventory list has no owning component")
        if not self.authority:
            raise RuntimeError("only the authority may add inventory entries")

    def all_items(self) -> list[InventoryItem]:
        """Every item held, skipping empty entries."""
        return [item for item in self.entries if item is not None]

    def add_from_component(self, item_component: Any) -> InventoryItem:
        """Create a new item from the component's manifest and add it."""
        self._require_authority()
        item = item_component.item_manifest.manifest()
        self.entries.append(item)
        self._mark_dirty()
        return item

    def add_entry(self, item: InventoryItem | None) -> InventoryItem | None:
        """Add an existing item."""
        self._require_authority()
        self.entries.append(item)
        self._mark_dirty()
        return item

    def remove_entry(self, item: InventoryItem) -> None:
        """Remove every entry holding item."""
        kept = [entry for entry in self.entries if entry is not item]
        if len(kept) != len(self.entries):
            self.entries = kept
            self._mark_dirty()

    def find_first_item_by_type(self, item_type: GameplayTag) -> InventoryItem | None:
        """The first item whose type matches item_type exactly."""
        return next(
            (
                item
                for item in self.entries
                if item is not None
                and item.item_manifest.item_type.matches_tag_exact(item_type)
            ),
            None,
        )

    def pre_replicated_remove(self, removed_indices: Iterable[int]) -> None:
        """Tell the owner about entries about to be removed by replication."""
        if self.owner is None:
            return
        for index in removed_indices:
            self.owner.on_item_removed.broadcast(self.entries[index])

    def post_replicated_add(self, added_indices: Iterable[int]) -> None:
        """Tell the owner about entries added by replication."""
        if self.owner is None:
            return
        for index in added_indices:
            self.owner.on_item_added.broadcast(self.entries[index])