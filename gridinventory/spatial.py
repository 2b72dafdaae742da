"""Inventory menus, including the spatial menu with one grid per item category."""

from __future__ import annotations

import logging
from typing import Any

from gridinventory.grid import InventoryGrid
from gridinventory.types import ItemCategory, SlotAvailabilityResult

log = logging.getLogger(__name__)


def item_category_of(item_component: Any) -> ItemCategory:
    """The category of the component's item; NONE when there is no component."""
    if item_component is None:
        return ItemCategory.NONE
    return item_component.item_manifest.item_category


class InventoryBase:
    """An inventory menu that can be shown, hidden and asked for room."""

    def __init__(self) -> None:
        self.visible = True

    def has_room_for_item(self, item_component: Any) -> SlotAvailabilityResult:
        """A plain menu has no room for anything."""
        return SlotAvailabilityResult()


class SpatialInventory(InventoryBase):
    """A menu of three grids, equippables, consumables and craftables, one shown at a time."""

    def __init__(
        self,
        equippables: InventoryGrid,
        consumables: InventoryGrid,
        craftables: InventoryGrid,
        inventory_component: Any = None,
    ) -> None:
        super().__init__()
        self.grids: dict[ItemCategory, InventoryGrid] = {
            ItemCategory.EQUIPABLE: equippables,
            ItemCategory.CONSUMABLE: consumables,
            ItemCategory.CRAFTABLE: craftables,
        }
        self.buttons_enabled: dict[ItemCategory, bool] = {
            category: True for category in self.grids
        }
        self.active_grid: InventoryGrid | None = None
        if inventory_component is not None:
            for grid in self.grids.values():
                grid.attach(inventory_component)
        self.show_equippables()

    def has_room_for_item(self, item_component: Any) -> SlotAvailabilityResult:
        """Ask the grid of the item's category for room."""
        grid = self.grids.get(item_category_of(item_component))
        if grid is None:
            log.error("ItemComponent does not have a valid Item Category.")
            return SlotAvailabilityResult()
        return grid.has_room_for_item(item_component)

    def show_equippables(self) -> None:
        """Show the equippables grid."""
        self._set_active_grid(ItemCategory.EQUIPABLE)

    def show_consumables(self) -> None:
        """Show the consumables grid."""
        self._set_active_grid(ItemCategory.CONSUMABLE)

    def show_craftables(self) -> None:
        """Show the craftables grid."""
        self._set_active_grid(ItemCategory.CRAFTABLE)

    def _set_active_grid(self, category: ItemCategory) -> None:
        for key in self.buttons_enabled:
            self.buttons_enabled[key] = True
        self.buttons_enabled[category] = False
        self.active_grid = self.grids[category]