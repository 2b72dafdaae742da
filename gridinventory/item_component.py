"""The component that makes a world object an item that can be picked up."""

from __future__ import annotations

from dataclasses import dataclass, field

from gridinventory.events import Event
from gridinventory.manifest import ItemManifest

DEFAULT_PICKUP_MESSAGE = "E - Pickup"


@dataclass(eq=False)
class ItemComponent:
    """An item lying in the world, described by its manifest."""

    item_manifest: ItemManifest = field(default_factory=ItemManifest)
    pickup_message: str = DEFAULT_PICKUP_MESSAGE
    on_picked_up: Event = field(default_factory=Event)
    destroyed: bool = False

    def picked_up(self) -> None:
        """Notify listeners of the pickup, then destroy the owning object."""
        self.on_picked_up.broadcast()
        self.destroyed = True