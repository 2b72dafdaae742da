"""On-screen messages shown to the player."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

NO_ROOM_MESSAGE = "No room in Inventory."


@dataclass(eq=False)
class InfoMessage:
    """A message that shows when set and hides once its lifetime runs out."""

    message_lifetime: float = 3.0
    text: str = ""
    visible: bool = False
    active: bool = False
    _remaining: float | None = field(default=None, repr=False)

    def set_message(self, message: str) -> None:
        """Show message and restart the hide timer."""
        self.text = message
        if not self.active:
            self.visible = True
        self.active = True
        self._remaining = self.message_lifetime

    def tick(self, delta_time: float) -> None:
        """Advance the hide timer by delta_time seconds."""
        if self._remaining is None:
            return
        self._remaining -= delta_time
        if self._remaining <= 0:
            self._remaining = None
            self.visible = False
            self.active = False


@dataclass(eq=False)
class HUDWidget:
    """The player's HUD: a pickup prompt and an info message."""

    info_message: InfoMessage | None = field(default_factory=InfoMessage)
    pickup_message: str = ""
    pickup_visible: bool = False

    def attach(self, inventory_component: Any) -> None:
        """Listen for the inventory having no room."""
        if inventory_component is None:
            return
        inventory_component.no_room_in_inventory.add(self.on_no_room)

    def on_no_room(self) -> None:
        """Tell the player the inventory is full."""
        if self.info_message is None:
            return
        self.info_message.set_message(NO_ROOM_MESSAGE)

    def show_pickup_message(self, message: str) -> None:
        """Show the pickup prompt with message."""
        self.pickup_message = message
        self.pickup_visible = True

    def hide_pickup_message(self) -> None:
        """Hide the pickup prompt."""
        self.pickup_visible = False