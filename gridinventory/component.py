"""The player's inventory: its items, its menu and picking items up."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from gridinventory.events import Event
from gridinventory.fragments import StackableFragment
from gridinventory.item_component import ItemComponent
from gridinventory.item_list import InventoryList
from gridinventory.manifest import InventoryItem
from gridinventory.spatial import InventoryBase
from gridinventory.tags import GameplayTag


class NetMode(Enum):
    """How the owning game instance takes part in the network session."""

    STANDALONE = "Standalone"
    DEDICATED_SERVER = "DedicatedServer"
    LISTEN_SERVER = "ListenServer"
    CLIENT = "Client"


class InputMode(Enum):
    """Where the owning controller sends player input."""

    GAME_ONLY = "GameOnly"
    GAME_AND_UI = "GameAndUI"


class InventoryComponent:
    """An inventory owned by a player controller.

    The controller is expected to have is_local_controller, input_mode and
    show_mouse_cursor attributes. menu_factory builds the inventory menu and
    is given this component.
    """

    def __init__(
        self,
        owning_controller: Any = None,
        menu_factory: Callable[[InventoryComponent], InventoryBase] | None = None,
        net_mode: NetMode = NetMode.STANDALONE,
    ) -> None:
        self.owning_controller = owning_controller
        self.menu_factory = menu_factory
        self.net_mode = net_mode
        self.inventory_menu: InventoryBase | None = None
        self.inventory_menu_open = False
        self.replicated_subobjects: list[Any] = []

        self.on_item_added = Event()
        self.on_item_removed = Event()
        self.no_room_in_inventory = Event()
        self.on_stack_changed = Event()

        self.inventory_list = InventoryList(owner=self)

    def construct_inventory(self) -> None:
        """Create the menu for a local controller and start with it closed."""
        if self.owning_controller is None:
            raise RuntimeError("Inventory Component should have Player Controller as Owner")
        if not self.owning_controller.is_local_controller:
            return
        if self.menu_factory is None:
            raise RuntimeError("no inventory menu is configured")
        self.inventory_menu = self.menu_factory(self)
        self.inventory_menu.visible = True
        self.close_inventory_menu()

    def toggle_inventory_menu(self) -> None:
        """Close the menu if it is open, otherwise open it."""
        if self.inventory_menu_open:
            self.close_inventory_menu()
        else:
            self.open_inventory_menu()

    def open_inventory_menu(self) -> None:
        """Show the menu and give input to both game and UI, with a cursor."""
        if self.inventory_menu is None:
            return
        self.inventory_menu.visible = True
        self.inventory_menu_open = True
        if self.owning_controller is None:
            return
        self.owning_controller.input_mode = InputMode.GAME_AND_UI
        self.owning_controller.show_mouse_cursor = True

    def close_inventory_menu(self) -> None:
        """Hide the menu and give input back to the game, hiding the cursor."""
        if self.inventory_menu is None:
            return
        self.inventory_menu.visible = False
        self.inventory_menu_open = False
        if self.owning_controller is None:
            return
        self.owning_controller.input_mode = InputMode.GAME_ONLY
        self.owning_controller.show_mouse_cursor = False

    def _add_rep_subobject(self, subobject: Any) -> None:
        if subobject is not None and subobject not in self.replicated_subobjects:
            self.replicated_subobjects.append(subobject)

    def try_add_item(self, item_component: ItemComponent) -> None:
        """Put the component's item into the inventory if there is room."""
        if self.inventory_menu is None:
            raise RuntimeError("the inventory has no menu to place items in")
        result = self.inventory_menu.has_room_for_item(item_component)
        result.item = self.inventory_list.find_first_item_by_type(
            item_component.item_manifest.item_type
        )

        if result.total_room_to_fill == 0:
            self.no_room_in_inventory.broadcast()
            return

        if result.item is not None and result.stackable:
            self.on_stack_changed.broadcast(result)
            self.server_add_stacks_to_item(
                item_component, result.total_room_to_fill, result.remainder
            )
        elif result.total_room_to_fill > 0:
            self.server_add_new_item(
                item_component, result.total_room_to_fill if result.stackable else 0
            )

    def server_add_new_item(self, item_component: ItemComponent, stack_count: int) -> None:
        """Create a new item from the component and consume the pickup."""
        new_item: InventoryItem = self.inventory_list.add_from_component(item_component)
        self._add_rep_subobject(new_item)
        new_item.total_stack_count = stack_count
        if self.net_mode in (NetMode.LISTEN_SERVER, NetMode.STANDALONE):
            self.on_item_added.broadcast(new_item)
        item_component.picked_up()

    def server_add_stacks_to_item(
        self, item_component: ItemComponent | None, stack_count: int, remainder: int
    ) -> None:
        """Add stacks to the held item of the component's type; leave any remainder behind."""
        item_type = (
            item_component.item_manifest.item_type
            if item_component is not None
            else GameplayTag.EMPTY
        )
        item = self.inventory_list.find_first_item_by_type(item_type)
        if item is None:
            return
        item.total_stack_count += stack_count
        if remainder == 0:
            item_component.picked_up()
            return
        stackable = item_component.item_manifest.fragment_of_type(StackableFragment)
        if stackable is not None:
            stackable.stack_count = remainder