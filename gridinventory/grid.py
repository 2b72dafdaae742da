"""An inventory grid: slots, placed items, hovering and picking up."""

from __future__ import annotations

from typing import Any, NamedTuple

from gridinventory.fragments import GridFragment, ImageFragment
from gridinventory.gridmath import (
    index_from_position,
    is_within_bounds,
    iter_2d,
    position_from_index,
)
from gridinventory.hover import HoverItem
from gridinventory.item_component import ItemComponent
from gridinventory.manifest import InventoryItem, ItemManifest, get_fragment
from gridinventory.placement import check_hover_position as _check_hover_position
from gridinventory.placement import find_room
from gridinventory.placement import is_in_grid_bounds as _is_in_grid_bounds
from gridinventory.slots import GridSlot, GridSlotState
from gridinventory.slotted import SlottedItem
from gridinventory.tags import FragmentTags
from gridinventory.tiles import (
    calculate_hovered_coordinates,
    calculate_starting_coordinate,
    calculate_tile_quadrant,
)
from gridinventory.types import (
    INDEX_NONE,
    ItemCategory,
    SlotAvailabilityResult,
    SpaceQueryResult,
    TileParameters,
)


class _Brush(NamedTuple):
    resource: Any
    image_size: tuple[float, float]
    draw_as: str = "Image"


class _Placement(NamedTuple):
    position: tuple[float, float]
    size: tuple[float, float]


class InventoryGrid:
    """A rows x columns grid of slots holding the items of one category."""

    def __init__(
        self,
        rows: int,
        columns: int,
        tile_size: float,
        item_category: ItemCategory = ItemCategory.NONE,
        *,
        viewport_scale: float = 1.0,
    ) -> None:
        if columns <= 0:
            raise ValueError("a grid needs at least one column")
        if rows < 0:
            raise ValueError("a grid cannot have a negative number of rows")
        self.rows = rows
        self.columns = columns
        self.tile_size = tile_size
        self.item_category = item_category
        self.viewport_scale = viewport_scale

        self.inventory_component: Any = None
        self.slotted_items: dict[int, SlottedItem] = {}
        self.item_layout: dict[int, _Placement] = {}
        self.hover_item: HoverItem | None = None
        self.cursor_widget: Any = None

        self.tile_parameters = TileParameters()
        self.last_tile_parameters = TileParameters()
        self.item_drop_index = INDEX_NONE
        self.current_query_result = SpaceQueryResult()
        self.mouse_within_canvas = False
        self.last_mouse_within_canvas = False
        self.last_highlighted_index = INDEX_NONE
        self.last_highlighted_dimensions: tuple[int, int] = (0, 0)

        self.grid_slots: list[GridSlot] = [
            GridSlot(tile_index=index_from_position((i, j), columns))
            for j in range(rows)
            for i in range(columns)
        ]

    # -- wiring -------------------------------------------------------------

    def attach(self, inventory_component: Any) -> None:
        """Listen to an inventory component for added items and changed stacks."""
        self.inventory_component = inventory_component
        inventory_component.on_item_added.add(self.add_item)
        inventory_component.on_stack_changed.add(self.add_stacks)

    # -- room and bounds ----------------------------------------------------

    def has_room_for_item(
        self, source: ItemComponent | InventoryItem | ItemManifest
    ) -> SlotAvailabilityResult:
        """Find room for an item given as a component, an item or a manifest."""
        manifest = source if isinstance(source, ItemManifest) else source.item_manifest
        return find_room(self.grid_slots, self.columns, self.rows, manifest)

    def matches_category(self, item: InventoryItem | None) -> bool:
        """True when item belongs to this grid's category."""
        if item is None:
            return False
        return item.item_manifest.item_category == self.item_category

    def is_in_grid_bounds(self, start_index: int, dimensions: tuple[int, int]) -> bool:
        """True when a block of dimensions at start_index fits inside the grid."""
        return _is_in_grid_bounds(
            start_index, dimensions, self.columns, self.rows, len(self.grid_slots)
        )

    def check_hover_position(
        self, position: tuple[int, int], dimensions: tuple[int, int]
    ) -> SpaceQueryResult:
        """Check the area under a hovered item of dimensions at position."""
        return _check_hover_position(
            self.grid_slots, self.columns, self.rows, position, dimensions
        )

    # -- adding items -------------------------------------------------------

    def add_item(self, item: InventoryItem) -> None:
        """Place a newly added item wherever the grid has room for it."""
        if not self.matches_category(item):
            return
        result = self.has_room_for_item(item)
        for availability in result.slot_availabilities:
            self._add_item_at_index(
                item, availability.index, result.stackable, availability.amount_to_fill
            )
            self._update_grid_slots(
                item, availability.index, result.stackable, availability.amount_to_fill
            )

    def add_stacks(self, result: SlotAvailabilityResult) -> None:
        """Add stacks to existing items, or place new ones, as result describes."""
        if not self.matches_category(result.item):
            return
        for availability in result.slot_availabilities:
            if availability.item_at_index:
                grid_slot = self.grid_slots[availability.index]
                slotted = self.slotted_items[availability.index]
                new_count = grid_slot.stack_count + availability.amount_to_fill
                slotted.update_stack_count(new_count)
                grid_slot.stack_count = new_count
            else:
                self._add_item_at_index(
                    result.item,
                    availability.index,
                    result.stackable,
                    availability.amount_to_fill,
                )
                self._update_grid_slots(
                    result.item,
                    availability.index,
                    result.stackable,
                    availability.amount_to_fill,
                )

    def _add_item_at_index(
        self, item: InventoryItem, index: int, stackable: bool, stack_amount: int
    ) -> None:
        grid_fragment = get_fragment(item, GridFragment, FragmentTags.GRID_FRAGMENT)
        image_fragment = get_fragment(item, ImageFragment, FragmentTags.ICON_FRAGMENT)
        if grid_fragment is None or image_fragment is None:
            return
        slotted = self._create_slotted_item(
            item, stackable, stack_amount, grid_fragment, image_fragment, index
        )
        self._add_slotted_item_to_canvas(index, grid_fragment)
        self.slotted_items[index] = slotted

    def _create_slotted_item(
        self,
        item: InventoryItem,
        stackable: bool,
        stack_amount: int,
        grid_fragment: GridFragment,
        image_fragment: ImageFragment,
        index: int,
    ) -> SlottedItem:
        slotted = SlottedItem(inventory_item=item, grid_index=index, stackable=stackable)
        slotted.image_brush = _Brush(
            image_fragment.icon, self._image_draw_size(grid_fragment)
        )
        slotted.update_stack_count(stack_amount if stackable else 0)
        slotted.on_clicked.add(self.on_slotted_item_clicked)
        return slotted

    def _add_slotted_item_to_canvas(self, index: int, grid_fragment: GridFragment) -> None:
        x, y = position_from_index(index, self.columns)
        padding = grid_fragment.grid_padding
        position = (x * self.tile_size + padding, y * self.tile_size + padding)
        self.item_layout[index] = _Placement(position, self._image_draw_size(grid_fragment))

    def _image_draw_size(self, grid_fragment: GridFragment) -> tuple[float, float]:
        icon_tile_width = self.tile_size - grid_fragment.grid_padding * 2
        width, height = grid_fragment.grid_size
        return width * icon_tile_width, height * icon_tile_width

    def _update_grid_slots(
        self, item: InventoryItem, index: int, stackable: bool, stack_amount: int
    ) -> None:
        if not 0 <= index < len(self.grid_slots):
            raise IndexError(f"grid index {index} is out of range")
        if stackable:
            self.grid_slots[index].stack_count = stack_amount
        grid_fragment = get_fragment(item, GridFragment, FragmentTags.GRID_FRAGMENT)
        dimensions = grid_fragment.grid_size if grid_fragment is not None else (1, 1)
        for grid_slot in iter_2d(self.grid_slots, index, dimensions, self.columns):
            grid_slot.inventory_item = item
            grid_slot.upper_left_index = index
            grid_slot.set_state(GridSlotState.OCCUPIED)
            grid_slot.available = False
        self.grid_slots[index].set_state(GridSlotState.OCCUPIED)

    # -- highlighting -------------------------------------------------------

    def highlight_slots(self, index: int, dimensions: tuple[int, int]) -> None:
        """Highlight the block at index, clearing the previous highlight."""
        if not self.mouse_within_canvas:
            return
        self.unhighlight_slots(self.last_highlighted_index, self.last_highlighted_dimensions)
        for grid_slot in iter_2d(self.grid_slots, index, dimensions, self.columns):
            grid_slot.set_state(GridSlotState.OCCUPIED)
        self.last_highlighted_index = index
        self.last_highlighted_dimensions = dimensions

    def unhighlight_slots(self, index: int, dimensions: tuple[int, int]) -> None:
        """Draw the block at index as its occupancy dictates."""
        for grid_slot in iter_2d(self.grid_slots, index, dimensions, self.columns):
            grid_slot.set_state(
                GridSlotState.UNOCCUPIED if grid_slot.available else GridSlotState.OCCUPIED
            )

    def change_hover_type(
        self, index: int, dimensions: tuple[int, int], state: GridSlotState
    ) -> None:
        """Draw the block at index in state, clearing the previous highlight."""
        self.unhighlight_slots(self.last_highlighted_index, self.last_highlighted_dimensions)
        for grid_slot in iter_2d(self.grid_slots, index, dimensions, self.columns):
            grid_slot.set_state(state)
        self.last_highlighted_index = index
        self.last_highlighted_dimensions = dimensions

    # -- picking up ---------------------------------------------------------

    def pick_up(self, item: InventoryItem, grid_index: int) -> None:
        """Lift item from grid_index onto the cursor."""
        self._assign_hover_item_at(item, grid_index, grid_index)
        self.remove_item_from_grid(item, grid_index)

    def _assign_hover_item_at(
        self, item: InventoryItem, grid_index: int, previous_grid_index: int
    ) -> None:
        self._assign_hover_item(item)
        self.hover_item.previous_grid_index = previous_grid_index
        self.hover_item.update_stack_count(
            self.grid_slots[grid_index].stack_count if item.is_stackable() else 0
        )

    def _assign_hover_item(self, item: InventoryItem) -> None:
        if self.hover_item is None:
            self.hover_item = HoverItem()
        grid_fragment = get_fragment(item, GridFragment, FragmentTags.GRID_FRAGMENT)
        image_fragment = get_fragment(item, ImageFragment, FragmentTags.ICON_FRAGMENT)
        if grid_fragment is None or image_fragment is None:
            return
        width, height = self._image_draw_size(grid_fragment)
        self.hover_item.image_brush = _Brush(
            image_fragment.icon,
            (width * self.viewport_scale, height * self.viewport_scale),
        )
        self.hover_item.grid_dimensions = grid_fragment.grid_size
        self.hover_item.inventory_item = item
        self.hover_item.set_stackable(item.is_stackable())
        self.cursor_widget = self.hover_item

    def remove_item_from_grid(self, item: InventoryItem, grid_index: int) -> None:
        """Clear the slots item covers from grid_index and drop its icon."""
        grid_fragment = get_fragment(item, GridFragment, FragmentTags.GRID_FRAGMENT)
        if grid_fragment is None:
            return
        for grid_slot in iter_2d(
            self.grid_slots, grid_index, grid_fragment.grid_size, self.columns
        ):
            grid_slot.clear()
        if grid_index in self.slotted_items:
            del self.slotted_items[grid_index]
            self.item_layout.pop(grid_index, None)

    def on_slotted_item_clicked(self, grid_index: int, mouse_event: Any) -> None:
        """Pick up the clicked item unless the cursor already holds one."""
        if not 0 <= grid_index < len(self.grid_slots):
            raise IndexError(f"grid index {grid_index} is out of range")
        clicked = self.grid_slots[grid_index].inventory_item
        if self.hover_item is None:
            self.pick_up(clicked, grid_index)

    # -- per-frame update ---------------------------------------------------

    def tick(
        self,
        canvas_position: tuple[float, float],
        canvas_size: tuple[float, float],
        mouse_position: tuple[float, float],
    ) -> None:
        """Track the cursor over the canvas and update highlighting."""
        if self._cursor_exited_canvas(canvas_position, canvas_size, mouse_position):
            return
        self._update_tile_parameters(canvas_position, mouse_position)

    def _cursor_exited_canvas(
        self,
        boundary_pos: tuple[float, float],
        boundary_size: tuple[float, float],
        location: tuple[float, float],
    ) -> bool:
        self.last_mouse_within_canvas = self.mouse_within_canvas
        self.mouse_within_canvas = is_within_bounds(boundary_pos, boundary_size, location)
        if not self.mouse_within_canvas and self.last_mouse_within_canvas:
            self.unhighlight_slots(
                self.last_highlighted_index, self.last_highlighted_dimensions
            )
            return True
        return False

    def _update_tile_parameters(
        self, canvas_position: tuple[float, float], mouse_position: tuple[float, float]
    ) -> None:
        if not self.mouse_within_canvas:
            return
        coordinates = calculate_hovered_coordinates(
            canvas_position, mouse_position, self.tile_size
        )
        self.last_tile_parameters = self.tile_parameters
        self.tile_parameters = TileParameters(
            tile_coordinates=coordinates,
            tile_index=index_from_position(coordinates, self.columns),
            tile_quadrant=calculate_tile_quadrant(
                canvas_position, mouse_position, self.tile_size
            ),
        )
        self._on_tile_parameters_updated(self.tile_parameters)

    def _on_tile_parameters_updated(self, parameters: TileParameters) -> None:
        if self.hover_item is None:
            return
        dimensions = self.hover_item.grid_dimensions
        starting_point = calculate_starting_coordinate(
            parameters.tile_coordinates, dimensions, parameters.tile_quadrant
        )
        self.item_drop_index = index_from_position(starting_point, self.columns)
        self.current_query_result = self.check_hover_position(starting_point, dimensions)

        if self.current_query_result.has_space:
            self.highlight_slots(self.item_drop_index, dimensions)
            return
        self.unhighlight_slots(self.last_highlighted_index, self.last_highlighted_dimensions)

        query = self.current_query_result
        if query.valid_item is not None and 0 <= query.upper_left_index < len(self.grid_slots):
            grid_fragment = get_fragment(
                query.valid_item, GridFragment, FragmentTags.GRID_FRAGMENT
            )
            if grid_fragment is None:
                return
            self.change_hover_type(
                query.upper_left_index, grid_fragment.grid_size, GridSlotState.GRAYED_OUT
            )