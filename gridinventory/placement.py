"""Searching an inventory grid for room to place items."""

from __future__ import annotations

from typing import Sequence

from gridinventory.fragments import GridFragment, StackableFragment
from gridinventory.gridmath import index_from_position, iter_2d
from gridinventory.manifest import ItemManifest
from gridinventory.slots import GridSlot
from gridinventory.tags import GameplayTag
from gridinventory.types import (
    INDEX_NONE,
    SlotAvailability,
    SlotAvailabilityResult,
    SpaceQueryResult,
)


def is_in_grid_bounds(
    start_index: int,
    dimensions: tuple[int, int],
    columns: int,
    rows: int,
    slot_count: int,
) -> bool:
    """True when a block of dimensions with its top-left at start_index fits the grid."""
    if start_index < 0 or start_index >= slot_count:
        return False
    width, height = dimensions
    end_column = start_index % columns + width
    end_row = start_index // columns + height
    return end_column <= columns and end_row <= rows


def item_dimensions(manifest: ItemManifest) -> tuple[int, int]:
    """The grid size of the manifest's item; (1, 1) when it has no grid fragment."""
    fragment = manifest.fragment_of_type(GridFragment)
    return fragment.grid_size if fragment is not None else (1, 1)


def _has_item(grid_slot: GridSlot) -> bool:
    return grid_slot.inventory_item is not None


def _stack_amount(grid_slots: Sequence[GridSlot], grid_slot: GridSlot) -> int:
    """The stack held at grid_slot, read from its item's top-left slot."""
    if grid_slot.upper_left_index != INDEX_NONE:
        return grid_slots[grid_slot.upper_left_index].stack_count
    return grid_slot.stack_count


def _slot_fits(
    grid_slot: GridSlot,
    sub_slot: GridSlot,
    checked: set[int],
    item_type: GameplayTag,
    max_stack_size: int,
) -> bool:
    if sub_slot.tile_index in checked:
        return False
    if not _has_item(sub_slot):
        return True
    if sub_slot.upper_left_index != grid_slot.tile_index:
        return False
    sub_item = sub_slot.inventory_item
    if not sub_item.is_stackable():
        return False
    if not sub_item.item_manifest.item_type.matches_tag_exact(item_type):
        return False
    return grid_slot.stack_count < max_stack_size


def _claim_at_index(
    grid_slots: Sequence[GridSlot],
    columns: int,
    grid_slot: GridSlot,
    dimensions: tuple[int, int],
    checked: set[int],
    item_type: GameplayTag,
    max_stack_size: int,
) -> set[int] | None:
    """The tile indices an item would claim at grid_slot, or None if it does not fit."""
    claimed: set[int] = set()
    for sub_slot in iter_2d(grid_slots, grid_slot.tile_index, dimensions, columns):
        if not _slot_fits(grid_slot, sub_slot, checked, item_type, max_stack_size):
            return None
        claimed.add(sub_slot.tile_index)
    return claimed


def find_room(
    grid_slots: Sequence[GridSlot],
    columns: int,
    rows: int,
    manifest: ItemManifest,
) -> SlotAvailabilityResult:
    """Find where the manifest's item, with its whole stack, can go on the grid."""
    result = SlotAvailabilityResult()
    stackable = manifest.fragment_of_type(StackableFragment)
    result.stackable = stackable is not None
    max_stack_size = stackable.max_stack_size if stackable is not None else 1
    amount_to_fill = stackable.stack_count if stackable is not None else 1
    dimensions = item_dimensions(manifest)

    checked: set[int] = set()
    for grid_slot in grid_slots:
        if amount_to_fill == 0:
            break
        if grid_slot.tile_index in checked:
            continue
        if not is_in_grid_bounds(
            grid_slot.tile_index, dimensions, columns, rows, len(grid_slots)
        ):
            continue
        claimed = _claim_at_index(
            grid_slots,
            columns,
            grid_slot,
            dimensions,
            checked,
            manifest.item_type,
            max_stack_size,
        )
        if claimed is None:
            continue

        room_in_slot = max_stack_size - _stack_amount(grid_slots, grid_slot)
        fill = min(amount_to_fill, room_in_slot) if result.stackable else 1
        if fill == 0:
            continue

        checked |= claimed
        result.total_room_to_fill += fill
        has_item = _has_item(grid_slot)
        result.slot_availabilities.append(
            SlotAvailability(
                index=grid_slot.upper_left_index if has_item else grid_slot.tile_index,
                amount_to_fill=fill if result.stackable else 0,
                item_at_index=has_item,
            )
        )
        amount_to_fill -= fill
        result.remainder = amount_to_fill
        if amount_to_fill == 0:
            return result
    return result


def check_hover_position(
    grid_slots: Sequence[GridSlot],
    columns: int,
    rows: int,
    position: tuple[int, int],
    dimensions: tuple[int, int],
) -> SpaceQueryResult:
    """Check whether the area at position is free, or holds exactly one item to swap with."""
    result = SpaceQueryResult()
    start_index = index_from_position(position, columns)
    if not is_in_grid_bounds(start_index, dimensions, columns, rows, len(grid_slots)):
        return result

    result.has_space = True
    occupied: dict[int, None] = {}
    for grid_slot in iter_2d(grid_slots, start_index, dimensions, columns):
        if _has_item(grid_slot):
            occupied[grid_slot.upper_left_index] = None
            result.has_space = False

    if len(occupied) == 1:
        index = next(iter(occupied))
        result.valid_item = grid_slots[index].inventory_item
        result.upper_left_index = grid_slots[index].upper_left_index
    return result