import pytest

from gridinventory.fragments import GridFragment, StackableFragment
from gridinventory.gridmath import iter_2d
from gridinventory.manifest import ItemManifest
from gridinventory.placement import (
    check_hover_position,
    find_room,
    is_in_grid_bounds,
    item_dimensions,
)
from gridinventory.slots import GridSlot
from gridinventory.tags import FragmentTags, ItemTags
from gridinventory.types import INDEX_NONE, ItemCategory, SlotAvailability

RED_SMALL = ItemTags.Consumables.Potions.Red.SMALL
BLUE_SMALL = ItemTags.Consumables.Potions.Blue.SMALL


def make_grid(columns, rows):
    return [GridSlot(tile_index=i) for i in range(columns * rows)]


def place(slots, columns, item, index, dims=(1, 1), stack=0):
    for slot in iter_2d(slots, index, dims, columns):
        slot.inventory_item = item
        slot.upper_left_index = index
        slot.available = False
    slots[index].stack_count = stack


def potion(count, max_size, tag=RED_SMALL):
    return ItemManifest(
        fragments=[
            StackableFragment(
                fragment_tag=FragmentTags.STACKABLE_FRAGMENT,
                max_stack_size=max_size,
                stack_count=count,
            )
        ],
        item_category=ItemCategory.CONSUMABLE,
        item_type=tag,
    )


def weapon(size=(1, 1)):
    return ItemManifest(
        fragments=[GridFragment(fragment_tag=FragmentTags.GRID_FRAGMENT, grid_size=size)],
        item_category=ItemCategory.EQUIPABLE,
        item_type=ItemTags.Equipment.Weapons.SWORD,
    )


@pytest.mark.parametrize("index", [-1, 12, 100])
def test_index_outside_slots_is_out_of_bounds(index):
    assert is_in_grid_bounds(index, (1, 1), 4, 3, 12) is False


def test_whole_grid_fits_from_origin():
    assert is_in_grid_bounds(0, (4, 3), 4, 3, 12) is True


def test_block_past_right_edge_is_out_of_bounds():
    assert is_in_grid_bounds(3, (2, 1), 4, 3, 12) is False
    assert is_in_grid_bounds(2, (2, 1), 4, 3, 12) is True


def test_block_past_bottom_edge_is_out_of_bounds():
    assert is_in_grid_bounds(8, (1, 2), 4, 3, 12) is False


def test_item_dimensions_default_and_fragment():
    assert item_dimensions(ItemManifest()) == (1, 1)
    assert item_dimensions(weapon((2, 3))) == (2, 3)


def test_non_stackable_item_on_empty_grid():
    result = find_room(make_grid(3, 3), 3, 3, weapon())
    assert result.stackable is False
    assert result.total_room_to_fill == 1
    assert result.remainder == 0
    assert result.slot_availabilities == [SlotAvailability(0, 0, False)]


def test_stackable_item_fits_in_one_slot():
    result = find_room(make_grid(3, 3), 3, 3, potion(3, 5))
    assert result.stackable is True
    assert result.total_room_to_fill == 3
    assert result.slot_availabilities == [SlotAvailability(0, 3, False)]


def test_large_stack_is_split_over_slots():
    result = find_room(make_grid(3, 3), 3, 3, potion(12, 5))
    amounts = [a.amount_to_fill for a in result.slot_availabilities]
    assert sum(amounts) == 12
    assert all(0 < amount <= 5 for amount in amounts)
    assert result.total_room_to_fill == 12
    assert result.remainder == 0
    indices = [a.index for a in result.slot_availabilities]
    assert len(set(indices)) == len(indices)


def test_not_enough_room_leaves_remainder():
    result = find_room(make_grid(2, 1), 2, 1, potion(12, 5))
    assert result.total_room_to_fill == 2 * 5
    assert result.remainder == 12 - 2 * 5


def test_existing_stack_of_same_type_is_topped_up_first():
    slots = make_grid(3, 1)
    place(slots, 3, potion(4, 5).manifest(), 0, stack=4)
    result = find_room(slots, 3, 1, potion(3, 5))
    first = result.slot_availabilities[0]
    assert first.index == 0
    assert first.item_at_index is True
    assert first.amount_to_fill == 5 - 4
    assert sum(a.amount_to_fill for a in result.slot_availabilities) == 3


def test_full_stack_is_skipped():
    slots = make_grid(3, 1)
    place(slots, 3, potion(5, 5).manifest(), 0, stack=5)
    result = find_room(slots, 3, 1, potion(2, 5))
    assert all(a.index != 0 for a in result.slot_availabilities)
    assert all(a.item_at_index is False for a in result.slot_availabilities)


def test_stack_of_other_type_is_skipped():
    slots = make_grid(2, 1)
    place(slots, 2, potion(1, 5, tag=BLUE_SMALL).manifest(), 0, stack=1)
    result = find_room(slots, 2, 1, potion(2, 5))
    assert [a.index for a in result.slot_availabilities] == [1]


def test_full_grid_has_no_room():
    slots = make_grid(2, 1)
    place(slots, 2, weapon().manifest(), 0)
    place(slots, 2, weapon().manifest(), 1)
    result = find_room(slots, 2, 1, weapon())
    assert result.total_room_to_fill == 0
    assert result.slot_availabilities == []


def test_large_item_goes_where_block_is_free():
    slots = make_grid(3, 3)
    place(slots, 3, weapon().manifest(), 0)
    result = find_room(slots, 3, 3, weapon((2, 2)))
    assert len(result.slot_availabilities) == 1
    index = result.slot_availabilities[0].index
    assert index == 1
    block = list(iter_2d(slots, index, (2, 2), 3))
    assert all(slot.inventory_item is None for slot in block)


def test_hover_out_of_bounds():
    result = check_hover_position(make_grid(3, 3), 3, 3, (2, 2), (2, 2))
    assert result.has_space is False
    assert result.valid_item is None
    assert result.upper_left_index == INDEX_NONE


def test_hover_over_empty_area_has_space():
    result = check_hover_position(make_grid(3, 3), 3, 3, (1, 1), (2, 2))
    assert result.has_space is True
    assert result.valid_item is None


def test_hover_over_single_item_offers_swap():
    slots = make_grid(3, 3)
    item = weapon((2, 1)).manifest()
    place(slots, 3, item, 4, dims=(2, 1))
    result = check_hover_position(slots, 3, 3, (1, 1), (2, 2))
    assert result.has_space is False
    assert result.valid_item is item
    assert result.upper_left_index == 4


def test_hover_over_two_items_offers_nothing():
    slots = make_grid(3, 3)
    place(slots, 3, weapon().manifest(), 0)
    place(slots, 3, weapon().manifest(), 1)
    result = check_hover_position(slots, 3, 3, (0, 0), (2, 2))
    assert result.has_space is False
    assert result.valid_item is None
    assert result.upper_left_index == INDEX_NONE