# gridinventory

A model of a grid-based ("spatial") inventory like the ones in action RPGs.
Items take up rectangular areas of tiles, and stackable items merge into the
stacks already on the grid. Each category (equipment, consumables, craftables)
has its own grid.

## Concepts

- **Tags** (`gridinventory.tags`): `GameplayTag` values name item types, such as
  `ItemTags.Consumables.Potions.Red.Small`. They also name fragment kinds, such as
  `FragmentTags.GRID_FRAGMENT`. `registered_tags()` returns every defined tag
  mapped to its comment.
- **Fragments** (`gridinventory.fragments`): `GridFragment` holds the footprint
  and padding, `ImageFragment` holds the icon, and `StackableFragment` holds the
  maximum stack size and the current count.
- **Manifests** (`gridinventory.manifest`): an `ItemManifest` holds an item's
  fragments, its `ItemCategory` and its type tag. `ItemManifest.manifest()`
  creates an `InventoryItem` that has its own copy of the manifest.
  `get_fragment(item, fragment_type, tag)` looks up a tagged fragment.
- **Grids** (`gridinventory.grid`): an `InventoryGrid(rows, columns, tile_size,
  item_category)` is a list of `GridSlot`s stored row by row.
  `has_room_for_item()` takes an item component, an item or a manifest. It
  returns a `SlotAvailabilityResult` that lists where the item, or its stacks,
  would go. The search itself is in `gridinventory.placement.find_room`.
- **Menus** (`gridinventory.spatial`): a `SpatialInventory` holds one grid per
  category and shows one of them at a time. It passes each room query to the
  grid for the item's category.
- **Component** (`gridinventory.component`): an `InventoryComponent` connects an
  `InventoryList` to a menu. It raises `Event`s (`on_item_added`,
  `on_item_removed`, `on_stack_changed`, `no_room_in_inventory`).
- **HUD** (`gridinventory.hud`): `HUDWidget.attach(component)` shows
  "No room in Inventory." through an `InfoMessage`. The message hides once its
  lifetime has passed, which `tick()` counts down.

## Example

```python
from types import SimpleNamespace

from gridinventory.component import InventoryComponent
from gridinventory.fragments import GridFragment, ImageFragment, StackableFragment
from gridinventory.grid import InventoryGrid
from gridinventory.item_component import ItemComponent
from gridinventory.manifest import ItemManifest
from gridinventory.spatial import SpatialInventory
from gridinventory.tags import FragmentTags, ItemTags
from gridinventory.types import ItemCategory

potion = ItemManifest(
    fragments=[
        GridFragment(fragment_tag=FragmentTags.GRID_FRAGMENT),
        ImageFragment(fragment_tag=FragmentTags.ICON_FRAGMENT),
        StackableFragment(
            fragment_tag=FragmentTags.STACKABLE_FRAGMENT,
            max_stack_size=10,
            stack_count=3,
        ),
    ],
    item_category=ItemCategory.CONSUMABLE,
    item_type=ItemTags.Consumables.Potions.Red.Small,
)

controller = SimpleNamespace(
    is_local_controller=True, input_mode=None, show_mouse_cursor=False
)


def build_menu(component):
    return SpatialInventory(
        InventoryGrid(4, 6, 64.0, ItemCategory.EQUIPABLE),
        InventoryGrid(4, 6, 64.0, ItemCategory.CONSUMABLE),
        InventoryGrid(4, 6, 64.0, ItemCategory.CRAFTABLE),
        inventory_component=component,
    )


inventory = InventoryComponent(owning_controller=controller, menu_factory=build_menu)
inventory.construct_inventory()
inventory.no_room_in_inventory.add(lambda: print("No room in Inventory."))

pickup = ItemComponent(item_manifest=potion)
inventory.try_add_item(pickup)
print(pickup.destroyed)                                  # True
print(inventory.inventory_list.all_items()[0].total_stack_count)  # 3
```

`gridinventory.gridmath` has the grid coordinate helpers
(`index_from_position`, `position_from_index`, `is_within_bounds`, `iter_2d`).
`gridinventory.tiles` works out the tile and quadrant under a cursor position.

## What this package does not do

The package is a model only. It draws nothing and reads no input. Canvas and
mouse positions go into `InventoryGrid.tick()` as plain numbers. Icons and
brushes are stored values and are never rendered. No data is sent over a
network: `NetMode` only decides whether a new item is announced locally.
Inventories are not saved to storage. Picking an item up puts it on the cursor
as a `HoverItem`, but the package cannot drop or swap it back onto the grid.
There is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```