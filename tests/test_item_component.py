from gridinventory.item_component import ItemComponent
from gridinventory.manifest import ItemManifest
from gridinventory.tags import ItemTags
from gridinventory.types import ItemCategory


def test_default_pickup_message():
    assert ItemComponent().pickup_message == "E - Pickup"


def test_new_component_is_not_destroyed():
    assert ItemComponent().destroyed is False


def test_picked_up_notifies_and_destroys():
    component = ItemComponent()
    calls = []
    component.on_picked_up.add(lambda: calls.append("picked"))
    component.picked_up()
    assert calls == ["picked"]
    assert component.destroyed is True


def test_manifest_is_kept():
    manifest = ItemManifest(
        item_category=ItemCategory.EQUIPABLE, item_type=ItemTags.Equipment.Weapons.AXE
    )
    component = ItemComponent(item_manifest=manifest)
    assert component.item_manifest.item_type == ItemTags.Equipment.Weapons.AXE
    assert component.item_manifest.item_category is ItemCategory.EQUIPABLE