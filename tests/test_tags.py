from gridinventory.tags import FragmentTags, GameplayTag, ItemTags, registered_tags


def test_item_tag_names_follow_hierarchy():
    tags = registered_tags()
    axe = ItemTags.Equipment.Weapons.AXE
    large_blue = ItemTags.Consumables.Potions.Blue.LARGE
    assert axe.name == "GameItems.Equipment.Weapons.Axe"
    assert large_blue.name == "GameItems.Consumables.Potions.Blue.Large"
    assert tags[axe.name] == "Axe"
    assert tags[large_blue.name] == "Large Blue Potion"
    assert axe.matches_tag_exact(GameplayTag("GameItems.Equipment.Weapons.Axe"))


def test_fragment_tag_names():
    tags = registered_tags()
    assert FragmentTags.GRID_FRAGMENT.name == "FragmentTags.GridFragment"
    assert FragmentTags.STACKABLE_FRAGMENT.name == "FragmentTags.StackableFragment"
    assert tags[FragmentTags.GRID_FRAGMENT.name] == "GridFragment"
    assert tags[FragmentTags.STACKABLE_FRAGMENT.name] == "StackableFragment"
    assert FragmentTags.GRID_FRAGMENT.matches_tag_exact(
        GameplayTag("FragmentTags.GridFragment")
    )


def test_registry_holds_comments():
    tags = registered_tags()
    assert tags["GameItems.Consumables.Potions.Red.Small"] == "Small Red Potion"
    assert tags[FragmentTags.ICON_FRAGMENT.name] == "IconFragment"


def test_registry_is_a_copy():
    tags = registered_tags()
    tags.clear()
    assert ItemTags.Craftables.LUMIN_DAISY.name in registered_tags()


def test_empty_tag_is_invalid():
    assert not GameplayTag.EMPTY.is_valid()
    assert ItemTags.Equipment.Masks.STEEL_MASK.is_valid()


def test_matches_tag_exact_same_name():
    tag = ItemTags.Equipment.Weapons.SWORD
    assert tag.matches_tag_exact(GameplayTag(tag.name))


def test_matches_tag_exact_rejects_parent_and_sibling():
    axe = ItemTags.Equipment.Weapons.AXE
    assert not axe.matches_tag_exact(GameplayTag("GameItems.Equipment.Weapons"))
    assert not axe.matches_tag_exact(ItemTags.Equipment.Weapons.SWORD)


def test_empty_tags_never_match():
    assert not GameplayTag.EMPTY.matches_tag_exact(GameplayTag.EMPTY)
    assert not ItemTags.Equipment.Weapons.AXE.matches_tag_exact(GameplayTag.EMPTY)


def test_same_leaf_in_different_branches_differ():
    red_small = ItemTags.Consumables.Potions.Red.SMALL
    blue_small = ItemTags.Consumables.Potions.Blue.SMALL
    assert not red_small.matches_tag_exact(blue_small)
    assert red_small.matches_tag_exact(GameplayTag("GameItems.Consumables.Potions.Red.Small"))