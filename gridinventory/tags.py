"""Gameplay tags naming item kinds and item fragments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_REGISTRY: dict[str, str] = {}


@dataclass(frozen=True)
class GameplayTag:
    """A dot-separated hierarchical name; the empty name is the invalid tag."""

    name: str = ""

    EMPTY: ClassVar[GameplayTag]

    def is_valid(self) -> bool:
        """True when the tag names something."""
        return bool(self.name)

    def matches_tag_exact(self, other: GameplayTag) -> bool:
        """True when both tags are valid and name exactly the same node."""
        return other.is_valid() and self.name == other.name

    def __str__(self) -> str:
        return self.name


GameplayTag.EMPTY = GameplayTag()


def _define(name: str, comment: str) -> GameplayTag:
    if name in _REGISTRY:
        raise ValueError(f"gameplay tag {name!r} is already defined")
    _REGISTRY[name] = comment
    return GameplayTag(name)


def registered_tags() -> dict[str, str]:
    """Return every defined tag name mapped to its comment, in definition order."""
    return dict(_REGISTRY)


class ItemTags:
    """Tags naming the kinds of items the inventory knows."""

    class Equipment:
        class Weapons:
            AXE = _define("GameItems.Equipment.Weapons.Axe", "Axe")
            SWORD = _define("GameItems.Equipment.Weapons.Sword", "Sword")

        class Cloaks:
            RED_CLOAK = _define("GameItems.Equipment.Cloaks.RedCloak", "RedCloak")

        class Masks:
            STEEL_MASK = _define("GameItems.Equipment.Masks.SteelMask", "SteelMask")

    class Consumables:
        class Potions:
            class Red:
                SMALL = _define("GameItems.Consumables.Potions.Red.Small", "Small Red Potion")
                LARGE = _define("GameItems.Consumables.Potions.Red.Large", "Large Red Potion")

            class Blue:
                SMALL = _define("GameItems.Consumables.Potions.Blue.Small", "Small Blue Potion")
                LARGE = _define("GameItems.Consumables.Potions.Blue.Large", "Large Blue Potion")

    class Craftables:
        FIRE_FERN_FRUIT = _define("GameItems.Craftables.FireFernFruit", "FireFernFruit")
        LUMIN_DAISY = _define("GameItems.Craftables.LuminDaisy", "LuminDaisy")
        SCORCH_PETAL_BLOSSOM = _define(
            "GameItems.Craftables.ScorchPetalBlossom", "ScorchPetalBlossom"
        )


class FragmentTags:
    """Tags identifying the fragments that make up an item manifest."""

    GRID_FRAGMENT = _define("FragmentTags.GridFragment", "GridFragment")
    ICON_FRAGMENT = _define("FragmentTags.IconFragment", "IconFragment")
    STACKABLE_FRAGMENT = _define("FragmentTags.StackableFragment", "StackableFragment")