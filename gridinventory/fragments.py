"""Fragments: the pieces of data that describe an item."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gridinventory.tags import GameplayTag


@dataclass
class ItemFragment:
    """Base fragment, identified by a tag."""

    fragment_tag: GameplayTag = GameplayTag.EMPTY


@dataclass
class GridFragment(ItemFragment):
    """Size in tiles an item takes on the grid, and its icon padding."""

    grid_size: tuple[int, int] = (1, 1)
    grid_padding: float = 0.0


@dataclass
class ImageFragment(ItemFragment):
    """The icon drawn for an item."""

    icon: Any = None
    icon_dimensions: tuple[float, float] = (44.0, 44.0)


@dataclass
class StackableFragment(ItemFragment):
    """Stacking limits and the current stack of an item."""

    max_stack_size: int = 1
    stack_count: int = 1