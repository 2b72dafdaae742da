"""Mapping cursor positions onto grid tiles."""

from __future__ import annotations

import logging
import math

from gridinventory.types import TileQuadrant

log = logging.getLogger(__name__)


def calculate_starting_coordinate(
    coordinate: tuple[int, int], dimensions: tuple[int, int], quadrant: TileQuadrant
) -> tuple[int, int]:
    """Return the top-left tile for an item of dimensions centred on coordinate.

    Even-sized items shift right or down by one when the cursor is in the
    right or bottom half of the tile. An invalid quadrant gives (-1, -1).
    """
    x, y = coordinate
    width, height = dimensions
    even_width = 1 if width % 2 == 0 else 0
    even_height = 1 if height % 2 == 0 else 0
    base_x = x - width // 2
    base_y = y - height // 2

    if quadrant is TileQuadrant.TOP_LEFT:
        return base_x, base_y
    if quadrant is TileQuadrant.TOP_RIGHT:
        return base_x + even_width, base_y
    if quadrant is TileQuadrant.BOTTOM_LEFT:
        return base_x, base_y + even_height
    if quadrant is TileQuadrant.BOTTOM_RIGHT:
        return base_x + even_width, base_y + even_height
    log.error("Invalid quadrant")
    return -1, -1


def calculate_hovered_coordinates(
    canvas_position: tuple[float, float],
    mouse_position: tuple[float, float],
    tile_size: float,
) -> tuple[int, int]:
    """Return the (column, row) of the tile under the mouse."""
    cx, cy = canvas_position
    mx, my = mouse_position
    return math.floor((mx - cx) / tile_size), math.floor((my - cy) / tile_size)


def calculate_tile_quadrant(
    canvas_position: tuple[float, float],
    mouse_position: tuple[float, float],
    tile_size: float,
) -> TileQuadrant:
    """Return which quarter of its tile the mouse is over."""
    cx, cy = canvas_position
    mx, my = mouse_position
    local_x = math.fmod(mx - cx, tile_size)
    local_y = math.fmod(my - cy, tile_size)
    is_top = local_y < tile_size / 2
    is_left = local_x < tile_size / 2
    if is_top:
        return TileQuadrant.TOP_LEFT if is_left else TileQuadrant.TOP_RIGHT
    return TileQuadrant.BOTTOM_LEFT if is_left else TileQuadrant.BOTTOM_RIGHT