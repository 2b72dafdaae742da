"""Index and coordinate arithmetic for row-major grids."""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, value - quotient * divisor


def index_from_position(position: tuple[int, int], columns: int) -> int:
    """Return the row-major index of an (x, y) position."""
    x, y = position
    return x + y * columns


def position_from_index(index: int, columns: int) -> tuple[int, int]:
    """Return the (x, y) position of a row-major index, truncating towards zero."""
    row, column = _trunc_divmod(index, columns)
    return column, row


def is_within_bounds(
    boundary_pos: tuple[float, float],
    widget_size: tuple[float, float],
    mouse_pos: tuple[float, float],
) -> bool:
    """True when mouse_pos lies inside the rectangle, edges included."""
    bx, by = boundary_pos
    width, height = widget_size
    mx, my = mouse_pos
    return bx <= mx <= bx + width and by <= my <= by + height


def iter_2d(
    items: Sequence[T], index: int, range_2d: tuple[int, int], columns: int
) -> Iterator[T]:
    """Yield the items of a range_2d block whose top-left is at index, row by row.

    Tiles whose index falls outside items are skipped.
    """
    width, height = range_2d
    start_x, start_y = position_from_index(index, columns)
    for dy in range(height):
        for dx in range(width):
            tile_index = index_from_position((start_x + dx, start_y + dy), columns)
            if 0 <= tile_index < len(items):
                yield items[tile_index]