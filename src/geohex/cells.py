"""Thin layer over the H3 index, with cells held as 64-bit integers."""
from __future__ import annotations

from h3.api import basic_int as h3

MAX_RES = 15


class InvalidCellError(ValueError):
    pass


def check_resolution(resolution) -> int:
    if isinstance(resolution, bool) or not isinstance(resolution, int):
        raise ValueError(f"resolution must be an integer, got {resolution!r}")
    if not 0 <= resolution <= MAX_RES:
        raise ValueError(
            f"resolution must be between 0 and {MAX_RES}, got {resolution}"
        )
    return resolution


def check_cell(cell) -> int:
    if (
        isinstance(cell, bool)
        or not isinstance(cell, int)
        or not 0 <= cell < 2**64
        or not h3.is_valid_cell(cell)
    ):
        raise InvalidCellError(f"{cell!r} is not a valid H3 cell")
    return cell


def latlng_to_cell(lat: float, lng: float, resolution: int) -> int:
    """Raw H3 lookup, which may miss the true cell close to its boundary."""
    return h3.latlng_to_cell(lat, lng, check_resolution(resolution))


def ring_neighbors(cell: int) -> list[int]:
    """Cells adjacent to `cell`, in ascending id order.

    Six for hexagons, five for pentagons. Built from the disk rather than the
    ring, so pentagons need no special casing.
    """
    return sorted(set(h3.grid_disk(check_cell(cell), 1)) - {cell})


def resolution_of(cell: int) -> int:
    return h3.get_resolution(check_cell(cell))


def res0_cells() -> list[int]:
    return sorted(h3.get_res0_cells())


def children(cell: int) -> list[int]:
    """Direct children of `cell`, one resolution finer."""
    res = resolution_of(cell)
    if res == MAX_RES:
        raise ValueError(f"cell {to_string(cell)} is already at the finest resolution")
    return sorted(h3.cell_to_children(cell, res + 1))


def boundary(cell: int) -> tuple[tuple[float, float], ...]:
    """Boundary vertices of `cell` as (lat, lng) pairs, not closed."""
    return tuple(h3.cell_to_boundary(check_cell(cell)))


def to_string(cell: int) -> str:
    return h3.int_to_str(check_cell(cell))


def from_string(key: str) -> int:
    try:
        cell = h3.str_to_int(key)
    except (TypeError, ValueError) as e:
        raise InvalidCellError(f"{key!r} is not a valid H3 cell key") from e
    return check_cell(cell)
