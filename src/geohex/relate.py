from __future__ import annotations

from enum import Enum

from shapely.geometry import shape as to_shapely
from shapely.geometry.base import BaseGeometry

from .projection import project


class Relation(Enum):
    """How a cell relates to a shape, seen from the cell."""

    DISJOINT = "disjoint"
    INTERSECTS = "intersects"
    # The cell lies within the shape.
    WITHIN = "within"
    # The cell contains the shape.
    CONTAINS = "contains"


def as_shape(value) -> BaseGeometry:
    """Coerce a Shapely geometry, a `__geo_interface__` object or a GeoJSON dict."""
    if isinstance(value, BaseGeometry):
        return value
    if hasattr(value, "__geo_interface__") or isinstance(value, dict):
        return to_shapely(value)
    raise TypeError(f"cannot interpret {type(value).__name__} as a geometry")


def relate(shape, cell_polygon) -> Relation:
    shape = as_shape(shape)
    if not cell_polygon.intersects(shape):
        return Relation.DISJOINT
    if cell_polygon.covers(shape):
        return Relation.CONTAINS
    if shape.covers(cell_polygon):
        return Relation.WITHIN
    return Relation.INTERSECTS


def relate_cell(shape, cell: int) -> Relation:
    return relate(shape, project(cell))


def is_candidate(shape, cell: int) -> bool:
    """Whether `shape` has to be counted in the bucket of `cell`."""
    return relate_cell(shape, cell) is not Relation.DISJOINT
