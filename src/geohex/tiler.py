from __future__ import annotations

import logging
from dataclasses import dataclass, field

from . import cells
from .geometry import GeoBoundingBox
from .projection import project, project_disk
from .relate import Relation, as_shape, relate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundedTiler:
    """
    Restricts the cells at `resolution` to the ones intersecting `bbox`. Cells
    merely touching the box count as intersecting it.
    """
    resolution: int
    bbox: GeoBoundingBox
    _boxes: tuple = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        cells.check_resolution(self.resolution)
        # Frozen dataclass, so going through object to set the derived field.
        object.__setattr__(self, "_boxes", self.bbox.split())

    def _intersects(self, polygon) -> bool:
        return any(polygon.intersects(b) for b in self._boxes)

    def intersects_bounds(self, cell: int) -> bool:
        return self._intersects(project(cell))

    def _accepts(self, polygon, shape) -> bool:
        if not self._intersects(polygon):
            return False
        return shape is None or relate(shape, polygon) is not Relation.DISJOINT

    def cells(self, shape=None) -> list[int]:
        """
        List all the cells at `resolution` intersecting the box and, if `shape` is
        given, not disjoint from it. Walks down the hierarchy from resolution 0,
        going into a cell's children only if the region covered by the cell and
        its neighbours passes the same test.
        """
        if shape is not None:
            shape = as_shape(shape)
        found = []
        self._visit(cells.res0_cells(), 0, shape, found)
        logger.debug(
            "%d cells at resolution %d selected within %s",
            len(found),
            self.resolution,
            self.bbox,
        )
        return sorted(found)

    def _visit(self, candidates, res, shape, found):
        for cell in candidates:
            if res == self.resolution:
                if self._accepts(project(cell), shape):
                    found.append(cell)
            elif self._accepts(project_disk(cell), shape):
                self._visit(cells.children(cell), res + 1, shape, found)
