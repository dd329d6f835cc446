from __future__ import annotations

import logging

from . import cells
from .geometry import GeoPoint
from .projection import contains

logger = logging.getLogger(__name__)


class GeometryResolutionError(RuntimeError):
    """No cell among the H3 candidate and its neighbours contains the point."""

    def __init__(self, point, resolution, candidate, tried):
        self.point = point
        self.resolution = resolution
        self.candidate = candidate
        self.tried = tried
        super().__init__(
            f"could not find the cell containing {point} at resolution {resolution}: "
            f"candidate {cells.to_string(candidate)} and neighbours "
            f"{[cells.to_string(c) for c in tried[1:]]} all miss it"
        )


def resolve(point: GeoPoint, resolution: int) -> int:
    """
    Return the cell at `resolution` whose polygon contains `point`.

    H3's own lookup works on the sphere while cells are tested as planar polygons,
    so close to an edge it can return a cell whose polygon misses the point. The
    H3 answer is then only a candidate: if its polygon does not contain the
    point, its neighbours are tried in ascending id order and the first one that
    does wins.
    """
    cells.check_resolution(resolution)
    candidate = cells.latlng_to_cell(point.lat, point.lon, resolution)
    if contains(candidate, point):
        return candidate

    tried = [candidate]
    for neighbor in cells.ring_neighbors(candidate):
        tried.append(neighbor)
        if contains(neighbor, point):
            logger.debug(
                "%s resolved to neighbour %s of H3 candidate %s at resolution %d",
                point,
                cells.to_string(neighbor),
                cells.to_string(candidate),
                resolution,
            )
            return neighbor

    error = GeometryResolutionError(point, resolution, candidate, tried)
    logger.error("%s", error)
    raise error


def cell_key(point: GeoPoint, resolution: int) -> str:
    """Bucket key of the cell containing `point`."""
    return cells.to_string(resolve(point, resolution))
