"""
Planar (lon, lat) polygons for H3 cells.

H3 gives the boundary of a cell as a ring of vertices on the sphere. Drawn in
degrees this ring breaks down in two cases: when it crosses the antimeridian,
the longitudes jump by 360, and when the cell contains a pole, the ring winds
all the way around it without enclosing it in the plane. In both cases the ring
is first unwrapped into continuous longitudes, closed through the pole if
needed, and then cut into pieces lying within [-180, 180].
"""
from __future__ import annotations

from functools import lru_cache

import numpy as np
import shapely
import shapely.affinity
from shapely.geometry import MultiPolygon, Polygon, box

from . import cells

# Distance in degrees below which a point counts as lying on a cell. Absorbs
# the last-bit differences between the copies of a vertex that H3 computes for
# each of the cells sharing it.
TOLERANCE = 1e-9

_WINDOW_SHIFTS = (-360.0, 0.0, 360.0)


def _split_at_antimeridian(polygon: Polygon):
    pieces = []
    for shift in _WINDOW_SHIFTS:
        window = box(-180.0 - shift, -90.0, 180.0 - shift, 90.0)
        clipped = polygon.intersection(window)
        if clipped.is_empty:
            continue
        clipped = shapely.affinity.translate(clipped, xoff=shift)
        # Intersection can also return the lines and points where the polygon
        # merely touches the window, only keep actual areas.
        pieces.extend(
            part
            for part in shapely.get_parts(clipped)
            if part.geom_type == "Polygon" and part.area > 0
        )
    if len(pieces) == 1:
        return pieces[0]
    return MultiPolygon(pieces)


def _unwrapped_ring(lats: np.ndarray, lngs: np.ndarray) -> Polygon:
    lngs = np.unwrap(lngs, period=360)
    # Longitude travelled along the closing edge, from the last vertex back to
    # the first one.
    closing = (lngs[0] - lngs[-1] + 180) % 360 - 180
    winding = lngs[-1] + closing - lngs[0]
    coords = list(zip(lngs, lats))
    if abs(winding) > 180:
        # The ring goes once around a pole: close it along the pole's parallel.
        pole_lat = 90.0 if lats.mean() > 0 else -90.0
        end_lng = lngs[0] + winding
        coords += [(end_lng, lats[0]), (end_lng, pole_lat), (lngs[0], pole_lat)]
    return Polygon(coords)


def _snap_to_vertices(geometry, lats: np.ndarray, lngs: np.ndarray):
    """
    Put back H3's own vertex coordinates where unwrapping and shifting by 360
    moved them by a few ulps, so that a point taken from a vertex lies exactly on
    the polygon.
    """
    vertices = np.column_stack([lngs, lats])

    def snap(coords):
        coords = coords.copy()
        for vertex in vertices:
            close = np.all(np.abs(coords - vertex) <= TOLERANCE, axis=1)
            coords[close] = vertex
        return coords

    return shapely.transform(geometry, snap)


@lru_cache(maxsize=4096)
def project(cell: int):
    """
    Convert an H3 cell to a Shapely polygon in (lon, lat) degrees.

    Returns a `Polygon`, or a `MultiPolygon` of simple polygons if the cell spans
    the antimeridian or contains a pole.
    """
    vertices = np.array(cells.boundary(cell), dtype=float)
    lats, lngs = vertices[:, 0], vertices[:, 1]
    if np.all(np.abs(np.diff(np.append(lngs, lngs[0]))) <= 180):
        # Built from H3's own coordinates, so that a point taken from a vertex
        # lies exactly on the polygon.
        return Polygon(list(zip(lngs, lats)))
    pieces = _split_at_antimeridian(_unwrapped_ring(lats, lngs))
    return _snap_to_vertices(pieces, lats, lngs)


@lru_cache(maxsize=1024)
def project_disk(cell: int):
    """
    Union of the polygons of `cell` and its neighbours. H3 children stick out a
    little from their parent, but never beyond this region.
    """
    disk = [cell, *cells.ring_neighbors(cell)]
    return shapely.union_all([project(c) for c in disk])


def contains(cell: int, point) -> bool:
    """Boundary-inclusive test of whether `point` (a `GeoPoint`) lies in `cell`."""
    return shapely.dwithin(project(cell), point.to_shapely(), TOLERANCE)
