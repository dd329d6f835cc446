from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry import LineString, Point, box


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self):
        if not -90 <= self.lat <= 90:
            raise ValueError(f"latitude must be within [-90, 90], got {self.lat}")
        if not -180 <= self.lon <= 180:
            raise ValueError(f"longitude must be within [-180, 180], got {self.lon}")

    def to_shapely(self) -> Point:
        # Planar geometries are all in (x, y) = (lon, lat) order.
        return Point(self.lon, self.lat)


@dataclass(frozen=True)
class GeoBoundingBox:
    """
    Axis-aligned box in degrees, in the same [min_lon, min_lat, max_lon, max_lat]
    order as shapely's `bounds`. A `min_lon` greater than `max_lon` describes a box
    crossing the antimeridian.
    """
    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    def __post_init__(self):
        for lon in (self.min_lon, self.max_lon):
            if not -180 <= lon <= 180:
                raise ValueError(f"longitude must be within [-180, 180], got {lon}")
        for lat in (self.min_lat, self.max_lat):
            if not -90 <= lat <= 90:
                raise ValueError(f"latitude must be within [-90, 90], got {lat}")
        if self.min_lat > self.max_lat:
            raise ValueError(
                f"min_lat ({self.min_lat}) is greater than max_lat ({self.max_lat})"
            )

    @classmethod
    def from_bounds(cls, bounds):
        min_lon, min_lat, max_lon, max_lat = bounds
        return cls(float(min_lon), float(min_lat), float(max_lon), float(max_lat))

    @property
    def crosses_antimeridian(self) -> bool:
        return self.min_lon > self.max_lon

    def split(self):
        """
        Return the box as a tuple of non-wrapping shapely geometries: one box, or
        two if it crosses the antimeridian. A wrapping box starting at 180 or ending
        at -180 yields a zero-width piece lying on the antimeridian, which the other
        piece already covers, so it is left out. The box from 180 to -180 is only
        the antimeridian itself, kept as that segment on both of its sides.
        """
        if not self.crosses_antimeridian:
            return (box(self.min_lon, self.min_lat, self.max_lon, self.max_lat),)
        pieces = []
        for west, east in ((self.min_lon, 180.0), (-180.0, self.max_lon)):
            if west < east:
                pieces.append(box(west, self.min_lat, east, self.max_lat))
        if not pieces:
            pieces = [self._meridian(180.0), self._meridian(-180.0)]
        return tuple(pieces)

    def _meridian(self, lon):
        if self.min_lat == self.max_lat:
            return Point(lon, self.min_lat)
        return LineString([(lon, self.min_lat), (lon, self.max_lat)])
