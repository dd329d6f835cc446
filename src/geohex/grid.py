import geopandas as gpd
import pandas as pd

from .cells import to_string
from .geometry import GeoBoundingBox, GeoPoint
from .projection import project
from .relate import as_shape
from .resolve import cell_key
from .tiler import BoundedTiler

DEFAULT_CRS = "EPSG:4326"


def to_polygon(cell):
    """Convert an H3 cell to a Shapely (multi)polygon."""
    return project(cell)


def grid(area, resolution=9, bbox=None):
    """
    Build the GeoDataFrame of the cells at `resolution` relating to `area`, indexed
    by their key. Only cells intersecting `bbox` are kept, which defaults to the
    bounds of `area`.
    """
    area = as_shape(area)
    if bbox is None:
        bbox = GeoBoundingBox.from_bounds(area.bounds)
    hexs = BoundedTiler(resolution, bbox).cells(shape=area)
    grid = gpd.GeoDataFrame(
        geometry=list(map(to_polygon, hexs)),
        index=pd.Index(list(map(to_string, hexs)), name="cell_id"),
        crs=DEFAULT_CRS,
    )
    return grid


def assign_cells(points: gpd.GeoSeries, resolution: int) -> pd.Series:
    """Get the key of the cell containing each of `points`, given in lon/lat."""
    keys = [cell_key(GeoPoint(p.y, p.x), resolution) for p in points]
    return pd.Series(keys, index=points.index, name="cell_id")
