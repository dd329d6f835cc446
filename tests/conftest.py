import pytest
from h3.api import basic_int as h3


def _straddles_antimeridian(cell):
    lngs = [lng for _, lng in h3.cell_to_boundary(cell)]
    return min(lngs) < -170 and max(lngs) > 170


@pytest.fixture
def paris_cell():
    return h3.latlng_to_cell(48.8566, 2.3522, 5)


@pytest.fixture
def antimeridian_cell():
    """A resolution 2 cell on the equator cut in two by the antimeridian."""
    center = h3.latlng_to_cell(0.0, 180.0, 2)
    return next(c for c in sorted(h3.grid_disk(center, 2)) if _straddles_antimeridian(c))


@pytest.fixture
def north_pole_cell():
    return h3.latlng_to_cell(90.0, 0.0, 2)


@pytest.fixture
def south_pole_cell():
    return h3.latlng_to_cell(-90.0, 0.0, 2)


def _wraps(cell):
    lngs = [lng for _, lng in h3.cell_to_boundary(cell)]
    return any(abs(a - b) > 180 for a, b in zip(lngs, lngs[1:] + lngs[:1]))


@pytest.fixture(scope="session")
def wrapping_cells():
    """Cells at a resolution whose boundary crosses the antimeridian or goes round a pole."""
    found = {}

    def at_resolution(resolution):
        if resolution not in found:
            cells = sorted(h3.get_res0_cells())
            for res in range(1, resolution + 1):
                cells = [child for cell in cells for child in h3.cell_to_children(cell, res)]
            found[resolution] = [c for c in cells if _wraps(c)]
        return found[resolution]

    return at_resolution
