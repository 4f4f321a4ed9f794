"""
Plate geometry for the supported multi-well plate formats.
"""
from typing import NamedTuple

from ...errors import UnsupportedPlateError


class PlateShape(NamedTuple):
    """Fixed geometry of a plate format plus how its wells are drawn."""
    well_count: int
    n_rows: int
    n_cols: int
    marker_size: int
    width: int
    height: int


# Real layouts are not always the squarest factorisation (384 is 16x24),
# so the table is the source of truth.
PLATE_SHAPES = {
    6: PlateShape(6, 2, 3, 60, 500, 380),
    12: PlateShape(12, 3, 4, 48, 550, 420),
    24: PlateShape(24, 4, 6, 36, 620, 440),
    48: PlateShape(48, 6, 8, 26, 680, 480),
    96: PlateShape(96, 8, 12, 20, 760, 480),
    384: PlateShape(384, 16, 24, 10, 900, 560),
    1536: PlateShape(1536, 32, 48, 5, 1100, 700),
}

SUPPORTED_PLATES = tuple(sorted(PLATE_SHAPES))


def shape_for(well_count):
    """
    Look up the plate shape for a total well count.

    Args:
        well_count (int or PlateShape): Number of wells on the plate. A
            PlateShape is returned unchanged if it is one of PLATE_SHAPES.

    Returns:
        PlateShape: Geometry of the plate.

    Raises:
        UnsupportedPlateError: If the count is not a supported format.
    """
    if isinstance(well_count, PlateShape):
        if PLATE_SHAPES.get(well_count.well_count) != well_count:
            raise UnsupportedPlateError(well_count, SUPPORTED_PLATES)
        return well_count
    # bool is an int subclass, True would otherwise hash like 1
    if isinstance(well_count, bool):
        raise UnsupportedPlateError(well_count, SUPPORTED_PLATES)
    try:
        shape = PLATE_SHAPES.get(well_count)
    except TypeError:
        shape = None
    if shape is None:
        raise UnsupportedPlateError(well_count, SUPPORTED_PLATES)
    return shape


def dimensions(shape):
    """Return (n_rows, n_cols) for a plate shape or well count."""
    shape = shape_for(shape)
    return shape.n_rows, shape.n_cols
