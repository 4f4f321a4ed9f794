"""
Hit platemaps for multi-well plates (6 to 1536 wells).
"""
from .config import Config
from .core.analysis import classify, classify_value, scale_values
from .core.data import (
    PLATE_SHAPES,
    SUPPORTED_PLATES,
    PlateShape,
    build_platemap,
    dimensions,
    num_to_well,
    parse_well,
    platemap_table,
    shape_for,
    well_label,
)
from .core.visualization import assign_colors, create_platemap_figure, hit_map, palette_colors
from .errors import (
    LengthMismatch,
    MalformedLabel,
    OutOfRange,
    PlatemapError,
    UnknownPalette,
    UnsupportedPlateError,
)
from .utils import setup_logging

__version__ = "1.0.0"

__all__ = [
    'Config', 'setup_logging',
    'classify', 'classify_value', 'scale_values',
    'PLATE_SHAPES', 'SUPPORTED_PLATES', 'PlateShape', 'build_platemap', 'dimensions',
    'num_to_well', 'parse_well', 'platemap_table', 'shape_for', 'well_label',
    'assign_colors', 'create_platemap_figure', 'hit_map', 'palette_colors',
    'LengthMismatch', 'MalformedLabel', 'OutOfRange', 'PlatemapError',
    'UnknownPalette', 'UnsupportedPlateError',
]
