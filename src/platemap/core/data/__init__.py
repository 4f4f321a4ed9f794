"""
Data handling package for platemaps.
"""
from .geometry import PlateShape, PLATE_SHAPES, SUPPORTED_PLATES, shape_for, dimensions
from .wells import parse_well, well_label, num_to_well, row_index, row_letters
from .models import WellRecord, ClassifiedRecord, build_platemap, platemap_table

__all__ = ['PlateShape', 'PLATE_SHAPES', 'SUPPORTED_PLATES', 'shape_for', 'dimensions',
           'parse_well', 'well_label', 'num_to_well', 'row_index', 'row_letters',
           'WellRecord', 'ClassifiedRecord', 'build_platemap', 'platemap_table']
