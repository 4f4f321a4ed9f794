"""
Core functionality package for platemaps.
"""
from .data import build_platemap, parse_well, shape_for
from .analysis import classify
from .visualization import hit_map

__all__ = ['build_platemap', 'parse_well', 'shape_for', 'classify', 'hit_map']
