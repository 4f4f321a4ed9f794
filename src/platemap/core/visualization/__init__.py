"""
Visualization package for platemaps.
"""
from .palette import CATEGORY_PALETTE_INDEX, assign_colors, palette_colors
from .plots import create_platemap_figure, hit_map

__all__ = ['CATEGORY_PALETTE_INDEX', 'assign_colors', 'palette_colors',
           'create_platemap_figure', 'hit_map']
