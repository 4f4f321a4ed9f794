"""
Analysis package for platemaps.
"""
from .classifier import HIT, NEG_HIT, NULL, UNDEFINED, classify, classify_value, scale_values

__all__ = ['HIT', 'NEG_HIT', 'NULL', 'UNDEFINED', 'classify', 'classify_value', 'scale_values']
