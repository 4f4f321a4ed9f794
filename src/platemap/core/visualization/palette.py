"""
Module for resolving named palettes into colours for the hit categories.
"""
import numpy as np
import plotly.colors

from ...errors import UnknownPalette
from ..analysis.classifier import HIT, NULL, NEG_HIT, UNDEFINED

DEFAULT_PALETTE = "Spectral"

# Position of each category in a 3-colour palette
CATEGORY_PALETTE_INDEX = {HIT: 0, NULL: 1, NEG_HIT: 2}

UNDEFINED_COLOR = "#7F7F7F"

_PALETTE_MODULES = (
    plotly.colors.qualitative,
    plotly.colors.diverging,
    plotly.colors.sequential,
    plotly.colors.cyclical,
)


def _lookup(name):
    """Find a named colour list and whether it is qualitative."""
    wanted = name.lower()
    for module in _PALETTE_MODULES:
        for attr in dir(module):
            if attr.startswith('_') or attr.lower() != wanted:
                continue
            colors = getattr(module, attr)
            if isinstance(colors, list) and colors:
                return colors, module is plotly.colors.qualitative
    return None, False


def palette_colors(n, name=DEFAULT_PALETTE):
    """
    Draw n colours from a named plotly palette.

    Qualitative palettes give their first n colours. Continuous palettes
    are sampled evenly between 15% and 85% of their length, so light ends
    of sequential palettes do not blend into the white empty wells.

    Args:
        n (int): Number of colours.
        name (str, optional): Palette name, case-insensitive. A '_r' suffix
            reverses it. Default 'Spectral'.

    Returns:
        list: n colour strings.

    Raises:
        UnknownPalette: If the name does not resolve to at least n colours.
    """
    if not isinstance(name, str):
        raise UnknownPalette(name, n)
    reverse = name.lower().endswith('_r')
    colors, qualitative = _lookup(name[:-2] if reverse else name)
    if colors is None or len(colors) < n:
        raise UnknownPalette(name, n)
    if reverse:
        colors = colors[::-1]
    if qualitative:
        return list(colors[:n])
    positions = (np.linspace(0.15, 0.85, n) * (len(colors) - 1)).round().astype(int)
    return [colors[i] for i in positions]


def assign_colors(palette=DEFAULT_PALETTE):
    """
    Build the category -> colour mapping.

    Args:
        palette (str, optional): Palette name. Default 'Spectral'.

    Returns:
        dict: Colour for 'hit', 'null', 'neg_hit' and 'undefined'.
    """
    colors = palette_colors(len(CATEGORY_PALETTE_INDEX), palette)
    mapping = {category: colors[i] for category, i in CATEGORY_PALETTE_INDEX.items()}
    mapping[UNDEFINED] = UNDEFINED_COLOR
    return mapping
