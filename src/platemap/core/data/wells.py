"""
Module for parsing and building well labels such as 'A01' or 'AF48'.

Row letters are a bijective base-26 numeral (A=0 ... Z=25, AA=26, AB=27),
column digits are 1-based on the label and 0-based internally.
"""
import re

import numpy as np

from ...errors import MalformedLabel, OutOfRange
from .geometry import shape_for

_LABEL_PATTERN = re.compile(r'^([A-Za-z]+)([0-9]+)$')


def row_index(letters):
    """
    Convert row letters into a 0-based row index.

    Args:
        letters (str): One or more letters, case-insensitive.

    Returns:
        int: Row index, e.g. 'A' -> 0, 'Z' -> 25, 'AA' -> 26.
    """
    index = 0
    for char in letters.upper():
        index = index * 26 + (ord(char) - ord('A') + 1)
    return index - 1


def row_letters(index):
    """Convert a 0-based row index back into row letters."""
    if index < 0:
        raise ValueError(f"Row index must be non-negative, got {index}")
    letters = ""
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord('A') + rem) + letters
    return letters


def parse_well(label, plate):
    """
    Parse a well label into a 0-based (row, col) pair for a plate.

    Args:
        label (str): Well label, e.g. 'A01' or 'h12'. Surrounding whitespace
            is ignored.
        plate (int or PlateShape): Plate format the label belongs to.

    Returns:
        tuple: (row, col) with both indices inside the plate.

    Raises:
        MalformedLabel: If the label is not letters followed by digits.
        OutOfRange: If the coordinate falls outside the plate.
        UnsupportedPlateError: If the plate format is not supported.
    """
    shape = shape_for(plate)
    if not isinstance(label, str):
        raise MalformedLabel(label)
    match = _LABEL_PATTERN.match(label.strip())
    if not match:
        raise MalformedLabel(label)

    row = row_index(match.group(1))
    col = int(match.group(2)) - 1
    if not (0 <= row < shape.n_rows and 0 <= col < shape.n_cols):
        raise OutOfRange(label, row, col, shape)
    return row, col


def well_label(row, col, plate):
    """
    Build the canonical label for a coordinate.

    The column number is zero-padded to the width of the plate's largest
    column, so 96-well plates give 'A01' while 6-well plates give 'A1'.

    Args:
        row (int): 0-based row index.
        col (int): 0-based column index.
        plate (int or PlateShape): Plate format.

    Returns:
        str: Canonical well label.
    """
    shape = shape_for(plate)
    if not (0 <= row < shape.n_rows and 0 <= col < shape.n_cols):
        raise OutOfRange(
            None, row, col, shape,
            f"Coordinate (row={row}, col={col}) is outside the {shape.well_count}-well "
            f"plate ({shape.n_rows} rows x {shape.n_cols} columns)"
        )
    width = len(str(shape.n_cols))
    return f"{row_letters(row)}{col + 1:0{width}d}"


def num_to_well(numbers, plate=96):
    """
    Convert 1-based well numbers into well labels.

    Wells are numbered row by row: on a 96-well plate 1 is 'A01', 12 is
    'A12' and 13 is 'B01'.

    Args:
        numbers (int or iterable of int): Well number(s).
        plate (int or PlateShape, optional): Plate format. Default 96.

    Returns:
        str or list: A single label for a single number, else a list.
    """
    shape = shape_for(plate)
    single = np.ndim(numbers) == 0
    labels = []
    for number in ([numbers] if single else numbers):
        if number != int(number):
            raise OutOfRange(
                number, None, None, shape,
                f"Well number {number!r} is not a whole number"
            )
        number = int(number)
        if not 1 <= number <= shape.well_count:
            raise OutOfRange(
                number, None, None, shape,
                f"Well number {number} is outside 1-{shape.well_count} "
                f"for a {shape.well_count}-well plate"
            )
        row, col = divmod(number - 1, shape.n_cols)
        labels.append(well_label(row, col, shape))
    return labels[0] if single else labels
