"""
Module containing the well records and the platemap builder.
"""
import logging
from collections import Counter
from typing import NamedTuple

import numpy as np
import pandas as pd

from ...errors import LengthMismatch
from .geometry import shape_for
from .wells import parse_well

TABLE_COLUMNS = ['well', 'row', 'column', 'value', 'category']


class WellRecord(NamedTuple):
    """One measured well placed on the plate grid."""
    well: str
    row: int
    col: int
    value: float


class ClassifiedRecord(NamedTuple):
    """A well record with its hit category."""
    well: str
    row: int
    col: int
    value: float
    category: str


def _as_float(value):
    """Coerce a measurement to float, treating None as missing."""
    if value is None:
        return np.nan
    return float(value)


def build_platemap(values, labels, plate):
    """
    Join measurements with their parsed well coordinates.

    Args:
        values (sequence): One numeric measurement per well.
        labels (sequence): Well labels, parallel to values.
        plate (int or PlateShape): Plate format the labels belong to.

    Returns:
        list: WellRecord objects in input order.

    Raises:
        LengthMismatch: If values and labels differ in length.
        MalformedLabel, OutOfRange: For the first label that fails to parse.
        UnsupportedPlateError: If the plate format is not supported.
    """
    shape = shape_for(plate)
    values = list(values)
    labels = list(labels)
    if len(values) != len(labels):
        raise LengthMismatch(len(values), len(labels))

    records = []
    for value, label in zip(values, labels):
        row, col = parse_well(label, shape)
        records.append(WellRecord(label, row, col, _as_float(value)))

    duplicates = find_duplicate_wells(records)
    if duplicates:
        logging.getLogger('platemap').warning(
            f"Duplicate wells on {shape.well_count}-well plate, last value wins: {duplicates}"
        )
    logging.getLogger('platemap').debug(
        f"Built platemap with {len(records)} wells on a {shape.n_rows}x{shape.n_cols} plate"
    )
    return records


def find_duplicate_wells(records):
    """
    Find labels of every record whose coordinate appears more than once.

    Args:
        records (sequence): WellRecord or ClassifiedRecord objects.

    Returns:
        list: Labels of all records in a duplicated group, first one
        included, in input order.
    """
    counts = Counter((r.row, r.col) for r in records)
    return [r.well for r in records if counts[(r.row, r.col)] > 1]


def platemap_table(records):
    """
    Convert records into a DataFrame.

    Args:
        records (sequence): WellRecord or ClassifiedRecord objects.

    Returns:
        pandas.DataFrame: Columns 'well', 'row', 'column', 'value' and
        'category' (None for unclassified records), in input order.
    """
    rows = [
        {
            'well': r.well,
            'row': r.row,
            'column': r.col,
            'value': r.value,
            'category': getattr(r, 'category', None),
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def last_per_well(table):
    """Keep only the last row for each (row, column) coordinate."""
    if table.empty:
        return table
    return table.drop_duplicates(subset=['row', 'column'], keep='last').reset_index(drop=True)
