"""
Module for classifying wells as hits against a threshold.
"""
import logging
import math
from collections import Counter

import numpy as np

from ..data.models import ClassifiedRecord

HIT = "hit"
NEG_HIT = "neg_hit"
NULL = "null"
UNDEFINED = "undefined"

CATEGORIES = (HIT, NULL, NEG_HIT, UNDEFINED)

DEFAULT_THRESHOLD = 2


def classify_value(value, threshold=DEFAULT_THRESHOLD):
    """
    Classify a single measurement.

    Comparisons are strict, so a value equal to +/- threshold is 'null'.
    A negative threshold is not rejected but swaps the meaning of the
    two bounds.

    Args:
        value (float): Measurement, usually in standard-deviation units.
        threshold (float, optional): Distance from zero for a hit. Default 2.

    Returns:
        str: One of 'hit', 'neg_hit', 'null' or 'undefined'.
    """
    if value is None or not math.isfinite(value):
        return UNDEFINED
    if value > threshold:
        return HIT
    if value < -threshold:
        return NEG_HIT
    return NULL


def classify(records, threshold=DEFAULT_THRESHOLD):
    """
    Classify every well record.

    Args:
        records (sequence): WellRecord objects.
        threshold (float, optional): Hit threshold. Default 2.

    Returns:
        list: ClassifiedRecord objects in input order.
    """
    classified = [
        ClassifiedRecord(r.well, r.row, r.col, r.value, classify_value(r.value, threshold))
        for r in records
    ]
    counts = Counter(r.category for r in classified)
    logging.getLogger('platemap').info(
        f"Classified {len(classified)} wells at threshold {threshold}: "
        + ", ".join(f"{c}={counts.get(c, 0)}" for c in CATEGORIES)
    )
    return classified


def scale_values(values):
    """
    Z-score values so a threshold reads as standard deviations.

    Non-finite entries are ignored when computing the mean and standard
    deviation and stay NaN in the output.

    Args:
        values (sequence): Numeric measurements.

    Returns:
        numpy.ndarray: Scaled values, same length as the input.
    """
    arr = np.array([np.nan if v is None else v for v in values], dtype=float)
    finite = np.isfinite(arr)
    scaled = np.full(arr.shape, np.nan)
    if finite.sum() < 2:
        return scaled
    mean = arr[finite].mean()
    std = arr[finite].std(ddof=1)
    if std == 0:
        scaled[finite] = 0.0
        return scaled
    scaled[finite] = (arr[finite] - mean) / std
    return scaled
