"""Tests for hit classification."""

import math

import numpy as np
import pytest

from platemap import build_platemap, classify, classify_value, num_to_well, scale_values
from platemap.core.analysis.classifier import HIT, NEG_HIT, NULL, UNDEFINED


def _records(values):
    wells = num_to_well(range(1, len(values) + 1), plate=96)
    return build_platemap(values, wells, 96)


class TestClassifyValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, HIT),
            (-5, NEG_HIT),
            (0, NULL),
            (2, NULL),
            (-2, NULL),
            (2.0001, HIT),
            (-2.0001, NEG_HIT),
        ],
    )
    def test_default_threshold(self, value, expected):
        assert classify_value(value) == expected

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), None])
    def test_non_finite_is_undefined(self, value):
        for threshold in (0, 2, 100):
            assert classify_value(value, threshold) == UNDEFINED

    def test_zero_threshold(self):
        assert classify_value(0.1, 0) == HIT
        assert classify_value(-0.1, 0) == NEG_HIT
        assert classify_value(0, 0) == NULL


class TestClassify:
    def test_mixed_values(self):
        classified = classify(_records([5, -5, 0, float("nan")]), threshold=2)
        assert [c.category for c in classified] == [HIT, NEG_HIT, NULL, UNDEFINED]

    def test_keeps_coordinates_and_values(self):
        records = _records([3.0, 1.0])
        classified = classify(records, threshold=2)
        for record, result in zip(records, classified):
            assert (result.well, result.row, result.col, result.value) == tuple(record)

    def test_idempotent(self):
        records = _records([3.0, -0.5, -7, float("inf")])
        assert classify(records, 1.5) == classify(records, 1.5)

    def test_total_over_finite_values(self):
        rng = np.random.default_rng(0)
        values = rng.normal(scale=3, size=60).tolist()
        classified = classify(_records(values), threshold=2)
        assert all(c.category in (HIT, NEG_HIT, NULL) for c in classified)

    def test_empty(self):
        assert classify([], 2) == []


class TestScaleValues:
    def test_z_scores(self):
        scaled = scale_values([1, 2, 3])
        assert scaled.tolist() == pytest.approx([-1.0, 0.0, 1.0])

    def test_ignores_non_finite(self):
        scaled = scale_values([1, float("nan"), 3, None])
        assert scaled[0] == pytest.approx(-0.7071067811865475)
        assert scaled[2] == pytest.approx(0.7071067811865475)
        assert math.isnan(scaled[1])
        assert math.isnan(scaled[3])

    def test_constant_values(self):
        assert scale_values([4, 4, 4]).tolist() == [0.0, 0.0, 0.0]

    def test_too_few_values(self):
        assert math.isnan(scale_values([4])[0])
