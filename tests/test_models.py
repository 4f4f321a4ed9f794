"""Tests for the platemap builder."""

import logging
import math

import pytest

from platemap import LengthMismatch, MalformedLabel, OutOfRange, build_platemap, platemap_table
from platemap.core.data.models import WellRecord, find_duplicate_wells, last_per_well


class TestBuildPlatemap:
    def test_records_in_input_order(self):
        records = build_platemap([1.5, 2.5, 3.5], ["H12", "A01", "B02"], 96)
        assert records == [
            WellRecord("H12", 7, 11, 1.5),
            WellRecord("A01", 0, 0, 2.5),
            WellRecord("B02", 1, 1, 3.5),
        ]

    def test_values_become_float(self):
        records = build_platemap([1, None], ["A01", "A02"], 96)
        assert records[0].value == 1.0
        assert isinstance(records[0].value, float)
        assert math.isnan(records[1].value)

    def test_accepts_iterables(self):
        records = build_platemap(iter([1, 2]), ("A1", "A2"), 6)
        assert [(r.row, r.col) for r in records] == [(0, 0), (0, 1)]

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatch) as excinfo:
            build_platemap([1, 2, 3], ["A01", "A02", "A03", "A04"], 96)
        assert excinfo.value.n_values == 3
        assert excinfo.value.n_labels == 4
        assert "3" in str(excinfo.value) and "4" in str(excinfo.value)

    def test_one_bad_label_fails_the_call(self):
        with pytest.raises(MalformedLabel):
            build_platemap([1, 2, 3], ["A01", "oops", "A03"], 96)

    def test_out_of_range_label_fails_the_call(self):
        with pytest.raises(OutOfRange):
            build_platemap([1, 2], ["A01", "I01"], 96)

    def test_empty(self):
        assert build_platemap([], [], 96) == []

    def test_duplicates_are_kept_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="platemap"):
            records = build_platemap([1, 2], ["A01", "a1"], 96)
        assert len(records) == 2
        assert "Duplicate wells" in caplog.text


class TestDuplicates:
    def test_find_duplicate_wells(self):
        records = build_platemap([1, 2, 3], ["A01", "B01", "A1"], 96)
        assert find_duplicate_wells(records) == ["A01", "A1"]

    def test_last_per_well_keeps_last_value(self):
        records = build_platemap([1, 2, 3], ["A01", "B01", "A1"], 96)
        table = last_per_well(platemap_table(records))
        assert len(table) == 2
        a01 = table[(table["row"] == 0) & (table["column"] == 0)]
        assert a01["value"].tolist() == [3.0]


class TestPlatemapTable:
    def test_columns(self):
        table = platemap_table(build_platemap([0.5], ["C04"], 96))
        assert list(table.columns) == ["well", "row", "column", "value", "category"]
        assert table.iloc[0]["well"] == "C04"
        assert table.iloc[0]["row"] == 2
        assert table.iloc[0]["column"] == 3
        assert table.iloc[0]["category"] is None

    def test_empty(self):
        table = platemap_table([])
        assert table.empty
        assert list(table.columns) == ["well", "row", "column", "value", "category"]
