"""Tests for plate geometry."""

import pytest

from platemap import PLATE_SHAPES, SUPPORTED_PLATES, PlateShape, UnsupportedPlateError, dimensions, shape_for


class TestShapeFor:
    @pytest.mark.parametrize("plate", [6, 12, 24, 48, 96, 384, 1536])
    def test_rows_times_cols_is_well_count(self, plate):
        rows, cols = dimensions(plate)
        assert rows * cols == plate

    @pytest.mark.parametrize(
        "plate, expected",
        [
            (6, (2, 3)),
            (12, (3, 4)),
            (24, (4, 6)),
            (48, (6, 8)),
            (96, (8, 12)),
            (384, (16, 24)),
            (1536, (32, 48)),
        ],
    )
    def test_dimensions(self, plate, expected):
        assert dimensions(shape_for(plate)) == expected

    def test_shape_passes_through(self):
        shape = PLATE_SHAPES[96]
        assert shape_for(shape) is shape

    def test_custom_shape_is_rejected(self):
        with pytest.raises(UnsupportedPlateError):
            shape_for(PlateShape(100, 10, 10, 10, 500, 500))

    def test_inconsistent_shape_is_rejected(self):
        with pytest.raises(UnsupportedPlateError):
            shape_for(PlateShape(96, 2, 2, 10, 500, 500))

    def test_supported_plates(self):
        assert SUPPORTED_PLATES == (6, 12, 24, 48, 96, 384, 1536)

    def test_unsupported_names_value_and_supported_set(self):
        with pytest.raises(UnsupportedPlateError) as excinfo:
            shape_for(100)
        message = str(excinfo.value)
        assert "100" in message
        for plate in SUPPORTED_PLATES:
            assert str(plate) in message
        assert excinfo.value.plate == 100
        assert excinfo.value.supported == SUPPORTED_PLATES

    @pytest.mark.parametrize("plate", [0, -96, "96", None, True, [96]])
    def test_rejects_non_plate_values(self, plate):
        with pytest.raises(UnsupportedPlateError):
            shape_for(plate)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            shape_for(100)
