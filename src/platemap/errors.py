"""
Exceptions raised by the platemap pipeline.

Every error keeps the offending input as attributes and names it in the
message. All of them derive from ValueError.
"""


class PlatemapError(ValueError):
    """Base class for platemap input errors."""


class MalformedLabel(PlatemapError):
    """Well label does not follow the row-letters + column-digits grammar."""

    def __init__(self, label):
        self.label = label
        super().__init__(
            f"Malformed well label {label!r}: expected row letters followed "
            f"by column digits, e.g. 'A01'"
        )


class OutOfRange(PlatemapError):
    """Well label decodes to a coordinate outside the plate."""

    def __init__(self, label, row, col, plate, message=None):
        self.label = label
        self.row = row
        self.col = col
        self.plate = plate
        if message is None:
            message = (
                f"Well {label!r} (row={row}, col={col}) is outside the "
                f"{plate.well_count}-well plate ({plate.n_rows} rows x {plate.n_cols} columns)"
            )
        super().__init__(message)


class LengthMismatch(PlatemapError):
    """Values and well labels have different lengths."""

    def __init__(self, n_values, n_labels):
        self.n_values = n_values
        self.n_labels = n_labels
        super().__init__(
            f"Got {n_values} values but {n_labels} well labels; "
            f"they must be the same length"
        )


class UnsupportedPlateError(PlatemapError):
    """Plate size is not one of the supported formats."""

    def __init__(self, plate, supported):
        self.plate = plate
        self.supported = tuple(supported)
        valid = ", ".join(str(s) for s in self.supported)
        super().__init__(
            f"Not a valid plate format: {plate!r}. Either {valid}."
        )


class UnknownPalette(PlatemapError):
    """Palette name cannot be resolved to a list of colours."""

    def __init__(self, name, needed):
        self.name = name
        self.needed = needed
        super().__init__(
            f"Unknown palette {name!r}: need a named palette with at least "
            f"{needed} colours"
        )
