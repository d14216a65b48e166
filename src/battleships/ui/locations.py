"""Text encodings for grid locations and ship orientations.

A location is an upper-case column letter (``A`` is column 0) followed by a
one or two digit, one-indexed row number, so ``"E10"`` is ``Cell(4, 9)``.
An orientation is a single ``H`` or ``V`` in either case.
"""

from __future__ import annotations

import re

from battleships.model.ship import Cell, Orientation

LOCATION_PATTERN = re.compile(r"[A-Z][0-9]{1,2}")
ORIENTATION_PATTERN = re.compile(r"[HV]")
MAX_COLUMN = 25


def check_location_input(text: str) -> bool:
    """Format check only; the location may still be outside the grid."""
    return LOCATION_PATTERN.fullmatch(text) is not None


def parse_location_input(text: str) -> Cell:
    if not check_location_input(text):
        raise ValueError(f"Location input: {text} is not valid")
    return Cell(ord(text[0]) - ord("A"), int(text[1:]) - 1)


def stringify_location(cell: Cell) -> str:
    if cell.column < 0 or cell.row < 0 or cell.column > MAX_COLUMN:
        raise ValueError(
            f"Location {cell} has negative values or a column greater than {MAX_COLUMN}"
        )
    return f"{chr(ord('A') + cell.column)}{cell.row + 1}"


def check_orientation_input(text: str) -> bool:
    return ORIENTATION_PATTERN.fullmatch(text.upper()) is not None


def parse_orientation_input(text: str) -> Orientation:
    if not check_orientation_input(text):
        raise ValueError(f"Orientation input: {text} is not valid")
    return Orientation.HORIZONTAL if text.upper() == "H" else Orientation.VERTICAL
