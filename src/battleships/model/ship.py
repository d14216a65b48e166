"""Ship domain model for the Battleships engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Cell:
    """Immutable zero-indexed grid cell."""

    column: int
    row: int


@dataclass(frozen=True)
class Bounds:
    """Inclusive rectangle of grid cells."""

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def for_footprint(cls, location: Cell, length: int, orientation: Orientation) -> Bounds:
        """Return the cells covered by a ship of ``length`` placed at ``location``."""
        if orientation is Orientation.HORIZONTAL:
            return cls(location.column, location.row, location.column + length - 1, location.row)
        return cls(location.column, location.row, location.column, location.row + length - 1)

    def contains(self, cell: Cell) -> bool:
        return self.left <= cell.column <= self.right and self.top <= cell.row <= self.bottom

    def contains_bounds(self, other: Bounds) -> bool:
        return (
            self.left <= other.left
            and other.right <= self.right
            and self.top <= other.top
            and other.bottom <= self.bottom
        )

    def intersects(self, other: Bounds) -> bool:
        """Return True if the two rectangles share at least one cell."""
        return (
            self.left <= other.right
            and other.left <= self.right
            and self.top <= other.bottom
            and other.top <= self.bottom
        )


class Orientation(Enum):
    """Allowed ship orientations."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ShipType(Enum):
    """Supported ship classes and their lengths."""

    DESTROYER = 4
    BATTLESHIP = 5

    @property
    def length(self) -> int:
        """Return the number of contiguous cells the ship occupies."""
        return self.value

    @property
    def label(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class Deployment:
    """Where a fleet builder has decided to put a ship."""

    location: Cell
    orientation: Orientation


@dataclass
class Ship:
    """A single deployed ship whose damage is tracked as a bitmask.

    Bit ``i`` of ``condition`` stands for the cell ``i`` steps from
    ``location`` along the ship's orientation; a cleared bit is a damaged cell.
    """

    ship_type: ShipType
    location: Cell
    orientation: Orientation
    condition: int = field(init=False)

    def __post_init__(self) -> None:
        self.condition = self.full_condition

    @property
    def size(self) -> int:
        return self.ship_type.length

    @property
    def full_condition(self) -> int:
        """Undamaged mask: the ``size`` low bits set."""
        return (1 << self.size) - 1

    @property
    def bounds(self) -> Bounds:
        return Bounds.for_footprint(self.location, self.size, self.orientation)

    @property
    def is_sunk(self) -> bool:
        return self.condition == 0

    def cells(self) -> list[Cell]:
        """Return the occupied cells in bit order."""
        if self.orientation is Orientation.HORIZONTAL:
            return [Cell(self.location.column + i, self.location.row) for i in range(self.size)]
        return [Cell(self.location.column, self.location.row + i) for i in range(self.size)]

    def offset_of(self, cell: Cell) -> int:
        """Distance of ``cell`` from ``location`` along the orientation axis."""
        if self.orientation is Orientation.HORIZONTAL:
            return cell.column - self.location.column
        return cell.row - self.location.row

    def record_hit(self, offset: int) -> None:
        """Clear the bit for ``offset``; out-of-range offsets wrap around the ship."""
        self.condition &= ~(1 << (offset % self.size)) & self.full_condition
