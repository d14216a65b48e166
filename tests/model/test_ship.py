"""Tests for Ship damage tracking."""

import pytest

from battleships.model.ship import Bounds, Cell, Orientation, Ship, ShipType


def test_new_ship_has_all_condition_bits_set() -> None:
    destroyer = Ship(ShipType.DESTROYER, Cell(0, 0), Orientation.HORIZONTAL)
    battleship = Ship(ShipType.BATTLESHIP, Cell(0, 0), Orientation.VERTICAL)
    assert destroyer.condition == 0b1111
    assert battleship.condition == 0b11111
    assert not destroyer.is_sunk


@pytest.mark.parametrize("ship_type", list(ShipType))
def test_single_hit_clears_exactly_one_bit(ship_type: ShipType) -> None:
    for offset in range(ship_type.length):
        ship = Ship(ship_type, Cell(2, 2), Orientation.HORIZONTAL)
        ship.record_hit(offset)
        assert ship.condition == ship.full_condition & ~(1 << offset)
        assert not ship.is_sunk


def test_record_hit_is_idempotent() -> None:
    ship = Ship(ShipType.DESTROYER, Cell(0, 0), Orientation.VERTICAL)
    ship.record_hit(2)
    once = ship.condition
    ship.record_hit(2)
    assert ship.condition == once == 0b1011


def test_out_of_range_offset_wraps() -> None:
    ship = Ship(ShipType.DESTROYER, Cell(0, 0), Orientation.HORIZONTAL)
    ship.record_hit(5)
    assert ship.condition == 0b1101
    ship.record_hit(-1)
    assert ship.condition == 0b0101


@pytest.mark.parametrize("ship_type", list(ShipType))
def test_ship_sinks_after_every_offset_is_hit(ship_type: ShipType) -> None:
    ship = Ship(ship_type, Cell(1, 1), Orientation.VERTICAL)
    for hits, offset in enumerate(reversed(range(ship_type.length)), start=1):
        ship.record_hit(offset)
        assert ship.is_sunk is (hits == ship_type.length)
    assert ship.condition == 0


def test_battleship_at_c3_hit_at_f3() -> None:
    ship = Ship(ShipType.BATTLESHIP, Cell(2, 2), Orientation.HORIZONTAL)
    assert ship.cells() == [Cell(2, 2), Cell(3, 2), Cell(4, 2), Cell(5, 2), Cell(6, 2)]
    ship.record_hit(ship.offset_of(Cell(5, 2)))
    assert ship.condition == 0b11011 == 27


def test_bounds_follow_orientation() -> None:
    horizontal = Ship(ShipType.DESTROYER, Cell(3, 4), Orientation.HORIZONTAL)
    vertical = Ship(ShipType.DESTROYER, Cell(3, 4), Orientation.VERTICAL)
    assert horizontal.bounds == Bounds(3, 4, 6, 4)
    assert vertical.bounds == Bounds(3, 4, 3, 7)
    assert vertical.offset_of(Cell(3, 6)) == 2
    assert horizontal.size == vertical.size == 4


def test_bounds_intersection_is_symmetric() -> None:
    a = Bounds(0, 0, 3, 0)
    touching_corner = Bounds(3, 0, 3, 3)
    apart = Bounds(4, 0, 4, 3)
    assert a.intersects(touching_corner) and touching_corner.intersects(a)
    assert not a.intersects(apart) and not apart.intersects(a)


def test_bounds_containment() -> None:
    grid = Bounds(0, 0, 9, 9)
    assert grid.contains(Cell(9, 9))
    assert not grid.contains(Cell(10, 0))
    assert grid.contains_bounds(Bounds(6, 0, 9, 0))
    assert not grid.contains_bounds(Bounds(7, 0, 10, 0))
