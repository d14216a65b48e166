"""A player's collection of deployed ships."""

from __future__ import annotations

import logging

from battleships.telemetry import get_meter, get_tracer

from .ship import Bounds, Cell, Ship

logger = logging.getLogger(__name__)
tracer = get_tracer("battleships.model.fleet")
meter = get_meter("battleships.model.fleet")

HIT_CHECK_COUNTER = meter.create_counter(
    "battleships_fleet_hit_checks",
    unit="1",
    description="Attacks resolved against a fleet",
)


class Fleet:
    """Ordered ships of one side. Ships are never removed, even when sunk."""

    def __init__(self, ships: list[Ship] | None = None) -> None:
        self._ships: list[Ship] = list(ships or [])

    @property
    def ships(self) -> list[Ship]:
        """Snapshot copy; mutating it does not change the fleet."""
        return list(self._ships)

    @property
    def all_ships_sunk(self) -> bool:
        # An empty fleet counts as sunk.
        return all(ship.is_sunk for ship in self._ships)

    def __len__(self) -> int:
        return len(self._ships)

    def add_ship(self, ship: Ship | None) -> None:
        if ship is None:
            return
        self._ships.append(ship)
        logger.debug(
            "fleet_ship_added",
            extra={
                "ship_type": ship.ship_type.name,
                "orientation": ship.orientation.name,
                "column": ship.location.column,
                "row": ship.location.row,
            },
        )

    def does_ship_bounds_clash(self, bounds: Bounds) -> bool:
        """Return True if ``bounds`` shares a cell with any deployed ship."""
        return any(bounds.intersects(ship.bounds) for ship in self._ships)

    def check_for_and_record_any_hit(self, cell: Cell) -> Ship | None:
        """Record a hit on the afloat ship covering ``cell`` and return it.

        Sunk ships are skipped, so attacking a sunk ship's cell is a miss.
        """
        with tracer.start_as_current_span("fleet.check_for_and_record_any_hit") as span:
            span.set_attribute("cell.column", cell.column)
            span.set_attribute("cell.row", cell.row)
            for ship in self._ships:
                if ship.is_sunk or not ship.bounds.contains(cell):
                    continue
                ship.record_hit(ship.offset_of(cell))
                span.set_attribute("attack.outcome", "hit")
                span.set_attribute("ship.sunk", ship.is_sunk)
                HIT_CHECK_COUNTER.add(1, attributes={"outcome": "hit"})
                return ship
            span.set_attribute("attack.outcome", "miss")
            HIT_CHECK_COUNTER.add(1, attributes={"outcome": "miss"})
            return None
