"""A player: a fleet plus the strategies that act on its behalf."""

from __future__ import annotations

import logging
from typing import Mapping, Protocol

from battleships.model.fleet import Fleet
from battleships.model.ship import Bounds, Cell, Orientation, Ship, ShipType
from battleships.ui.commands import InputHandler, OutputHandler
from battleships.ui.locations import stringify_location

logger = logging.getLogger(__name__)

HIT_MARKER = "*"
MISS_MARKER = "_"

FleetComposition = Mapping[ShipType, int]


class GameControl(Protocol):
    """The parts of a game that strategies are allowed to see."""

    @property
    def grid_bounds(self) -> Bounds:
        ...

    def quit(self) -> None:
        ...


class FleetBuilder(Protocol):
    def build(
        self,
        game: GameControl | None,
        player: Player | None,
        fleet_composition: FleetComposition | None,
    ) -> bool:
        """Deploy the whole composition; False means the build was abandoned."""
        ...


class GoActioner(Protocol):
    def action(self, player: Player, enemy: Player) -> None:
        """Take ``player``'s turn against ``enemy``."""
        ...


def stringify_attack(cell: Cell, was_hit: bool) -> str:
    """Encode an attack as ``<location><marker>``, e.g. ``C5*`` or ``E10_``."""
    return f"{stringify_location(cell)}{HIT_MARKER if was_hit else MISS_MARKER}"


class Player:
    """One side of the game.

    The fleet and the attack log belong to the player; the four strategies are
    shared references supplied by the game.
    """

    def __init__(
        self,
        fleet: Fleet,
        fleet_builder: FleetBuilder,
        output_handler: OutputHandler,
        input_handler: InputHandler,
        go_actioner: GoActioner,
        name: str = "player",
    ) -> None:
        self.fleet = fleet
        self.fleet_builder = fleet_builder
        self.output_handler = output_handler
        self.input_handler = input_handler
        self.go_actioner = go_actioner
        self.name = name
        self._attacks: list[str] = []

    @property
    def attacks(self) -> tuple[str, ...]:
        return tuple(self._attacks)

    @property
    def is_fleet_sunk(self) -> bool:
        return self.fleet.all_ships_sunk

    def add_ship_to_fleet(self, ship_type: ShipType, location: Cell, orientation: Orientation) -> Ship:
        ship = Ship(ship_type, location, orientation)
        self.fleet.add_ship(ship)
        return ship

    def add_attack(self, attack: str) -> None:
        self._attacks.append(attack)
        logger.debug("attack_logged", extra={"player": self.name, "attack": attack})

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, ships={len(self.fleet)}, attacks={len(self._attacks)})"
