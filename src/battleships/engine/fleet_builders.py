"""Strategies that deploy a player's fleet before play starts."""

from __future__ import annotations

import logging
import random

from battleships.model.ship import Bounds, Cell, Deployment, Orientation, ShipType
from battleships.telemetry import get_meter, get_tracer
from battleships.ui.commands import CommandType
from battleships.ui.locations import parse_location_input, parse_orientation_input

from .player import FleetComposition, GameControl, Player

logger = logging.getLogger(__name__)
tracer = get_tracer("battleships.engine.fleet_builders")
meter = get_meter("battleships.engine.fleet_builders")

DEPLOYMENT_COUNTER = meter.create_counter(
    "battleships_engine_ship_deployments",
    unit="1",
    description="Number of attempted ship deployments",
)

BAD_LOCATION = "Helm to Captain, sir, this is not a valid grid co-ordinate!\n\n"
BAD_ORIENTATION = "Helm to Captain, sir, this is not a valid ship orientation!\n\n"
OUT_OF_BOUNDS = (
    "Helm to Captain, sir, ship orientation and grid co-ordinate does not fit into battle area!\n\n"
)
COLLISION = "Helm to Captain, sir, ship orientation and grid co-ordinate rams an existing ship!\n\n"


class AIRandomFleetBuilder:
    """Places ships by rejection sampling random in-grid deployments."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def build(
        self,
        game: GameControl | None,
        player: Player | None,
        fleet_composition: FleetComposition | None,
    ) -> bool:
        if game is None or player is None or fleet_composition is None:
            logger.warning("fleet_build_missing_arguments", extra={"builder": "ai"})
            return False

        with tracer.start_as_current_span("fleet_builder.ai.build") as span:
            span.set_attribute("player", player.name)
            for ship_type, count in fleet_composition.items():
                for _ in range(count):
                    deployment = self._random_deployment(game, player, ship_type)
                    player.add_ship_to_fleet(ship_type, deployment.location, deployment.orientation)
            span.set_attribute("fleet.size", len(player.fleet))
        return True

    def _random_deployment(self, game: GameControl, player: Player, ship_type: ShipType) -> Deployment:
        grid = game.grid_bounds
        length = ship_type.length
        orientations = [
            orientation
            for orientation in Orientation
            if grid.contains_bounds(Bounds.for_footprint(Cell(grid.left, grid.top), length, orientation))
        ]
        attempts = 0
        while True:
            attempts += 1
            orientation = self._rng.choice(orientations)
            if orientation is Orientation.HORIZONTAL:
                column = self._rng.randint(grid.left, grid.right - length + 1)
                row = self._rng.randint(grid.top, grid.bottom)
            else:
                column = self._rng.randint(grid.left, grid.right)
                row = self._rng.randint(grid.top, grid.bottom - length + 1)
            deployment = Deployment(Cell(column, row), orientation)
            bounds = Bounds.for_footprint(deployment.location, length, orientation)
            if player.fleet.does_ship_bounds_clash(bounds):
                DEPLOYMENT_COUNTER.add(1, attributes={"result": "collision", "builder": "ai"})
                continue
            DEPLOYMENT_COUNTER.add(1, attributes={"result": "success", "builder": "ai"})
            logger.debug(
                "random_ship_deployed",
                extra={
                    "player": player.name,
                    "ship_type": ship_type.name,
                    "orientation": orientation.name,
                    "column": column,
                    "row": row,
                    "attempts": attempts,
                },
            )
            return deployment


class HumanFleetBuilder:
    """Asks the player where each ship goes, re-prompting until it fits."""

    def build(
        self,
        game: GameControl | None,
        player: Player | None,
        fleet_composition: FleetComposition | None,
    ) -> bool:
        if game is None or player is None or fleet_composition is None:
            logger.warning("fleet_build_missing_arguments", extra={"builder": "human"})
            return False

        player.output_handler.message("Helm to Captain, sir, where shall we deploy the fleet?\n\n")
        for ship_type, count in fleet_composition.items():
            for ordinal in range(1, count + 1):
                deployment = self._prompt_deployment(game, player, ship_type, ordinal)
                if deployment is None:
                    logger.info(
                        "fleet_build_quit",
                        extra={"player": player.name, "ship_type": ship_type.name, "ordinal": ordinal},
                    )
                    return False
                player.add_ship_to_fleet(ship_type, deployment.location, deployment.orientation)

        player.output_handler.message("Radar Room to Captain, sir, enemy detected!\n\n")
        return True

    def _prompt_deployment(
        self, game: GameControl, player: Player, ship_type: ShipType, ordinal: int
    ) -> Deployment | None:
        """Return a valid deployment, or None if the player quit."""
        out = player.output_handler
        while True:
            out.message(
                "Helm to Captain, sir, give me grid co-ordinate (E4, D10 etc) and orientation "
                f"(using h or v) for {ship_type.label}{ordinal}\n"
            )
            out.message("(enter X or x to quit the game immediately)\n")

            out.message("Grid co-ordinate: ")
            command = player.input_handler.get_input()
            if command.type is CommandType.QUIT:
                return None
            if command.type is not CommandType.LOCATION:
                out.message(BAD_LOCATION)
                continue
            try:
                location = parse_location_input(command.data)
            except ValueError:
                out.message(BAD_LOCATION)
                continue

            out.message("Orientation: ")
            command = player.input_handler.get_input()
            if command.type is CommandType.QUIT:
                return None
            if command.type is not CommandType.ORIENTATION:
                out.message(BAD_ORIENTATION)
                continue
            try:
                orientation = parse_orientation_input(command.data)
            except ValueError:
                out.message(BAD_ORIENTATION)
                continue

            bounds = Bounds.for_footprint(location, ship_type.length, orientation)
            if not game.grid_bounds.contains_bounds(bounds):
                DEPLOYMENT_COUNTER.add(1, attributes={"result": "out_of_bounds", "builder": "human"})
                out.message(OUT_OF_BOUNDS)
                continue
            if player.fleet.does_ship_bounds_clash(bounds):
                DEPLOYMENT_COUNTER.add(1, attributes={"result": "collision", "builder": "human"})
                out.message(COLLISION)
                continue

            DEPLOYMENT_COUNTER.add(1, attributes={"result": "success", "builder": "human"})
            out.message(f"Helm to Captain, {ship_type.label}{ordinal} deployed sir.\n\n")
            return Deployment(location, orientation)
