"""Strategies that take one player's turn each round."""

from __future__ import annotations

import logging

from battleships.model.ship import Bounds, Cell, Ship
from battleships.telemetry import get_meter, get_tracer
from battleships.ui.commands import SHOW_OWN_ATTACKS, CommandType
from battleships.ui.locations import parse_location_input, stringify_location

from .player import GameControl, Player, stringify_attack

logger = logging.getLogger(__name__)
tracer = get_tracer("battleships.engine.go_actioners")
meter = get_meter("battleships.engine.go_actioners")

ATTACK_COUNTER = meter.create_counter(
    "battleships_engine_attacks",
    unit="1",
    description="Attacks made by players",
)

COMMAND_HELP = (
    "  !         - Show your previous attacks on the enemy fleet\n",
    "  *         - Show the enemy's previous attacks on your fleet\n",
    "  X or x    - Quit game immediately\n",
    "  ?         - Show help (what you are seeing now)\n",
)

CLASSIC_GRID = Bounds(0, 0, 9, 9)


def help_text(grid: Bounds) -> tuple[str, ...]:
    """Command help, with the attack range spelled out for ``grid``."""
    last = stringify_location(Cell(grid.right, grid.bottom))
    cells = f"[A-{last[0]}][1-{grid.bottom + 1}]"
    return COMMAND_HELP + (f"{cells:<11} - Grid location to attack (eg. A1, {last})\n\n",)


def resolve_attack(player: Player, enemy: Player, cell: Cell) -> Ship | None:
    """Fire at ``cell``, log the attack against ``player`` and return any ship hit."""
    with tracer.start_as_current_span("go_actioner.resolve_attack") as span:
        span.set_attribute("player", player.name)
        span.set_attribute("cell.column", cell.column)
        span.set_attribute("cell.row", cell.row)
        ship = enemy.fleet.check_for_and_record_any_hit(cell)
        was_hit = ship is not None
        attack = stringify_attack(cell, was_hit)
        player.add_attack(attack)
        outcome = "hit" if was_hit else "miss"
        span.set_attribute("attack.outcome", outcome)
        ATTACK_COUNTER.add(1, attributes={"player": player.name, "outcome": outcome})
        logger.info(
            "attack_resolved",
            extra={
                "player": player.name,
                "attack": attack,
                "ship_type": ship.ship_type.name if ship else None,
                "sunk": bool(ship and ship.is_sunk),
            },
        )
        return ship


class AIGoActioner:
    """Attacks wherever the player's input handler says.

    Nothing is remembered between turns, so cells may be attacked repeatedly.
    """

    def action(self, player: Player, enemy: Player) -> None:
        target = player.input_handler.get_input().data
        cell = parse_location_input(target)
        ship = resolve_attack(player, enemy, cell)
        if ship is None:
            player.output_handler.message(f"AI attack at {target} missed...\n\n")
            return
        sank = " and sank it" if ship.is_sunk else ""
        player.output_handler.message(
            f"AI scored a hit at {target} on enemy {ship.ship_type.label}{sank}!\n\n"
        )


class HumanGoActioner:
    """Command loop for a human turn.

    ``game`` is attached after the game is constructed; the quit command is
    forwarded to it.
    """

    def __init__(self, game: GameControl | None = None) -> None:
        self.game = game

    def action(self, player: Player, enemy: Player) -> None:
        out = player.output_handler
        while True:
            out.message("XO to Captain, sir, what is your command?\n")
            out.message("(Enter ? for help): ")
            command = player.input_handler.get_input()

            if command.type is CommandType.HELP_REQUEST:
                grid = self.game.grid_bounds if self.game is not None else CLASSIC_GRID
                for line in help_text(grid):
                    out.message(line)
            elif command.type is CommandType.SHOW_ATTACKS:
                self._show_attacks(player, enemy, own=command.data == SHOW_OWN_ATTACKS)
            elif command.type is CommandType.LOCATION:
                try:
                    cell = parse_location_input(command.data)
                except ValueError:
                    out.message("XO to Captain, sir, this is not a valid grid co-ordinate...\n\n")
                    continue
                if self.game is None:
                    logger.error("human_go_without_game", extra={"player": player.name})
                    return
                if not self.game.grid_bounds.contains(cell):
                    out.message("XO to Captain, sir, grid co-ordinate is not within range our guns...\n\n")
                    continue
                ship = resolve_attack(player, enemy, cell)
                if ship is None:
                    out.message("Gunnery to Captain, sir, our attack missed...\n\n")
                else:
                    sank = " and it sank" if ship.is_sunk else ""
                    out.message(f"Gunnery to Captain, sir, we scored a hit on an enemy ship{sank}!\n\n")
                return
            elif command.type is CommandType.QUIT:
                logger.info("human_quit_requested", extra={"player": player.name})
                if self.game is not None:
                    self.game.quit()
                return
            else:
                out.message("XO to Captain, sir, invalid command! Please repeat...\n")
                out.message("(enter ? for help)\n\n")

    @staticmethod
    def _show_attacks(player: Player, enemy: Player, own: bool) -> None:
        out = player.output_handler
        attacks = player.attacks if own else enemy.attacks
        if not attacks:
            if own:
                out.message("XO to Captain, sir, we have not made any attacks yet...\n\n")
            else:
                out.message("XO to Captain, sir, we have not been attacked yet...\n\n")
            return
        if own:
            out.message("XO to Captain, sir, our attacks so far:-\n")
        else:
            out.message("XO to Captain, sir, the enemy's attacks so far:-\n")
        for attack in attacks:
            out.message(f"{attack} ")
        out.message("\n\n")
