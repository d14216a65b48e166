"""Two-player Battleships game controller."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from battleships.model.fleet import Fleet
from battleships.model.ship import Bounds
from battleships.telemetry import get_tracer
from battleships.ui.commands import InputHandler, OutputHandler

from .player import FleetBuilder, FleetComposition, GoActioner, Player

logger = logging.getLogger(__name__)
tracer = get_tracer("battleships.engine.game")

NUMBER_OF_PLAYERS = 2


class PlayerId(Enum):
    """Player slots; ONE always moves first."""

    ONE = 0
    TWO = 1
    NONE = -1

    @property
    def label(self) -> str:
        return self.name.title()


class PlayerType(Enum):
    HUMAN = "human"
    AI = "ai"


class GameState(Enum):
    """Lifecycle of a match. Transitions only move forward."""

    INITIALISING = "initialising"
    PLAYING = "playing"
    WON = "won"
    QUIT = "quit"


class Game:
    """Runs a match between two players built from injected strategies.

    The game never inspects whether a slot is human or AI beyond choosing
    which collaborators to hand to the new ``Player``.
    """

    def __init__(
        self,
        grid_size: tuple[int, int],
        output_handler: OutputHandler,
        ai_input_handler: InputHandler,
        human_input_handler: InputHandler,
        ai_fleet_builder: FleetBuilder,
        human_fleet_builder: FleetBuilder,
        ai_go_actioner: GoActioner,
        human_go_actioner: GoActioner,
    ) -> None:
        width, height = grid_size
        self._grid_bounds = Bounds(0, 0, width - 1, height - 1)
        self.output_handler = output_handler
        self._collaborators = {
            PlayerType.HUMAN: (human_fleet_builder, human_input_handler, human_go_actioner),
            PlayerType.AI: (ai_fleet_builder, ai_input_handler, ai_go_actioner),
        }
        self._players: list[Player | None] = [None] * NUMBER_OF_PLAYERS
        self.state = GameState.INITIALISING
        self.winning_player = PlayerId.NONE
        self.rounds = 0

    @property
    def grid_bounds(self) -> Bounds:
        return self._grid_bounds

    @property
    def players(self) -> tuple[Player | None, ...]:
        return tuple(self._players)

    def run(
        self,
        player_types: Sequence[PlayerType],
        player_fleets: Sequence[FleetComposition | None],
    ) -> None:
        """Play the match to completion."""
        self.output_handler.message("GAME OF BATTLESHIPS\n")
        self.output_handler.message("===================\n\n")

        finished = False
        while not finished:
            if self.state is GameState.INITIALISING:
                self.state = (
                    GameState.PLAYING
                    if self._initialise(player_types, player_fleets)
                    else GameState.QUIT
                )
                logger.info("game_initialised", extra={"state": self.state.value})
            elif self.state is GameState.PLAYING:
                self.execute_round()
            elif self.state is GameState.WON:
                self._announce_winner()
            else:
                finished = self._finish()

    def quit(self) -> None:
        """Stop the match at the next opportunity, whatever the current state."""
        logger.info("game_quit", extra={"state": self.state.value, "rounds": self.rounds})
        self.state = GameState.QUIT

    def execute_round(self) -> None:
        """Player ONE moves, then player TWO unless the game was won or quit."""
        one = self._player(PlayerId.ONE)
        two = self._player(PlayerId.TWO)
        self.rounds += 1
        self._take_turn(PlayerId.ONE, one, two)
        if self.state is GameState.PLAYING:
            self._take_turn(PlayerId.TWO, two, one)
        self.output_handler.message("\n")

    def _take_turn(self, player_id: PlayerId, player: Player, enemy: Player) -> None:
        self.output_handler.message(f"Captain of fleet {player_id.label}, this is round {self.rounds}\n")
        self.output_handler.message("-----------------------------------\n")
        player.go_actioner.action(player, enemy)
        # A quit issued during the turn wins over a sinking.
        if self.state is GameState.QUIT:
            return
        if enemy.is_fleet_sunk:
            self.winning_player = player_id
            self.state = GameState.WON
            logger.info("game_won", extra={"winner": player_id.label, "rounds": self.rounds})

    def _initialise(
        self,
        player_types: Sequence[PlayerType],
        player_fleets: Sequence[FleetComposition | None],
    ) -> bool:
        with tracer.start_as_current_span("game.initialise"):
            for player_id in (PlayerId.ONE, PlayerId.TWO):
                if not self._initialise_player(
                    player_id, player_types[player_id.value], player_fleets[player_id.value]
                ):
                    # Either both slots are populated or neither is.
                    self._players = [None] * NUMBER_OF_PLAYERS
                    return False
            return True

    def _initialise_player(
        self,
        player_id: PlayerId,
        player_type: PlayerType,
        fleet_composition: FleetComposition | None,
    ) -> bool:
        if fleet_composition is None:
            logger.warning("player_missing_fleet_composition", extra={"slot": player_id.label})
            return False

        fleet_builder, input_handler, go_actioner = self._collaborators[player_type]
        player = Player(
            Fleet(),
            fleet_builder,
            self.output_handler,
            input_handler,
            go_actioner,
            name=f"{player_id.label.lower()}-{player_type.value}",
        )
        self._players[player_id.value] = player
        built = player.fleet_builder.build(self, player, fleet_composition)
        logger.info(
            "player_initialised",
            extra={"slot": player_id.label, "player_type": player_type.value, "built": built},
        )
        return built

    def _announce_winner(self) -> None:
        self.output_handler.message(
            f"Well done Captain of fleet {self.winning_player.label}, "
            "you have sunk the enemy and won the day!!!\n\n"
        )
        self.state = GameState.QUIT

    def _finish(self) -> bool:
        self.output_handler.message("\n\nGame finished\n\n")
        return True

    def _player(self, player_id: PlayerId) -> Player:
        player = self._players[player_id.value]
        if player is None:
            raise RuntimeError(f"Player {player_id.label} has not been initialised.")
        return player
