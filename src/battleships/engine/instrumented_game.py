"""Battleships game with telemetry hooks."""

from __future__ import annotations

import logging
import time
from typing import Any, Sequence

from battleships.engine.game import Game, GameState, PlayerType
from battleships.engine.player import FleetComposition
from battleships.telemetry import get_tracer, record_game_duration, record_game_metric

logger = logging.getLogger(__name__)


class InstrumentedGame(Game):
    """Wraps Game with tracing, metrics, and logging."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._tracer = get_tracer("battleships.engine")

    def run(
        self,
        player_types: Sequence[PlayerType],
        player_fleets: Sequence[FleetComposition | None],
    ) -> None:
        started = time.perf_counter()
        with self._tracer.start_as_current_span("battleships.engine.game") as span:
            span.set_attribute("player_types", [player_type.value for player_type in player_types])
            logger.info(
                "Game started: grid=%dx%d players=%s",
                self.grid_bounds.right + 1,
                self.grid_bounds.bottom + 1,
                ",".join(player_type.value for player_type in player_types),
            )
            super().run(player_types, player_fleets)

            duration = time.perf_counter() - started
            winner = self.winning_player.label
            span.set_attribute("winner", winner)
            span.set_attribute("rounds", self.rounds)
            span.set_attribute("duration_ms", duration * 1000)

        record_game_metric("battleships_game_completed_total", 1, {"winner": winner})
        record_game_duration("battleships_game_duration_seconds", duration, {"winner": winner})
        logger.info(
            "Game finished. Winner=%s rounds=%d duration_s=%.3f", winner, self.rounds, duration
        )

    def execute_round(self) -> None:
        with self._tracer.start_as_current_span("battleships.engine.round") as span:
            span.set_attribute("round", self.rounds + 1)
            super().execute_round()
            span.set_attribute("state", self.state.value)
            record_game_metric("battleships_game_rounds_total", 1)
            if self.state is GameState.QUIT:
                record_game_metric("battleships_game_quit_total", 1, {"round": self.rounds})
                logger.info("Game quit during round %d", self.rounds)
