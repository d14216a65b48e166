"""Command-line driver for playing Battleships on the console."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence, TextIO

from pydantic import ValidationError

from battleships.config import GameConfig
from battleships.engine.fleet_builders import AIRandomFleetBuilder, HumanFleetBuilder
from battleships.engine.go_actioners import AIGoActioner, HumanGoActioner
from battleships.engine.instrumented_game import InstrumentedGame
from battleships.telemetry import init_console_logging, init_telemetry, shutdown_tracing
from battleships.ui.ai_input import AISimpleRandomInputHandler
from battleships.ui.console import ConsoleInputHandler, ConsoleOutputHandler


def build_game(
    config: GameConfig,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> InstrumentedGame:
    """Wire the console and AI collaborators into a ready-to-run game."""
    rng = random.Random(config.seed)
    human_go_actioner = HumanGoActioner()
    game = InstrumentedGame(
        config.grid_size,
        ConsoleOutputHandler(stdout),
        AISimpleRandomInputHandler(config.grid_width, config.grid_height, rng=rng),
        ConsoleInputHandler(stdin),
        AIRandomFleetBuilder(rng=rng),
        HumanFleetBuilder(),
        AIGoActioner(),
        human_go_actioner,
    )
    # The human actioner needs the game to forward quit requests.
    human_go_actioner.game = game
    return game


def play_game(
    config: GameConfig,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> InstrumentedGame:
    game = build_game(config, stdin=stdin, stdout=stdout)
    composition = config.fleet_composition()
    game.run(config.player_types, [composition, dict(composition)])
    return game


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Battleships via the CLI.")
    parser.add_argument("--width", type=int, default=None, help="Grid width in columns (max 26).")
    parser.add_argument("--height", type=int, default=None, help="Grid height in rows (max 99).")
    parser.add_argument("--destroyers", type=int, default=None, help="Destroyers per fleet.")
    parser.add_argument("--battleships", type=int, default=None, help="Battleships per fleet.")
    parser.add_argument(
        "--players",
        default=None,
        help="Seating as 'first,second' from human/ai, e.g. 'human,ai' or 'ai,ai'.",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Optional RNG seed for reproducibility."
    )
    parser.add_argument(
        "--telemetry",
        action="store_true",
        help="Initialise OpenTelemetry exporters from BATTLESHIPS_*/OTEL_* settings.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    init_console_logging()
    if args.telemetry:
        init_telemetry()

    try:
        config = GameConfig.from_env(
            grid_width=args.width,
            grid_height=args.height,
            destroyers=args.destroyers,
            battleships=args.battleships,
            player_types=args.players,
            seed=args.seed,
        )
    except ValidationError as exc:
        print(f"Invalid game configuration:\n{exc}", file=sys.stderr)
        return 2

    try:
        play_game(config)
    except KeyboardInterrupt:
        print("\n\nGame finished\n", file=sys.stderr)
    finally:
        shutdown_tracing()
    return 0


if __name__ == "__main__":
    sys.exit(main())
