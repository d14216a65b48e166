"""Game engine: players, deployment and turn strategies, and the round loop."""

from .fleet_builders import AIRandomFleetBuilder, HumanFleetBuilder
from .game import NUMBER_OF_PLAYERS, Game, GameState, PlayerId, PlayerType
from .go_actioners import AIGoActioner, HumanGoActioner
from .instrumented_game import InstrumentedGame
from .player import FleetBuilder, FleetComposition, GameControl, GoActioner, Player, stringify_attack

__all__ = [
    "AIGoActioner",
    "AIRandomFleetBuilder",
    "FleetBuilder",
    "FleetComposition",
    "Game",
    "GameControl",
    "GameState",
    "GoActioner",
    "HumanFleetBuilder",
    "HumanGoActioner",
    "InstrumentedGame",
    "NUMBER_OF_PLAYERS",
    "Player",
    "PlayerId",
    "PlayerType",
    "stringify_attack",
]
