"""High-level gameplay tests."""

import random

from battleships.engine.fleet_builders import AIRandomFleetBuilder
from battleships.engine.game import Game, GameState, PlayerId, PlayerType
from battleships.engine.go_actioners import AIGoActioner, HumanGoActioner
from battleships.model.ship import Cell, Orientation, ShipType
from battleships.ui.ai_input import AISimpleRandomInputHandler

ONE_DESTROYER = {ShipType.DESTROYER: 1}


class PlacingFleetBuilder:
    """Deploys a single destroyer along the top row."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.calls = 0

    def build(self, game, player, fleet_composition) -> bool:
        self.calls += 1
        if fleet_composition:
            player.add_ship_to_fleet(ShipType.DESTROYER, Cell(0, 0), Orientation.HORIZONTAL)
        return self.result


def _game(output, human_input, ai_input, human_builder, ai_builder, human_actioner, ai_actioner) -> Game:
    return Game(
        (10, 10),
        output,
        ai_input,
        human_input,
        ai_builder,
        human_builder,
        ai_actioner,
        human_actioner,
    )


def test_first_attack_sinking_last_ship_wins(output, scripted, recording_actioner) -> None:
    turns: list[str] = []

    def sink_everything(player, enemy) -> None:
        for ship in enemy.fleet.ships:
            for offset in range(ship.size):
                ship.record_hit(offset)

    game = _game(
        output,
        scripted([]),
        scripted([]),
        PlacingFleetBuilder(),
        PlacingFleetBuilder(),
        recording_actioner(turns, "human", on_action=sink_everything),
        recording_actioner(turns, "ai"),
    )
    game.run([PlayerType.HUMAN, PlayerType.AI], [ONE_DESTROYER, ONE_DESTROYER])

    assert turns == ["human"]
    assert game.winning_player is PlayerId.ONE
    assert game.state is GameState.QUIT
    assert game.rounds == 1
    assert "Well done Captain of fleet One" in output.text
    assert output.messages[-1] == "\n\nGame finished\n\n"


def test_second_player_can_win(output, scripted, recording_actioner) -> None:
    turns: list[str] = []

    def sink_everything(player, enemy) -> None:
        for ship in enemy.fleet.ships:
            for offset in range(ship.size):
                ship.record_hit(offset)

    game = _game(
        output,
        scripted([]),
        scripted([]),
        PlacingFleetBuilder(),
        PlacingFleetBuilder(),
        recording_actioner(turns, "human"),
        recording_actioner(turns, "ai", on_action=sink_everything),
    )
    game.run([PlayerType.HUMAN, PlayerType.AI], [ONE_DESTROYER, ONE_DESTROYER])

    assert turns == ["human", "ai"]
    assert game.winning_player is PlayerId.TWO
    assert "Well done Captain of fleet Two" in output.text


def test_human_quit_mid_round_skips_opponent_turn(output, scripted, recording_actioner) -> None:
    turns: list[str] = []
    human_actioner = HumanGoActioner()
    game = _game(
        output,
        scripted(["?", "x"]),
        scripted([]),
        PlacingFleetBuilder(),
        PlacingFleetBuilder(),
        human_actioner,
        recording_actioner(turns, "ai"),
    )
    human_actioner.game = game

    game.run([PlayerType.HUMAN, PlayerType.AI], [ONE_DESTROYER, ONE_DESTROYER])

    assert turns == []
    assert game.state is GameState.QUIT
    assert game.winning_player is PlayerId.NONE
    assert game.rounds == 1
    assert "Captain of fleet Two" not in output.text


def test_missing_fleet_composition_quits_before_second_player(output, scripted, recording_actioner) -> None:
    human_builder = PlacingFleetBuilder()
    ai_builder = PlacingFleetBuilder()
    game = _game(
        output,
        scripted([]),
        scripted([]),
        human_builder,
        ai_builder,
        recording_actioner([], "human"),
        recording_actioner([], "ai"),
    )
    game.run([PlayerType.HUMAN, PlayerType.AI], [None, ONE_DESTROYER])

    assert game.state is GameState.QUIT
    assert game.rounds == 0
    assert game.players == (None, None)
    assert human_builder.calls == 0 and ai_builder.calls == 0


def test_failed_build_skips_second_player(output, scripted, recording_actioner) -> None:
    human_builder = PlacingFleetBuilder(result=False)
    ai_builder = PlacingFleetBuilder()
    game = _game(
        output,
        scripted([]),
        scripted([]),
        human_builder,
        ai_builder,
        recording_actioner([], "human"),
        recording_actioner([], "ai"),
    )
    game.run([PlayerType.HUMAN, PlayerType.AI], [ONE_DESTROYER, ONE_DESTROYER])

    assert human_builder.calls == 1
    assert ai_builder.calls == 0
    assert game.players == (None, None)
    assert game.rounds == 0
    assert "Game finished" in output.text


def test_player_slots_get_collaborators_for_their_type(output, scripted, recording_actioner) -> None:
    human_input, ai_input = scripted([]), scripted([])
    human_actioner, ai_actioner = recording_actioner([], "human"), recording_actioner([], "ai")
    game = _game(
        output, human_input, ai_input, PlacingFleetBuilder(), PlacingFleetBuilder(), human_actioner, ai_actioner
    )
    assert game._initialise([PlayerType.AI, PlayerType.HUMAN], [ONE_DESTROYER, ONE_DESTROYER])

    first, second = game.players
    assert first.input_handler is ai_input and first.go_actioner is ai_actioner
    assert second.input_handler is human_input and second.go_actioner is human_actioner
    assert first.output_handler is second.output_handler is output
    assert first.fleet is not second.fleet


def test_empty_fleets_are_an_instant_win_for_player_one(output, scripted, null_builder, recording_actioner) -> None:
    # Nothing deployed means the opposing fleet already counts as sunk.
    turns: list[str] = []
    game = _game(
        output,
        scripted([]),
        scripted([]),
        null_builder(),
        null_builder(),
        recording_actioner(turns, "human"),
        recording_actioner(turns, "ai"),
    )
    game.run([PlayerType.HUMAN, PlayerType.AI], [{}, {}])

    assert turns == ["human"]
    assert game.winning_player is PlayerId.ONE


def test_quit_is_terminal_from_any_state(output, scripted, recording_actioner) -> None:
    game = _game(
        output,
        scripted([]),
        scripted([]),
        PlacingFleetBuilder(),
        PlacingFleetBuilder(),
        recording_actioner([], "human"),
        recording_actioner([], "ai"),
    )
    game.quit()
    game.run([PlayerType.HUMAN, PlayerType.AI], [ONE_DESTROYER, ONE_DESTROYER])
    assert game.state is GameState.QUIT
    assert game.players == (None, None)


def test_ai_versus_ai_plays_to_a_winner(output) -> None:
    rng = random.Random(42)
    ai_input = AISimpleRandomInputHandler(10, 10, rng=rng)
    game = Game(
        (10, 10),
        output,
        ai_input,
        ai_input,
        AIRandomFleetBuilder(rng),
        AIRandomFleetBuilder(rng),
        AIGoActioner(),
        AIGoActioner(),
    )
    composition = {ShipType.DESTROYER: 2, ShipType.BATTLESHIP: 1}
    game.run([PlayerType.AI, PlayerType.AI], [composition, composition])

    assert game.state is GameState.QUIT
    assert game.winning_player in {PlayerId.ONE, PlayerId.TWO}
    loser = game.players[1 - game.winning_player.value]
    winner = game.players[game.winning_player.value]
    assert loser.is_fleet_sunk
    assert not winner.is_fleet_sunk
    assert len(winner.attacks) == game.rounds


def test_grid_bounds_are_inclusive() -> None:
    game = Game((8, 6), None, None, None, None, None, None, None)
    assert (game.grid_bounds.right, game.grid_bounds.bottom) == (7, 5)
    assert game.state is GameState.INITIALISING


def test_quit_during_a_turn_takes_precedence_over_a_sunk_fleet(output, scripted, null_builder, recording_actioner) -> None:
    # The enemy fleet is empty and therefore sunk, but the quit comes first.
    turns: list[str] = []
    game = _game(
        output,
        scripted([]),
        scripted([]),
        null_builder(),
        null_builder(),
        recording_actioner(turns, "human", on_action=lambda player, enemy: game.quit()),
        recording_actioner(turns, "ai"),
    )
    game.run([PlayerType.HUMAN, PlayerType.AI], [{}, {}])

    assert turns == ["human"]
    assert game.state is GameState.QUIT
    assert game.winning_player is PlayerId.NONE
    assert "Well done" not in output.text


def test_failed_second_player_leaves_no_player_populated(output, scripted, recording_actioner) -> None:
    human_builder = PlacingFleetBuilder()
    ai_builder = PlacingFleetBuilder()
    game = _game(
        output,
        scripted([]),
        scripted([]),
        human_builder,
        ai_builder,
        recording_actioner([], "human"),
        recording_actioner([], "ai"),
    )
    game.run([PlayerType.HUMAN, PlayerType.AI], [ONE_DESTROYER, None])

    assert human_builder.calls == 1
    assert ai_builder.calls == 0
    assert game.players == (None, None)
    assert game.rounds == 0
