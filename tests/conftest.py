"""Shared fakes for driving players without a console."""

from __future__ import annotations

from typing import Callable, Iterable

import pytest

from battleships.engine.player import Player
from battleships.model.fleet import Fleet
from battleships.ui.commands import CommandType, InputCommand
from battleships.ui.console import parse_input_command


class ScriptedInputHandler:
    """Replays a fixed list of commands, then quits."""

    def __init__(self, commands: Iterable[InputCommand | str]) -> None:
        self._commands = [
            parse_input_command(command) if isinstance(command, str) else command
            for command in commands
        ]
        self.calls = 0

    def get_input(self) -> InputCommand:
        self.calls += 1
        if not self._commands:
            return InputCommand(CommandType.QUIT, "")
        return self._commands.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._commands)


class RecordingOutputHandler:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def message(self, text: str) -> None:
        self.messages.append(text)

    @property
    def text(self) -> str:
        return "".join(self.messages)


class RecordingGoActioner:
    """Records turns without attacking anything."""

    def __init__(self, log: list[str], label: str, on_action: Callable[[Player, Player], None] | None = None) -> None:
        self.log = log
        self.label = label
        self.on_action = on_action

    def action(self, player: Player, enemy: Player) -> None:
        self.log.append(self.label)
        if self.on_action is not None:
            self.on_action(player, enemy)


class NullFleetBuilder:
    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.calls = 0

    def build(self, game, player, fleet_composition) -> bool:
        self.calls += 1
        return self.result


@pytest.fixture
def output() -> RecordingOutputHandler:
    return RecordingOutputHandler()


@pytest.fixture
def make_player(output: RecordingOutputHandler) -> Callable[..., Player]:
    def _make(commands: Iterable[InputCommand | str] = (), go_actioner=None, fleet_builder=None) -> Player:
        return Player(
            Fleet(),
            fleet_builder or NullFleetBuilder(),
            output,
            ScriptedInputHandler(commands),
            go_actioner or RecordingGoActioner([], "player"),
        )

    return _make


@pytest.fixture
def scripted() -> type[ScriptedInputHandler]:
    return ScriptedInputHandler


@pytest.fixture
def recording_actioner() -> type[RecordingGoActioner]:
    return RecordingGoActioner


@pytest.fixture
def null_builder() -> type[NullFleetBuilder]:
    return NullFleetBuilder
