"""Input commands and the input/output handler contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class CommandType(Enum):
    """Kinds of command an input handler can produce."""

    NONE = "none"
    HELP_REQUEST = "help_request"
    ORIENTATION = "orientation"
    LOCATION = "location"
    SHOW_ATTACKS = "show_attacks"
    QUIT = "quit"


@dataclass(frozen=True)
class InputCommand:
    """A command plus its raw text; ``data`` meaning depends on ``type``."""

    type: CommandType
    data: str = ""


SHOW_OWN_ATTACKS = "!"
SHOW_ENEMY_ATTACKS = "*"


class InputHandler(Protocol):
    def get_input(self) -> InputCommand:
        """Block until the next command is available."""
        ...


class OutputHandler(Protocol):
    def message(self, text: str) -> None:
        ...
