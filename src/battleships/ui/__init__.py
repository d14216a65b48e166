"""Player input/output collaborators."""

from .ai_input import AISimpleRandomInputHandler
from .commands import (
    SHOW_ENEMY_ATTACKS,
    SHOW_OWN_ATTACKS,
    CommandType,
    InputCommand,
    InputHandler,
    OutputHandler,
)
from .console import ConsoleInputHandler, ConsoleOutputHandler, parse_input_command
from .locations import (
    check_location_input,
    check_orientation_input,
    parse_location_input,
    parse_orientation_input,
    stringify_location,
)

__all__ = [
    "AISimpleRandomInputHandler",
    "CommandType",
    "ConsoleInputHandler",
    "ConsoleOutputHandler",
    "InputCommand",
    "InputHandler",
    "OutputHandler",
    "SHOW_ENEMY_ATTACKS",
    "SHOW_OWN_ATTACKS",
    "check_location_input",
    "check_orientation_input",
    "parse_input_command",
    "parse_location_input",
    "parse_orientation_input",
    "stringify_location",
]
