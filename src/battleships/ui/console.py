"""Console-backed input and output handlers for a human player."""

from __future__ import annotations

import logging
import re
import sys
from typing import TextIO

from .commands import CommandType, InputCommand
from .locations import check_location_input, check_orientation_input

logger = logging.getLogger(__name__)

HELP_REQUEST_PATTERN = re.compile(r"\?")
SHOW_ATTACKS_PATTERN = re.compile(r"[!*]")
QUIT_PATTERN = re.compile(r"[Xx]")


def parse_input_command(text: str) -> InputCommand:
    """Classify one line of player input."""
    cleaned = text.strip()
    if HELP_REQUEST_PATTERN.fullmatch(cleaned):
        return InputCommand(CommandType.HELP_REQUEST, cleaned)
    if SHOW_ATTACKS_PATTERN.fullmatch(cleaned):
        return InputCommand(CommandType.SHOW_ATTACKS, cleaned)
    if QUIT_PATTERN.fullmatch(cleaned):
        return InputCommand(CommandType.QUIT, cleaned)
    if check_location_input(cleaned):
        return InputCommand(CommandType.LOCATION, cleaned)
    if check_orientation_input(cleaned):
        return InputCommand(CommandType.ORIENTATION, cleaned)
    return InputCommand(CommandType.NONE, "")


class ConsoleInputHandler:
    """Reads commands line by line; end of input is treated as a quit."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def get_input(self) -> InputCommand:
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if not line:
            logger.info("console_input_closed")
            return InputCommand(CommandType.QUIT, "")
        return parse_input_command(line)


class ConsoleOutputHandler:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def message(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)
        stream.flush()
