"""Input handler that picks attack locations at random."""

from __future__ import annotations

import random

from battleships.model.ship import Cell

from .commands import CommandType, InputCommand
from .locations import stringify_location


class AISimpleRandomInputHandler:
    """Produces a uniformly random in-grid location on every call.

    Earlier results are ignored, so the same cell can come up again.
    """

    def __init__(self, grid_width: int, grid_height: int, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.grid_width = grid_width
        self.grid_height = grid_height

    def get_input(self) -> InputCommand:
        cell = Cell(self._rng.randrange(self.grid_width), self._rng.randrange(self.grid_height))
        return InputCommand(CommandType.LOCATION, stringify_location(cell))
