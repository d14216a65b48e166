"""Game configuration: grid size, fleet composition and seating."""

from __future__ import annotations

import os
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator, model_validator

from battleships.engine.game import PlayerType
from battleships.model.ship import ShipType

MAX_GRID_WIDTH = 26  # one column letter per column
MAX_GRID_HEIGHT = 99  # at most two row digits

_ENV_FIELDS = {
    "grid_width": "BATTLESHIPS_GRID_WIDTH",
    "grid_height": "BATTLESHIPS_GRID_HEIGHT",
    "destroyers": "BATTLESHIPS_DESTROYERS",
    "battleships": "BATTLESHIPS_BATTLESHIPS",
    "seed": "BATTLESHIPS_SEED",
    "player_types": "BATTLESHIPS_PLAYERS",
}


def parse_player_types(value: str) -> tuple[PlayerType, PlayerType]:
    """Parse ``"human,ai"`` style seating into two player types."""
    parts = [part.strip().lower() for part in value.split(",") if part.strip()]
    if len(parts) != 2:
        raise ValueError(f"Expected two comma separated player types, got {value!r}")
    return PlayerType(parts[0]), PlayerType(parts[1])


class GameConfig(BaseModel):
    """Settings for one match; both sides get the same fleet."""

    grid_width: int = Field(default=10, ge=1, le=MAX_GRID_WIDTH)
    grid_height: int = Field(default=10, ge=1, le=MAX_GRID_HEIGHT)
    destroyers: int = Field(default=2, ge=0)
    battleships: int = Field(default=1, ge=0)
    player_types: tuple[PlayerType, PlayerType] = (PlayerType.HUMAN, PlayerType.AI)
    seed: int | None = None

    @field_validator("player_types", mode="before")
    @classmethod
    def _coerce_player_types(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_player_types(value)
        return value

    @model_validator(mode="after")
    def _check_fleet_fits(self) -> "GameConfig":
        if self.destroyers + self.battleships == 0:
            raise ValueError("A fleet needs at least one ship.")
        longest = max(
            ship_type.length
            for ship_type, count in self.fleet_composition().items()
            if count > 0
        )
        if max(self.grid_width, self.grid_height) < longest:
            raise ValueError(
                f"A {self.grid_width}x{self.grid_height} grid cannot hold a ship of length {longest}."
            )
        # Random deployment retries until a ship fits, so the fleet must not
        # need more cells than the grid has.
        area = self.grid_width * self.grid_height
        if self.fleet_cells > area:
            raise ValueError(
                f"A fleet of {self.fleet_cells} cells does not fit a "
                f"{self.grid_width}x{self.grid_height} grid of {area} cells."
            )
        return self

    @property
    def grid_size(self) -> tuple[int, int]:
        return self.grid_width, self.grid_height

    def fleet_composition(self) -> dict[ShipType, int]:
        return {ShipType.DESTROYER: self.destroyers, ShipType.BATTLESHIP: self.battleships}

    @property
    def fleet_cells(self) -> int:
        return sum(ship_type.length * count for ship_type, count in self.fleet_composition().items())

    @classmethod
    def from_env(cls, **overrides: Any) -> "GameConfig":
        """Construct config from `BATTLESHIPS_*` env vars; explicit overrides win."""

        data: Dict[str, Any] = {}
        for field, env_name in _ENV_FIELDS.items():
            value = os.getenv(env_name)
            if value is not None and value.strip():
                data[field] = value.strip()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**data)
