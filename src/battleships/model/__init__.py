"""Fleet and ship domain model."""

from .fleet import Fleet
from .ship import Bounds, Cell, Deployment, Orientation, Ship, ShipType

__all__ = ["Bounds", "Cell", "Deployment", "Fleet", "Orientation", "Ship", "ShipType"]
