"""Frogs and Toads: swap two groups of tokens across an odd-sized grid."""

from frogs_toads.game.display import grid_to_str
from frogs_toads.game.engine import FrogsToadsEngine
from frogs_toads.game.grid import Grid, InvalidDimensionError
from frogs_toads.game.moves import legal_moves
from frogs_toads.game.protocol import PuzzleEngine
from frogs_toads.game.snapshot import EngineSnapshot
from frogs_toads.game.types import DEFAULT_SIZE, Cell, Coord

__all__ = [
    "Cell",
    "Coord",
    "DEFAULT_SIZE",
    "EngineSnapshot",
    "FrogsToadsEngine",
    "Grid",
    "InvalidDimensionError",
    "PuzzleEngine",
    "grid_to_str",
    "legal_moves",
]
