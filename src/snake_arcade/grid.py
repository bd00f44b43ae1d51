"""Square playfield geometry for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_arcade.snake import Point


class BoundaryMode(enum.Enum):
    """Defines how a boundary crossing is detected."""

    LEADING_EDGE = "leading_edge"
    STRICT = "strict"


class Grid:
    """A ``field_size`` × ``field_size`` field of integer (x, y) cells.

    Occupancy is materialised as a NumPy boolean array indexed ``[y, x]``
    only when a full scan is needed, e.g. to list the free cells.
    """

    def __init__(self, field_size: int = 16) -> None:
        if field_size < 4:
            raise ValueError("Grid size must be at least 4×4.")
        self.field_size = field_size

    @property
    def cell_count(self) -> int:
        return self.field_size * self.field_size

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.field_size and 0 <= y < self.field_size

    def occupancy(self, occupied: Iterable[Point]) -> np.ndarray:
        """Return a boolean ``[y, x]`` mask of the in-bounds *occupied* cells."""
        mask = np.zeros((self.field_size, self.field_size), dtype=bool)
        for x, y in occupied:
            if self.in_bounds(x, y):
                mask[y, x] = True
        return mask

    def free_cells(self, occupied: Iterable[Point]) -> list[Point]:
        """Return every cell not in *occupied*, row by row from the bottom."""
        from snake_arcade.snake import Point

        ys, xs = np.where(~self.occupancy(occupied))
        return [
            Point(x, y)
            for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
        ]

    def to_dict(self) -> dict:
        """Serialize grid geometry to a dictionary."""
        return {"field_size": self.field_size}
