"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

from snake_arcade.snake import Point

if TYPE_CHECKING:
    from snake_arcade.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Picks uniformly random unoccupied cells for the food item.

    Random draws are retried up to *max_attempts* times; after that the
    spawner scans the grid for free cells and picks one of those, so a
    nearly full field still resolves in bounded time.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = 64,
    ) -> None:
        if max_attempts < 0:
            raise ValueError("max_attempts must be non-negative.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(self, occupied: Collection[Point]) -> Point | None:
        """Return a random cell not in *occupied*, or ``None`` if none is free."""
        taken = set(occupied)
        size = self.grid.field_size
        for _ in range(self.max_attempts):
            x, y = self.rng.integers(size, size=2).tolist()
            candidate = Point(x, y)
            if candidate not in taken:
                return candidate

        free = self.grid.free_cells(taken)
        if not free:
            logger.warning("No empty cells available for food spawning.")
            return None
        return free[int(self.rng.integers(len(free)))]
