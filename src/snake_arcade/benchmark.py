"""Headless throughput benchmark for the game engine."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from snake_arcade.config import GameConfig
from snake_arcade.engine import GameEngine
from snake_arcade.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_steps: int
    total_score: int
    wall_time_seconds: float
    games_per_second: float
    steps_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_steps} steps, "
            f"{self.total_score} food eaten in {self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.steps_per_second:.1f} steps/s"
        )


def benchmark_throughput(
    *,
    num_games: int = 100,
    max_steps: int = 200,
    field_size: int = 16,
    seed: int | None = 42,
) -> BenchmarkResult:
    """Measure raw simulation throughput without a window.

    Plays *num_games* games of at most *max_steps* steps each, pressing a
    random direction before every step.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    config = GameConfig(field_size=field_size)
    rng = np.random.default_rng(seed)

    total_steps = 0
    total_score = 0
    start = time.perf_counter()

    for _ in range(num_games):
        engine = GameEngine(config, rng=rng)
        for _ in range(max_steps):
            engine.handle_input([_DIRECTIONS[int(rng.integers(4))]])
            engine.step()
            total_steps += 1
            if engine.is_over:
                break
        total_score += engine.score

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_steps=total_steps,
        total_score=total_score,
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        steps_per_second=total_steps / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
