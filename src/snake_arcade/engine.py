"""Fixed-rate game engine composing the snake, command queue, and food."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable

import numpy as np

from snake_arcade.config import GameConfig
from snake_arcade.food import FoodSpawner
from snake_arcade.grid import Grid
from snake_arcade.snake import CommandQueue, Direction, Point, Snake

logger = logging.getLogger(__name__)

# Order in which simultaneously held keys are considered.
INPUT_PRIORITY: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.LEFT,
    Direction.DOWN,
)


class GameState(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameEngine:
    """Single-snake game engine driven by an external frame callback.

    :meth:`tick` is called once per rendered frame with the current time
    and the directions held down. Input is polled on every call, while the
    simulation only advances once per ``1 / fps`` seconds.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        on_food: Callable[[], None] | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.field_size)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.on_food = on_food

        self.snake = Snake()
        self.commands = CommandQueue(self.snake.direction)
        self.food_spawner = FoodSpawner(self.grid, rng=self.rng)
        self.food: Point | None = self.food_spawner.spawn(self.snake.body)

        self.score = 0
        self.tick_count = 0
        self.last_tick_time = 0.0
        self.state = GameState.PLAYING

    @property
    def is_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    def handle_input(self, pressed: Iterable[Direction]) -> bool:
        """Queue the first held direction that does not reverse the last one.

        Returns True if a direction was accepted.
        """
        held = set(pressed)
        last = self.commands.peek_last()
        for direction in INPUT_PRIORITY:
            if direction in held and direction != last.opposite:
                self.commands.push(direction)
                return True
        return False

    def tick(self, now: float, pressed: Iterable[Direction] = ()) -> bool:
        """Poll input and, once the tick interval has elapsed, step.

        Returns True if the simulation advanced.
        """
        if self.is_over:
            return False
        self.handle_input(pressed)
        if now - self.last_tick_time <= self.config.tick_interval:
            return False
        self.step()
        if not self.is_over:
            self.last_tick_time = now
        return True

    def step(self) -> None:
        """Advance the game by exactly one simulation step."""
        if self.is_over:
            return

        # Food is checked against the head before it moves, so the snake
        # grows on the step after reaching the food.
        if self.food is not None and self.snake.head == self.food:
            self._eat()

        self.snake.commit_direction(self.commands)
        self.snake.advance()

        if self.snake.check_collision(self.config.field_size, self.config.boundary):
            self.state = GameState.GAME_OVER
            logger.info(
                "Game over at tick %d with score %d.", self.tick_count, self.score,
            )
            return

        self.snake.fed = False
        self.tick_count += 1

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick_count,
            "score": self.score,
            "state": self.state.value,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food is not None else None,
            "commands": [d.name for d in self.commands],
        }

    def _eat(self) -> None:
        self.snake.fed = True
        self.food = self.food_spawner.spawn(self.snake.body)
        self.score += 1
        logger.debug("Food eaten, score %d, next food at %s.", self.score, self.food)
        if self.on_food is not None:
            self.on_food()
