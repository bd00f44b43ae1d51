"""Snake representation, movement, and the direction command queue."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from typing import NamedTuple

from snake_arcade.grid import BoundaryMode


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    The y-axis grows upward, so UP increases ``y``.
    """

    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)
    LEFT = (-1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Point(NamedTuple):
    """An immutable (x, y) grid cell."""

    x: int
    y: int

    def moved(self, direction: Direction) -> Point:
        """Return the neighbouring cell one unit away in *direction*."""
        dx, dy = direction.value
        return Point(self.x + dx, self.y + dy)


# Cells every game starts from, head first.
START_BODY: tuple[Point, ...] = (Point(5, 5), Point(5, 6))


class CommandQueue:
    """Buffers direction changes between input polls and simulation ticks.

    The queue is never empty: the last remaining entry is the committed
    direction and survives :meth:`pop_next` until a newer one is queued.
    """

    def __init__(self, initial: Direction = Direction.RIGHT) -> None:
        self._queue: deque[Direction] = deque([initial])

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._queue)

    def push(self, direction: Direction) -> None:
        """Queue *direction* unless it repeats the most recent entry."""
        if self.peek_last() != direction:
            self._queue.append(direction)

    def peek_last(self) -> Direction:
        """Return the most recently queued direction."""
        return self._queue[-1]

    def pop_next(self) -> Direction:
        """Return the next direction, removing it only if more are queued."""
        if len(self._queue) == 1:
            return self._queue[0]
        return self._queue.popleft()


class Snake:
    """A snake represented as an ordered deque of :class:`Point` segments.

    The head is ``body[0]``; the tail is ``body[-1]``. While :attr:`fed` is
    set, :meth:`advance` keeps the tail and the body grows by one cell.
    """

    def __init__(
        self,
        body: list[Point] | None = None,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        if body is None:
            body = list(START_BODY)
        if len(body) < 2:
            raise ValueError("Snake length must be at least 2.")
        self.body: deque[Point] = deque(Point(*p) for p in body)
        self.direction = direction
        self.fed = False

    @property
    def head(self) -> Point:
        """Return the head coordinate."""
        return self.body[0]

    def commit_direction(self, queue: CommandQueue) -> None:
        """Take the next queued direction as the direction of travel."""
        self.direction = queue.pop_next()

    def next_head(self) -> Point:
        """Compute the next head position without moving."""
        return self.head.moved(self.direction)

    def advance(self) -> Point | None:
        """Move the snake one step forward.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(self.next_head())
        if self.fed:
            return None
        return self.body.pop()

    def occupies(self, point: Point) -> bool:
        """Check whether the snake occupies a given cell."""
        return point in self.body

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg == head for seg in list(self.body)[1:])

    def out_of_bounds(
        self,
        field_size: int,
        mode: BoundaryMode = BoundaryMode.LEADING_EDGE,
    ) -> bool:
        """Check whether the head has left a square field of *field_size*."""
        x, y = self.head
        if mode == BoundaryMode.STRICT:
            return not (0 <= x < field_size and 0 <= y < field_size)
        # Only the edge the snake is heading towards can be crossed.
        if self.direction == Direction.UP:
            return y == field_size
        if self.direction == Direction.RIGHT:
            return x == field_size
        if self.direction == Direction.DOWN:
            return y < 0
        return x < 0

    def check_collision(
        self,
        field_size: int,
        mode: BoundaryMode = BoundaryMode.LEADING_EDGE,
    ) -> bool:
        """Return True on self-collision or a boundary crossing."""
        return self.self_collision() or self.out_of_bounds(field_size, mode)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name,
            "fed": self.fed,
        }
