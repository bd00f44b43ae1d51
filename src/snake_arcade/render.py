"""Backend-independent frame drawing.

The engine never talks to a windowing library directly. Drawing goes
through the small :class:`Renderer` protocol, which ``snake_arcade.app``
implements on top of pygame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from snake_arcade.config import RGB, GameConfig
from snake_arcade.snake import Point

if TYPE_CHECKING:
    from snake_arcade.engine import GameEngine

SCORE_POSITION = (25, 25)
SCORE_FONT_SIZE = 24
GAME_OVER_POSITION = (100, 100)
GAME_OVER_FONT_SIZE = 36
GAME_OVER_TEXT = "GAME OVER. Press Enter to try again!"


class Renderer(Protocol):
    def clear(self, color: RGB) -> None: ...
    def draw_rect(
        self, x: float, y: float, width: float, height: float, color: RGB,
    ) -> None: ...
    def draw_text(
        self, text: str, x: float, y: float, size: int, color: RGB,
    ) -> None: ...


@dataclass(frozen=True)
class FieldLayout:
    """Pixel placement of the playfield inside the window."""

    left: float
    top: float
    cell_size: int
    field_size: int
    border_width: int

    @classmethod
    def from_config(cls, config: GameConfig) -> FieldLayout:
        """Center the field in the window."""
        field_px = config.field_size * config.cell_size
        return cls(
            left=config.window_width / 2 - field_px / 2,
            top=config.window_height / 2 - field_px / 2,
            cell_size=config.cell_size,
            field_size=config.field_size,
            border_width=config.border_width,
        )

    @property
    def field_px(self) -> int:
        return self.field_size * self.cell_size

    def cell_origin(self, point: Point) -> tuple[float, float]:
        """Top-left pixel of a grid cell; grid y grows up, pixel y grows down."""
        x = self.left + point.x * self.cell_size
        y = self.top + (self.field_px - (point.y + 1) * self.cell_size)
        return x, y


def draw_frame(
    renderer: Renderer,
    engine: GameEngine,
    layout: FieldLayout,
    colors: dict[str, RGB],
) -> None:
    """Draw one complete frame for the current engine state."""
    if engine.is_over:
        renderer.clear(colors["background"])
        renderer.draw_text(
            GAME_OVER_TEXT, *GAME_OVER_POSITION, GAME_OVER_FONT_SIZE, colors["ui"],
        )
        return

    renderer.clear(colors["window"])
    _draw_field(renderer, layout, colors)
    renderer.draw_text(
        f"Score: {engine.score}", *SCORE_POSITION, SCORE_FONT_SIZE, colors["ui"],
    )
    if engine.food is not None:
        _draw_cell(renderer, layout, engine.food, colors["apple"])
    for segment in engine.snake.body:
        _draw_cell(renderer, layout, segment, colors["snake"])


def _draw_field(
    renderer: Renderer, layout: FieldLayout, colors: dict[str, RGB],
) -> None:
    border = layout.border_width
    renderer.draw_rect(
        layout.left - border,
        layout.top - border,
        layout.field_px + 2 * border,
        layout.field_px + 2 * border,
        colors["ui"],
    )
    renderer.draw_rect(
        layout.left, layout.top, layout.field_px, layout.field_px,
        colors["background"],
    )


def _draw_cell(
    renderer: Renderer, layout: FieldLayout, point: Point, color: RGB,
) -> None:
    x, y = layout.cell_origin(point)
    renderer.draw_rect(x, y, layout.cell_size, layout.cell_size, color)
