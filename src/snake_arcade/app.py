"""pygame application shell: window, input polling, audio, frame loop."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path

import numpy as np
import pygame

from snake_arcade.config import RGB, GameConfig
from snake_arcade.engine import GameEngine
from snake_arcade.render import FieldLayout, draw_frame
from snake_arcade.snake import Direction

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[int, Direction] = {
    pygame.K_w: Direction.UP,
    pygame.K_d: Direction.RIGHT,
    pygame.K_a: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
}
RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def held_directions(keys: Sequence[bool]) -> list[Direction]:
    """Map a ``pygame.key.get_pressed()`` snapshot to held directions."""
    return [direction for key, direction in KEY_BINDINGS.items() if keys[key]]


class PygameRenderer:
    """:class:`~snake_arcade.render.Renderer` backed by a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}

    def clear(self, color: RGB) -> None:
        self.surface.fill(color)

    def draw_rect(
        self, x: float, y: float, width: float, height: float, color: RGB,
    ) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(x, y, width, height))

    def draw_text(
        self, text: str, x: float, y: float, size: int, color: RGB,
    ) -> None:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.SysFont(None, size)
        self.surface.blit(font.render(text, True, color), (x, y))


class SnakeApp:
    """Owns the window and replaces the engine when the player restarts."""

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        # Bad colors and missing assets fail here, before a window opens.
        self.colors = self.config.active_palette.resolve()
        sound_path = Path(self.config.sound_path)
        if self.config.sound_enabled and not sound_path.is_file():
            raise FileNotFoundError(f"Sound asset not found: {sound_path}")

        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.config.window_width, self.config.window_height),
        )
        pygame.display.set_caption(self.config.title)
        self.clock = pygame.time.Clock()
        self.renderer = PygameRenderer(self.screen)
        self.layout = FieldLayout.from_config(self.config)

        self.sound: pygame.mixer.Sound | None = None
        if self.config.sound_enabled:
            pygame.mixer.init()
            self.sound = pygame.mixer.Sound(str(sound_path))

        self.rng = np.random.default_rng(self.config.seed)
        self.engine = self._new_engine()
        self._started = time.perf_counter()
        self.running = False
        logger.info(
            "Started %dx%d field at %d ticks/s.",
            self.config.field_size, self.config.field_size, self.config.fps,
        )

    def _new_engine(self) -> GameEngine:
        on_food = self.sound.play if self.sound is not None else None
        return GameEngine(self.config, rng=self.rng, on_food=on_food)

    def restart(self) -> None:
        logger.info("Restarting after score %d.", self.engine.score)
        self.engine = self._new_engine()
        self._started = time.perf_counter()

    def frame(self) -> None:
        """Run one frame: events, input, simulation, drawing."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

        keys = pygame.key.get_pressed()
        if self.engine.is_over:
            if any(keys[key] for key in RESTART_KEYS):
                self.restart()
        else:
            now = time.perf_counter() - self._started
            self.engine.tick(now, held_directions(keys))

        draw_frame(self.renderer, self.engine, self.layout, self.colors)
        pygame.display.flip()
        self.clock.tick(self.config.frame_rate)

    def run(self) -> int:
        """Loop until the window is closed. Returns the last score."""
        self.running = True
        try:
            while self.running:
                self.frame()
        finally:
            pygame.quit()
            logger.info("Window closed with score %d.", self.engine.score)
        return self.engine.score
