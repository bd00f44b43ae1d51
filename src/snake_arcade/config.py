"""Game configuration: geometry, timing, palette, and audio options."""

from __future__ import annotations

import json
import logging
import string
from dataclasses import asdict, dataclass, field
from pathlib import Path

from snake_arcade.grid import BoundaryMode
from snake_arcade.snake import START_BODY

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]

# The starting snake must lie inside the field.
MIN_FIELD_SIZE = max(max(cell) for cell in START_BODY) + 1


def hex_to_color(hexcolor: str) -> RGB:
    """Parse a ``RRGGBB`` (optionally ``#``-prefixed) string into RGB."""
    digits = hexcolor.removeprefix("#")
    if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: {hexcolor!r}")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


@dataclass(frozen=True)
class Palette:
    """Hex color strings for every drawn element."""

    background: str = "FCF0C8"
    snake: str = "911F27"
    apple: str = "630A10"
    ui: str = "630A10"
    window: str = "FEECE9"

    def resolve(self) -> dict[str, RGB]:
        """Parse every color, raising ``ValueError`` on the first bad one."""
        return {name: hex_to_color(value) for name, value in asdict(self).items()}


@dataclass(frozen=True)
class GameConfig:
    """Full game configuration.

    Supports JSON serialization so a setup can be shared between runs.
    """

    # Field
    field_size: int = 16
    cell_size: int = 20
    border_width: int = 2
    boundary_mode: str = BoundaryMode.LEADING_EDGE.value

    # Window
    window_width: int = 720
    window_height: int = 480
    title: str = "Snake"

    # Timing
    fps: int = 5
    frame_rate: int = 60

    # Colors
    palette: Palette = field(default_factory=Palette)
    theme_colors: Palette | None = None

    # Audio
    sound_enabled: bool = False
    sound_path: str = "assets/apple.wav"

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.field_size < MIN_FIELD_SIZE:
            raise ValueError(f"field_size must be at least {MIN_FIELD_SIZE}.")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive.")
        if self.fps <= 0:
            raise ValueError("fps must be positive.")
        if self.frame_rate <= 0:
            raise ValueError("frame_rate must be positive.")
        # Raises ValueError for unknown modes.
        BoundaryMode(self.boundary_mode)

    @property
    def boundary(self) -> BoundaryMode:
        return BoundaryMode(self.boundary_mode)

    @property
    def active_palette(self) -> Palette:
        """Return the theme override when one is set."""
        return self.theme_colors if self.theme_colors is not None else self.palette

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.fps

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        data = dict(raw)
        data["palette"] = Palette(**data.pop("palette", {}))
        theme = data.pop("theme_colors", None)
        data["theme_colors"] = Palette(**theme) if theme is not None else None
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
