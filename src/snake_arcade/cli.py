"""Command-line launcher for Snake Arcade."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snake_arcade.config import GameConfig

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-arcade",
        description="Snake Arcade: play, benchmark, and configuration tools.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open the game window.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    play_p.add_argument("--fps", type=_positive_int, default=None)
    play_p.add_argument("--field-size", type=int, default=None)
    play_p.add_argument(
        "--sound", type=str, default=None,
        help="Path to a sound played when food is eaten.",
    )
    play_p.add_argument(
        "--strict-bounds", action="store_true",
        help="Check both axes against the field bounds on every step.",
    )
    play_p.add_argument("--seed", type=int, default=None)

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure headless simulation throughput.",
    )
    bench_p.add_argument("--num-games", type=_positive_int, default=100)
    bench_p.add_argument("--max-steps", type=_positive_int, default=200)
    bench_p.add_argument("--field-size", type=int, default=16)
    bench_p.add_argument("--seed", type=int, default=42)

    # --- dump-config ---
    dump_p = sub.add_parser(
        "dump-config", help="Write the default configuration as JSON.",
    )
    dump_p.add_argument("output", help="Destination JSON path.")

    return parser


def _play_config(args: argparse.Namespace) -> GameConfig:
    from snake_arcade.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    if args.fps is not None:
        overrides["fps"] = args.fps
    if args.field_size is not None:
        overrides["field_size"] = args.field_size
    if args.sound is not None:
        overrides["sound_enabled"] = True
        overrides["sound_path"] = args.sound
    if args.strict_bounds:
        overrides["boundary_mode"] = "strict"
    if args.seed is not None:
        overrides["seed"] = args.seed

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig.from_dict(d)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from snake_arcade.app import SnakeApp

    app = SnakeApp(_play_config(args))
    score = app.run()
    print(f"Final score: {score}")  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from snake_arcade.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_games=args.num_games,
        max_steps=args.max_steps,
        field_size=args.field_size,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_dump_config(args: argparse.Namespace) -> int:
    from snake_arcade.config import GameConfig

    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-arcade`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "benchmark": _run_benchmark,
        "dump-config": _run_dump_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
