"""Tests for the command-line launcher."""

import pytest

from snake_arcade.cli import _build_parser, _play_config, main
from snake_arcade.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_play_defaults(self):
        args = _build_parser().parse_args(["play"])
        assert args.command == "play"
        assert args.config is None
        assert args.fps is None
        assert args.strict_bounds is False

    def test_benchmark_defaults(self):
        args = _build_parser().parse_args(["benchmark"])
        assert args.num_games == 100
        assert args.max_steps == 200
        assert args.field_size == 16

    def test_fps_must_be_positive(self):
        with pytest.raises(SystemExit, match="2"):
            main(["play", "--fps", "0"])


class TestPlayConfig:
    def test_defaults_without_flags(self):
        args = _build_parser().parse_args(["play"])
        assert _play_config(args) == GameConfig()

    def test_flags_override(self):
        args = _build_parser().parse_args([
            "play",
            "--fps", "8",
            "--field-size", "12",
            "--sound", "eat.wav",
            "--strict-bounds",
            "--seed", "4",
        ])
        cfg = _play_config(args)
        assert cfg.fps == 8
        assert cfg.field_size == 12
        assert cfg.sound_enabled is True
        assert cfg.sound_path == "eat.wav"
        assert cfg.boundary_mode == "strict"
        assert cfg.seed == 4

    def test_flags_override_config_file(self, tmp_path):
        path = tmp_path / "cfg.json"
        GameConfig(fps=3, cell_size=30).save(path)
        args = _build_parser().parse_args(["play", "--config", str(path), "--fps", "7"])
        cfg = _play_config(args)
        assert cfg.fps == 7
        assert cfg.cell_size == 30


class TestCLIBenchmark:
    def test_benchmark_runs(self, capsys):
        result = main(["benchmark", "--num-games", "3", "--max-steps", "20"])
        assert result == 0
        captured = capsys.readouterr()
        assert "Benchmark:" in captured.out
        assert "games/s" in captured.out

    def test_num_games_must_be_positive(self):
        with pytest.raises(SystemExit, match="2"):
            main(["benchmark", "--num-games", "0"])


class TestCLIDumpConfig:
    def test_dump_config(self, tmp_path, capsys):
        out = tmp_path / "default.json"
        assert main(["dump-config", str(out)]) == 0
        assert GameConfig.load(out) == GameConfig()
        assert "Wrote default config" in capsys.readouterr().out
