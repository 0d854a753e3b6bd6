"""Tests for command-line argument parsing."""

from __future__ import annotations

import logging

import pytest

from untd.cli import normalize_argv, parse_arguments
from untd.config import Config


@pytest.fixture
def config() -> Config:
    return Config(
        default_timezone="local",
        default_format="default",
        copy_to_clipboard=True,
        log_level=logging.WARNING,
    )


class TestParseArguments:
    def test_defaults(self, config: Config) -> None:
        args = parse_arguments([], config)
        assert args.timestamp is None
        assert args.format == "default"
        assert args.offset is None
        assert args.range_count == 1
        assert args.timezone == "local"
        assert args.copy is True
        assert args.verbose is False

    def test_defaults_follow_config(self) -> None:
        config = Config(
            default_timezone="JST",
            default_format="jpwd",
            copy_to_clipboard=False,
            log_level=logging.WARNING,
        )
        args = parse_arguments([], config)
        assert args.timezone == "JST"
        assert args.format == "jpwd"
        assert args.copy is False

    def test_all_options(self, config: Config) -> None:
        args = parse_arguments(
            ["1742776709", "-f", "iso", "-o", "3h", "-r", "4", "-z", "UTC", "--no-copy", "-v"],
            config,
        )
        assert args.timestamp == 1742776709
        assert args.format == "iso"
        assert args.offset == "3h"
        assert args.range_count == 4
        assert args.timezone == "UTC"
        assert args.copy is False
        assert args.verbose is True

    @pytest.mark.parametrize(
        "argv",
        [["-o", "-1d"], ["--offset", "-1d"], ["--offset=-1d"], ["-o=-1d"]],
    )
    def test_negative_offset(self, config: Config, argv: list[str]) -> None:
        assert parse_arguments(argv, config).offset == "-1d"

    @pytest.mark.parametrize(
        ("argv", "expected"),
        [(["-z", "-05:00"], "-05:00"), (["--timezone", "-0330"], "-0330"), (["-z", "-05"], "-05")],
    )
    def test_negative_timezone_offset(self, config: Config, argv: list[str], expected: str) -> None:
        assert parse_arguments(argv, config).timezone == expected

    def test_negative_timestamp(self, config: Config) -> None:
        assert parse_arguments(["-86400"], config).timestamp == -86400

    def test_zero_range_is_left_for_the_engine(self, config: Config) -> None:
        assert parse_arguments(["-r", "0"], config).range_count == 0

    def test_non_integer_range_exits(self, config: Config) -> None:
        with pytest.raises(SystemExit):
            parse_arguments(["-r", "many"], config)


class TestNormalizeArgv:
    def test_binds_negative_offset(self) -> None:
        assert normalize_argv(["-f", "iso", "-o", "-30m"]) == ["-f", "iso", "--offset=-30m"]

    def test_binds_negative_timezone_offset(self) -> None:
        assert normalize_argv(["-z", "-05:00", "-f", "iso"]) == ["--timezone=-05:00", "-f", "iso"]
        assert normalize_argv(["--timezone", "-0330"]) == ["--timezone=-0330"]

    def test_leaves_other_tokens(self) -> None:
        argv = ["-o", "2d", "-z", "JST", "-f", "-%d"]
        assert normalize_argv(argv) == argv
