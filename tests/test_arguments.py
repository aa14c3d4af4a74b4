"""
Tests for pacman-style argument parsing.
"""

import pytest

from baur.core.domain.arguments import ParsedArguments, parse_arguments
from baur.core.errors import ParseError


class TestParseArguments:
    def test_operation_flags_and_target(self):
        args = parse_arguments(["-Syu", "vim"])
        assert args.operation == "S"
        assert args.operation_flags == ("y", "u")
        assert args.target == "vim"
        assert args.additional_options == ()

    def test_flag_order_is_preserved(self):
        assert parse_arguments(["-Qsyi"]).operation_flags == ("s", "y", "i")

    def test_target_before_operation(self):
        args = parse_arguments(["vim", "-S"])
        assert args.operation == "S"
        assert args.target == "vim"

    def test_long_options_are_collected(self):
        args = parse_arguments(["--noconfirm", "-S", "vim", "--debug"])
        assert args.additional_options == ("--noconfirm", "--debug")
        assert args.has_option("noconfirm")
        assert not args.has_option("needed")

    def test_empty(self):
        assert parse_arguments([]) == ParsedArguments()

    def test_long_option_does_not_count_as_operation(self):
        args = parse_arguments(["--help"])
        assert args.operation is None

    @pytest.mark.parametrize(
        "argv",
        [
            ["-S", "vim", "-S", "foo"],
            ["-S", "-Q"],
            ["vim", "-Ss", "-R"],
        ],
    )
    def test_multiple_operations(self, argv):
        with pytest.raises(ParseError, match="Multiple operations"):
            parse_arguments(argv)

    def test_multiple_targets(self):
        with pytest.raises(ParseError, match="Multiple targets"):
            parse_arguments(["-S", "vim", "emacs"])

    def test_result_is_immutable(self):
        args = parse_arguments(["-S", "vim"])
        with pytest.raises(AttributeError):
            args.target = "emacs"  # type: ignore[misc]
