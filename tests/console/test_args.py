"""
Tests for appconsole/args.py.

Tests key functionality including:
- Command pattern parsing
- Option flag translation
- Help formatter defaults
"""

import argparse

import pytest

from appconsole.args import (
    ArgumentSpec,
    DefaultsHelpFormatter,
    option_to_argparse,
    parse_command_pattern,
    validate_command_name,
)
from appconsole.constants import MAX_COMMAND_NAME_LENGTH
from appconsole.descriptors import OptionDescriptor
from appconsole.errors import ConfigurationError

# =============================================================================
# Test validate_command_name
# =============================================================================


@pytest.mark.unit
class TestValidateCommandName:
    """Test validate_command_name helper function."""

    @pytest.mark.parametrize("name", ["hello", "subCommand2", "db:migrate", "a-b_c"])
    def test_accepts_valid_names(self, name):
        """Test accepts names made of letters, digits and separators."""
        validate_command_name(name)  # Should not raise

    def test_rejects_empty_name(self):
        """Test rejects empty string."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_command_name("")

        assert "must have a name" in str(exc_info.value)

    def test_rejects_long_name(self):
        """Test rejects names longer than the limit."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_command_name("a" * (MAX_COMMAND_NAME_LENGTH + 1))

        assert "exceeds maximum length" in str(exc_info.value)

    @pytest.mark.parametrize("name", ["1abc", "-x", "my tool", "a@b"])
    def test_rejects_invalid_names(self, name):
        """Test rejects names not starting with a letter or with bad chars."""
        with pytest.raises(ConfigurationError):
            validate_command_name(name)


# =============================================================================
# Test parse_command_pattern
# =============================================================================


@pytest.mark.unit
class TestParseCommandPattern:
    """Test command pattern parsing."""

    def test_bare_name(self):
        """Test a pattern without placeholders."""
        assert parse_command_pattern("hello") == ("hello", [])

    def test_required_and_optional(self):
        """Test <required> and [optional] placeholders."""
        name, specs = parse_command_pattern("copy <source> [target]")

        assert name == "copy"
        assert specs == [
            ArgumentSpec("source", required=True),
            ArgumentSpec("target", required=False),
        ]

    def test_variadic(self):
        """Test a trailing variadic placeholder."""
        _, specs = parse_command_pattern("add <files...>")

        assert specs == [ArgumentSpec("files", required=True, variadic=True)]
        assert specs[0].nargs == "+"

    def test_extra_whitespace_is_ignored(self):
        """Test patterns are split on any whitespace."""
        name, specs = parse_command_pattern("  run   <x>  ")

        assert name == "run"
        assert [s.name for s in specs] == ["x"]

    @pytest.mark.parametrize(
        "pattern",
        [
            "",
            "copy source",
            "copy <>",
            "copy <a...> <b>",
            "copy [a] <b>",
            "copy <a> <a>",
            "copy <a",
        ],
    )
    def test_rejects_malformed_patterns(self, pattern):
        """Test malformed patterns raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            parse_command_pattern(pattern)


@pytest.mark.unit
class TestArgumentSpec:
    """Test ArgumentSpec nargs mapping."""

    @pytest.mark.parametrize(
        "required,variadic,nargs",
        [(True, False, None), (False, False, "?"), (True, True, "+"), (False, True, "*")],
    )
    def test_nargs(self, required, variadic, nargs):
        """Test nargs follows required/variadic."""
        assert ArgumentSpec("x", required, variadic).nargs == nargs

    def test_add_to_parser(self):
        """Test the argument is declared on the parser."""
        parser = argparse.ArgumentParser()
        ArgumentSpec("files", required=False, variadic=True).add_to(parser)

        assert parser.parse_args(["a", "b"]).files == ["a", "b"]
        assert parser.parse_args([]).files == []


# =============================================================================
# Test option_to_argparse
# =============================================================================


@pytest.mark.unit
class TestOptionToArgparse:
    """Test option flag translation."""

    def test_value_option(self):
        """Test an option with a required value."""
        args, kwargs = option_to_argparse(
            OptionDescriptor("-p, --port <port>", "Port", type=int, default=80)
        )

        assert args == ["-p", "--port"]
        assert kwargs["metavar"] == "port"
        assert kwargs["type"] is int
        assert kwargs["default"] == 80
        assert kwargs["help"] == "Port"
        assert "nargs" not in kwargs

    def test_optional_value_option(self):
        """Test [value] makes the value optional."""
        _, kwargs = option_to_argparse(OptionDescriptor("-c, --color [name]"))

        assert kwargs["nargs"] == "?"
        assert kwargs["const"] is True

    def test_switch(self):
        """Test a flag without value is a boolean switch."""
        args, kwargs = option_to_argparse(OptionDescriptor("-v, --verbose"))

        assert args == ["-v", "--verbose"]
        assert kwargs["action"] == "store_true"
        assert kwargs["default"] is False

    def test_negated_switch(self):
        """Test --no-x stores False into x, defaulting to True."""
        _, kwargs = option_to_argparse(OptionDescriptor("--no-cache"))

        assert kwargs["action"] == "store_false"
        assert kwargs["dest"] == "cache"
        assert kwargs["default"] is True

    def test_pipe_separator(self):
        """Test short and long flags may be separated by a pipe."""
        args, _ = option_to_argparse(OptionDescriptor("-f|--force"))

        assert args == ["-f", "--force"]

    def test_required(self):
        """Test required options are passed through."""
        _, kwargs = option_to_argparse(OptionDescriptor("--name <n>", required=True))

        assert kwargs["required"] is True

    def test_rejects_missing_flag(self):
        """Test a placeholder alone is rejected."""
        with pytest.raises(ConfigurationError):
            option_to_argparse(OptionDescriptor("<value>"))

    def test_rejects_bare_word(self):
        """Test words that are neither flag nor placeholder are rejected."""
        with pytest.raises(ConfigurationError):
            option_to_argparse(OptionDescriptor("--port number"))

    def test_declares_on_parser(self):
        """Test the translated option parses as expected."""
        parser = argparse.ArgumentParser()
        args, kwargs = option_to_argparse(
            OptionDescriptor("-s, --scale <factor>", type=int, default=1)
        )
        parser.add_argument(*args, **kwargs)

        assert parser.parse_args(["-s", "3"]).scale == 3
        assert parser.parse_args([]).scale == 1


# =============================================================================
# Test DefaultsHelpFormatter
# =============================================================================


@pytest.mark.unit
class TestDefaultsHelpFormatter:
    """Test default values in help output."""

    def _help(self, **kwargs) -> str:
        parser = argparse.ArgumentParser(
            prog="test", formatter_class=DefaultsHelpFormatter
        )
        parser.add_argument("--opt", help="Option", **kwargs)
        return parser.format_help()

    def test_shows_default(self):
        """Test a non-empty default is appended."""
        assert "(default: 42)" in self._help(default=42)

    def test_hides_none_default(self):
        """Test None defaults are not shown."""
        assert "(default:" not in self._help()

    def test_hides_false_default(self):
        """Test False defaults of switches are not shown."""
        assert "(default:" not in self._help(action="store_true")
