"""
Argument declaration helpers.

This module translates command patterns (``"name <required> [optional]"``)
and option flag strings (``"-p, --port <port>"``) into ``argparse``
declarations, and provides the help formatter used by every command node.
"""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from typing import Any

from .constants import MAX_COMMAND_NAME_LENGTH
from .descriptors import OptionDescriptor
from .errors import ConfigurationError

_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_:.-]*$")
_PLACEHOLDER_RE = re.compile(r"^(?:<(?P<req>[^<>\[\]]+)>|\[(?P<opt>[^<>\[\]]+)\])$")
_FLAG_SPLIT_RE = re.compile(r"[\s,|]+")


class DefaultsHelpFormatter(argparse.HelpFormatter):
    """
    Help formatter that displays default values.

    Appends ``(default: ...)`` to the help text of every argument whose default
    is neither suppressed, ``None`` nor ``False``.
    """

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        default = action.default
        if default is argparse.SUPPRESS or default is None or default is False:
            return help_text
        return help_text + f" (default: {default})"


@dataclass(frozen=True)
class ArgumentSpec:
    """A positional argument placeholder taken from a command pattern."""

    name: str
    required: bool = True
    variadic: bool = False

    @property
    def nargs(self) -> str | None:
        if self.variadic:
            return "+" if self.required else "*"
        return None if self.required else "?"

    def add_to(self, parser: argparse.ArgumentParser) -> argparse.Action:
        """Declare this argument on an argparse parser."""
        kwargs: dict[str, Any] = {"metavar": self.name}
        if self.nargs is not None:
            kwargs["nargs"] = self.nargs
        return parser.add_argument(self.name, **kwargs)


def validate_command_name(name: str) -> None:
    """Validate a bare command or group name."""
    if not name:
        raise ConfigurationError("Command must have a name")

    if len(name) > MAX_COMMAND_NAME_LENGTH:
        raise ConfigurationError(
            f"Command name '{name[:32]}...' exceeds maximum length of "
            f"{MAX_COMMAND_NAME_LENGTH} characters"
        )

    if not _NAME_RE.match(name):
        raise ConfigurationError(
            f"Command name '{name}' must start with a letter and contain only "
            "letters, numbers, underscores, colons, dots and hyphens"
        )


def _parse_placeholder(token: str, pattern: str) -> ArgumentSpec:
    match = _PLACEHOLDER_RE.match(token)
    if not match:
        raise ConfigurationError(
            f"Invalid argument '{token}' in command '{pattern}', "
            "expected <required> or [optional]"
        )
    required = match.group("req") is not None
    name = match.group("req") or match.group("opt")
    variadic = name.endswith("...")
    if variadic:
        name = name[:-3]
    if not name:
        raise ConfigurationError(f"Empty argument name in command '{pattern}'")
    return ArgumentSpec(name=name, required=required, variadic=variadic)


def _check_argument_order(specs: list[ArgumentSpec], pattern: str) -> None:
    seen_optional = False
    for i, spec in enumerate(specs):
        if spec.variadic and i != len(specs) - 1:
            raise ConfigurationError(
                f"Only the last argument of '{pattern}' can be variadic"
            )
        if spec.required and seen_optional:
            raise ConfigurationError(
                f"Required argument '{spec.name}' of '{pattern}' "
                "cannot follow an optional one"
            )
        seen_optional = seen_optional or not spec.required


def parse_command_pattern(pattern: str) -> tuple[str, list[ArgumentSpec]]:
    """
    Split a command pattern into its name and positional argument specs.

    Args:
        pattern: e.g. ``"copy <source> [target]"`` or ``"add <files...>"``

    Returns:
        Tuple of command name and argument specs in declaration order

    Raises:
        ConfigurationError: If the name or any placeholder is malformed
    """
    tokens = pattern.split()
    if not tokens:
        raise ConfigurationError("Command must have a name")

    name, placeholders = tokens[0], tokens[1:]
    validate_command_name(name)

    specs = [_parse_placeholder(token, pattern) for token in placeholders]
    _check_argument_order(specs, pattern)

    names = [spec.name for spec in specs]
    if len(set(names)) != len(names):
        raise ConfigurationError(f"Duplicate argument name in command '{pattern}'")

    return name, specs


def _split_flags(flags: str) -> tuple[list[str], str | None]:
    """Return option strings and the value placeholder (if any)."""
    option_strings: list[str] = []
    placeholder: str | None = None
    for token in _FLAG_SPLIT_RE.split(flags.strip()):
        if not token:
            continue
        if token.startswith("-"):
            option_strings.append(token)
        elif token[0] in "<[" and placeholder is None:
            placeholder = token
        else:
            raise ConfigurationError(f"Invalid token '{token}' in option '{flags}'")

    if not option_strings:
        raise ConfigurationError(f"Option '{flags}' does not declare any flag")
    return option_strings, placeholder


def option_to_argparse(option: OptionDescriptor) -> tuple[list[str], dict[str, Any]]:
    """
    Translate an option descriptor into ``add_argument`` args and kwargs.

    Raises:
        ConfigurationError: If the flag string cannot be understood
    """
    option_strings, placeholder = _split_flags(option.flags)
    kwargs: dict[str, Any] = {"help": option.description}
    if option.required:
        kwargs["required"] = True

    long_flags = [s for s in option_strings if s.startswith("--")]

    if placeholder is None:
        negated = bool(long_flags) and long_flags[0].startswith("--no-")
        if negated:
            kwargs["action"] = "store_false"
            kwargs["dest"] = long_flags[0][5:].replace("-", "_")
            kwargs["default"] = True if option.default is None else option.default
        else:
            kwargs["action"] = "store_true"
            kwargs["default"] = False if option.default is None else option.default
        return option_strings, kwargs

    kwargs["metavar"] = placeholder.strip("<>[]").removesuffix("...")
    if option.type is not None:
        kwargs["type"] = option.type
    kwargs["default"] = option.default
    if placeholder.startswith("["):
        kwargs["nargs"] = "?"
        kwargs["const"] = True
    return option_strings, kwargs
