"""
Rendering of action results and errors for display.
"""

from __future__ import annotations

import json
import traceback
from collections.abc import Mapping
from typing import Any

from .errors import ConsoleError


def _format_error(error: BaseException, verbose: bool) -> str:
    if isinstance(error, ConsoleError) and not verbose:
        return str(error)

    text = f"{type(error).__name__}: {error}"
    if verbose and error.__traceback__ is not None:
        tb = "".join(traceback.format_tb(error.__traceback__))
        text = f"{text}\n{tb.rstrip()}"
    return text


def format_response(value: Any, verbose: bool = False) -> str:
    """
    Format an action result or an error as a displayable string.

    Args:
        value: Exception, mapping, sequence, None or any object
        verbose: Append the traceback when formatting an exception

    Returns:
        Display string
    """
    if isinstance(value, BaseException):
        return _format_error(value, verbose)

    if value is None:
        return ""

    if isinstance(value, str):
        return value

    if isinstance(value, Mapping):
        return json.dumps(dict(value), indent=2, default=str)

    if isinstance(value, (list, tuple)):
        return json.dumps(list(value), indent=2, default=str)

    return str(value)
