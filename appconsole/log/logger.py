"""
Logger class with structured extra fields and a trace level.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .constants import LogConstants

TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]
EXTRA_ATTR = "__console__extra"

logging.addLevelName(TRACE, "TRACE")


class Logger(logging.Logger):
    """
    Logger that keeps ``extra`` fields together on the record.

    Standard loggers merge ``extra`` into the record's attributes, where the
    formatter cannot tell them apart from built-in attributes. Here they are
    stored as one mapping under ``EXTRA_ATTR`` and rendered as ``[key:value]``.
    """

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: Mapping[str, object] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, None, sinfo
        )
        setattr(record, EXTRA_ATTR, dict(extra) if extra else {})
        return record

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at TRACE level, below DEBUG."""
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)
