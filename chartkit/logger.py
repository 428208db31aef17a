"""A minimal timestamped logger that writes lines to text streams."""

from __future__ import annotations

import re
import sys
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

_VERB = re.compile(r"%(%|v)")


def _rfc3339_nano(moment: datetime) -> str:
    """UTC timestamp with trailing zeros of the fraction dropped."""
    base = moment.strftime("%Y-%m-%dT%H:%M:%S")
    fraction = f"{moment.microsecond:06d}".rstrip("0")
    return base + (f".{fraction}" if fraction else "") + "Z"


def _sprintf(fmt: str, args: tuple) -> str:
    """Printf-style formatting that also accepts the generic %v verb."""
    translated = _VERB.sub(lambda m: "%%" if m.group(1) == "%" else "%s", fmt)
    return translated % args


class StdoutLogger:
    """Writes timestamped, levelled lines to an output and an error stream.

    With no ``time_format`` the timestamp is RFC 3339 in UTC with a
    fractional second; otherwise ``time_format`` is a strftime pattern.
    Streams left unset resolve to ``sys.stdout`` and ``sys.stderr`` when
    a line is written.
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        time_format: Optional[str] = None,
    ):
        self.stdout = stdout
        self.stderr = stderr
        self.time_format = time_format

    def _timestamp(self) -> str:
        now = datetime.now(timezone.utc)
        if self.time_format is None:
            return _rfc3339_nano(now)
        return now.strftime(self.time_format)

    def _line(self, args: tuple) -> str:
        return " ".join(str(a) for a in (self._timestamp(), *args)) + "\n"

    def info(self, *args: Any) -> None:
        self.println("[INFO]", *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.println("[INFO]", _sprintf(fmt, args))

    def debug(self, *args: Any) -> None:
        self.println("[DEBUG]", *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.println("[DEBUG]", _sprintf(fmt, args))

    def error(self, *args: Any) -> None:
        self.println("[ERROR]", *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.println("[ERROR]", _sprintf(fmt, args))

    def err(self, error: Optional[BaseException]) -> None:
        """Log an exception's message; does nothing for None."""
        if error is not None:
            self.println("[ERROR]", str(error))

    def fatal_err(self, error: Optional[BaseException]) -> None:
        """Log an exception's message and exit with status 1; does nothing for None."""
        if error is not None:
            self.println("[FATAL]", str(error))
            raise SystemExit(1)

    def println(self, *args: Any) -> None:
        """Write a timestamped line to the output stream."""
        stream = self.stdout if self.stdout is not None else sys.stdout
        stream.write(self._line(args))

    def errorln(self, *args: Any) -> None:
        """Write a timestamped line to the error stream."""
        stream = self.stderr if self.stderr is not None else sys.stderr
        stream.write(self._line(args))


def info(log: Optional[StdoutLogger], *args: Any) -> None:
    """Log an info message when a logger is given."""
    if log is not None:
        log.info(*args)


def infof(log: Optional[StdoutLogger], fmt: str, *args: Any) -> None:
    """Log a formatted info message when a logger is given."""
    if log is not None:
        log.infof(fmt, *args)


def debug(log: Optional[StdoutLogger], *args: Any) -> None:
    """Log a debug message when a logger is given."""
    if log is not None:
        log.debug(*args)


def debugf(log: Optional[StdoutLogger], fmt: str, *args: Any) -> None:
    """Log a formatted debug message when a logger is given."""
    if log is not None:
        log.debugf(fmt, *args)