from __future__ import annotations

import enum
from datetime import datetime
from typing import Callable

from rich.console import Console
from rich.text import Text

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Level(enum.Enum):
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARN = "WARN"
    ERROR = "ERROR"
    DEBUG = "DEBUG"


# 256-colour palette indices match the gum styles this template started from.
_STYLES: dict[Level, str] = {
    Level.INFO: "color(212)",
    Level.SUCCESS: "color(40)",
    Level.WARN: "color(208)",
    Level.ERROR: "bold color(196)",
    Level.DEBUG: "dim",
}


def _coerce_level(level: Level | str) -> Level | None:
    if isinstance(level, Level):
        return level
    try:
        return Level[str(level)]
    except KeyError:
        return None


def format_line(level: Level | None, message: str | Text, timestamp: str) -> Text:
    """Render one log line; ``level=None`` is the unstyled fallback.

    A ``Text`` message keeps its own spans on top of the level style.
    """
    if level is None:
        line = Text(f"[{timestamp}] ")
    else:
        line = Text(f"[{timestamp} {level.value}] ", style=_STYLES[level])
    line.append(message if isinstance(message, Text) else str(message))
    return line


class Logger:
    """Levelled, timestamped terminal logger.

    ERROR lines go to stderr and everything else to stdout. DEBUG lines are
    dropped unless ``verbose`` is set. Levels may be given as ``Level``
    members or as plain strings; unknown strings are still printed, without
    styling.
    """

    def __init__(
        self,
        *,
        verbose: bool = False,
        console: Console | None = None,
        error_console: Console | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.verbose = bool(verbose)
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, soft_wrap=True)
        self._clock = clock

    def log(self, level: Level | str, message: str | Text) -> None:
        resolved = _coerce_level(level)
        if resolved is Level.DEBUG and not self.verbose:
            return
        line = format_line(resolved, message, self._clock().strftime(TIMESTAMP_FORMAT))
        target = self.error_console if resolved is Level.ERROR else self.console
        target.print(line)

    def info(self, message: str | Text) -> None:
        self.log(Level.INFO, message)

    def success(self, message: str) -> None:
        self.log(Level.SUCCESS, message)

    def warn(self, message: str) -> None:
        self.log(Level.WARN, message)

    def error(self, message: str) -> None:
        self.log(Level.ERROR, message)

    def debug(self, message: str) -> None:
        self.log(Level.DEBUG, message)
