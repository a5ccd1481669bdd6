"""LogContext: explicit logging setup passed to the command runner.

Verbosity flags pick a default level; the CARGO_BOOTSTRAP_LOG environment
variable, when set, overrides it with a filter string such as
``debug`` or ``info,cargo_bootstrap.command_runner=trace``.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

from cargo_bootstrap.errors import LogFilterError

LOG_ENV_VAR = "CARGO_BOOTSTRAP_LOG"
LOGGER_NAME = "cargo_bootstrap"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

# Above CRITICAL so nothing gets through.
_OFF = logging.CRITICAL + 10


class Verbosity(Enum):
    OFF = "off"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    @property
    def logging_level(self):
        return _LOGGING_LEVELS[self]

    @classmethod
    def from_counts(cls, verbose=0, quiet=0):
        """Step away from INFO by the -v/-q counts, clamped to the scale."""
        scale = list(cls)
        index = scale.index(cls.INFO) + verbose - quiet
        return scale[max(0, min(index, len(scale) - 1))]

    @classmethod
    def parse(cls, name):
        key = name.strip().lower()
        if key == "warning":
            key = "warn"
        try:
            return cls(key)
        except ValueError:
            raise LogFilterError(f"unknown level {name!r}") from None


_LOGGING_LEVELS = {
    Verbosity.OFF: _OFF,
    Verbosity.ERROR: logging.ERROR,
    Verbosity.WARN: logging.WARNING,
    Verbosity.INFO: logging.INFO,
    Verbosity.DEBUG: logging.DEBUG,
    Verbosity.TRACE: TRACE,
}


@dataclass(frozen=True)
class LogFilter:
    """Parsed form of a filter string: a default level plus per-logger levels."""

    default: Optional[Verbosity] = None
    targets: Dict[str, Verbosity] = field(default_factory=dict)

    @classmethod
    def parse(cls, text):
        default = None
        targets = {}
        for directive in text.split(","):
            directive = directive.strip()
            if not directive:
                continue
            if "=" in directive:
                target, _, level = directive.partition("=")
                if not target.strip():
                    raise LogFilterError(f"missing logger name in {directive!r}")
                targets[target.strip()] = Verbosity.parse(level)
            else:
                default = Verbosity.parse(directive)
        return cls(default=default, targets=targets)


class LogContext:
    """Owns the package logger and its effective level.

    Args:
        verbosity: Level derived from the command-line flags.
        log_filter: Optional parsed filter; its default wins over *verbosity*.
        stream: Where the console handler writes. Defaults to stderr.
    """

    def __init__(self, verbosity=Verbosity.INFO, log_filter=None, stream=None):
        self._filter = log_filter or LogFilter()
        self.verbosity = self._filter.default or verbosity
        self._stream = stream
        self.logger = logging.getLogger(LOGGER_NAME)

    @classmethod
    def from_environment(cls, verbosity, environ):
        text = environ.get(LOG_ENV_VAR, "")
        if not text.strip():
            return cls(verbosity)
        try:
            log_filter = LogFilter.parse(text)
        except LogFilterError as e:
            raise LogFilterError(
                f"couldn't parse {LOG_ENV_VAR} environment variable: {e.message}"
            ) from e
        return cls(verbosity, log_filter)

    @classmethod
    def for_tests(cls, verbosity=Verbosity.TRACE):
        """Context with levels applied but no console handler attached."""
        context = cls(verbosity)
        context._apply_levels()
        return context

    def install(self):
        """Attach the rich console handler once and apply levels.

        Filter targets outside the package logger get the handler too,
        otherwise their records would never reach the console.
        """
        console = Console(file=self._stream) if self._stream else Console(stderr=True)
        handler = RichHandler(console=console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        for logger in [self.logger] + self._foreign_targets():
            if not any(isinstance(h, RichHandler) for h in logger.handlers):
                logger.addHandler(handler)
        self._apply_levels()
        return self

    def _foreign_targets(self):
        return [
            logging.getLogger(target) for target in self._filter.targets
            if target != LOGGER_NAME and not target.startswith(LOGGER_NAME + ".")
        ]

    def _apply_levels(self):
        self.logger.setLevel(self.verbosity.logging_level)
        for target, level in self._filter.targets.items():
            logging.getLogger(target).setLevel(level.logging_level)

    def get_logger(self, suffix):
        return self.logger.getChild(suffix)
