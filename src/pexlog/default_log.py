"""
The process-wide default log.

Exactly one Log is "the default" at any time. Code that has no log of
its own writes to get_default_log(). If nothing was configured, a
baseline Log (no output, not screen-capable) is installed on first use,
so reading the default never fails.

Replacing the default happens under a lock and is published with a
single reference assignment, so concurrent readers see either the old
log or the new, fully built one.

Narrowing to ScreenLog is checked: as_screen_log() raises CastError
rather than handing back a log that lacks the screen operations.
"""

import threading
from typing import Optional, TextIO

from .levels import Level, Threshold
from .log import Log
from .screen_log import ScreenLog


class CastError(TypeError):
    """A log is not of the variant it was narrowed to."""


# =============================================================================
# Module-level singleton
# =============================================================================

_default: Optional[Log] = None
_lock = threading.Lock()


def get_default_log() -> Log:
    """Get the default Log, installing a baseline Log if none is set."""
    global _default
    log = _default
    if log is None:
        with _lock:
            if _default is None:
                _default = Log()
            log = _default
    return log


def set_default_log(log: Log) -> Optional[Log]:
    """Install log as the default.

    Returns:
        The previous default, or None if none was set
    """
    global _default
    if not isinstance(log, Log):
        raise TypeError(f"Default log must be a Log, not {type(log).__name__}")
    with _lock:
        previous = _default
        _default = log
    return previous


def create_default_log(threshold: int = Level.INFO,
                       preamble: Optional[dict] = None) -> Log:
    """Install and return a fresh baseline Log as the default."""
    log = Log(threshold=threshold, preamble=preamble)
    set_default_log(log)
    return log


def create_screen_default_log(
    verbose: bool = False,
    threshold: int = Level.INFO,
    stream: Optional[TextIO] = None,
    screen_threshold: int = Threshold.PASS_ALL,
    preamble: Optional[dict] = None,
) -> ScreenLog:
    """Install and return a fresh ScreenLog as the default.

    Call once at program startup, after reading configuration.
    """
    log = ScreenLog(verbose=verbose, threshold=threshold, stream=stream,
                    screen_threshold=screen_threshold, preamble=preamble)
    set_default_log(log)
    return log


def close_default_log() -> None:
    """Forget the default; the next read installs a baseline Log."""
    global _default
    with _lock:
        _default = None


# =============================================================================
# Variant queries
# =============================================================================

def is_screen_log(log: Log) -> bool:
    """True if log is a ScreenLog at runtime."""
    return isinstance(log, ScreenLog)


def as_screen_log(log: Log) -> ScreenLog:
    """Return log typed as a ScreenLog.

    Raises:
        CastError: log is not a ScreenLog
    """
    if not isinstance(log, ScreenLog):
        raise CastError(f"{type(log).__name__} is not a ScreenLog")
    return log


def default_log_is_screen_log() -> bool:
    """True if the current default log is a ScreenLog."""
    return is_screen_log(get_default_log())


def get_default_as_screen_log() -> ScreenLog:
    """The current default log as a ScreenLog.

    Raises:
        CastError: the default log is not a ScreenLog
    """
    return as_screen_log(get_default_log())
