"""
pexlog — severity thresholds and the process-wide default log.

Public API:
    Level, Threshold        — named importances and the PASS_ALL/INHERIT sentinels
    pass_all, should_log    — the threshold test
    level_name, parse_level, parse_threshold_spec
    ThresholdMemory         — per-name thresholds with ancestor fallback
    Log, LogRecord          — baseline (silent) logger and its records
    ScreenLog               — logger that writes to a console stream
    get_default_log, set_default_log, create_default_log,
    create_screen_default_log, close_default_log
    is_screen_log, as_screen_log, CastError
    default_log_is_screen_log, get_default_as_screen_log
    configure_default_log   — build the default from .pexlog.json files
    trace                   — function tracing decorator
"""

from pexlog._version import __version__, __app_name__
from pexlog.levels import (
    Level, Threshold, pass_all, should_log,
    level_name, parse_level, parse_threshold_spec,
)
from pexlog.memory import ThresholdMemory
from pexlog.log import Log, LogRecord
from pexlog.screen_log import ScreenLog
from pexlog.default_log import (
    CastError,
    get_default_log, set_default_log, create_default_log,
    create_screen_default_log, close_default_log,
    is_screen_log, as_screen_log,
    default_log_is_screen_log, get_default_as_screen_log,
)
from pexlog.config import configure_default_log
from pexlog.trace import trace

__all__ = [
    "__version__", "__app_name__",
    "Level", "Threshold", "pass_all", "should_log",
    "level_name", "parse_level", "parse_threshold_spec",
    "ThresholdMemory",
    "Log", "LogRecord", "ScreenLog",
    "CastError",
    "get_default_log", "set_default_log", "create_default_log",
    "create_screen_default_log", "close_default_log",
    "is_screen_log", "as_screen_log",
    "default_log_is_screen_log", "get_default_as_screen_log",
    "configure_default_log",
    "trace",
]
