"""
Severity levels and the threshold test.

Importance is a plain integer; larger means more severe. The named
levels are reference points, and any integer in between is valid
(e.g. DEBUG - 5 for extra-chatty debug output).

    ←── quieter ──────────────────────── louder ──→
    FATAL   ERROR   WARN    INFO    DEBUG
     20      15      10      0      -10

The emit rule is:

    threshold == PASS_ALL  or  importance >= threshold  →  message is sent

PASS_ALL is tested before any numeric comparison, so its ordinal never
takes part in the decision. Its value is stable because configuration
files and serialized records may carry it.
"""

from enum import IntEnum
from typing import Tuple, Union


class Level(IntEnum):
    """Named importance levels."""
    DEBUG = -10
    INFO = 0
    WARN = 10
    ERROR = 15
    FATAL = 20


class Threshold(IntEnum):
    """Special threshold values.

    PASS_ALL: accept every message regardless of importance.
    INHERIT: use the nearest ancestor's threshold (named logs only).
    """
    PASS_ALL = -2147483647
    INHERIT = -2147483648


# Aliases accepted by parse_level()
_LEVEL_ALIASES = {
    'WARNING': Level.WARN,
    'CRITICAL': Level.FATAL,
}


def pass_all() -> Threshold:
    """Return the threshold that disables filtering."""
    return Threshold.PASS_ALL


def should_log(message_severity: int, threshold: int) -> bool:
    """Decide whether a message of the given importance passes a threshold.

    Args:
        message_severity: Importance of the message
        threshold: Minimum importance to send, or Threshold.PASS_ALL

    Returns:
        True if the message should be sent
    """
    if threshold == Threshold.PASS_ALL:
        return True
    return message_severity >= threshold


def level_name(importance: int) -> str:
    """Name of the highest named level that is not above importance.

    Anything below DEBUG is reported as DEBUG.
    """
    name = Level.DEBUG.name
    for level in sorted(Level):
        if importance >= level:
            name = level.name
    return name


def parse_level(value: Union[int, str]) -> int:
    """Convert a level given as int, numeric string, or name to an int.

    Names are case-insensitive and cover both Level and Threshold
    members ("warn", "PASS_ALL", "inherit") plus WARNING/CRITICAL.

    Raises:
        ValueError: value is not a recognised level
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a log level: {value!r}")
    if isinstance(value, int):
        return int(value)
    if not isinstance(value, str):
        raise ValueError(f"Not a log level: {value!r}")

    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass

    key = text.upper().replace('-', '_')
    if key in Level.__members__:
        return Level[key]
    if key in Threshold.__members__:
        return Threshold[key]
    if key in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[key]
    raise ValueError(f"Unknown log level: {value!r}")


def parse_threshold_spec(spec: str) -> Tuple[str, int]:
    """Parse a "NAME:LEVEL" threshold spec.

    Examples:
        pipeline.io:DEBUG   # ('pipeline.io', Level.DEBUG)
        :WARN               # root log, ('', Level.WARN)
        pipeline            # ('pipeline', Level.INFO)
        pipeline:-5         # ('pipeline', -5)

    Only the last colon separates the level, so names may not contain
    colons but numeric levels may be negative.

    Raises:
        ValueError: spec is not a string, or its level is not recognised
    """
    if not isinstance(spec, str):
        raise ValueError(f"Not a threshold spec: {spec!r}")
    name, sep, level = spec.rpartition(':')
    if not sep:
        return spec.strip(), Level.INFO
    level = level.strip()
    if not level:
        return name.strip(), Level.INFO
    return name.strip(), parse_level(level)
