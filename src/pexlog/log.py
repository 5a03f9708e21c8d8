"""
Log — the base logger.

A Log has a dotted name, a threshold held in a ThresholdMemory shared
with its parent and children, and a set of preamble properties that are
attached to every record it sends.

The base class filters and builds records but does not write them
anywhere: send() is a no-op. It is the baseline default logger used
when nothing else has been configured. Subclasses (ScreenLog) override
send() to deliver records.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .levels import Level, Threshold, level_name, should_log
from .memory import ThresholdMemory


@dataclass
class LogRecord:
    """A single message that passed its log's threshold.

    Attributes:
        name: Dotted name of the log that produced it ('' for root)
        importance: Integer importance (see levels.Level)
        message: The message text
        properties: Preamble properties merged with call properties
        timestamp: Seconds since the epoch when the record was built
    """
    name: str
    importance: int
    message: str
    properties: Dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)

    @property
    def level_name(self) -> str:
        return level_name(self.importance)


class Log:
    """Threshold-filtered logger with hierarchical names.

    Usage::

        log = Log(threshold=Level.WARN, name='pipeline')
        log.info("skipped")                # below threshold
        log.warn("disk nearly full", free_mb=12)
        io = log.create_child_log('io', Level.DEBUG)
        io.debug("opened", path=src)       # name is 'pipeline.io'
    """

    # Variant tag: can this log render to a console/terminal?
    is_screen_capable = False

    def __init__(
        self,
        threshold: int = Level.INFO,
        name: str = '',
        memory: Optional[ThresholdMemory] = None,
        preamble: Optional[Dict[str, Any]] = None,
    ):
        self._name = name
        if memory is None:
            if not name and threshold == Threshold.INHERIT:
                raise ValueError("The root threshold cannot be INHERIT")
            memory = ThresholdMemory()
        self._memory = memory
        # INHERIT leaves whatever the family already recorded for this name
        if threshold != Threshold.INHERIT:
            memory.set_threshold_for(name, threshold)
        self._preamble: Dict[str, Any] = dict(preamble or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, threshold={self.get_threshold()!r})"

    # -----------------------------------------------------------------
    # Naming and thresholds
    # -----------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def memory(self) -> ThresholdMemory:
        return self._memory

    def _full_name(self, child_name: str) -> str:
        if not child_name:
            return self._name
        if not self._name:
            return child_name
        return f"{self._name}.{child_name}"

    def get_threshold(self) -> int:
        """Effective threshold of this log (inherited if not set)."""
        return self._memory.get_threshold_for(self._name)

    def set_threshold(self, threshold: int) -> None:
        """Set this log's threshold; INHERIT reverts to the parent's."""
        self._memory.set_threshold_for(self._name, threshold)

    def get_threshold_for(self, child_name: str) -> int:
        """Effective threshold of a descendant, named relative to this log."""
        return self._memory.get_threshold_for(self._full_name(child_name))

    def set_threshold_for(self, child_name: str, threshold: int) -> None:
        """Set a descendant's threshold, named relative to this log."""
        self._memory.set_threshold_for(self._full_name(child_name), threshold)

    def sends(self, importance: int) -> bool:
        """True if a message of this importance would be sent."""
        return should_log(importance, self.get_threshold())

    # -----------------------------------------------------------------
    # Preamble
    # -----------------------------------------------------------------

    def add_preamble_property(self, name: str, value: Any) -> None:
        """Attach a property to every record this log sends."""
        self._preamble[name] = value

    @property
    def preamble(self) -> Dict[str, Any]:
        return dict(self._preamble)

    # -----------------------------------------------------------------
    # Emitting
    # -----------------------------------------------------------------

    def log(self, importance: int, message: str, **properties: Any) -> bool:
        """Send a message if importance passes the threshold.

        Call properties override preamble properties of the same name.

        Returns:
            True if the record was built and handed to send()
        """
        if not self.sends(importance):
            return False
        props = dict(self._preamble)
        props.update(properties)
        self.send(LogRecord(self._name, int(importance), message, props))
        return True

    def debug(self, message: str, **properties: Any) -> bool:
        return self.log(Level.DEBUG, message, **properties)

    def info(self, message: str, **properties: Any) -> bool:
        return self.log(Level.INFO, message, **properties)

    def warn(self, message: str, **properties: Any) -> bool:
        return self.log(Level.WARN, message, **properties)

    def error(self, message: str, **properties: Any) -> bool:
        return self.log(Level.ERROR, message, **properties)

    def fatal(self, message: str, **properties: Any) -> bool:
        return self.log(Level.FATAL, message, **properties)

    def send(self, record: LogRecord) -> None:
        """Deliver a record. The base Log discards it."""

    # -----------------------------------------------------------------
    # Children
    # -----------------------------------------------------------------

    def create_child_log(self, child_name: str,
                         threshold: int = Threshold.INHERIT) -> 'Log':
        """Create a log named '<this>.<child_name>' in the same family.

        The child shares this log's threshold memory and a copy of its
        preamble; subclasses pick the child's class in _spawn(). With the
        default INHERIT threshold it follows this log's threshold.
        """
        return self._spawn(self._full_name(child_name), threshold)

    def _spawn(self, name: str, threshold: int) -> 'Log':
        return Log(threshold=threshold, name=name, memory=self._memory,
                   preamble=self._preamble)
