"""
ScreenLog — a Log that renders records to a console stream.

Output format (one line per record):

    pipeline.io: opened                  # INFO omits the level label
    pipeline.io WARN: disk nearly full
    root FATAL: giving up                # the root log prints as 'root'

In verbose mode every record property follows on its own line:

    pipeline.io WARN: disk nearly full
        free_mb: 12
"""

import sys
from typing import Any, Dict, Optional, TextIO

from .levels import Level, Threshold, should_log
from .log import Log, LogRecord
from .memory import ThresholdMemory


class ScreenLog(Log):
    """Log that writes to a text stream (default: stderr).

    Two thresholds apply: the log threshold decides whether a record is
    built at all, and the screen threshold decides whether it reaches the
    stream. The screen threshold defaults to PASS_ALL.
    """

    is_screen_capable = True

    def __init__(
        self,
        verbose: bool = False,
        threshold: int = Level.INFO,
        name: str = '',
        memory: Optional[ThresholdMemory] = None,
        preamble: Optional[Dict[str, Any]] = None,
        stream: Optional[TextIO] = None,
        screen_threshold: int = Threshold.PASS_ALL,
    ):
        super().__init__(threshold=threshold, name=name, memory=memory,
                         preamble=preamble)
        self._verbose = verbose
        self._stream = stream
        self.set_screen_threshold(screen_threshold)

    # -----------------------------------------------------------------
    # Screen-specific settings
    # -----------------------------------------------------------------

    def set_screen_verbose(self, verbose: bool) -> None:
        """Print record properties under each message when True."""
        self._verbose = bool(verbose)

    def is_screen_verbose(self) -> bool:
        return self._verbose

    def set_screen_threshold(self, threshold: int) -> None:
        if threshold == Threshold.INHERIT:
            raise ValueError("A screen threshold cannot be INHERIT")
        self._screen_threshold = threshold

    def get_screen_threshold(self) -> int:
        return self._screen_threshold

    def set_stream(self, stream: Optional[TextIO]) -> None:
        """Redirect output; None means sys.stderr at write time."""
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    # -----------------------------------------------------------------
    # Delivery
    # -----------------------------------------------------------------

    def format_record(self, record: LogRecord) -> str:
        name = record.name or 'root'
        if record.level_name == Level.INFO.name:
            head = f"{name}: {record.message}"
        else:
            head = f"{name} {record.level_name}: {record.message}"
        if not self._verbose or not record.properties:
            return head
        lines = [head]
        for key, value in record.properties.items():
            lines.append(f"    {key}: {value}")
        return "\n".join(lines)

    def send(self, record: LogRecord) -> None:
        if not should_log(record.importance, self._screen_threshold):
            return
        print(self.format_record(record), file=self.stream)

    def _spawn(self, name: str, threshold: int) -> 'ScreenLog':
        return ScreenLog(verbose=self._verbose, threshold=threshold,
                         name=name, memory=self.memory,
                         preamble=self.preamble, stream=self._stream,
                         screen_threshold=self._screen_threshold)
