"""
Hierarchical threshold memory shared by a family of logs.

Log names are dotted paths: "" is the root, "pipeline" a child of the
root, "pipeline.io" a grandchild. A log without an explicit threshold
inherits from its closest ancestor that has one; the root always has one.
"""

import threading
from typing import Dict, List

from .levels import Level, Threshold


class ThresholdMemory:
    """Thresholds by log name, with ancestor fallback.

    Usage::

        mem = ThresholdMemory(Level.INFO)
        mem.set_threshold_for('pipeline', Level.DEBUG)
        mem.get_threshold_for('pipeline.io')   # Level.DEBUG (inherited)
        mem.get_threshold_for('other')         # Level.INFO (root)
    """

    def __init__(self, root_threshold: int = Level.INFO):
        if root_threshold == Threshold.INHERIT:
            raise ValueError("The root threshold cannot be INHERIT")
        self._thresholds: Dict[str, int] = {'': root_threshold}
        self._lock = threading.Lock()

    def set_threshold_for(self, name: str, threshold: int) -> None:
        """Record a threshold for a name; INHERIT clears it."""
        with self._lock:
            if threshold == Threshold.INHERIT:
                if not name:
                    raise ValueError("The root threshold cannot be INHERIT")
                self._thresholds.pop(name, None)
            else:
                self._thresholds[name] = threshold

    def get_threshold_for(self, name: str) -> int:
        """Effective threshold for a name."""
        with self._lock:
            while name:
                if name in self._thresholds:
                    return self._thresholds[name]
                name = name.rpartition('.')[0]
            return self._thresholds['']

    def explicit_threshold_for(self, name: str) -> int:
        """Threshold set directly on a name, or INHERIT if none."""
        with self._lock:
            return self._thresholds.get(name, Threshold.INHERIT)

    def names(self) -> List[str]:
        """Names that carry an explicit threshold, sorted."""
        with self._lock:
            return sorted(self._thresholds)
