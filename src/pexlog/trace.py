"""
Function tracing decorator.

Routes trace output through the default log's 'trace' child at DEBUG
importance, so it follows that log's thresholds: enable it with
    get_default_log().set_threshold_for('trace', Level.DEBUG)
"""

import functools
import inspect
from pathlib import Path

from .levels import Level


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to log function entry, return value, and exceptions.

    Arguments are only formatted when the trace log sends DEBUG.
    """
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .default_log import get_default_log

        tracer = get_default_log().create_child_log('trace')
        if not tracer.sends(Level.DEBUG):
            return func(*args, **kwargs)

        qualname = func.__qualname__
        args_repr = [_short_repr(a) for a in args]
        args_repr.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
        tracer.debug(f">> {module_name}.{qualname}({', '.join(args_repr)})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            tracer.debug(f"!! {module_name}.{qualname} raised: "
                         f"{type(e).__name__}: {e}")
            raise

        if result is not None:
            tracer.debug(f"<< {module_name}.{qualname} returned: "
                         f"{_short_repr(result)}")
        return result

    return wrapper
