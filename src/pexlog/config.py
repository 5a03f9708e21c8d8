"""Configuration for the default log.

Three-layer config resolution (highest priority wins):
  1. Overrides — a dict passed by the calling program (e.g. from its CLI)
  2. Project config — .pexlog.json in the working directory or a parent
  3. Global config — ~/.pexlog/config.json

Recognised keys:
  threshold         level of the root log ("INFO", "warn", -5, "PASS_ALL")
  screen            true to install a ScreenLog, false for a silent Log
  verbose           ScreenLog prints record properties
  screen_threshold  extra gate on what a ScreenLog writes
  thresholds        {"pipeline.io": "DEBUG"} or ["pipeline.io:DEBUG", ...]

Example .pexlog.json:
  {"threshold": "WARN", "screen": true, "thresholds": {"pipeline": "DEBUG"}}
"""

import json
import os
from pathlib import Path

from .default_log import set_default_log
from .levels import Level, Threshold, parse_level, parse_threshold_spec
from .log import Log
from .screen_log import ScreenLog


CONFIG_KEYS = ["threshold", "screen", "verbose", "screen_threshold",
               "thresholds"]

DEFAULTS = {
    "threshold": Level.INFO,
    "screen": True,
    "verbose": False,
    "screen_threshold": Threshold.PASS_ALL,
    "thresholds": {},
}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.pexlog/)."""
    return Path.home() / ".pexlog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .pexlog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / ".pexlog.json"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .pexlog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def _normalize_thresholds(value):
    """Turn a thresholds mapping or spec list into {name: int}.

    Raises:
        ValueError: value is not a dict, a spec string, or a list of specs
    """
    if value is None:
        return {}
    if isinstance(value, dict):
        return {str(name): parse_level(level) for name, level in value.items()}
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ValueError(f"thresholds must be a mapping or a list of specs, "
                         f"not {type(value).__name__}")
    result = {}
    for spec in value:
        name, level = parse_threshold_spec(spec)
        result[name] = level
    return result


def resolve_config(overrides=None, start_dir=None):
    """Resolve config values using three-layer precedence.

    Scalar keys take the first layer that sets them. Per-name
    thresholds are merged, with higher layers winning per name.

    Returns a dict with every key in CONFIG_KEYS; levels are ints.

    Raises:
        ValueError: a level in any layer is not recognised, a flag is
            not a bool, or thresholds has the wrong shape
    """
    overrides = overrides or {}
    project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config()
    layers = [overrides, project_cfg, global_cfg]

    resolved = {}
    for key in CONFIG_KEYS:
        if key == "thresholds":
            continue
        resolved[key] = DEFAULTS[key]
        for layer in layers:
            value = layer.get(key)
            if value is None:
                value = layer.get(key.replace("_", "-"))
            if value is not None:
                resolved[key] = value
                break

    for key in ("threshold", "screen_threshold"):
        resolved[key] = parse_level(resolved[key])
    for key in ("screen", "verbose"):
        if not isinstance(resolved[key], bool):
            raise ValueError(f"{key} must be true or false, "
                             f"not {resolved[key]!r}")

    thresholds = {}
    for layer in reversed(layers):
        thresholds.update(_normalize_thresholds(layer.get("thresholds")))
    resolved["thresholds"] = thresholds
    return resolved


def configure_default_log(start_dir=None, overrides=None, stream=None):
    """Build a log from resolved config and install it as the default.

    Args:
        start_dir: Where to start looking for .pexlog.json
        overrides: Highest-priority settings (same keys as the files)
        stream: Output stream for a ScreenLog (default: stderr)

    Returns:
        The installed Log or ScreenLog
    """
    cfg = resolve_config(overrides, start_dir)
    threshold = cfg["threshold"]
    if threshold == Threshold.INHERIT:
        raise ValueError("The root threshold cannot be INHERIT")

    if cfg["screen"]:
        log = ScreenLog(verbose=cfg["verbose"], threshold=threshold,
                        stream=stream,
                        screen_threshold=cfg["screen_threshold"])
    else:
        log = Log(threshold=threshold)

    for name, level in cfg["thresholds"].items():
        log.set_threshold_for(name, level)

    set_default_log(log)
    return log


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, project_dir=None):
    """Write .pexlog.json to the project directory."""
    target = Path(project_dir or os.getcwd()) / ".pexlog.json"
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def save_global_config(data):
    """Write the global config file."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = get_global_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return config_path
