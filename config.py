"""Load/save driver and UI settings. One JSON file (settings.json beside this module, or $SANDFALL_CONFIG).
World contents are never written; only how the window, brush and seed are set up."""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(os.environ.get("SANDFALL_CONFIG", Path(__file__).resolve().parent / "settings.json"))

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_config(path: Path | str | None = None) -> dict:
    p = Path(path) if path is not None else CONFIG_PATH
    if not p.exists():
        return _default_config()
    try:
        with open(p, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read config %s (%s); using defaults", p, e)
        return _default_config()
    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object; using defaults", p)
        return _default_config()
    logger.debug("Loaded config from %s", p)
    return _merge_defaults(data)


def save_config(params: dict, path: Path | str | None = None) -> Path:
    """Write params merged over defaults. Returns the path written."""
    p = Path(path) if path is not None else CONFIG_PATH
    p.parent.mkdir(parents=True, exist_ok=True)
    out = _merge_defaults(params)
    with open(p, "w") as f:
        json.dump(out, f, indent=2)
    logger.debug("Saved config to %s", p)
    return p


def _default_config() -> dict:
    return {
        "window": {"width": 1280, "height": 800},
        "pixel_size": 4,
        "sidebar_width": 250,
        "fps": 60,
        "brush_size": 1,
        "material": "Sand",
        "seed": -1,
        "log_level": "INFO",
    }


# key -> (lowest, highest); None = unbounded.
_INT_RANGES = {
    "pixel_size": (1, None),
    "sidebar_width": (0, None),
    "fps": (1, 240),
    "brush_size": (1, None),
    "seed": (-1, None),
}
_WINDOW_RANGE = (1, None)


def _as_int(value, bounds: tuple[int | None, int | None]) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    v = int(value)
    lo, hi = bounds
    if lo is not None:
        v = max(lo, v)
    if hi is not None:
        v = min(hi, v)
    return v


def _as_log_level(value) -> str:
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        raise ValueError(f"expected one of {', '.join(LOG_LEVELS)}")
    return value.upper()


def _as_name(value) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _merge_defaults(data: dict) -> dict:
    """Defaults overlaid with every recognised key that coerces; a bad value keeps its default."""
    d = _default_config()
    window = data.get("window")
    if window is not None and not isinstance(window, dict):
        logger.warning("Ignoring config key 'window': expected an object")
    elif window:
        for k in ("width", "height"):
            if k in window:
                try:
                    d["window"][k] = _as_int(window[k], _WINDOW_RANGE)
                except (TypeError, ValueError) as e:
                    logger.warning("Ignoring config key 'window.%s' (%s)", k, e)
    checks = {k: (lambda v, b=b: _as_int(v, b)) for k, b in _INT_RANGES.items()}
    checks["material"] = _as_name
    checks["log_level"] = _as_log_level
    for k, check in checks.items():
        if k not in data:
            continue
        try:
            d[k] = check(data[k])
        except (TypeError, ValueError) as e:
            logger.warning("Ignoring config key %r (%s)", k, e)
    return d
