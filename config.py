"""Load/save driver settings. Settings live in configs/settings.json; world state is never saved."""

import json
import logging
from pathlib import Path

from world.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, TICK_INTERVAL_MS
from world.materials import PALETTE, Material

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
SETTINGS_FILE = CONFIG_DIR / "settings.json"


def _default_config() -> dict:
    return {
        "world": {"width": DEFAULT_WIDTH, "height": DEFAULT_HEIGHT},
        "cell_size": 20,
        "tick_interval_ms": TICK_INTERVAL_MS,
        "seed": -1,
        "brush_radius": 0,
        "initial_material": "sand",
        "log_level": "INFO",
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    if isinstance(data.get("world"), dict):
        d["world"] = {**d["world"], **data["world"]}
    for k in ("cell_size", "tick_interval_ms", "seed", "brush_radius", "initial_material", "log_level"):
        if k in data:
            d[k] = data[k]
    return d


def load_config(path: Path | str | None = None) -> dict:
    """Settings merged over defaults. Missing or unreadable file gives defaults."""
    p = Path(path) if path is not None else SETTINGS_FILE
    if not p.exists():
        return _default_config()
    try:
        with open(p, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return _default_config()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", p)
        return _default_config()
    return _merge_defaults(data)


def save_config(params: dict, path: Path | str | None = None) -> Path:
    p = Path(path) if path is not None else SETTINGS_FILE
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(_merge_defaults(params), f, indent=2)
    return p


def material_from_name(name: str) -> Material:
    """Palette material by lower-case name, e.g. "water"."""
    key = (name or "").strip().lower()
    for m in PALETTE:
        if m.name == key:
            return m
    raise ValueError(f"unknown material {name!r}; expected one of {[m.name for m in PALETTE]}")
