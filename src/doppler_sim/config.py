"""Simple settings persistence for the Doppler simulator."""
import json
import logging
import os
from typing import Dict, Optional

logger = logging.getLogger(__name__)

_CONFIG_PATH = os.path.expanduser("~/.doppler_sim_config.json")


def load_config(path: Optional[str] = None) -> Dict:
    path = path or _CONFIG_PATH
    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                cfg = json.load(f)
        except Exception as e:
            logger.warning(f"Ignoring unreadable config {path}: {e}")
            return {}
        return cfg if isinstance(cfg, dict) else {}
    return {}


def save_config(cfg: Dict, path: Optional[str] = None) -> None:
    path = path or _CONFIG_PATH
    d = os.path.dirname(path)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)
    with open(path, "w") as f:
        json.dump(cfg, f, indent=2)


def config_float(cfg: Dict, key: str, default: float) -> float:
    """Return cfg[key] as a float, or `default` when it is missing or not a number."""
    value = cfg.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring config {key}={value!r}: not a number, using {default}")
        return default
