# config_manager.py - JSON config with defaults for the suggestion engine

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

# Bundled resources ship inside the package
RESOURCE_DIR = Path(__file__).resolve().parent.parent / "resources"
DEFAULT_DICTIONARY = RESOURCE_DIR / "autocomplete_en_small.txt"
DEFAULT_BIGRAMS = RESOURCE_DIR / "bigrams_en_small.txt"

ENV_CONFIG = "KEYBOARD_PREDICT_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "dictionary_path": str(DEFAULT_DICTIONARY),
    "bigram_path": str(DEFAULT_BIGRAMS),
    "dictionary_term_count": 25_000,
    "bigram_pair_count": 15_000,
    "log_level": "WARNING",
}

_PATH_KEYS = ("dictionary_path", "bigram_path")
_INT_KEYS = ("dictionary_term_count", "bigram_pair_count")


class ConfigError(ValueError):
    """An explicitly requested config file could not be used."""


@dataclass(frozen=True)
class EngineConfig:
    dictionary_path: Path
    bigram_path: Path
    dictionary_term_count: int = 25_000
    bigram_pair_count: int = 15_000
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> "EngineConfig":
        """Merge `data` over DEFAULTS; relative resource paths resolve against base_dir."""
        merged = dict(DEFAULTS)
        # keys starting with "_" are comments
        merged.update({k: v for k, v in data.items() if not k.startswith("_")})

        unknown = set(merged) - set(DEFAULTS)
        if unknown:
            raise ConfigError(f"unknown config option(s): {', '.join(sorted(unknown))}")

        for key in _INT_KEYS:
            try:
                merged[key] = int(merged[key])
            except (TypeError, ValueError):
                raise ConfigError(f"{key} must be an integer, got {merged[key]!r}") from None
            if merged[key] < 0:
                raise ConfigError(f"{key} must not be negative")

        for key in _PATH_KEYS:
            p = Path(os.path.expanduser(str(merged[key])))
            if not p.is_absolute() and base_dir is not None:
                p = base_dir / p
            merged[key] = p

        merged["log_level"] = str(merged["log_level"]).upper()
        return cls(**merged)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        for key in _PATH_KEYS:
            d[key] = str(d[key])
        return d


def load_config(path: Union[str, Path, None] = None) -> EngineConfig:
    """
    Build the engine config.

    Resolution order (first found wins):
        1. Explicit ``path`` argument
        2. ``KEYBOARD_PREDICT_CONFIG`` environment variable
        3. Built-in defaults (bundled resources)

    An explicit path that is missing or invalid raises ConfigError; a bad
    file named by the environment variable is logged and ignored so the
    keyboard still starts.
    """
    if path is not None:
        return _read_config(Path(path))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        try:
            return _read_config(Path(env_path))
        except ConfigError as e:
            logger.warning("ignoring %s=%s: %s", ENV_CONFIG, env_path, e)

    return EngineConfig.from_dict({})


def _read_config(path: Path) -> EngineConfig:
    try:
        with open(path, "r", encoding="utf8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must contain a JSON object")
    return EngineConfig.from_dict(data, base_dir=path.resolve().parent)


def save_config(cfg: EngineConfig, path: Union[str, Path]) -> None:
    with open(path, "w", encoding="utf8") as f:
        json.dump(cfg.to_dict(), f, indent=2)
