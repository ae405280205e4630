import os
from pathlib import Path

import yaml

from scribble.core.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "scribble.yml"
CONFIG_ENV_VAR = "SCRIBBLE_CONFIG"


class ScribbleConfig:
    def __init__(self, data, source=None):
        self.source = source
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = bool(data.get("debug", False))

    @property
    def log_to_file(self) -> bool:
        # Built-in defaults (no config file) never write log files.
        return bool(self.logging.get("to_file", self.source is not None))

    def __repr__(self) -> str:
        return f"<ScribbleConfig source={self.source} debug={self.debug}>"


def config_path() -> Path:
    """Return the active config file path (``$SCRIBBLE_CONFIG`` wins)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'ScribbleConfig':
    path = Path(path) if path is not None else config_path()

    # An installed wheel has no config/ directory next to src/.
    if not path.exists():
        return ScribbleConfig({})

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return ScribbleConfig(data, source=path)


_config_cache = None


def get_config() -> 'ScribbleConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next ``get_config`` re-reads the file."""
    global _config_cache
    _config_cache = None
