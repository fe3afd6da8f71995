import os
from pathlib import Path

import yaml

from vamsa_gedcom.core.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "vamsa_gedcom.yml"
CONFIG_ENV_VAR = "VAMSA_GEDCOM_CONFIG"

DEFAULTS = {
    "paths": {"logs_dir": "logs"},
    "pipeline": {"skip_validation": False, "ignore_missing_references": False},
    "validation": {"absolute_path_is_error": False, "media_base_dir": None},
    "export": {
        "source_program": "vamsa",
        "submitter_name": "Vamsa User",
        "max_line_length": 80,
    },
    "logging": {"level": "INFO", "file": "vamsa_gedcom.log", "to_file": False},
    "debug": False,
}


class GPConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.pipeline = {**DEFAULTS["pipeline"], **(data.get("pipeline") or {})}
        self.validation = {**DEFAULTS["validation"], **(data.get("validation") or {})}
        self.export = {**DEFAULTS["export"], **(data.get("export") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = bool(data.get("debug", False))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> 'GPConfig':
    """
    Read the YAML config file.

    A missing default file yields the built-in defaults; an explicitly
    requested file that does not exist is an error.
    """
    explicit = path is not None or CONFIG_ENV_VAR in os.environ
    path = path or config_path()

    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        return GPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    return GPConfig(data)

_config_cache = None

def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config (tests switch files through the env var)."""
    global _config_cache
    _config_cache = None
