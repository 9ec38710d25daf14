"""YAML configuration with environment placeholders.

A string value of the form ``${NAME:default}`` is replaced by the environment
variable ``NAME``, or by ``default`` when it is unset. A ``.env`` file in the
working directory is loaded into the environment first.
"""

import os
import re
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv

PACKAGED_CONFIG = Path(__file__).parent.parent / "configs" / "default.yaml"

# Tried in order when no explicit path is given
SEARCH_PATH = (
    Path("configs") / "default.yaml",
    PACKAGED_CONFIG,
    Path.home() / ".folentail" / "config.yaml",
)

_PLACEHOLDER = re.compile(r"^\$\{([^}:]+)(?::([^}]*))?\}$")


def _expand(value):
    if isinstance(value, dict):
        return {key: _expand(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand(item) for item in value]
    if isinstance(value, str):
        match = _PLACEHOLDER.match(value)
        if match:
            return os.environ.get(match.group(1), match.group(2) or "")
    return value


def _merge(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    def __init__(self, config_path: Optional[str] = None):
        load_dotenv(Path.cwd() / ".env")
        self.config_path = str(self._locate(config_path))
        with open(self.config_path, 'r') as f:
            self.config = _expand(yaml.safe_load(f) or {})

    @staticmethod
    def _locate(config_path: Optional[str]) -> Path:
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")
            return path
        for candidate in SEARCH_PATH:
            if candidate.exists():
                return candidate
        raise FileNotFoundError("No configuration file found")

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dot-separated key such as ``saturation.timeout``."""
        node = self.config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def update(self, updates: Dict[str, Any]):
        """Merge nested ``updates`` into the loaded values."""
        self.config = _merge(self.config, updates)


_config = None


def get_config(config_path: Optional[str] = None) -> Config:
    """Shared configuration, loaded on first use or when a path is given."""
    global _config
    if config_path is not None or _config is None:
        _config = Config(config_path)
    return _config
