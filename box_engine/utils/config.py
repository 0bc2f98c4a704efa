"""
Configuration for the box engine.
"""

import copy
import json
import logging
import os
import sys
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 200

# Python frames the markup parser spends per nesting level, and the stack
# reserved for callers and logging
FRAMES_PER_LEVEL = 3
RESERVED_FRAMES = 250

# Class attribute splitting modes
CLASS_SPLIT_LITERAL = "literal"
CLASS_SPLIT_WHITESPACE = "whitespace"
CLASS_SPLIT_MODES = (CLASS_SPLIT_LITERAL, CLASS_SPLIT_WHITESPACE)

DEFAULTS: Dict[str, Any] = {
    "parser": {
        "max_depth": DEFAULT_MAX_DEPTH,
        "class_split": CLASS_SPLIT_LITERAL
    },
    "logging": {
        "console_level": "WARNING",
        "file": None
    }
}


class Config:
    """
    Settings store backed by an optional JSON file.

    Keys can be nested using dots, e.g. ``parser.max_depth``. Nothing is
    written to disk unless ``save`` is called.
    """

    def __init__(self, config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        """
        Initialize the configuration.

        Args:
            config_path: Path to a JSON config file, or None for defaults only
            overrides: Dotted keys applied after loading
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        for key, value in (overrides or {}).items():
            self.set(key, value)

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """Load configuration from file, falling back to defaults."""
        self._set_defaults()
        if not self.config_path:
            return

        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        if not isinstance(loaded, dict):
            logger.error(f"Configuration in {self.config_path} is not an object, using defaults")
            return

        with self._lock:
            _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self) -> None:
        """Save configuration to ``config_path``."""
        if not self.config_path:
            raise ValueError("No config_path set")

        with self._lock:
            config_copy = copy.deepcopy(self.config)

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (dotted for nested values)
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]

            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]

            config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return False
                config = config[part]

            if parts[-1] in config:
                del config[parts[-1]]
                return True
            return False

    def get_all(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self.config)

    @property
    def max_depth(self) -> int:
        return check_max_depth(self.get("parser.max_depth", DEFAULT_MAX_DEPTH))

    @property
    def class_split(self) -> str:
        mode = self.get("parser.class_split", CLASS_SPLIT_LITERAL)
        if mode not in CLASS_SPLIT_MODES:
            raise ValueError(f"Unknown class split mode: {mode!r}")
        return mode

    def _set_defaults(self) -> None:
        with self._lock:
            self.config = copy.deepcopy(DEFAULTS)


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Recursively merge ``source`` into ``target``."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


def max_safe_depth() -> int:
    """Deepest nesting the markup parser can handle under the current recursion limit."""
    return (sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_LEVEL


def check_max_depth(value: Any) -> int:
    """
    Validate a ``parser.max_depth`` setting.

    Raises:
        ValueError: If the value is not an integer between 1 and
            ``max_safe_depth()``
    """
    if isinstance(value, bool):
        raise ValueError(f"parser.max_depth must be an integer, got {value!r}")
    try:
        depth = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"parser.max_depth must be an integer, got {value!r}") from None

    limit = max_safe_depth()
    if not 1 <= depth <= limit:
        raise ValueError(f"parser.max_depth must be between 1 and {limit}, got {depth}")
    return depth
