"""
Check configuration.

A configuration is a flat JSON object whose keys are prefixed with the check
name, e.g.:

    {
        "MultiFeatureRoundaboutCheck.enabled": true,
        "MultiFeatureRoundaboutCheck.instructions": ["Merge the ring."]
    }
"""

import json
import os
from typing import Any, Dict, List, Optional


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be read or holds values of the wrong type."""

    pass


class Configuration:
    """Read-only key/value view over a check configuration."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    @classmethod
    def empty(cls) -> "Configuration":
        return cls()

    @classmethod
    def from_file(cls, path: str) -> "Configuration":
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"{path} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {path} must be a JSON object")
        return cls(data)

    def get(self, check_name: str, key: str, default: Any = None) -> Any:
        """Look up `<check_name>.<key>`, falling back to `default`."""
        return self._values.get(f"{check_name}.{key}", default)

    def get_bool(self, check_name: str, key: str, default: bool) -> bool:
        """Like get(), but the value must be a JSON boolean."""
        value = self.get(check_name, key, default)
        if not isinstance(value, bool):
            raise ConfigurationError(f"{check_name}.{key} must be true or false, got {value!r}")
        return value

    def get_strings(self, check_name: str, key: str, default: Optional[List[str]] = None) -> Optional[List[str]]:
        """Like get(), but the value must be a list of strings."""
        value = self.get(check_name, key, default)
        if value is None:
            return None
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ConfigurationError(f"{check_name}.{key} must be a list of strings, got {value!r}")
        return list(value)

    def __len__(self) -> int:
        return len(self._values)
