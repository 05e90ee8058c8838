"""
Configuration loader for the Fireworks API.

Loads settings from app_config.yaml, applies FIREWORKS_* environment
overrides and provides singleton access.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
import os


ENV_PREFIX = "FIREWORKS_"
CONFIG_FILE_ENV = "FIREWORKS_CONFIG_FILE"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "app_config.yaml"


class ConfigLoader:
    """Singleton configuration loader."""

    _instance: Optional['ConfigLoader'] = None
    _config: Optional[Dict[str, Any]] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._config is None:
            self._load_config()

    def _load_config(self):
        """Load configuration from YAML file, then apply env overrides."""
        config_path = Path(os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_PATH))

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            self._config = yaml.safe_load(f) or {}

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply FIREWORKS_* environment variables to existing keys."""
        # Example: FIREWORKS_UPLOAD_MAX_BYTES=2048
        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key == CONFIG_FILE_ENV:
                continue

            parts = self._parse_config_path(key[len(ENV_PREFIX):].lower())
            if parts:
                self._set_nested_value(self._config, parts, value)

    def _parse_config_path(self, env_key: str) -> List[str]:
        """
        Split an env key into a config path, matching the YAML structure.

        Key names containing underscores are matched greedily, so
        "upload_max_bytes" resolves to ["upload", "max_bytes"].

        Returns:
            List of path parts, or an empty list if no such key exists
        """
        all_parts = env_key.split('_')
        current = self._config
        result = []
        i = 0

        while i < len(all_parts):
            for length in range(len(all_parts) - i, 0, -1):
                candidate_key = '_'.join(all_parts[i:i + length])
                if isinstance(current, dict) and candidate_key in current:
                    result.append(candidate_key)
                    current = current[candidate_key]
                    i += length
                    break
            else:
                return []

        return result

    def _set_nested_value(self, config: Dict, parts: List[str], value: str):
        """Set a nested value, keeping the type of the value it replaces."""
        current = config
        for part in parts[:-1]:
            if part in current and isinstance(current[part], dict):
                current = current[part]
            else:
                return

        key = parts[-1]
        if key not in current or isinstance(current[key], dict):
            return

        original_type = type(current[key])
        try:
            if original_type == bool:
                current[key] = value.lower() in ('true', '1', 'yes')
            elif original_type == int:
                current[key] = int(value)
            elif original_type == float:
                current[key] = float(value)
            else:
                current[key] = value
        except ValueError:
            # Keep as string if conversion fails
            current[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation key.

        Example:
            >>> config = ConfigLoader()
            >>> config.get("upload.max_bytes")
            10485760
        """
        current = self._config

        for part in key.split('.'):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section as a dict."""
        return self.get(section, {})

    def reload(self):
        """Reload configuration from file and environment."""
        self._config = None
        self._load_config()


# Singleton instance
_loader: Optional[ConfigLoader] = None


def get_config() -> ConfigLoader:
    """
    Get the singleton configuration loader.

    Example:
        >>> from config import get_config
        >>> max_bytes = get_config().get("upload.max_bytes")
    """
    global _loader
    if _loader is None:
        _loader = ConfigLoader()
    return _loader


def reload_config():
    """Reload configuration, e.g. after changing environment variables."""
    global _loader
    if _loader is not None:
        _loader.reload()
    else:
        _loader = ConfigLoader()
