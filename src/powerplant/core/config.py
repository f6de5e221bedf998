"""YAML configuration for power plant setups.

A configuration file describes the providers a ``PowerPlant`` should build
and, optionally, how logging is set up. Values are read with dot notation.

Typical usage example:
    from powerplant.core.config import ConfigLoader

    config = ConfigLoader.load("plant.yaml")
    decay = config.get("providers.backup.decay", default=3)
"""

from pathlib import Path
from typing import Any

import yaml

from powerplant.core.errors import PowerPlantError
from powerplant.core.logging_system import get_logger

logger = get_logger(__name__)


class ConfigError(PowerPlantError):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Nested configuration with dot-notation access.

    Examples:
        >>> config = ConfigLoader({"providers": {"omni": {"efficiency": 80}}})
        >>> config.get("providers.omni.efficiency")
        80
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable, or its top level
                is not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key, e.g. ``"providers.backup.decay"``.
            default: Value returned when the key is missing.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Raises:
            ConfigError: If the section is missing or not a mapping.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def get_optional_section(self, key: str) -> dict[str, Any]:
        """Get a section that may be left out; missing or empty gives ``{}``.

        Raises:
            ConfigError: If the key holds something other than a mapping.
        """
        value = self.get(key)

        if value is None:
            return {}

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value
