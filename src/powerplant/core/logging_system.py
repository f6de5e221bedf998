"""Logging setup for powerplant components.

Logging is configured from a YAML file (or the built-in defaults) and
attached to the ``powerplant`` package logger, so applications embedding the
library keep control of the root logger. Each module asks for its own
logger through ``get_logger`` and may be given a dedicated level in the
``components`` section of the configuration.

The default configuration only logs to the console. A combined log file is
written when ``log_file.enabled`` is set, and the previous file is rotated
on every initialization, keeping the last few runs.

Example config:
    level: INFO
    format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_dir: logs
    console:
      enabled: true
      level: WARNING
    log_file:
      enabled: true
      filename: powerplant.log
      backup_count: 5
    components:
      powerplant.providers.combustion:
        level: DEBUG

Typical usage example:
    from powerplant.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.debug("Efficiency decayed to %d%%", efficiency)
"""

import logging
import time
from pathlib import Path
from typing import Any

import yaml

from powerplant.core.errors import PowerPlantError

PACKAGE_LOGGER = "powerplant"

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_handlers: list[logging.Handler] = []
_initialized = False


class LoggingError(PowerPlantError):
    """Raised when logging system operations fail."""


def rotate_logs(log_dir: Path, log_filename: str = "powerplant.log", keep_count: int = 5) -> None:
    """Rotate the log file left by a previous run.

    ``powerplant.log`` becomes ``powerplant.log.1``, older files shift up by
    one and anything beyond ``keep_count`` is deleted.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename
    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(
    config_path: str | Path | None = None, config: dict[str, Any] | None = None
) -> None:
    """Initialize logging from a YAML file, a dictionary or the defaults.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        config_path: Path to a logging configuration YAML file.
        config: Configuration dictionary, used when no path is given.

    Raises:
        LoggingError: If the configuration file is missing or unreadable.
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")
        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
        _logging_config = _merge_with_defaults(loaded)
    elif config is not None:
        _logging_config = _merge_with_defaults(config)
    else:
        _logging_config = _get_default_config()

    _remove_handlers()
    _loggers_cache.clear()

    if _logging_config["log_file"].get("enabled", False):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_logs(
            log_dir,
            _logging_config["log_file"].get("filename", "powerplant.log"),
            _logging_config["log_file"].get("backup_count", 5),
        )

    _configure_package_logger()
    _configure_component_loggers()
    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration."""
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "log_file": {
            "enabled": False,
            "filename": "powerplant.log",
            "backup_count": 5,
        },
        "components": {},
    }


def _merge_with_defaults(config: dict[str, Any]) -> dict[str, Any]:
    merged = _get_default_config()
    for key, value in config.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def _remove_handlers() -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()


def _configure_package_logger() -> None:
    """Attach the configured handlers to the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(_level(_logging_config.get("level", "INFO")))

    if _logging_config["console"].get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(_logging_config["console"].get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        package_logger.addHandler(console_handler)
        _handlers.append(console_handler)

    if _logging_config["log_file"].get("enabled", False):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / _logging_config["log_file"].get("filename", "powerplant.log")
        # Rotation already happened, start a fresh file
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        package_logger.addHandler(file_handler)
        _handlers.append(file_handler)


def _component_name(name: str) -> str:
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        return f"{PACKAGE_LOGGER}.{name}"
    return name


def _apply_component_config(logger: logging.Logger) -> None:
    if logger.name == PACKAGE_LOGGER:
        return
    component_config = _logging_config.get("components", {}).get(logger.name, {})
    if component_config.get("enabled", True):
        logger.disabled = False
        if "level" in component_config:
            logger.setLevel(_level(component_config["level"]))
        else:
            logger.setLevel(logging.NOTSET)
    else:
        logger.disabled = True


def _configure_component_loggers() -> None:
    """Reapply component settings to every logger under the package.

    Package modules create their loggers at import time, usually before the
    application configures logging, so existing loggers are reset here and
    the ``components`` section is applied to them as well as to loggers
    that do not exist yet.
    """
    components = _logging_config.get("components") or {}
    _logging_config["components"] = {
        _component_name(name): settings or {} for name, settings in components.items()
    }

    existing = [
        name
        for name, logger in list(logging.Logger.manager.loggerDict.items())
        if isinstance(logger, logging.Logger) and name.startswith(PACKAGE_LOGGER + ".")
    ]
    for name in set(existing) | set(_logging_config["components"]):
        _apply_component_config(logging.getLogger(name))


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a powerplant component.

    Loggers are cached. Names outside the package are placed under it, so
    ``get_logger("plant")`` returns ``powerplant.plant``.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        Configured logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if not _initialized:
        initialize_logging()

    name = _component_name(name)

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _apply_component_config(logger)

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close the handlers installed by ``initialize_logging``."""
    global _initialized

    _remove_handlers()
    _loggers_cache.clear()
    _initialized = False
