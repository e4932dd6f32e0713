"""Unified configuration management for the application."""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from src.config.defaults import CONFIG_FILE_ENV, DEFAULT_CONFIG, ENV_OVERRIDES
from src.config.schemas import AppConfig, DemoConfig, LoggingConfig
from src.config.utils.env_expansion import expand_config_env_vars
from src.domain.core.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled lazily from three layers, later layers winning:
    - built-in defaults
    - an optional JSON file (argument or PATTERNS_CONFIG_FILE)
    - PATTERNS_* environment variable overrides

    $VAR references in string values are expanded before validation.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def config_file(self) -> Optional[str]:
        """Path of the configuration file in use, if any."""
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            file_data = self._load_file(self._config_file)
            config_data = _deep_merge(config_data, file_data)

        config_data = self._apply_environment_overrides(config_data)
        config_data = expand_config_env_vars(config_data)

        app_config = AppConfig.from_dict(config_data)
        logger.debug("Configuration loaded (file=%s)", self._config_file)
        return app_config

    @staticmethod
    def _load_file(path: str) -> Dict[str, Any]:
        """Load a JSON configuration file."""
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return data

    @staticmethod
    def _apply_environment_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply PATTERNS_* environment variable overrides."""
        for env_var, dotted_path in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            target = config
            *parents, leaf = dotted_path.split(".")
            for key in parents:
                target = target.setdefault(key, {})
            target[leaf] = value
            logger.debug("Applied environment override %s -> %s", env_var, dotted_path)
        return config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration section with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        """Map a config section type to the matching AppConfig attribute."""
        type_mapping = {
            LoggingConfig: "logging",
            DemoConfig: "demo",
        }
        if config_type is AppConfig:
            return self.app_config
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, type_mapping[config_type])

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key."""
        value: Any = self.app_config.model_dump()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def reload(self) -> None:
        """Drop cached configuration; the next access reloads from sources."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base, returning a new dictionary."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    Passing a config_file replaces the current manager with one reading that file.
    """
    global _config_manager
    with _manager_lock:
        if _config_manager is None or (config_file and config_file != _config_manager.config_file):
            _config_manager = ConfigurationManager(config_file)
        return _config_manager


def reset_config_manager() -> None:
    """Reset the process-wide configuration manager."""
    global _config_manager
    with _manager_lock:
        _config_manager = None
