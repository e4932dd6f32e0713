"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import AppConfig, DemoConfig, LoggingConfig, validate_config

# Configuration management
from .manager import ConfigurationManager, get_config_manager, reset_config_manager

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'LoggingConfig',
    'DemoConfig',

    # Management
    'ConfigurationManager',
    'get_config_manager',
    'reset_config_manager',
]
