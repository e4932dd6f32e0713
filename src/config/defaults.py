# src/config/defaults.py
from typing import Any, Dict

CONFIG_FILE_ENV = "PATTERNS_CONFIG_FILE"

# Environment variable -> dotted configuration path
ENV_OVERRIDES: Dict[str, str] = {
    "PATTERNS_ENVIRONMENT": "environment",
    "PATTERNS_LOG_LEVEL": "logging.level",
    "PATTERNS_LOG_DESTINATION": "logging.destination",
    "PATTERNS_LOG_RENDERER": "logging.renderer",
    "PATTERNS_LOG_FILE": "logging.file_path",
    "PATTERNS_OUTPUT_FORMAT": "demo.output_format",
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "development",
    "debug": False,
    "logging": {
        "level": "WARNING",
        "destination": "console",
        "renderer": "console",
        "file_path": "logs/patterns.log",
        "max_size_mb": 10,
        "backup_count": 3,
    },
    "demo": {
        "output_format": "text",
        "auth_tokens": {"secret-token": "alice"},
        "coffee_base_cost": 2.0,
    },
}
