import logging
import os

import pytest

from src.config.manager import reset_config_manager
from src.infrastructure.logging.logger import PACKAGE_LOGGER
from src.patterns.dependency_injection import reset_container
from src.patterns.singleton import Logger, SingletonRegistry


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Strip PATTERNS_* variables so host settings never leak into tests."""
    for name in list(os.environ):
        if name.startswith("PATTERNS_"):
            monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Reset every process-wide object the patterns keep."""
    Logger().reset()
    SingletonRegistry.get_instance().clear()
    reset_container()
    reset_config_manager()
    yield
    Logger().reset()
    SingletonRegistry.get_instance().clear()
    reset_container()
    reset_config_manager()
    _remove_package_handlers()


def _remove_package_handlers():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        if getattr(handler, "_patterns_handler", False):
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def config_file(tmp_path):
    """Write a JSON configuration file and return its path."""
    import json

    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)

    return _write
