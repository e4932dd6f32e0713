"""Singleton pattern: one shared instance per class for the whole process.

Three variants are shown:

- ``Logger`` guards ``__new__`` with a double-checked lock and skips
  re-initialisation, so every ``Logger()`` call returns the same object.
- ``SingletonMeta`` moves that guard into a reusable metaclass.
- ``SingletonRegistry`` / ``get_singleton`` keep classes ordinary and
  cache one instance per class in a registry instead.
"""

import threading
from typing import Any, Dict, List, Optional, Type, TypeVar

from src.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class Logger:
    """
    Shared in-memory logger.

    Every construction returns the same instance, so messages logged through
    one reference are counted by every other reference.
    """

    _instance: Optional["Logger"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "Logger":
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the log store once."""
        if hasattr(self, "_initialized"):
            return

        self._logs: List[str] = []
        self._logger = get_logger(__name__)
        self._initialized = True

        self._logger.debug("Logger singleton created")

    def log(self, message: str) -> None:
        """Store a message and emit it through the structured logger."""
        self._logs.append(message)
        self._logger.info(f"LOG: {message}")

    @property
    def log_count(self) -> int:
        """Number of stored messages."""
        return len(self._logs)

    def get_log_count(self) -> int:
        return self.log_count

    def print_log_count(self) -> str:
        """Emit and return the current count as ``"<n> Logs"``."""
        text = f"{self.log_count} Logs"
        self._logger.info(text)
        return text

    def get_logs(self) -> List[str]:
        """Get a copy of the stored messages."""
        return list(self._logs)

    def reset(self) -> None:
        """Forget all stored messages."""
        self._logs.clear()


def get_logger_instance() -> Logger:
    """Module-level accessor for the shared Logger."""
    return Logger()


class SingletonMeta(type):
    """Metaclass giving each class that uses it exactly one instance."""

    _instances: Dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in SingletonMeta._instances:
            with SingletonMeta._lock:
                # Double-checked locking pattern
                if cls not in SingletonMeta._instances:
                    SingletonMeta._instances[cls] = super().__call__(*args, **kwargs)
        return SingletonMeta._instances[cls]

    def reset_instance(cls) -> None:
        """Drop the cached instance so the next call builds a fresh one."""
        with SingletonMeta._lock:
            SingletonMeta._instances.pop(cls, None)


class SingletonRegistry:
    """
    Registry caching one instance per class.

    Classes stay ordinary: only instances obtained through the registry are
    shared. Constructor arguments are used on first creation and ignored
    afterwards.
    """

    _instance: Optional["SingletonRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._instances: Dict[type, Any] = {}
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """Get the cached instance of singleton_class, creating it on first use."""
        with self._lock:
            if singleton_class not in self._instances:
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
                self._logger.debug(f"Created singleton instance of {singleton_class.__name__}")
            return self._instances[singleton_class]

    def has(self, singleton_class: type) -> bool:
        with self._lock:
            return singleton_class in self._instances

    def clear(self) -> None:
        """Drop every cached instance."""
        with self._lock:
            self._instances.clear()
            self._logger.debug("Singleton registry cleared")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)
