"""Tests for the singleton pattern implementations."""

from src.patterns.singleton import (
    Logger,
    SingletonMeta,
    SingletonRegistry,
    get_logger_instance,
    get_singleton,
)


class TestLogger:
    """Test the shared Logger."""

    def test_two_acquisitions_return_identical_instance(self):
        """Test that separate constructions yield the same object."""
        assert Logger() is Logger()

    def test_log_count_is_shared_across_references(self):
        """Test that logs written through one reference are counted by another."""
        logger = Logger()
        logger.log("This is the first log")
        assert logger.print_log_count() == "1 Logs"

        another_logger = Logger()
        another_logger.log("This is the second log")
        assert another_logger.print_log_count() == "2 Logs"
        assert logger.log_count == 2
        assert logger.get_log_count() == 2

    def test_reconstruction_does_not_reset_state(self):
        """Test that calling Logger() again keeps stored messages."""
        Logger().log("kept")
        assert Logger().get_logs() == ["kept"]

    def test_get_logs_returns_copy(self):
        """Test that callers cannot mutate the internal log list."""
        logger = Logger()
        logger.log("one")
        logs = logger.get_logs()
        logs.append("injected")
        assert logger.get_logs() == ["one"]

    def test_reset_clears_logs(self):
        logger = Logger()
        logger.log("one")
        logger.reset()
        assert logger.log_count == 0
        assert logger.print_log_count() == "0 Logs"

    def test_module_accessor_returns_shared_instance(self):
        assert get_logger_instance() is Logger()


class TestSingletonMeta:
    """Test the singleton metaclass."""

    def test_same_instance_and_first_arguments_win(self):
        class Settings(metaclass=SingletonMeta):
            def __init__(self, value=0):
                self.value = value

        try:
            first = Settings(1)
            second = Settings(2)
            assert first is second
            assert second.value == 1
        finally:
            Settings.reset_instance()

    def test_reset_instance_builds_fresh_object(self):
        class Settings(metaclass=SingletonMeta):
            def __init__(self, value=0):
                self.value = value

        try:
            first = Settings(1)
            Settings.reset_instance()
            second = Settings(2)
            assert first is not second
            assert second.value == 2
        finally:
            Settings.reset_instance()

    def test_each_class_has_its_own_instance(self):
        class First(metaclass=SingletonMeta):
            pass

        class Second(metaclass=SingletonMeta):
            pass

        try:
            assert First() is First()
            assert First() is not Second()
        finally:
            First.reset_instance()
            Second.reset_instance()


class Counter:
    def __init__(self, start=0):
        self.value = start


class TestSingletonRegistry:
    """Test registry based singleton access."""

    def test_get_singleton_returns_cached_instance(self):
        assert get_singleton(Counter) is get_singleton(Counter)

    def test_constructor_arguments_only_used_on_first_creation(self):
        first = get_singleton(Counter, start=5)
        second = get_singleton(Counter, start=9)
        assert first is second
        assert second.value == 5

    def test_class_stays_ordinary(self):
        """Test that direct construction still creates new objects."""
        shared = get_singleton(Counter)
        assert Counter() is not shared
        assert Counter() is not Counter()

    def test_clear_drops_instances(self):
        registry = SingletonRegistry.get_instance()
        first = registry.get(Counter)
        assert registry.has(Counter)

        registry.clear()

        assert not registry.has(Counter)
        assert registry.get(Counter) is not first

    def test_registry_itself_is_shared(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()
