"""Tests for the decorator pattern."""

import pytest

from src.patterns.decorator import (
    Coffee,
    WithMilk,
    WithSugar,
    WithWhippedCream,
    decorate_method,
    log_calls,
    restore_method,
)


class TestBeverageDecorators:
    """Test object wrapping."""

    def test_plain_coffee(self):
        coffee = Coffee()
        assert coffee.cost() == 2.0
        assert coffee.description() == "Coffee"
        assert str(coffee) == "Coffee ($2.00)"

    def test_single_wrapper_extends_behavior(self):
        coffee = WithMilk(Coffee())
        assert coffee.cost() == pytest.approx(2.5)
        assert str(coffee) == "Coffee, milk ($2.50)"

    def test_wrappers_compose_in_any_order(self):
        milk_then_sugar = WithSugar(WithMilk(Coffee()))
        sugar_then_milk = WithMilk(WithSugar(Coffee()))

        assert milk_then_sugar.cost() == pytest.approx(sugar_then_milk.cost())
        assert milk_then_sugar.description() == "Coffee, milk, sugar"
        assert sugar_then_milk.description() == "Coffee, sugar, milk"

    def test_same_wrapper_can_repeat(self):
        double_cream = WithWhippedCream(WithWhippedCream(Coffee(base_cost=1.0)))
        assert double_cream.cost() == pytest.approx(2.5)

    def test_wrapped_component_untouched(self):
        coffee = Coffee()
        decorated = WithMilk(coffee)
        assert decorated.wrapped is coffee
        assert coffee.cost() == 2.0


class TestLogCalls:
    """Test function wrapping."""

    def test_bare_decorator_returns_result_and_records_call(self):
        @log_calls
        def add(a, b):
            return a + b

        assert add(2, b=3) == 5
        assert add.calls == [{"args": (2,), "kwargs": {"b": 3}, "result": 5}]

    def test_metadata_preserved(self):
        @log_calls(level="debug")
        def greet(name):
            """Say hello."""
            return f"hello {name}"

        assert greet.__name__ == "greet"
        assert greet.__doc__ == "Say hello."
        assert greet("bob") == "hello bob"

    def test_exception_propagates_and_is_recorded(self):
        @log_calls
        def fail():
            raise ValueError("nope")

        with pytest.raises(ValueError, match="nope"):
            fail()

        assert len(fail.calls) == 1
        assert isinstance(fail.calls[0]["error"], ValueError)

    def test_recording_can_be_disabled(self):
        @log_calls(record=False)
        def identity(value):
            return value

        identity(1)
        assert identity.calls == []


class TestDecorateMethod:
    """Test runtime method wrapping."""

    def test_only_patched_instance_changes(self):
        plain = Coffee()
        loud = Coffee()

        decorate_method(loud, "description", lambda original: lambda: original().upper())

        assert loud.description() == "COFFEE"
        assert plain.description() == "Coffee"
        assert Coffee().description() == "Coffee"

    def test_returns_original_and_can_restore(self):
        coffee = Coffee()
        original = decorate_method(coffee, "cost", lambda original: lambda: original() * 2)

        assert coffee.cost() == 4.0
        assert original() == 2.0

        restore_method(coffee, "cost")
        assert coffee.cost() == 2.0

    def test_wrapper_can_stack(self):
        coffee = Coffee()
        decorate_method(coffee, "cost", lambda original: lambda: original() + 1)
        decorate_method(coffee, "cost", lambda original: lambda: original() * 10)
        assert coffee.cost() == 30.0

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            decorate_method(Coffee(), "grind", lambda original: original)

    def test_non_callable_attribute(self):
        with pytest.raises(TypeError):
            decorate_method(Coffee(), "_name", lambda original: original)
