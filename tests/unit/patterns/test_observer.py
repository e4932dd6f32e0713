"""Tests for the observer pattern."""

import pydantic
import pytest

from src.patterns.observer import Event, EventPublisher, Observer, RecordingObserver, Subject


class OrderPlaced(Event):
    pass


class FailingObserver(Observer):
    def update(self, event):
        raise Exception("Observer error")


class TestEvent:
    """Test event payloads."""

    def test_event_type_defaults_to_class_name(self):
        assert Event().event_type == "Event"
        assert OrderPlaced().event_type == "OrderPlaced"

    def test_explicit_event_type_kept(self):
        assert Event(event_type="custom").event_type == "custom"

    def test_events_are_immutable(self):
        event = Event(payload=1)
        with pytest.raises(pydantic.ValidationError):
            event.payload = 2

    def test_events_get_unique_ids(self):
        assert Event().event_id != Event().event_id


class TestSubject:
    """Test subscribe/unsubscribe/notify."""

    def setup_method(self):
        """Set up test fixtures."""
        self.subject = Subject("news")
        self.first = RecordingObserver("first")
        self.second = RecordingObserver("second")

    def test_notify_reaches_every_observer(self):
        self.subject.subscribe(self.first)
        self.subject.subscribe(self.second)

        delivered = self.subject.notify("headline")

        assert delivered == 2
        assert self.first.payloads == ["headline"]
        assert self.second.payloads == ["headline"]
        assert self.first.received[0].source == "news"

    def test_notification_order_follows_subscription_order(self):
        order = []
        self.subject.subscribe(lambda event: order.append("a"))
        self.subject.subscribe(lambda event: order.append("b"))
        self.subject.subscribe(lambda event: order.append("c"))

        self.subject.notify()

        assert order == ["a", "b", "c"]

    def test_unsubscribed_observer_not_notified(self):
        self.subject.subscribe(self.first)
        self.subject.subscribe(self.second)

        assert self.subject.unsubscribe(self.second) is True
        self.subject.notify("only first")

        assert self.first.payloads == ["only first"]
        assert self.second.payloads == []

    def test_duplicate_subscription_ignored(self):
        assert self.subject.subscribe(self.first) is True
        assert self.subject.subscribe(self.first) is False
        self.subject.notify("once")
        assert self.first.payloads == ["once"]
        assert len(self.subject) == 1

    def test_unsubscribe_unknown_observer(self):
        assert self.subject.unsubscribe(self.first) is False

    def test_event_instances_delivered_as_is(self):
        self.subject.subscribe(self.first)
        event = OrderPlaced(payload={"order": 1})

        self.subject.notify(event)

        assert self.first.received == [event]

    def test_failing_observer_does_not_stop_others(self):
        self.subject.subscribe(FailingObserver())
        self.subject.subscribe(self.first)

        delivered = self.subject.notify("still delivered")

        assert delivered == 1
        assert self.first.payloads == ["still delivered"]

    def test_observer_may_unsubscribe_during_notify(self):
        subject = self.subject

        class OneShot(Observer):
            def __init__(self):
                self.calls = 0

            def update(self, event):
                self.calls += 1
                subject.unsubscribe(self)

        one_shot = OneShot()
        subject.subscribe(one_shot)
        subject.subscribe(self.first)

        subject.notify("first")
        subject.notify("second")

        assert one_shot.calls == 1
        assert self.first.payloads == ["first", "second"]

    def test_observers_view_is_read_only_snapshot(self):
        self.subject.subscribe(self.first)
        observers = self.subject.observers
        assert observers == (self.first,)
        assert isinstance(observers, tuple)

    def test_invalid_observer_rejected(self):
        with pytest.raises(TypeError):
            self.subject.subscribe(42)

    def test_notify_without_observers(self):
        assert self.subject.notify("nobody listens") == 0


class TestEventPublisher:
    """Test topic-keyed publishing."""

    def test_publish_to_matching_handlers_only(self):
        publisher = EventPublisher()
        orders, others = [], []
        publisher.register_handler("OrderPlaced", orders.append)
        publisher.register_handler("Other", others.append)

        assert publisher.publish(OrderPlaced()) == 1

        assert len(orders) == 1
        assert others == []

    def test_multiple_handlers(self):
        publisher = EventPublisher()
        first, second = [], []
        publisher.register_handler("OrderPlaced", first.append)
        publisher.register_handler("OrderPlaced", second.append)

        publisher.publish_all([OrderPlaced(), OrderPlaced()])

        assert len(first) == 2
        assert len(second) == 2
        assert publisher.get_registered_handlers() == {"OrderPlaced": 2}

    def test_handler_error_contained(self):
        publisher = EventPublisher()
        received = []

        def broken(event):
            raise Exception("Handler error")

        publisher.register_handler("OrderPlaced", broken)
        publisher.register_handler("OrderPlaced", received.append)

        assert publisher.publish(OrderPlaced()) == 1
        assert len(received) == 1

    def test_unregister_handler(self):
        publisher = EventPublisher()
        received = []
        publisher.register_handler("OrderPlaced", received.append)

        assert publisher.unregister_handler("OrderPlaced", received.append) is True
        assert publisher.unregister_handler("OrderPlaced", received.append) is False
        assert publisher.publish(OrderPlaced()) == 0
        assert publisher.get_registered_handlers() == {}
