"""Observer pattern: one-to-many notification with subscribe/unsubscribe.

``Subject`` keeps an ordered list of observers and pushes every ``Event`` to
each of them. ``EventPublisher`` is the topic-keyed variant, where handlers
register for one event type and only receive events of that type.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Event(BaseModel):
    """Immutable notification delivered to observers."""

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_type: str = ""
    source: Optional[str] = None
    payload: Any = None

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if not data.get("event_type"):
            data["event_type"] = self.__class__.__name__
        super().__init__(**data)


class Observer(ABC):
    """Receives events from a Subject."""

    @abstractmethod
    def update(self, event: Event) -> None:
        """Handle an event."""


ObserverLike = Union[Observer, Callable[[Event], None]]


class RecordingObserver(Observer):
    """Observer that keeps every event it receives."""

    def __init__(self, name: str = "recorder"):
        self.name = name
        self.received: List[Event] = []

    def update(self, event: Event) -> None:
        self.received.append(event)

    @property
    def payloads(self) -> List[Any]:
        return [event.payload for event in self.received]

    def __repr__(self) -> str:
        return f"RecordingObserver(name='{self.name}', received={len(self.received)})"


class Subject:
    """
    Maintains an ordered observer list and notifies it of events.

    Observers may be Observer instances or plain callables taking an Event.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__
        self._observers: List[ObserverLike] = []

    @property
    def observers(self) -> Tuple[ObserverLike, ...]:
        """Read-only view of the subscribed observers, in subscription order."""
        return tuple(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def subscribe(self, observer: ObserverLike) -> bool:
        """
        Add an observer.

        Returns:
            False if the observer was already subscribed, True otherwise
        """
        if not isinstance(observer, Observer) and not callable(observer):
            raise TypeError(f"Observer must implement update() or be callable, got {type(observer).__name__}")
        if observer in self._observers:
            return False
        self._observers.append(observer)
        logger.debug(f"{self.name}: subscribed {observer!r}")
        return True

    def unsubscribe(self, observer: ObserverLike) -> bool:
        """
        Remove an observer.

        Returns:
            False if the observer was not subscribed, True otherwise
        """
        try:
            self._observers.remove(observer)
        except ValueError:
            return False
        logger.debug(f"{self.name}: unsubscribed {observer!r}")
        return True

    def notify(self, event_or_payload: Any = None) -> int:
        """
        Deliver an event to every observer in subscription order.

        A bare payload is wrapped in an Event sourced from this subject.
        Delivery iterates over a snapshot, so observers may unsubscribe while
        being notified. A failing observer is logged and skipped.

        Returns:
            Number of observers notified successfully
        """
        if isinstance(event_or_payload, Event):
            event = event_or_payload
        else:
            event = Event(source=self.name, payload=event_or_payload)

        delivered = 0
        for observer in list(self._observers):
            try:
                if isinstance(observer, Observer):
                    observer.update(event)
                else:
                    observer(event)
                delivered += 1
            except Exception as e:
                logger.error(f"{self.name}: observer {observer!r} failed on {event.event_type}: {e}")
                # Continue with other observers

        logger.debug(f"{self.name}: notified {delivered}/{len(self._observers)} observers")
        return delivered


class EventPublisher:
    """Topic-keyed publisher: handlers subscribe to a single event type."""

    def __init__(self):
        self._handlers: Dict[str, List[Callable[[Event], None]]] = {}

    def register_handler(self, event_type: str, handler: Callable[[Event], None]) -> None:
        """Register event handler for specific event type."""
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(f"Registered handler for {event_type}")

    def unregister_handler(self, event_type: str, handler: Callable[[Event], None]) -> bool:
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        if not handlers:
            del self._handlers[event_type]
        return True

    def publish(self, event: Event) -> int:
        """
        Call the handlers registered for the event's type.

        Returns:
            Number of handlers that ran successfully
        """
        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug(f"No handlers registered for {event.event_type}")
            return 0

        delivered = 0
        for handler in handlers:
            try:
                handler(event)
                delivered += 1
            except Exception as e:
                logger.error(f"Event handler failed for {event.event_type}: {e}")
        return delivered

    def publish_all(self, events: List[Event]) -> int:
        return sum(self.publish(event) for event in events)

    def get_registered_handlers(self) -> Dict[str, int]:
        """Get count of registered handlers by event type."""
        return {event_type: len(handlers) for event_type, handlers in self._handlers.items()}
