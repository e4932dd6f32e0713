"""Collaborators used to demonstrate constructor injection."""

from abc import ABC, abstractmethod
from typing import List, Tuple


class MessageSender(ABC):
    """Port for delivering a message to a recipient."""

    @abstractmethod
    def send(self, recipient: str, message: str) -> str:
        """Deliver a message and return a delivery receipt."""


class EmailSender(MessageSender):
    def send(self, recipient: str, message: str) -> str:
        return f"Email to {recipient}: {message}"


class SmsSender(MessageSender):
    def send(self, recipient: str, message: str) -> str:
        return f"SMS to {recipient}: {message}"


class InMemorySender(MessageSender):
    """Sender that only records what it was asked to send."""

    def __init__(self):
        self.sent: List[Tuple[str, str]] = []

    def send(self, recipient: str, message: str) -> str:
        self.sent.append((recipient, message))
        return f"Recorded message to {recipient}"


class AuditLog:
    """Keeps a trail of delivery receipts."""

    def __init__(self):
        self.entries: List[str] = []

    def record(self, entry: str) -> None:
        self.entries.append(entry)


class NotificationService:
    """
    Consumer receiving its collaborators from outside.

    The service never constructs a sender itself, so swapping email for SMS
    (or a test double) is a matter of passing a different object.
    """

    def __init__(self, sender: MessageSender, audit_log: AuditLog):
        self.sender = sender
        self.audit_log = audit_log

    def notify(self, recipient: str, message: str) -> str:
        receipt = self.sender.send(recipient, message)
        self.audit_log.record(receipt)
        return receipt
