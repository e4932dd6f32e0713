"""Dependency Injection package."""
from .container import (
    Container,
    Lifetime,
    Registration,
    get_container,
    reset_container,
)
from .decorators import inject, injectable, is_injectable
from .exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    FactoryError,
    InstantiationError,
    UnregisteredDependencyError,
    UntypedParameterError,
)
from .services import (
    AuditLog,
    EmailSender,
    InMemorySender,
    MessageSender,
    NotificationService,
    SmsSender,
)

__all__ = [
    'Container',
    'Lifetime',
    'Registration',
    'get_container',
    'reset_container',
    'inject',
    'injectable',
    'is_injectable',
    'DependencyResolutionError',
    'UnregisteredDependencyError',
    'UntypedParameterError',
    'CircularDependencyError',
    'InstantiationError',
    'FactoryError',
    'MessageSender',
    'EmailSender',
    'SmsSender',
    'InMemorySender',
    'AuditLog',
    'NotificationService',
]
