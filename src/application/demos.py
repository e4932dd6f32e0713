"""
Pattern demonstrations.

Each demonstration exercises one pattern module in isolation and returns the
lines it would print. Demonstrations register themselves with ``@demo`` so
the CLI can list and run them by name.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from src.config.schemas.demo_schema import DemoConfig
from src.domain.core.exceptions import DemoNotFoundError, UnknownTypeError
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

DemoFunction = Callable[[DemoConfig], List[str]]


class DemoDefinition(BaseModel):
    """A registered demonstration."""

    name: str
    title: str
    idiom: str
    func: DemoFunction = Field(exclude=True)


class DemoResult(BaseModel):
    """Output of one demonstration run."""

    name: str
    title: str
    lines: List[str] = Field(default_factory=list)


_demo_registry: Dict[str, DemoDefinition] = {}


def demo(name: str, title: str, idiom: str):
    """
    Register a demonstration under a name.

    Usage:
        @demo("singleton", "Singleton", "process-wide shared instance")
        def singleton_demo(config: DemoConfig) -> List[str]:
            ...
    """
    def decorator(func: DemoFunction) -> DemoFunction:
        _demo_registry[name] = DemoDefinition(name=name, title=title, idiom=idiom, func=func)
        return func

    return decorator


def list_demos() -> List[DemoDefinition]:
    """Get registered demonstrations in registration order."""
    return list(_demo_registry.values())


def get_demo(name: str) -> DemoDefinition:
    key = name.strip().lower()
    if key not in _demo_registry:
        raise DemoNotFoundError(name, list(_demo_registry))
    return _demo_registry[key]


def run_demo(name: str, config: Optional[DemoConfig] = None) -> DemoResult:
    """
    Run one demonstration by name.

    Raises:
        DemoNotFoundError: If no demonstration has that name
    """
    definition = get_demo(name)
    logger.debug(f"Running demonstration {definition.name}")
    lines = definition.func(config or DemoConfig())
    return DemoResult(name=definition.name, title=definition.title, lines=lines)


def run_all(config: Optional[DemoConfig] = None) -> List[DemoResult]:
    return [run_demo(definition.name, config) for definition in list_demos()]


@demo("singleton", "Singleton", "process-wide shared instance reused across references")
def singleton_demo(config: DemoConfig) -> List[str]:
    from src.patterns.singleton import Logger

    logger_a = Logger()
    logger_a.reset()
    logger_a.log("This is the first log")
    lines = [logger_a.print_log_count()]

    logger_b = Logger()
    logger_b.log("This is the second log")
    lines.append(logger_b.print_log_count())

    lines.append(f"Same instance: {logger_a is logger_b}")
    logger_a.reset()
    return lines


@demo("factory", "Factory", "construction dispatch keyed by a type tag")
def factory_demo(config: DemoConfig) -> List[str]:
    from src.patterns.factory import VehicleFactory

    factory = VehicleFactory()
    lines = [f"Built: {factory.create(tag).describe()}" for tag in factory.supported_types()]
    try:
        factory.create("spaceship")
    except UnknownTypeError as e:
        lines.append(f"Rejected: {e.message}")
    return lines


@demo("observer", "Observer", "one-to-many notification list with subscribe/unsubscribe")
def observer_demo(config: DemoConfig) -> List[str]:
    from src.patterns.observer import RecordingObserver, Subject

    subject = Subject("news")
    alice = RecordingObserver("alice")
    bob = RecordingObserver("bob")
    subject.subscribe(alice)
    subject.subscribe(bob)

    subject.notify("Breaking: observers notified")
    subject.unsubscribe(bob)
    subject.notify("Update: bob unsubscribed")

    return [f"{observer.name} received: {observer.payloads}" for observer in (alice, bob)]


@demo("decorator", "Decorator", "dynamic wrapping to extend behavior")
def decorator_demo(config: DemoConfig) -> List[str]:
    from src.patterns.decorator import Coffee, WithMilk, WithSugar, decorate_method, log_calls

    coffee = Coffee(base_cost=config.coffee_base_cost)
    lines = [str(coffee), str(WithMilk(coffee)), str(WithSugar(WithMilk(coffee)))]

    @log_calls
    def brew(size: str) -> str:
        return f"{size} brew"

    brew("large")
    lines.append(f"log_calls recorded {len(brew.calls)} call(s) of {brew.__name__}")

    plain, shouting = Coffee(config.coffee_base_cost), Coffee(config.coffee_base_cost)
    decorate_method(shouting, "description", lambda original: lambda: original().upper())
    lines.append(f"Runtime-wrapped: {shouting.description()} / untouched: {plain.description()}")
    return lines


@demo("middleware", "Middleware", "ordered chain-of-responsibility over a request/response pair")
def middleware_demo(config: DemoConfig) -> List[str]:
    from src.patterns.middleware import (
        AuthMiddleware,
        ErrorMiddleware,
        LoggingMiddleware,
        MiddlewareChain,
        Request,
        Response,
    )

    trace: List[str] = []

    def tracing(request, call_next):
        trace.append(f"enter {request.path}")
        response = call_next(request)
        trace.append(f"leave {request.path} -> {response.status_code}")
        return response

    def endpoint(request: Request) -> Response:
        if request.path == "/boom":
            raise RuntimeError("endpoint exploded")
        return Response(body=f"Hello, {request.user}")

    chain = (
        MiddlewareChain()
        .use(ErrorMiddleware())
        .use(LoggingMiddleware())
        .use(tracing)
        .use(AuthMiddleware(config.auth_tokens))
    )
    token = next(iter(config.auth_tokens), "")

    lines = []
    for path, headers in (
        ("/hello", {"Authorization": f"Bearer {token}"}),
        ("/hello", {}),
        ("/boom", {"Authorization": f"Bearer {token}"}),
    ):
        response = chain.handle(Request(path=path, headers=headers), endpoint)
        lines.append(f"{path} -> {response.status_code} {response.body}")
    lines.extend(trace)
    return lines


@demo("di", "Dependency Injection", "passing a collaborator into a consumer rather than constructing it")
def dependency_injection_demo(config: DemoConfig) -> List[str]:
    from src.patterns.dependency_injection import (
        AuditLog,
        Container,
        EmailSender,
        MessageSender,
        NotificationService,
        SmsSender,
    )

    manual = NotificationService(SmsSender(), AuditLog())
    lines = [f"Manual injection: {manual.notify('alice', 'hi')}"]

    container = Container()
    container.register_type(MessageSender, EmailSender)
    container.register_singleton(AuditLog)
    service = container.get(NotificationService)
    lines.append(f"Container injection: {service.notify('bob', 'hello')}")
    lines.append(f"Shared audit log: {container.get(AuditLog) is service.audit_log}")
    return lines


@demo("mvc", "MVC", "separation of data storage, presentation, and input handling")
def mvc_demo(config: DemoConfig) -> List[str]:
    from src.patterns.mvc import UserController

    controller = UserController()
    lines = [controller.show_users()]
    controller.add_user("Alice", "alice@example.com")
    lines.append(controller.add_user("Bob", "bob@example.com"))
    lines.append(controller.add_user("", "not-an-email"))
    return lines
