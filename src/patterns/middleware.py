"""Middleware pattern: an ordered chain of handlers around an endpoint.

Each middleware receives the request and a ``call_next`` callable. Calling
``call_next(request)`` hands control to the next middleware (and finally to
the endpoint); returning a Response without calling it short-circuits the
rest of the chain. The first middleware registered is the outermost one.
"""

import time
import uuid
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from src.domain.core.exceptions import DomainException
from src.infrastructure.error.exception_handler import ExceptionHandler, get_exception_handler
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class MiddlewareError(DomainException):
    """Raised when a middleware misuses the chain."""

    def __init__(self, message: str):
        super().__init__(message, "MIDDLEWARE_ERROR")


class Request(BaseModel):
    """Incoming request travelling down the chain."""

    method: str = "GET"
    path: str = "/"
    headers: Dict[str, str] = Field(default_factory=dict)
    user: Optional[str] = None
    body: Any = None
    state: Dict[str, Any] = Field(default_factory=dict)


class Response(BaseModel):
    """Outgoing response travelling back up the chain."""

    status_code: int = 200
    body: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


Endpoint = Callable[[Request], Response]
CallNext = Callable[[Request], Response]


class Middleware(ABC):
    """Base class for middleware components."""

    @abstractmethod
    def dispatch(self, request: Request, call_next: CallNext) -> Response:
        """
        Process request through this middleware.

        Args:
            request: Incoming request
            call_next: Next middleware/handler in chain

        Returns:
            Response from downstream handlers, or a short-circuit response
        """


MiddlewareLike = Union[Middleware, Callable[[Request, CallNext], Response]]


class MiddlewareChain:
    """Ordered chain of middleware wrapped around an endpoint."""

    def __init__(self, middlewares: Optional[List[MiddlewareLike]] = None):
        self._middlewares: List[MiddlewareLike] = []
        for middleware in middlewares or []:
            self.use(middleware)

    def use(self, middleware: MiddlewareLike) -> "MiddlewareChain":
        """Append a middleware; returns the chain for fluent registration."""
        if not isinstance(middleware, Middleware) and not callable(middleware):
            raise TypeError(f"Middleware must implement dispatch() or be callable, got {type(middleware).__name__}")
        self._middlewares.append(middleware)
        return self

    def __len__(self) -> int:
        return len(self._middlewares)

    @property
    def middlewares(self) -> List[MiddlewareLike]:
        return list(self._middlewares)

    def handle(self, request: Request, endpoint: Endpoint) -> Response:
        """
        Run the request through every middleware and then the endpoint.

        Raises:
            MiddlewareError: If a middleware calls call_next more than once
        """
        return self._build(0, endpoint)(request)

    def _build(self, index: int, endpoint: Endpoint) -> CallNext:
        if index >= len(self._middlewares):
            return endpoint

        middleware = self._middlewares[index]
        downstream = self._build(index + 1, endpoint)

        def call(request: Request) -> Response:
            called = False

            def call_next(next_request: Request) -> Response:
                nonlocal called
                if called:
                    raise MiddlewareError(f"call_next invoked more than once by {_name_of(middleware)}")
                called = True
                return downstream(next_request)

            if isinstance(middleware, Middleware):
                return middleware.dispatch(request, call_next)
            return middleware(request, call_next)

        return call


def _name_of(middleware: MiddlewareLike) -> str:
    if isinstance(middleware, Middleware):
        return type(middleware).__name__
    return getattr(middleware, "__name__", repr(middleware))


class LoggingMiddleware(Middleware):
    """Logs requests and responses and tags each response with a request id."""

    def __init__(self, log_requests: bool = True, log_responses: bool = True):
        self.log_requests = log_requests
        self.log_responses = log_responses
        self.logger = get_logger(__name__)

    def dispatch(self, request: Request, call_next: CallNext) -> Response:
        request_id = str(uuid.uuid4())
        request.state["request_id"] = request_id

        start_time = time.time()
        if self.log_requests:
            self.logger.info(
                f"Request {request_id}: {request.method} {request.path} (user: {request.user or 'anonymous'})"
            )

        try:
            response = call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            self.logger.error(
                f"Error {request_id}: {type(e).__name__}: {e} "
                f"for {request.method} {request.path} (duration: {duration:.3f}s)"
            )
            raise

        duration = time.time() - start_time
        if self.log_responses:
            self.logger.info(
                f"Response {request_id}: {response.status_code} "
                f"for {request.method} {request.path} (duration: {duration:.3f}s)"
            )

        response.headers["X-Request-ID"] = request_id
        return response


class AuthMiddleware(Middleware):
    """
    Resolves the Authorization token to a user.

    Unknown or missing tokens short-circuit with a 401 response; the rest
    of the chain never runs.
    """

    def __init__(self, tokens: Dict[str, str], header: str = "Authorization"):
        self.tokens = dict(tokens)
        self.header = header

    def dispatch(self, request: Request, call_next: CallNext) -> Response:
        raw = request.headers.get(self.header, "")
        token = raw[len("Bearer "):] if raw.startswith("Bearer ") else raw
        user = self.tokens.get(token)
        if user is None:
            logger.warning(f"Rejected unauthenticated request to {request.path}")
            return Response(status_code=401, body={"error": "UNAUTHORIZED", "message": "Invalid or missing token"})

        request.user = user
        return call_next(request)


class ErrorMiddleware(Middleware):
    """Converts exceptions raised further down the chain into 500-style responses."""

    def __init__(self, error_handler: Optional[ExceptionHandler] = None):
        self._error_handler = error_handler or get_exception_handler()

    def dispatch(self, request: Request, call_next: CallNext) -> Response:
        try:
            return call_next(request)
        except Exception as e:
            error_response = self._error_handler.handle(e)
            return Response(status_code=error_response.status_code, body=error_response.to_dict())
