"""Dispatches requests to handlers registered by path."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class Request:
    """A request addressed to a path."""

    path: str
    method: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass
class Response:
    """The result of handling a request."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


class Handler(ABC):
    """Turns a request into a response."""

    @abstractmethod
    async def handle(self, request: Request) -> Response:
        """Handle ``request``."""


class _Health(Handler):
    async def handle(self, request: Request) -> Response:
        return Response(status=200, body=b"OK")


class _Metrics(Handler):
    async def handle(self, request: Request) -> Response:
        return Response(status=200, body=b"metrics")


class Router:
    """Maps exact paths to handlers; unknown paths get a 404 response."""

    def __init__(self) -> None:
        self._routes: dict[str, Handler] = {}

    async def register(self, path: str, handler: Handler) -> None:
        """Route ``path`` to ``handler``, replacing any earlier handler."""
        self._routes[path] = handler

    async def unregister(self, path: str) -> None:
        """Remove the route for ``path`` if there is one."""
        self._routes.pop(path, None)

    async def route(self, request: Request) -> Response:
        """Pass ``request`` to the handler for its path."""
        handler = self._routes.get(request.path)
        if handler is None:
            return Response(status=404, body=b"Not Found")
        return await handler.handle(request)

    async def init(self) -> None:
        """Install the built-in ``/health`` and ``/metrics`` routes."""
        await self.register("/health", _Health())
        await self.register("/metrics", _Metrics())

    async def shutdown(self) -> None:
        """Drop every route."""
        self._routes.clear()

    async def count(self) -> int:
        """Number of registered routes."""
        return len(self._routes)