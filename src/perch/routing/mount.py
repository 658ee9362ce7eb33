"""Hand resolved auth routes to a router.

Perch decides which routes exist; something else dispatches requests.
Anything with a ``register(method, path, handler, name=...)`` method
can receive the routes. Two adapters ship here:

- ``RouteSet`` collects ``Route`` records in memory (tests, introspection,
  or frameworks that take a route list).
- ``DecoratorRegistrar`` drives an app exposing a
  ``route(path, methods=[...], name=...)`` decorator.

Usage::

    routes = RouteSet()
    with router_definition(routes, controllers={"sessions": SessionHandlers()}) as r:
        r.auth_routes()
        r.auth_routes("protected")
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from perch.errors import ConfigurationError
from perch.routing.route import ResolvedRoute

_log = logging.getLogger("perch.routing")


@runtime_checkable
class RouteRegistrar(Protocol):
    """Anything that can register one verb + path + handler."""

    def register(
        self,
        http_method: str,
        path: str,
        handler: Any,
        *,
        name: str | None = None,
    ) -> None: ...


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route."""

    path: str
    handler: Any
    methods: frozenset[str]
    name: str | None = None


class RouteSet:
    """In-memory registrar. Keeps routes in registration order."""

    __slots__ = ("_index", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._index: dict[tuple[str, str], Route] = {}

    def register(
        self,
        http_method: str,
        path: str,
        handler: Any,
        *,
        name: str | None = None,
    ) -> None:
        """Add a route.

        Registering the same method, path, and handler again is a no-op, the
        first registration wins. The same method and path with a different
        handler or name raises ``ConfigurationError``.
        """
        method = http_method.upper()
        key = (method, path)
        if key in self._index:
            existing = self._index[key]
            if existing.name == name and existing.handler == handler:
                _log.warning("Route %s %s registered twice; keeping the first", method, path)
                return
            msg = f"Duplicate route {method} {path!r} (already registered as {existing.name!r})."
            raise ConfigurationError(msg)
        route = Route(path=path, handler=handler, methods=frozenset({method}), name=name)
        self._routes.append(route)
        self._index[key] = route

    @property
    def routes(self) -> list[Route]:
        return list(self._routes)

    def lookup(self, http_method: str, path: str) -> Route | None:
        """Exact match on method and path template."""
        return self._index.get((http_method.upper(), path))

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)


class DecoratorRegistrar:
    """Adapt an app with a ``route()`` decorator to ``RouteRegistrar``.

    Works with ``chirp.App`` and Flask-style apps::

        registrar = DecoratorRegistrar(app)
    """

    __slots__ = ("_app",)

    def __init__(self, app: Any) -> None:
        if not callable(getattr(app, "route", None)):
            msg = f"{type(app).__name__} has no route() decorator."
            raise ConfigurationError(msg)
        self._app = app

    def register(
        self,
        http_method: str,
        path: str,
        handler: Any,
        *,
        name: str | None = None,
    ) -> None:
        self._app.route(path, methods=[http_method.upper()], name=name)(handler)


def resolve_handler(route: ResolvedRoute, controllers: Mapping[str, Any]) -> Callable[..., Any]:
    """Find the callable for *route*: ``controllers[handler].<action>``.

    Raises ``ConfigurationError`` when the controller or its action is
    missing, so a half-wired app fails while the router is defined.
    """
    controller = controllers.get(route.handler)
    if controller is None:
        msg = (
            f"No controller registered for {route.handler!r} "
            f"(needed by {route.http_method} {route.path})."
        )
        raise ConfigurationError(msg)
    handler = getattr(controller, route.action.value, None)
    if not callable(handler):
        msg = (
            f"Controller for {route.handler!r} has no callable {route.action.value!r} "
            f"(needed by {route.http_method} {route.path})."
        )
        raise ConfigurationError(msg)
    return handler


def register_routes(
    registrar: RouteRegistrar,
    routes: Iterable[ResolvedRoute],
    controllers: Mapping[str, Any] | None = None,
) -> None:
    """Register *routes* with *registrar*, in order.

    With *controllers*, each route's handler identifier is resolved to a
    callable. Without, the endpoint string (``"sessions.create"``) is
    registered as the handler, for routers that resolve names themselves.
    """
    for route in routes:
        register_route(registrar, route, controllers)


def register_route(
    registrar: RouteRegistrar,
    route: ResolvedRoute,
    controllers: Mapping[str, Any] | None = None,
) -> None:
    """Register one route; see ``register_routes``."""
    handler = route.endpoint if controllers is None else resolve_handler(route, controllers)
    registrar.register(route.http_method, route.path, handler, name=route.endpoint)
