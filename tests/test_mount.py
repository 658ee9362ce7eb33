"""Tests for perch.routing.mount — registrars and handler resolution."""

import logging
from collections.abc import Callable
from typing import Any

import pytest

from perch.capabilities import Action, Capability
from perch.config import AuthConfig, configure
from perch.errors import ConfigurationError
from perch.routing.builder import build_routes, router_definition
from perch.routing.mount import (
    DecoratorRegistrar,
    RouteRegistrar,
    RouteSet,
    register_routes,
    resolve_handler,
)
from perch.routing.route import ResolvedRoute


class SessionHandlers:
    def new(self) -> str:
        return "sign-in form"

    def create(self) -> str:
        return "signed in"

    def delete(self) -> str:
        return "signed out"


class _FakeApp:
    """Stand-in for an app with a ``route()`` decorator."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str], str | None, Any]] = []

    def route(self, path: str, *, methods: list[str], name: str | None = None) -> Callable:
        def decorator(func: Any) -> Any:
            self.calls.append((path, methods, name, func))
            return func

        return decorator


def _route(action: Action = Action.CREATE, handler: str = "sessions") -> ResolvedRoute:
    return ResolvedRoute(
        http_method="POST",
        path="/sessions",
        handler=handler,
        capability=Capability.AUTHENTICATABLE,
        action=action,
    )


class TestRouteSet:
    def test_is_registrar(self) -> None:
        assert isinstance(RouteSet(), RouteRegistrar)

    def test_register_and_lookup(self) -> None:
        routes = RouteSet()
        routes.register("post", "/sessions", "sessions.create", name="sessions.create")
        route = routes.lookup("POST", "/sessions")
        assert route is not None
        assert route.methods == frozenset({"POST"})
        assert route.name == "sessions.create"
        assert routes.lookup("GET", "/sessions") is None

    def test_keeps_order(self) -> None:
        routes = RouteSet()
        routes.register("GET", "/b", "b")
        routes.register("GET", "/a", "a")
        assert [r.path for r in routes] == ["/b", "/a"]
        assert len(routes) == 2

    def test_same_path_different_method(self) -> None:
        routes = RouteSet()
        routes.register("PUT", "/registrations", "update")
        routes.register("PATCH", "/registrations", "update")
        assert len(routes) == 2

    def test_duplicate_rejected(self) -> None:
        routes = RouteSet()
        routes.register("GET", "/sessions/new", "a", name="sessions.new")
        with pytest.raises(ConfigurationError, match="Duplicate route GET '/sessions/new'"):
            routes.register("GET", "/sessions/new", "b")

    def test_same_route_twice_keeps_first(self, caplog: pytest.LogCaptureFixture) -> None:
        routes = RouteSet()
        routes.register("GET", "/sessions/new", "sessions.new", name="sessions.new")
        with caplog.at_level(logging.WARNING, logger="perch.routing"):
            routes.register("GET", "/sessions/new", "sessions.new", name="sessions.new")
        assert len(routes) == 1
        assert "registered twice" in caplog.text

    def test_same_path_other_endpoint_rejected(self) -> None:
        routes = RouteSet()
        routes.register("GET", "/sessions/new", "sessions.new", name="sessions.new")
        with pytest.raises(ConfigurationError, match="already registered as 'sessions.new'"):
            routes.register("GET", "/sessions/new", "unlocks.new", name="unlocks.new")

    def test_routes_is_a_copy(self) -> None:
        routes = RouteSet()
        routes.register("GET", "/", "x")
        routes.routes.clear()
        assert len(routes) == 1


class TestDecoratorRegistrar:
    def test_drives_route_decorator(self) -> None:
        app = _FakeApp()
        DecoratorRegistrar(app).register("delete", "/sessions", SessionHandlers().delete, name="sessions.delete")
        path, methods, name, func = app.calls[0]
        assert (path, methods, name) == ("/sessions", ["DELETE"], "sessions.delete")
        assert func() == "signed out"

    def test_rejects_object_without_route(self) -> None:
        with pytest.raises(ConfigurationError, match="has no route"):
            DecoratorRegistrar(object())


class TestResolveHandler:
    def test_finds_action_method(self) -> None:
        handler = resolve_handler(_route(), {"sessions": SessionHandlers()})
        assert handler() == "signed in"

    def test_missing_controller(self) -> None:
        with pytest.raises(ConfigurationError, match="No controller registered for 'sessions'"):
            resolve_handler(_route(), {})

    def test_missing_action(self) -> None:
        with pytest.raises(ConfigurationError, match="no callable 'show'"):
            resolve_handler(_route(Action.SHOW), {"sessions": SessionHandlers()})


class TestRegisterRoutes:
    def test_endpoint_names_without_controllers(self) -> None:
        configure(AuthConfig.from_options("authenticatable"))
        routes = RouteSet()
        register_routes(routes, build_routes("all"))
        assert [r.handler for r in routes] == ["sessions.new", "sessions.create", "sessions.delete"]

    def test_controllers_resolved(self) -> None:
        configure(AuthConfig.from_options("authenticatable"))
        app = _FakeApp()
        with router_definition(DecoratorRegistrar(app), controllers={"sessions": SessionHandlers()}) as r:
            r.auth_routes()
            r.auth_routes("protected")
        assert [(c[0], c[1], c[3]()) for c in app.calls] == [
            ("/sessions/new", ["GET"], "sign-in form"),
            ("/sessions", ["POST"], "signed in"),
            ("/sessions", ["DELETE"], "signed out"),
        ]

    def test_missing_controller_fails_at_definition(self) -> None:
        configure(AuthConfig.from_options("authenticatable", "recoverable"))
        with router_definition(RouteSet(), controllers={"sessions": SessionHandlers()}) as r:
            with pytest.raises(ConfigurationError, match="'passwords'"):
                r.auth_routes()
