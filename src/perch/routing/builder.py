"""Route table builder — turns the fixed table into concrete routes.

A ``RouterDefinition`` represents one router being defined. It remembers
whether protected routes have been declared yet, because public routes
must come first::

    from perch.routing.builder import router_definition
    from perch.routing.mount import RouteSet

    routes = RouteSet()
    with router_definition(routes) as r:
        r.auth_routes()             # public: sign in, sign up, recover, ...
        r.auth_routes("protected")  # sign out, edit account, invite, ...

Applications that guard handlers individually can declare everything at
once with ``r.auth_routes("all")``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from perch.config import AuthConfig, get_config
from perch.errors import RouteOrderingError
from perch.routing.mount import RouteRegistrar, register_route
from perch.routing.paths import merge_route_paths, resolve_path
from perch.routing.route import ResolvedRoute, RouteGroup, RoutingMode
from perch.routing.table import ROUTE_TABLE

_log = logging.getLogger("perch.routing")

# ``ALL`` walks the table once per group so public rows always come first.
_GROUP_ORDER = (RouteGroup.PUBLIC, RouteGroup.PROTECTED)


class RouterDefinition:
    """One router definition in progress.

    Holds the ordering flag for the definition, the routes emitted so
    far, and optionally a registrar that receives them as they are
    emitted. Discard it once the router is defined.
    """

    __slots__ = ("_config", "_controllers", "_protected_defined", "_registrar", "_routes")

    def __init__(
        self,
        registrar: RouteRegistrar | None = None,
        controllers: Mapping[str, Any] | None = None,
        config: AuthConfig | None = None,
    ) -> None:
        self._registrar = registrar
        self._controllers = controllers
        self._config = config
        self._protected_defined = False
        self._routes: list[ResolvedRoute] = []

    @property
    def protected_defined(self) -> bool:
        """True once a protected or ``all`` build has completed."""
        return self._protected_defined

    @property
    def routes(self) -> tuple[ResolvedRoute, ...]:
        """Every route ``auth_routes`` has emitted, in order."""
        return tuple(self._routes)

    @property
    def config(self) -> AuthConfig:
        """The pinned config, or the process-wide one."""
        return self._config if self._config is not None else get_config()

    def build_routes(
        self,
        mode: RoutingMode | str | None = None,
        opts: Mapping[str, Any] | None = None,
        *,
        _stacklevel: int = 3,
    ) -> list[ResolvedRoute]:
        """Return the enabled routes for *mode*, in table order.

        ``opts["custom_routes"]`` overrides path templates key-by-key.
        Raises ``RouteOrderingError`` for a public build after a
        protected one in this definition.
        """
        mode = RoutingMode.coerce(mode, stacklevel=_stacklevel)

        if mode is RoutingMode.PUBLIC and self._protected_defined:
            err = RouteOrderingError()
            _log.error("%s", err)
            raise err

        config = self.config
        custom_routes = (opts or {}).get("custom_routes")
        paths = merge_route_paths(config.default_routes(), custom_routes)

        routes: list[ResolvedRoute] = []
        for group in _GROUP_ORDER:
            if not mode.includes(group):
                continue
            for entry in ROUTE_TABLE:
                if entry.group is not group:
                    continue
                if not config.has_action(entry.capability, entry.action):
                    _log.debug(
                        "Skipping %s %s.%s: not enabled",
                        entry.http_method,
                        entry.capability.value,
                        entry.action.value,
                    )
                    continue
                route = ResolvedRoute(
                    http_method=entry.http_method,
                    path=resolve_path(paths, entry.path_key, entry.suffix),
                    handler=entry.handler,
                    capability=entry.capability,
                    action=entry.action,
                )
                _log.debug("Route %s %s -> %s", route.http_method, route.path, route.endpoint)
                routes.append(route)

        if mode is not RoutingMode.PUBLIC:
            self._protected_defined = True
        return routes

    def auth_routes(
        self,
        mode: RoutingMode | str | Mapping[str, Any] | None = None,
        opts: Mapping[str, Any] | None = None,
        *,
        custom_routes: Mapping[str, str] | None = None,
    ) -> list[ResolvedRoute]:
        """Declare auth routes in this router.

        Accepted forms::

            r.auth_routes()                          # public
            r.auth_routes("protected")
            r.auth_routes("all", {"custom_routes": {...}})
            r.auth_routes({"custom_routes": {...}})  # options only: all
            r.auth_routes("protected", custom_routes={...})

        Each route is passed to the registrar, if there is one, and
        recorded on the definition once it has been registered.
        """
        if isinstance(mode, Mapping):
            mode, opts = RoutingMode.ALL, mode
        if custom_routes is not None:
            opts = {**(opts or {}), "custom_routes": custom_routes}

        routes = self.build_routes(mode, opts, _stacklevel=4)
        for route in routes:
            if self._registrar is not None:
                register_route(self._registrar, route, self._controllers)
            self._routes.append(route)
        return routes


@contextmanager
def router_definition(
    registrar: RouteRegistrar | None = None,
    controllers: Mapping[str, Any] | None = None,
    config: AuthConfig | None = None,
) -> Iterator[RouterDefinition]:
    """Scope one router definition.

    The ordering flag lives only inside the ``with`` block; a new block
    starts clean.
    """
    definition = RouterDefinition(registrar, controllers, config)
    yield definition
    _log.debug("Router defined with %d auth routes", len(definition.routes))


def build_routes(
    mode: RoutingMode | str | None = None,
    opts: Mapping[str, Any] | None = None,
    *,
    definition: RouterDefinition | None = None,
) -> list[ResolvedRoute]:
    """Functional form of ``RouterDefinition.build_routes``.

    Without *definition* the build runs in a fresh definition and so
    carries no ordering history.
    """
    if definition is None:
        definition = RouterDefinition()
    return definition.build_routes(mode, opts, _stacklevel=4)
