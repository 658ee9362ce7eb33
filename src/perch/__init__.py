"""Perch — auth route tables from enabled capabilities.

Declare which auth capabilities an application uses, then let perch emit
the matching routes at startup::

    from perch import AuthConfig, RouteSet, configure, router_definition

    configure(AuthConfig.from_options("authenticatable", "registerable"))

    routes = RouteSet()
    with router_definition(routes) as r:
        r.auth_routes()             # sign in, sign up
        r.auth_routes("protected")  # sign out, account management

Only routes whose capability and action are enabled are emitted. Paths
can be moved per call with ``custom_routes``.
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "Action",
    "AuthConfig",
    "Capability",
    "ConfigurationError",
    "PerchError",
    "ResolvedRoute",
    "RouteOrderingError",
    "RouteSet",
    "RouterDefinition",
    "RoutingMode",
    "build_routes",
    "configure",
    "get_config",
    "router_definition",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name in ("Action", "Capability"):
        from perch import capabilities as _capabilities

        return getattr(_capabilities, name)

    if name in ("AuthConfig", "configure", "get_config"):
        from perch import config as _config

        return getattr(_config, name)

    if name in ("ConfigurationError", "PerchError", "RouteOrderingError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    if name in ("ResolvedRoute", "RoutingMode"):
        from perch.routing import route as _route

        return getattr(_route, name)

    if name == "RouteSet":
        from perch.routing.mount import RouteSet

        return RouteSet

    if name in ("RouterDefinition", "build_routes", "router_definition"):
        from perch.routing import builder as _builder

        return getattr(_builder, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
