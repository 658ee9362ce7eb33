"""Perch exception hierarchy.

Shared across the registry, builder, and registration adapters so every
module raises and catches the same types.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when auth or routing configuration is invalid.

    Always surfaced at startup or while a router is being defined,
    never while serving a request.
    """


class RouteOrderingError(ConfigurationError):
    """Public auth routes were requested after protected ones.

    Within one router definition the public group must be declared
    first. Move the protected (or ``all``) call below the public one.
    """

    def __init__(self, detail: str = "") -> None:
        default_detail = (
            "Protected routes must follow public routes. Please move "
            "'auth_routes(\"protected\")' below 'auth_routes()'."
        )
        super().__init__(detail or default_detail)
