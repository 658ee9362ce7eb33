"""Named path templates for auth routes.

Every route in the table refers to its URL through a path key
(``"sessions"``, ``"registrations_edit"``, ...) instead of a literal
string, so applications can move any of them independently::

    paths = merge_route_paths(DEFAULT_ROUTE_PATHS, {"sessions": "/login"})
    paths["sessions"]       # "/login"
    paths["registrations"]  # "/registrations"
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

RoutePaths: TypeAlias = dict[str, str]

DEFAULT_ROUTE_PATHS: Mapping[str, str] = MappingProxyType(
    {
        "sessions": "/sessions",
        "registrations": "/registrations",
        "registrations_new": "/registrations/new",
        "registrations_edit": "/registrations/edit",
        "passwords": "/passwords",
        "confirmations": "/confirmations",
        "unlocks": "/unlocks",
        "invitations": "/invitations",
        "invitations_create": "/invitations/create",
        "invitations_resend": "/invitations/{id}/resend",
    }
)


def merge_route_paths(
    defaults: Mapping[str, str],
    custom_routes: Mapping[str, str] | None = None,
) -> RoutePaths:
    """Return a fresh path map with *custom_routes* laid over *defaults*.

    Overrides win key-by-key; keys the caller leaves out keep their
    default template. Neither input is modified.
    """
    paths = dict(defaults)
    if custom_routes:
        paths.update(custom_routes)
    return paths


def resolve_path(paths: Mapping[str, str], path_key: str, suffix: str = "") -> str:
    """Resolve *path_key* to a concrete path, appending a resource *suffix*.

    A trailing slash on the base template is always dropped, so
    ``"/login/"`` resolves to ``"/login"`` and ``"/login/new"``. A bare
    ``"/"`` stays ``"/"``.
    """
    base = paths[path_key].rstrip("/")
    return base + suffix or "/"
