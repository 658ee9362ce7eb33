"""The fixed auth route table.

Built once at import. Order is emission order: public group first, then
protected, each in the sequence applications have always registered
them in. Resource-style rows follow the conventional REST layout::

    new     GET     /base/new
    create  POST    /base
    edit    GET     /base/{id}/edit
    update  PATCH   /base/{id}
            PUT     /base/{id}
    show    GET     /base/{id}
    delete  DELETE  /base/{id}
"""

from perch.capabilities import Action, Capability
from perch.routing.route import RouteGroup, RouteTableEntry

_RESOURCE_VERBS: dict[Action, tuple[tuple[str, str], ...]] = {
    Action.NEW: (("GET", "/new"),),
    Action.CREATE: (("POST", ""),),
    Action.EDIT: (("GET", "/{id}/edit"),),
    Action.UPDATE: (("PATCH", "/{id}"), ("PUT", "/{id}")),
    Action.SHOW: (("GET", "/{id}"),),
    Action.DELETE: (("DELETE", "/{id}"),),
}


def _resource(
    capability: Capability,
    path_key: str,
    handler: str,
    group: RouteGroup,
    *actions: Action,
) -> list[RouteTableEntry]:
    entries: list[RouteTableEntry] = []
    for action in actions:
        for method, suffix in _RESOURCE_VERBS[action]:
            entries.append(
                RouteTableEntry(
                    capability=capability,
                    action=action,
                    http_method=method,
                    path_key=path_key,
                    handler=handler,
                    group=group,
                    suffix=suffix,
                )
            )
    return entries


def _verb(
    method: str,
    capability: Capability,
    action: Action,
    path_key: str,
    handler: str,
    group: RouteGroup,
) -> RouteTableEntry:
    return RouteTableEntry(
        capability=capability,
        action=action,
        http_method=method,
        path_key=path_key,
        handler=handler,
        group=group,
    )


_PUBLIC = RouteGroup.PUBLIC
_PROTECTED = RouteGroup.PROTECTED

ROUTE_TABLE: tuple[RouteTableEntry, ...] = (
    # -- public -----------------------------------------------------------
    *_resource(Capability.AUTHENTICATABLE, "sessions", "sessions", _PUBLIC, Action.NEW, Action.CREATE),
    _verb("GET", Capability.REGISTERABLE, Action.NEW, "registrations_new", "registrations", _PUBLIC),
    _verb("POST", Capability.REGISTERABLE, Action.CREATE, "registrations", "registrations", _PUBLIC),
    *_resource(
        Capability.RECOVERABLE,
        "passwords",
        "passwords",
        _PUBLIC,
        Action.NEW,
        Action.CREATE,
        Action.EDIT,
        Action.UPDATE,
    ),
    *_resource(
        Capability.CONFIRMABLE,
        "confirmations",
        "confirmations",
        _PUBLIC,
        Action.EDIT,
        Action.NEW,
        Action.CREATE,
    ),
    *_resource(
        Capability.UNLOCKABLE_WITH_TOKEN,
        "unlocks",
        "unlocks",
        _PUBLIC,
        Action.NEW,
        Action.CREATE,
        Action.EDIT,
    ),
    *_resource(Capability.INVITABLE, "invitations", "invitations", _PUBLIC, Action.EDIT),
    _verb("POST", Capability.INVITABLE, Action.CREATE_USER, "invitations_create", "invitations", _PUBLIC),
    # -- protected --------------------------------------------------------
    *_resource(Capability.INVITABLE, "invitations", "invitations", _PROTECTED, Action.NEW, Action.CREATE),
    _verb("GET", Capability.INVITABLE, Action.RESEND, "invitations_resend", "invitations", _PROTECTED),
    _verb("DELETE", Capability.AUTHENTICATABLE, Action.DELETE, "sessions", "sessions", _PROTECTED),
    _verb("GET", Capability.REGISTERABLE, Action.SHOW, "registrations", "registrations", _PROTECTED),
    _verb("PUT", Capability.REGISTERABLE, Action.UPDATE, "registrations", "registrations", _PROTECTED),
    _verb("PATCH", Capability.REGISTERABLE, Action.UPDATE, "registrations", "registrations", _PROTECTED),
    _verb("GET", Capability.REGISTERABLE, Action.EDIT, "registrations_edit", "registrations", _PROTECTED),
    _verb("DELETE", Capability.REGISTERABLE, Action.DELETE, "registrations", "registrations", _PROTECTED),
)


def entries_for(group: RouteGroup) -> tuple[RouteTableEntry, ...]:
    """Table rows of one partition, in table order."""
    return tuple(entry for entry in ROUTE_TABLE if entry.group is group)
