"""Capability and action vocabulary.

A capability is an auth feature area that can be switched on or off
(``registerable``, ``recoverable``, ...). Each capability owns a fixed
set of actions, and each action may or may not have a route.
"""

from enum import StrEnum
from types import MappingProxyType


class Capability(StrEnum):
    """Auth feature areas that own routes."""

    AUTHENTICATABLE = "authenticatable"
    REGISTERABLE = "registerable"
    RECOVERABLE = "recoverable"
    CONFIRMABLE = "confirmable"
    UNLOCKABLE_WITH_TOKEN = "unlockable_with_token"
    INVITABLE = "invitable"


class Action(StrEnum):
    """Operations within a capability."""

    NEW = "new"
    CREATE = "create"
    EDIT = "edit"
    UPDATE = "update"
    DELETE = "delete"
    SHOW = "show"
    RESEND = "resend"
    CREATE_USER = "create_user"


# Everything a capability can do. A capability enabled without an
# explicit action list gets all of these.
CAPABILITY_ACTIONS: MappingProxyType[Capability, frozenset[Action]] = MappingProxyType(
    {
        Capability.AUTHENTICATABLE: frozenset({Action.NEW, Action.CREATE, Action.DELETE}),
        Capability.REGISTERABLE: frozenset(
            {Action.NEW, Action.CREATE, Action.SHOW, Action.EDIT, Action.UPDATE, Action.DELETE}
        ),
        Capability.RECOVERABLE: frozenset({Action.NEW, Action.CREATE, Action.EDIT, Action.UPDATE}),
        Capability.CONFIRMABLE: frozenset({Action.NEW, Action.CREATE, Action.EDIT}),
        Capability.UNLOCKABLE_WITH_TOKEN: frozenset({Action.NEW, Action.CREATE, Action.EDIT}),
        Capability.INVITABLE: frozenset(
            {Action.NEW, Action.CREATE, Action.EDIT, Action.CREATE_USER, Action.RESEND}
        ),
    }
)
