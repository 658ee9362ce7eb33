"""Route table entries, resolved routes, and routing modes."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from enum import StrEnum

from perch.capabilities import Action, Capability
from perch.errors import ConfigurationError


class RouteGroup(StrEnum):
    """Partition a table entry belongs to."""

    PUBLIC = "public"
    PROTECTED = "protected"


class RoutingMode(StrEnum):
    """Which partitions one build emits.

    ``ALL`` emits the public group followed by the protected group.
    """

    PUBLIC = "public"
    PROTECTED = "protected"
    ALL = "all"

    @classmethod
    def coerce(cls, value: RoutingMode | str | None, *, stacklevel: int = 3) -> RoutingMode:
        """Normalize a caller-supplied mode.

        ``None`` means public. ``"private"`` is the old name for
        protected: it still works but warns.
        """
        if value is None:
            return cls.PUBLIC
        if value == "private":
            warnings.warn(
                "auth_routes('private') has been deprecated. Please use 'protected' instead.",
                DeprecationWarning,
                stacklevel=stacklevel,
            )
            return cls.PROTECTED
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(m.value for m in cls)
            msg = f"Unknown routing mode {value!r}. Expected one of: {known}"
            raise ConfigurationError(msg) from None

    def includes(self, group: RouteGroup) -> bool:
        if self is RoutingMode.ALL:
            return True
        return self.value == group.value


@dataclass(frozen=True, slots=True)
class RouteTableEntry:
    """One row of the fixed route table.

    ``path_key`` names the path template; ``suffix`` is appended for
    resource-style routes (``"/new"``, ``"/{id}/edit"``).
    """

    capability: Capability
    action: Action
    http_method: str
    path_key: str
    handler: str
    group: RouteGroup
    suffix: str = ""


@dataclass(frozen=True, slots=True)
class ResolvedRoute:
    """A route the builder decided should exist, with its concrete path."""

    http_method: str
    path: str
    handler: str
    capability: Capability
    action: Action

    @property
    def endpoint(self) -> str:
        """Route name, e.g. ``"sessions.create"``."""
        return f"{self.handler}.{self.action.value}"
