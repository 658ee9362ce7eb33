"""Auth configuration — which capabilities and actions are enabled.

AuthConfig is a frozen dataclass, immutable after creation. One instance
is made active for the process at startup and read by every route build::

    from perch.config import AuthConfig, configure

    configure(AuthConfig.from_options(
        "authenticatable",
        "recoverable",
        registerable=("new", "create"),
    ))

Bare names enable every action of the capability; keyword names enable
only the listed actions.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from perch.capabilities import CAPABILITY_ACTIONS, Action, Capability
from perch.errors import ConfigurationError
from perch.routing.paths import DEFAULT_ROUTE_PATHS


@dataclass(frozen=True, slots=True)
class AuthConfig:
    """Enabled capabilities and application-level route paths.

    ``capabilities`` maps each enabled capability to its enabled
    actions, or to ``None`` for all of them. Capabilities absent from
    the mapping are disabled.

    ``routes`` overrides entries of ``DEFAULT_ROUTE_PATHS`` for the
    whole application; call sites can still override per call with
    ``custom_routes``.
    """

    capabilities: Mapping[Capability, frozenset[Action] | None] = field(
        default_factory=lambda: MappingProxyType({})
    )
    routes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_options(
        cls,
        *enabled: str,
        routes: Mapping[str, str] | None = None,
        **restricted: Iterable[str],
    ) -> AuthConfig:
        """Build a config from capability names.

        Raises ``ConfigurationError`` for names that are not known
        capabilities or actions, so typos fail at startup.
        """
        capabilities: dict[Capability, frozenset[Action] | None] = {}
        for name in enabled:
            capabilities[_capability(name)] = None
        for name, actions in restricted.items():
            capability = _capability(name)
            capabilities[capability] = frozenset(_action(capability, a) for a in actions)
        return cls(
            capabilities=MappingProxyType(capabilities),
            routes=MappingProxyType(dict(routes or {})),
        )

    def has_action(self, capability: Capability | str, action: Action | str) -> bool:
        """Return whether *capability* is enabled with *action*.

        Unknown names answer ``False``.
        """
        try:
            capability = Capability(capability)
            action = Action(action)
        except ValueError:
            return False
        if capability not in self.capabilities:
            return False
        actions = self.capabilities[capability]
        if actions is None:
            return action in CAPABILITY_ACTIONS[capability]
        return action in actions

    def default_routes(self) -> dict[str, str]:
        """Built-in path templates with this config's overrides applied."""
        return {**DEFAULT_ROUTE_PATHS, **self.routes}


def _capability(name: str) -> Capability:
    try:
        return Capability(name)
    except ValueError:
        known = ", ".join(c.value for c in Capability)
        msg = f"Unknown capability {name!r}. Known capabilities: {known}"
        raise ConfigurationError(msg) from None


def _action(capability: Capability, name: str) -> Action:
    owned = CAPABILITY_ACTIONS[capability]
    try:
        action = Action(name)
    except ValueError:
        action = None
    if action is None or action not in owned:
        known = ", ".join(sorted(a.value for a in owned))
        msg = f"{capability.value!r} has no action {name!r}. Known actions: {known}"
        raise ConfigurationError(msg)
    return action


# ---------------------------------------------------------------------------
# Process-wide active config
# ---------------------------------------------------------------------------

_config_lock = threading.Lock()
_config: AuthConfig = AuthConfig()


def configure(config: AuthConfig | None) -> None:
    """Set the process-wide auth config.

    Pass ``None`` to go back to the empty config (nothing enabled).
    """
    global _config
    with _config_lock:
        _config = config or AuthConfig()


def get_config() -> AuthConfig:
    """Return the active auth config."""
    with _config_lock:
        return _config


def has_action(capability: Capability | str, action: Action | str) -> bool:
    """``has_action`` against the active config."""
    return get_config().has_action(capability, action)


def default_routes() -> dict[str, str]:
    """``default_routes`` of the active config."""
    return get_config().default_routes()
