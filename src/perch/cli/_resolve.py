"""Resolve ``"module:attribute"`` strings to the AuthConfig ``perch routes`` inspects."""

import importlib

from perch.config import AuthConfig


def resolve_config(import_string: str) -> AuthConfig:
    """Import the AuthConfig named by *import_string*.

    The attribute defaults to ``auth_config``. A callable is treated as
    a config factory. Raises ``TypeError`` when the result is not an
    AuthConfig or the factory fails; import errors propagate.
    """
    module_path, _, attr_name = import_string.partition(":")
    obj = getattr(importlib.import_module(module_path), attr_name or "auth_config")

    if callable(obj) and not isinstance(obj, AuthConfig):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Config factory {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, AuthConfig):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a perch.AuthConfig instance"
        raise TypeError(msg)
    return obj
