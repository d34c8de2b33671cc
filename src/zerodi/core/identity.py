import typing
from typing import Any

STRING_PREFIX = "str:"


def identity_key(identity: Any) -> str:
    """Derive the registry key for a service identity.

    Classes, protocols, functions and NewTypes map to ``module.qualname``.
    Strings get a ``str:`` prefix so they never collide with type-derived
    keys. Anything else (e.g. ``list[int]``) falls back to ``repr``.
    """
    if isinstance(identity, str):
        return STRING_PREFIX + identity
    module = getattr(identity, "__module__", None)
    name = getattr(identity, "__qualname__", None) or getattr(identity, "__name__", None)
    # parameterised generics and unions proxy __module__/__name__ to their origin
    parameterised = typing.get_args(identity) or getattr(identity, "__origin__", None) is not None
    if module and isinstance(name, str) and not parameterised:
        return f"{module}.{name}"
    return repr(identity)


def qualified_key(identity: Any, target: Any) -> str:
    return identity_key(identity) + identity_key(target)
