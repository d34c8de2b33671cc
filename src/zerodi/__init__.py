"""Minimal service-location registry.

Exports:
- `Registry`: register factories by type (optionally per target) and resolve them.
- `RegistryConfig`, `load_config`: pydantic configuration and its YAML loader.
- `ResolutionError` and its subclasses, `RegistryFrozenError`.
- `identity_key`, `qualified_key`: the key derivation used by `Registry`.
- `setup_logging`: stdout logging for applications.
"""

from .core.config import RegistryConfig, load_config
from .core.errors import (
    RegistryFrozenError,
    ResolutionError,
    ServiceNotRegisteredError,
    ServiceTypeMismatchError,
)
from .core.identity import identity_key, qualified_key
from .core.logging import setup_logging
from .core.registry import Factory, Registry

__all__ = [
    "Factory",
    "Registry",
    "RegistryConfig",
    "RegistryFrozenError",
    "ResolutionError",
    "ServiceNotRegisteredError",
    "ServiceTypeMismatchError",
    "identity_key",
    "load_config",
    "qualified_key",
    "setup_logging",
]
