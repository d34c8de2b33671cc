"""Service-location registry keyed by type identity; see Registry."""
import logging
import threading
import types
import typing
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, overload

from .config import RegistryConfig, load_config
from .errors import RegistryFrozenError, ServiceNotRegisteredError, ServiceTypeMismatchError
from .identity import identity_key, qualified_key
from .logging import level_from_name

T = TypeVar("T")
Factory = Callable[["Registry"], Any]

logger = logging.getLogger(__name__)

_UNION_ORIGINS = (typing.Union, types.UnionType)


def _is_compatible(value: Any, service_type: Any) -> bool:
    if service_type is Any or isinstance(service_type, str):
        return True
    origin = typing.get_origin(service_type)
    if origin in _UNION_ORIGINS:
        return any(_is_compatible(value, arg) for arg in typing.get_args(service_type))
    check = origin or service_type
    if not isinstance(check, type):
        return True
    try:
        return isinstance(value, check)
    except TypeError:
        # protocols without @runtime_checkable
        return True


class Registry:
    """Maps service identities to factories.

    Intended use is configure-then-freeze: register everything, call
    ``freeze()``, then hand the registry to consumers.
    """

    def __init__(self, config: Optional[RegistryConfig] = None) -> None:
        self.config = config or RegistryConfig()
        logger.setLevel(level_from_name(self.config.log_level))
        self._lock = threading.RLock()
        self._by_type: Dict[str, Factory] = {}
        self._by_type_and_target: Dict[str, Factory] = {}
        self._frozen = False

    @classmethod
    def from_yaml(cls, path: str) -> "Registry":
        return cls(load_config(path))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True
        logger.debug("[%s] frozen with %d registrations", self.config.name, len(self))

    def register(self, service_type: Any, factory: Factory, target: Any = None) -> None:
        """Store ``factory`` for ``service_type`` (qualified by ``target`` when given).

        A second registration for the same key replaces the first.
        """
        if target is None:
            key, table = identity_key(service_type), self._by_type
        else:
            key, table = qualified_key(service_type, target), self._by_type_and_target
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(key, self.config.name)
            replaced = key in table
            table[key] = factory
        logger.debug("[%s] %s '%s'", self.config.name, "replaced" if replaced else "registered", key)

    @overload
    def resolve(self, service_type: Type[T], target: Any = None) -> T: ...

    @overload
    def resolve(self, service_type: Any, target: Any = None) -> Any: ...

    def resolve(self, service_type: Any, target: Any = None) -> Any:
        """Build the service registered for ``service_type`` (and ``target``).

        Raises:
            ServiceNotRegisteredError: nothing is registered under the key.
            ServiceTypeMismatchError: the factory produced a value that is not
                an instance of ``service_type`` (only with ``check_types``).
        """
        if target is None:
            key, table = identity_key(service_type), self._by_type
        else:
            key, table = qualified_key(service_type, target), self._by_type_and_target
        with self._lock:
            factory = table.get(key)
        if factory is None:
            raise ServiceNotRegisteredError(key)
        # called outside the lock so factories can resolve their own dependencies
        value = factory(self)
        if self.config.check_types and not _is_compatible(value, service_type):
            raise ServiceTypeMismatchError(key, service_type, type(value))
        logger.debug("[%s] resolved '%s'", self.config.name, key)
        return value

    def is_registered(self, service_type: Any, target: Any = None) -> bool:
        with self._lock:
            if target is None:
                return identity_key(service_type) in self._by_type
            return qualified_key(service_type, target) in self._by_type_and_target

    def __contains__(self, service_type: Any) -> bool:
        return self.is_registered(service_type)

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(self._by_type)

    def qualified_keys(self) -> List[str]:
        with self._lock:
            return sorted(self._by_type_and_target)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_type) + len(self._by_type_and_target)
