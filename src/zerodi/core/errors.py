from typing import Any


class ResolutionError(RuntimeError):
    """Raised when a service cannot be wired.

    This is a programmer error: the registry was configured incompletely or
    with a wrong factory. It is meant to surface at startup, not to be caught.
    """

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class ServiceNotRegisteredError(ResolutionError):
    def __init__(self, key: str) -> None:
        super().__init__(key, f"Service '{key}' not registered.")


class ServiceTypeMismatchError(ResolutionError):
    def __init__(self, key: str, expected: Any, actual: type) -> None:
        super().__init__(
            key,
            f"Service '{key}' produced {actual.__qualname__}, expected {expected!r}.",
        )
        self.expected = expected
        self.actual = actual


class RegistryFrozenError(RuntimeError):
    def __init__(self, key: str, registry_name: str) -> None:
        super().__init__(f"Cannot register '{key}': registry '{registry_name}' is frozen.")
        self.key = key
