from __future__ import annotations

from typing import Sequence


class CoreError(Exception):
    pass


class InvalidArgument(CoreError, TypeError):
    """Bad name, non-callable factory/callback, unknown option value."""


class ServiceNotFound(CoreError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Service '{name}' not found")
        self.name = name


class CircularDependency(CoreError):
    """
    Raised at resolution time, never at registration time.
    `path` starts and ends with the repeated name.
    """

    def __init__(self, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__("Circular dependency detected: " + " -> ".join(self.path))


class ComponentNotRegistered(CoreError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Component '{name}' not registered")
        self.name = name
