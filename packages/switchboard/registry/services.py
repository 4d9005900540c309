from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Literal, Sequence, Tuple, TypeVar

from ..contracts.errors import CircularDependency, InvalidArgument, ServiceNotFound

logger = logging.getLogger(__name__)

T = TypeVar("T")

Lifetime = Literal["singleton", "transient"]
_LIFETIMES = ("singleton", "transient")


@dataclass(frozen=True)
class ServiceRegistration:
    """
    Factory binding: name -> deferred constructor + declared dependency names.
    Dependencies are resolved first and passed positionally, in this order.
    """
    name: str
    factory: Callable[..., Any]
    lifetime: Lifetime = "singleton"
    dependencies: Tuple[str, ...] = ()


def _ensure_name(name: Any) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgument("Service name must be a non-empty string")


def _shareable(value: Any) -> Any:
    # a coroutine can be awaited once; a task can be awaited by every resolver
    if not inspect.iscoroutine(value):
        return value
    try:
        return asyncio.get_running_loop().create_task(value)
    except RuntimeError:
        return value


class ServiceRegistry:
    """
    In-memory service directory.

    Resolution order: direct instances, cached singletons, factories.
    Cycles are detected when a factory is resolved, not when it is registered.
    """

    def __init__(self) -> None:
        # key: name -> already constructed value
        self._instances: Dict[str, Any] = {}

        # key: name -> factory binding
        self._factories: Dict[str, ServiceRegistration] = {}

        # key: name -> value produced by a singleton factory
        self._singletons: Dict[str, Any] = {}

        # key: name -> declared dependency names (graph edges)
        self._dependencies: Dict[str, Tuple[str, ...]] = {}

    def register_instance(self, name: str, value: Any) -> None:
        _ensure_name(name)
        self._instances[name] = value
        # the instance supersedes any value a factory produced earlier
        self._singletons.pop(name, None)
        logger.debug("Service '%s' registered", name)

    def register_factory(
        self,
        name: str,
        factory: Callable[..., Any],
        lifetime: Lifetime = "singleton",
        dependencies: Sequence[str] = (),
    ) -> None:
        _ensure_name(name)
        if not callable(factory):
            raise InvalidArgument("Factory must be callable")
        if lifetime not in _LIFETIMES:
            raise InvalidArgument(f"Unknown lifetime '{lifetime}'")

        deps = tuple(dependencies)
        self._factories[name] = ServiceRegistration(
            name=name,
            factory=factory,
            lifetime=lifetime,
            dependencies=deps,
        )

        if deps:
            self._dependencies[name] = deps
        else:
            self._dependencies.pop(name, None)

        logger.debug("Factory '%s' registered (%s) deps=%s", name, lifetime, list(deps))

    def resolve(self, name: str) -> Any:
        if name in self._instances:
            return self._instances[name]

        if name in self._singletons:
            return self._singletons[name]

        if name in self._factories:
            return self._create_from_factory(name)

        raise ServiceNotFound(name)

    async def resolve_async(self, name: str) -> Any:
        """
        Like resolve, but awaits the value when the factory produced something pending.

        A singleton coroutine resolved outside a running loop is cached as-is;
        awaiting it directly instead of through resolve_async exhausts it.
        """
        value = self.resolve(name)
        if not inspect.isawaitable(value):
            return value

        # a cached coroutine can be awaited only once; keep a task in its place
        if self._singletons.get(name) is value and not isinstance(value, asyncio.Future):
            value = asyncio.ensure_future(value)
            self._singletons[name] = value

        return await value

    def resolve_many(self, names: Iterable[str]) -> Dict[str, Any]:
        return {name: self.resolve(name) for name in names}

    def _create_from_factory(self, name: str) -> Any:
        reg = self._factories[name]

        self._check_circular_dependency(name, ())

        resolved = [self.resolve(dep) for dep in reg.dependencies]
        instance = reg.factory(*resolved)

        if reg.lifetime == "singleton":
            instance = _shareable(instance)
            self._singletons[name] = instance

        logger.debug("Service '%s' created (%s)", name, reg.lifetime)
        return instance

    def _check_circular_dependency(self, name: str, path: Tuple[str, ...]) -> None:
        # path is the active branch only; siblings get their own copy
        if name in path:
            raise CircularDependency(path + (name,))

        branch = path + (name,)
        for dep in self._dependencies.get(name, ()):
            self._check_circular_dependency(dep, branch)

    def has(self, name: str) -> bool:
        return name in self._instances or name in self._factories or name in self._singletons

    def remove(self, name: str) -> None:
        self._instances.pop(name, None)
        self._factories.pop(name, None)
        self._singletons.pop(name, None)
        self._dependencies.pop(name, None)
        logger.debug("Service '%s' removed", name)

    def clear(self) -> None:
        self._instances.clear()
        self._factories.clear()
        self._singletons.clear()
        self._dependencies.clear()
        logger.debug("All services cleared")

    def names(self) -> List[str]:
        merged = dict.fromkeys(self._instances)
        merged.update(dict.fromkeys(self._factories))
        merged.update(dict.fromkeys(self._singletons))
        return list(merged)

    def debug_info(self) -> Dict[str, Any]:
        return {
            "instances": list(self._instances),
            "factories": list(self._factories),
            "singletons": list(self._singletons),
            "dependencies": {k: list(v) for k, v in self._dependencies.items()},
        }


# --- Registration helper (plain builder over register_factory) ---

def injectable(
    registry: ServiceRegistry,
    name: str,
    *,
    lifetime: Lifetime = "singleton",
    dependencies: Sequence[str] = (),
) -> Callable[[T], T]:
    """
    Class decorator: register the class itself as factory for `name`.

        @injectable(registry, "storageService")
        class StorageService: ...
    """

    def decorate(cls: T) -> T:
        registry.register_factory(name, cls, lifetime=lifetime, dependencies=dependencies)  # type: ignore[arg-type]
        return cls

    return decorate
