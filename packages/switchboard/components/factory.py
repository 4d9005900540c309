from __future__ import annotations

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, Dict, List, Literal, Mapping, Optional, Sequence, Set, Tuple

from .contracts import Destroyable, EventBusAware, Initializable
from ..contracts.errors import ComponentNotRegistered, InvalidArgument
from ..contracts.events import COMPONENT_CREATED, COMPONENT_DESTROYED
from ..events.bus import EventBus
from ..registry.services import ServiceRegistry

logger = logging.getLogger(__name__)

Lifecycle = Literal["manual", "auto"]
_LIFECYCLES = ("manual", "auto")


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ComponentRegistration:
    name: str
    constructible: Callable[..., Any]
    singleton: bool = False
    dependencies: Tuple[str, ...] = ()
    # "auto": initialize() is scheduled right after construction
    lifecycle: Lifecycle = "manual"


class ComponentFactory:
    """
    Turns registered component classes into live instances wired to the bus.

    - dependencies come from the registry and are passed after config
    - resolution errors propagate; initialize/destroy failures are logged only
    - emits component:created / component:destroyed without waiting for listeners
    """

    def __init__(self, registry: ServiceRegistry, bus: EventBus) -> None:
        self._registry = registry
        self._bus = bus
        self._components: Dict[str, ComponentRegistration] = {}

        # singleton components, in creation order
        self._singletons: Dict[str, Any] = {}

        # keep strong refs until scheduled initialize() calls and lifecycle publishes finish
        self._pending: Set["asyncio.Task[None]"] = set()

    @property
    def registry(self) -> ServiceRegistry:
        return self._registry

    @property
    def bus(self) -> EventBus:
        return self._bus

    def register(
        self,
        name: str,
        constructible: Callable[..., Any],
        *,
        singleton: bool = False,
        dependencies: Sequence[str] = (),
        lifecycle: Lifecycle = "manual",
    ) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("Component name must be a non-empty string")
        if not callable(constructible):
            raise InvalidArgument("Component class must be callable")
        if lifecycle not in _LIFECYCLES:
            raise InvalidArgument(f"Unknown lifecycle '{lifecycle}'")

        self._components[name] = ComponentRegistration(
            name=name,
            constructible=constructible,
            singleton=singleton,
            dependencies=tuple(dependencies),
            lifecycle=lifecycle,
        )
        logger.debug("Component '%s' registered", name)

    async def create(self, name: str, config: Optional[Mapping[str, Any]] = None) -> Any:
        reg = self._components.get(name)
        if reg is None:
            raise ComponentNotRegistered(name)

        if reg.singleton and name in self._singletons:
            return self._singletons[name]

        resolved = [self._registry.resolve(dep) for dep in reg.dependencies]
        instance = reg.constructible(config if config is not None else {}, *resolved)

        if reg.singleton:
            self._singletons[name] = instance

        if reg.lifecycle == "auto" and isinstance(instance, Initializable):
            self._schedule_initialize(name, instance)

        if isinstance(instance, EventBusAware):
            instance.set_event_bus(self._bus)

        self._notify(COMPONENT_CREATED, name, instance)
        return instance

    def _schedule_initialize(self, name: str, instance: Initializable) -> None:
        # runs on a later loop turn, never inline with construction
        self._spawn(self._run_initialize(name, instance))

    def _notify(self, event: str, name: str, instance: Any) -> None:
        # fire and forget; slow observers must not hold up create/destroy
        self._spawn(
            self._bus.publish(event, {"name": name, "instance": instance, "timestamp": _now_ms()})
        )

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _run_initialize(self, name: str, instance: Initializable) -> None:
        try:
            result = instance.initialize()
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Component '%s' initialization failed", name)

    async def drain(self) -> None:
        """
        Wait for every scheduled initialize() and lifecycle publish, including
        ones scheduled while waiting. Never raises.
        """
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def destroy(self, instance: Any, name: str) -> None:
        if isinstance(instance, Destroyable):
            try:
                result = instance.destroy()
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Error destroying component '%s'", name)

        if self._singletons.get(name) is instance:
            del self._singletons[name]

        self._notify(COMPONENT_DESTROYED, name, instance)

    async def destroy_all(self) -> None:
        """Tear down cached singleton components, newest first."""
        for name, instance in reversed(list(self._singletons.items())):
            await self.destroy(instance, name)

    def registered_components(self) -> List[str]:
        return list(self._components)

    def is_registered(self, name: str) -> bool:
        return name in self._components
