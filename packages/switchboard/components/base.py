from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..contracts.events import EventName
from ..events.bus import EventBus
from ..events.types import EventHandler, Unsubscribe


def _noop() -> None:
    return None


class BaseComponent:
    """
    Base for controllers/views/models/services wired to the event bus.

    Once destroyed, every bus operation becomes a no-op.
    Subclasses overriding destroy() must call super().destroy() after their own cleanup.
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None, event_bus: Optional[EventBus] = None) -> None:
        self._config: Mapping[str, Any] = MappingProxyType(dict(config or {}))
        self._event_bus = event_bus
        self._destroyed = False

    @property
    def config(self) -> Mapping[str, Any]:
        return self._config

    @property
    def event_bus(self) -> Optional[EventBus]:
        return self._event_bus

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def set_event_bus(self, bus: EventBus) -> None:
        if not self._destroyed:
            self._event_bus = bus

    def initialize(self) -> Any:
        # override in subclasses
        return None

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        self._event_bus = None
        self._config = MappingProxyType({})

    async def emit(self, event: EventName, data: Any = None) -> None:
        if self._event_bus is None or self._destroyed:
            return
        await self._event_bus.publish(event, data)

    def on(self, event: EventName, callback: EventHandler) -> Unsubscribe:
        if self._event_bus is None or self._destroyed:
            return _noop
        return self._event_bus.subscribe(event, callback)

    def once(self, event: EventName, callback: EventHandler) -> None:
        if self._event_bus is None or self._destroyed:
            return
        self._event_bus.subscribe_once(event, callback)

    def off(self, event: EventName, callback: EventHandler) -> None:
        if self._event_bus is None:
            return
        self._event_bus.unsubscribe(event, callback)
