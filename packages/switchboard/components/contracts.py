from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..events.bus import EventBus


# Optional capabilities. A component may implement any subset:
# absence is fine, presence is called by ComponentFactory.

@runtime_checkable
class Initializable(Protocol):
    def initialize(self) -> Any:
        """May return an awaitable; it is awaited on a later loop turn."""
        ...


@runtime_checkable
class Destroyable(Protocol):
    def destroy(self) -> Any:
        ...


@runtime_checkable
class EventBusAware(Protocol):
    def set_event_bus(self, bus: EventBus) -> None:
        ...
