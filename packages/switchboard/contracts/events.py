from __future__ import annotations

from dataclasses import dataclass
from typing import Any


EventName = str

# lifecycle events published by the core itself
COMPONENT_CREATED: EventName = "component:created"
COMPONENT_DESTROYED: EventName = "component:destroyed"


@dataclass(frozen=True)
class EventEnvelope:
    """
    What every listener receives.

    `data` shape is owned by the producer of the event, core just passes it through.
    """
    type: EventName
    data: Any
    # unix millis
    timestamp: int
    source: str = "EventBus"
