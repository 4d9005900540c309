from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Union

from ..contracts.events import EventEnvelope, EventName


# sync handlers return None, async ones return something awaitable
EventHandler = Callable[[EventEnvelope], Union[None, Awaitable[Any]]]

Unsubscribe = Callable[[], None]


@dataclass(frozen=True)
class Listener:
    event: EventName
    callback: EventHandler
    # False for one-shot listeners
    persistent: bool = True
