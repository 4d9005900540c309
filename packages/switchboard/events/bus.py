from __future__ import annotations

import asyncio
import inspect
import logging
import time
from typing import Any, Awaitable, Dict, List, Optional

from .types import EventHandler, Listener, Unsubscribe
from ..contracts.errors import InvalidArgument
from ..contracts.events import EventEnvelope, EventName

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _ensure_callable(callback: Any) -> None:
    if not callable(callback):
        raise InvalidArgument("Callback must be callable")


def _find_key(listeners: Dict[int, Listener], callback: EventHandler) -> Optional[int]:
    # exact object first; equality covers fresh bound methods (obj.method)
    if id(callback) in listeners:
        return id(callback)
    for key, listener in listeners.items():
        if listener.callback == callback:
            return key
    return None


class EventBus:
    """
    In-memory async event bus.

    - persistent and one-shot listeners, kept apart
    - error isolation per listener (sync raise and async failure)
    - all listeners are invoked first, then pending results are awaited together
    - listeners subscribed while a dispatch is running only see later dispatches
    """

    def __init__(self, *, debug: bool = False, source: str = "EventBus") -> None:
        # event -> {id(callback) -> listener}; identity keeps set semantics and
        # accepts unhashable callables. Listener holds the callable so the id stays valid.
        self._listeners: Dict[EventName, Dict[int, Listener]] = {}
        self._once_listeners: Dict[EventName, Dict[int, Listener]] = {}
        self._debug = debug
        self._source = source

    @property
    def debug(self) -> bool:
        return self._debug

    def set_debug(self, enabled: bool) -> None:
        self._debug = bool(enabled)

    def subscribe(self, event: EventName, callback: EventHandler) -> Unsubscribe:
        """
        Register a persistent listener.
        Returns a function removing exactly this callback; calling it again is a no-op.
        """
        _ensure_callable(callback)

        self._listeners.setdefault(event, {})[id(callback)] = Listener(event=event, callback=callback)
        self._trace("Subscribed handler=%s to event=%s", callback, event)

        def unsubscribe() -> None:
            self.unsubscribe(event, callback)

        return unsubscribe

    def subscribe_once(self, event: EventName, callback: EventHandler) -> None:
        _ensure_callable(callback)

        self._once_listeners.setdefault(event, {})[id(callback)] = Listener(
            event=event, callback=callback, persistent=False
        )
        self._trace("Subscribed once handler=%s to event=%s", callback, event)

    def unsubscribe(self, event: EventName, callback: EventHandler) -> int:
        """
        Remove callback from both persistent and once listeners of event.
        Returns number of removed listeners.
        """
        removed = 0
        for table in (self._listeners, self._once_listeners):
            listeners = table.get(event)
            if not listeners:
                continue

            key = _find_key(listeners, callback)
            if key is None:
                continue

            del listeners[key]
            removed += 1
            if not listeners:
                table.pop(event, None)

        if removed:
            self._trace("Unsubscribed handler=%s from event=%s", callback, event)
        return removed

    async def publish(self, event: EventName, data: Any = None, *, source: Optional[str] = None) -> None:
        envelope = EventEnvelope(
            type=event,
            data=data,
            timestamp=_now_ms(),
            source=source or self._source,
        )

        # snapshot both classes up front; once-listeners are claimed right away
        # so an overlapping publish of the same event cannot deliver them again
        persistent = list(self._listeners.get(event, {}).values())
        once = list(self._once_listeners.pop(event, {}).values())

        self._trace("Publishing event=%s to %s listener(s)", event, len(persistent) + len(once))

        if not persistent and not once:
            logger.debug("No subscribers for event %s", event)
            return

        await self._deliver(persistent, envelope)
        await self._deliver(once, envelope)

    async def _deliver(self, listeners: List[Listener], envelope: EventEnvelope) -> None:
        pending: List[Awaitable[Any]] = []
        owners: List[Listener] = []

        for listener in listeners:
            try:
                result = listener.callback(envelope)
            except Exception:
                logger.exception(
                    "Error in %slistener=%s for event=%s",
                    "" if listener.persistent else "once ",
                    listener.callback,
                    envelope.type,
                )
                continue

            if inspect.isawaitable(result):
                pending.append(result)
                owners.append(listener)

        if not pending:
            return

        results = await asyncio.gather(*pending, return_exceptions=True)
        for listener, outcome in zip(owners, results):
            if isinstance(outcome, Exception):
                logger.error(
                    "Async listener=%s failed for event=%s",
                    listener.callback,
                    envelope.type,
                    exc_info=outcome,
                )

    def clear_event(self, event: EventName) -> None:
        self._listeners.pop(event, None)
        self._once_listeners.pop(event, None)
        self._trace("Cleared listeners for event=%s", event)

    def clear_all(self) -> None:
        self._listeners.clear()
        self._once_listeners.clear()
        self._trace("Cleared all listeners")

    def events(self) -> List[EventName]:
        """Names with at least one persistent or once listener."""
        names = dict.fromkeys(self._listeners)
        names.update(dict.fromkeys(self._once_listeners))
        return list(names)

    def listener_count(self, event: EventName) -> int:
        return len(self._listeners.get(event, {})) + len(self._once_listeners.get(event, {}))

    def _trace(self, msg: str, *args: Any) -> None:
        if self._debug:
            logger.debug("[EventBus] " + msg, *args)
