from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

_TRUTHY = ("1", "true", "yes", "on")


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


@dataclass(frozen=True)
class CoreConfig:
    # verbose bus tracing, no behavioral effect
    debug: bool = False

    # `source` field of published envelopes
    event_source: str = "EventBus"

    # register the bus itself as the "eventBus" service
    register_bus: bool = True

    @staticmethod
    def from_mapping(data: Optional[Mapping[str, Any]]) -> "CoreConfig":
        """
        Build from a plain config blob (json/yaml loader output).
        Unknown keys are ignored.
        """
        data = data or {}
        return CoreConfig(
            debug=_as_bool(data.get("debug", False)),
            event_source=str(data.get("event_source") or "EventBus"),
            register_bus=_as_bool(data.get("register_bus", True)),
        )

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "CoreConfig":
        env = os.environ if environ is None else environ
        return CoreConfig.from_mapping(
            {
                "debug": env.get("SWITCHBOARD_DEBUG", ""),
                "event_source": env.get("SWITCHBOARD_EVENT_SOURCE"),
            }
        )
