from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .components.factory import ComponentFactory
from .config.loader import CoreConfig
from .contracts.names import Services
from .events.bus import EventBus
from .registry.services import ServiceRegistry


@dataclass(frozen=True)
class CoreApp:
    """
    Core runtime container (no IO/framework dependencies).
    """
    bus: EventBus
    services: ServiceRegistry
    components: ComponentFactory
    config: CoreConfig


def build_core(config: Optional[CoreConfig] = None) -> CoreApp:
    """
    Build core components.
    This is the composition root: callers pass the returned app down explicitly.
    """
    cfg = config or CoreConfig()

    bus = EventBus(debug=cfg.debug, source=cfg.event_source)
    services = ServiceRegistry()
    if cfg.register_bus:
        services.register_instance(Services.EVENT_BUS, bus)

    components = ComponentFactory(services, bus)
    return CoreApp(bus=bus, services=services, components=components, config=cfg)
