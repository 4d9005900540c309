"""Test BaseComponent bus access and teardown."""

import pytest

from switchboard.components.base import BaseComponent
from switchboard.components.contracts import Destroyable, EventBusAware, Initializable
from switchboard.events.bus import EventBus


@pytest.fixture
def bus():
    return EventBus()


class DocumentController(BaseComponent):
    def __init__(self, config=None, event_bus=None):
        super().__init__(config, event_bus)
        self.saved = []
        self._unsubscribe = self.on("file:saveRequest", self._on_save)

    def _on_save(self, env):
        self.saved.append(env.data)

    def destroy(self):
        self._unsubscribe()
        super().destroy()


class TestConfig:
    """Construction-time configuration snapshot."""

    def test_config_is_snapshot(self):
        raw = {"theme": "dark"}
        component = BaseComponent(raw)
        raw["theme"] = "light"

        assert component.config["theme"] == "dark"

    def test_config_is_read_only(self):
        component = BaseComponent({"theme": "dark"})

        with pytest.raises(TypeError):
            component.config["theme"] = "light"

    def test_default_config(self):
        assert dict(BaseComponent().config) == {}


class TestBusAccess:
    """emit / on / once / off."""

    @pytest.mark.asyncio
    async def test_emit_and_on(self, bus):
        component = BaseComponent(event_bus=bus)
        received = []
        component.on("document:changed", received.append)

        await component.emit("document:changed", "text")

        assert [env.data for env in received] == ["text"]

    @pytest.mark.asyncio
    async def test_once(self, bus):
        component = BaseComponent(event_bus=bus)
        received = []
        component.once("editor:ready", received.append)

        await component.emit("editor:ready")
        await component.emit("editor:ready")

        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_off(self, bus):
        component = BaseComponent(event_bus=bus)
        received = []
        component.on("e", received.append)

        component.off("e", received.append)
        await component.emit("e")

        assert received == []

    @pytest.mark.asyncio
    async def test_without_bus_everything_is_noop(self):
        component = BaseComponent()

        unsubscribe = component.on("e", print)
        unsubscribe()
        component.once("e", print)
        component.off("e", print)
        await component.emit("e", 1)

    @pytest.mark.asyncio
    async def test_set_event_bus_wires_component(self, bus):
        component = BaseComponent()
        component.set_event_bus(bus)
        received = []
        bus.subscribe("e", received.append)

        await component.emit("e", 1)

        assert component.event_bus is bus
        assert len(received) == 1


class TestDestroy:
    """Teardown semantics."""

    @pytest.mark.asyncio
    async def test_operations_are_noops_after_destroy(self, bus):
        component = BaseComponent({"a": 1}, bus)
        received = []
        bus.subscribe("e", received.append)

        component.destroy()
        await component.emit("e")
        unsubscribe = component.on("e", print)
        component.once("e", print)
        unsubscribe()

        assert received == []
        assert bus.listener_count("e") == 1

    def test_destroy_releases_state_and_is_idempotent(self, bus):
        component = BaseComponent({"a": 1}, bus)

        component.destroy()
        component.destroy()

        assert component.is_destroyed is True
        assert component.event_bus is None
        assert dict(component.config) == {}

    def test_set_event_bus_after_destroy_is_ignored(self, bus):
        component = BaseComponent()
        component.destroy()

        component.set_event_bus(bus)

        assert component.event_bus is None

    @pytest.mark.asyncio
    async def test_subclass_cleanup_chain(self, bus):
        controller = DocumentController({"autosave": False}, bus)

        await bus.publish("file:saveRequest", "a.md")
        controller.destroy()
        await bus.publish("file:saveRequest", "b.md")

        assert controller.saved == ["a.md"]
        assert controller.is_destroyed
        assert bus.listener_count("file:saveRequest") == 0


class TestCapabilities:
    """Optional capability protocols."""

    def test_base_component_has_all_capabilities(self):
        component = BaseComponent()

        assert isinstance(component, Initializable)
        assert isinstance(component, Destroyable)
        assert isinstance(component, EventBusAware)

    def test_plain_object_has_none(self):
        plain = object()

        assert not isinstance(plain, Initializable)
        assert not isinstance(plain, Destroyable)
        assert not isinstance(plain, EventBusAware)
