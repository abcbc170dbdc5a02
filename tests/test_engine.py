import pytest

from corekernel.config import Config
from corekernel.engine import Engine, State
from corekernel.plugin import Plugin
from corekernel.router import Request


class Recording(Plugin):
    def __init__(self, label="mock", fail=False):
        self.label = label
        self.fail = fail
        self.events = []
        self.seen_config = None

    async def init(self, config):
        if self.fail:
            raise RuntimeError("init failed")
        self.seen_config = config
        self.events.append("init")

    async def shutdown(self):
        self.events.append("shutdown")

    def name(self):
        return self.label

    def version(self):
        return "1.0.0"

    def description(self):
        return "Mock plugin for testing"


@pytest.mark.asyncio
async def test_life():
    engine = Engine()
    assert await engine.state() == State.INIT
    await engine.start()
    assert await engine.state() == State.RUNNING
    await engine.stop()
    assert await engine.state() == State.STOPPED


@pytest.mark.asyncio
async def test_plugin_add_list_remove():
    engine = Engine()
    await engine.start()
    await engine.add("test", Recording())
    assert "test" in await engine.list()
    await engine.remove("test")
    assert "test" not in await engine.list()
    await engine.stop()


@pytest.mark.asyncio
async def test_get_returns_registered_plugin():
    engine = Engine()
    plugin = Recording()
    await engine.add("test", plugin)
    assert await engine.get("test") is plugin
    assert await engine.get("none") is None


@pytest.mark.asyncio
async def test_remove_unknown_is_harmless():
    engine = Engine()
    await engine.add("a", Recording())
    await engine.remove("missing")
    assert await engine.list() == ["a"]


@pytest.mark.asyncio
async def test_lifecycle_calls_plugins():
    engine = Engine()
    plugin = Recording()
    await engine.add("test", plugin)
    await engine.start()
    assert plugin.events == ["init"]
    assert plugin.seen_config is engine.config
    await engine.stop()
    assert plugin.events == ["init", "shutdown"]


@pytest.mark.asyncio
async def test_router_default_routes_after_start_and_cleared_after_stop():
    engine = Engine()
    await engine.start()
    response = await engine.router.route(Request(path="/health", method="GET"))
    assert response.status == 200
    assert response.body == b"OK"
    assert await engine.router.count() == 2
    await engine.stop()
    assert await engine.router.count() == 0


@pytest.mark.asyncio
async def test_plugin_init_failure_propagates():
    engine = Engine()
    await engine.add("bad", Recording(fail=True))
    with pytest.raises(RuntimeError, match="init failed"):
        await engine.start()
    assert await engine.state() == State.READY


def test_default_config_and_custom_config():
    assert Engine().config.database.path == "./db"
    config = Config()
    config.set("k", "v")
    assert Engine(config).config.get("k") == "v"