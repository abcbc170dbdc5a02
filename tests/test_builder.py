import pytest

from corekernel.builder import Builder
from corekernel.config import Config
from corekernel.engine import State
from corekernel.plugin import Plugin


class Mock(Plugin):
    async def init(self, config):
        return None

    async def shutdown(self):
        return None

    def name(self):
        return "mock"

    def version(self):
        return "1.0.0"

    def description(self):
        return "Mock plugin for testing"


@pytest.mark.asyncio
async def test_basic():
    engine = await Builder().build()
    assert await engine.state() == State.INIT


@pytest.mark.asyncio
async def test_config():
    config = Config()
    engine = await Builder().config(config).build()
    assert await engine.state() == State.INIT
    assert engine.config is config


@pytest.mark.asyncio
async def test_plugin():
    engine = await Builder().plugin("test", Mock()).build()
    assert "test" in await engine.list()


@pytest.mark.asyncio
async def test_several_plugins_in_order():
    first, second = Mock(), Mock()
    engine = await Builder().plugin("a", first).plugin("b", second).build()
    assert await engine.list() == ["a", "b"]
    assert await engine.get("b") is second


def test_fluent_methods_return_builder():
    builder = Builder()
    assert builder.config(Config()) is builder
    assert builder.plugin("x", Mock()) is builder