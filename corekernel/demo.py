"""Small runnable demonstrations of the kernel's parts."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Optional, Sequence

from corekernel.builder import Builder
from corekernel.config import Config
from corekernel.engine import Engine
from corekernel.logger import Logger
from corekernel.plugin import Plugin
from corekernel.router import Handler, Request, Response, Router
from corekernel.serializer import System


class Hello(Plugin):
    """A plugin that announces its lifecycle."""

    async def init(self, config: Config) -> None:
        print("[Hello] init")

    async def shutdown(self) -> None:
        print("[Hello] shutdown")

    def name(self) -> str:
        return "hello"

    def version(self) -> str:
        return "1.0.0"

    def description(self) -> str:
        return "Say hello"


class Echo(Handler):
    """Answers with the request body."""

    async def handle(self, request: Request) -> Response:
        return Response(status=200, body=request.body)


@dataclass
class _Data:
    name: str
    value: int


async def _engine() -> None:
    engine = Engine()
    await engine.add("demo", Hello())
    await engine.start()
    print(f"Engine state: {(await engine.state()).value}")
    await engine.stop()
    print(f"Engine state: {(await engine.state()).value}")


async def _builder() -> None:
    engine = await Builder().config(Config()).plugin("hello", Hello()).build()
    await engine.start()
    print("Engine started with plugin: hello")
    await engine.stop()


async def _plugin() -> None:
    engine = Engine()
    plugin = Hello()
    await engine.add("hello", plugin)
    await engine.start()
    print(f"Plugin: {plugin.name()} v{plugin.version()} - {plugin.description()}")
    await engine.stop()


async def _router() -> None:
    router = Router()
    await router.register("/echo", Echo())
    for request in (
        Request(path="/echo", method="POST", body=b"hi"),
        Request(path="/none", method="GET"),
    ):
        response = await router.route(request)
        body = response.body.decode("utf-8", errors="replace")
        print(f'Response: {response.status} "{body}"')


async def _serializer() -> None:
    system = System()
    data = _Data(name="test", value=42)
    parsed = system.parse(system.json(data), _Data)
    print(f"JSON roundtrip: {data} == {parsed} => {data == parsed}")
    decoded = system.decode(system.encode(data), _Data)
    print(f"Bincode roundtrip: {data} == {decoded} => {data == decoded}")


async def _logger() -> None:
    logger = Logger(Config())
    logger.info("Info message")
    logger.warn("Warning message")
    logger.error("Error message")
    logger.debug("Debug message")
    logger.trace("Trace message")
    logger.context("EXAMPLE", "Context message")
    logger.performance("operation", timedelta(milliseconds=123))


_DEMOS: dict[str, Callable[[], "asyncio.Future[None]"]] = {
    "engine": _engine,
    "builder": _builder,
    "plugin": _plugin,
    "router": _router,
    "serializer": _serializer,
    "logger": _logger,
}


def run(name: str) -> None:
    """Run the demonstration called ``name``."""
    demo = _DEMOS.get(name)
    if demo is None:
        raise ValueError(f"unknown demo '{name}'; choose from {', '.join(_DEMOS)}")
    asyncio.run(demo())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: run one or more demonstrations."""
    parser = argparse.ArgumentParser(prog="corekernel-demo", description=__doc__)
    parser.add_argument("demos", nargs="*", choices=sorted(_DEMOS), metavar="DEMO",
                        help=f"one of: {', '.join(_DEMOS)} (default: all)")
    args = parser.parse_args(argv)
    for name in args.demos or list(_DEMOS):
        run(name)
    return 0