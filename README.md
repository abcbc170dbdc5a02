# corekernel

A compact asynchronous kernel for building applications out of plugins.

Modules:

- `corekernel.engine`: `Engine`, with lifecycle `State` values `INIT`, `READY`, `RUNNING`, `STOPPING`, `STOPPED` and `ERROR`.
- `corekernel.builder`: `Builder`, which sets an engine up step by step.
- `corekernel.plugin`: the abstract `Plugin` interface and a plugin `Registry` keyed by each plugin's name.
- `corekernel.router`: a path-based `Router` with `Request`, `Response` and the abstract `Handler`.
- `corekernel.config`: `Config` with `Database`, `Log`, `Addon` and `Performance` sections plus string custom keys, stored as JSON.
- `corekernel.logger`: `Logger`, writing through the standard `logging` module at trace, debug, info, warning and error levels.
- `corekernel.metric`: `Metric` and a metric `Registry` that count successes, failures and elapsed time per operation.
- `corekernel.serializer`: `Json`, `Bincode` and the `System` front end for JSON and a compact fixed-width binary form.
- `corekernel.errors`: a family of errors rooted at `KernelError`, plus `Fault` and `parse_error`.
- `corekernel.demo`: small runnable demonstrations.

## Installation

```
pip install corekernel
```

## Using the engine

```python
import asyncio

from corekernel.builder import Builder
from corekernel.config import Config
from corekernel.plugin import Plugin


class Hello(Plugin):
    async def init(self, config):
        print("[Hello] init")

    async def shutdown(self):
        print("[Hello] shutdown")

    def name(self):
        return "hello"

    def version(self):
        return "1.0.0"

    def description(self):
        return "Say hello"


async def main():
    engine = await Builder().config(Config()).plugin("hello", Hello()).build()
    await engine.start()
    print(await engine.state())   # State.RUNNING
    print(await engine.list())    # ['hello']
    await engine.stop()


asyncio.run(main())
```

`start` initialises every plugin and installs the default routes `/health`
(body `b"OK"`) and `/metrics` (body `b"metrics"`); `stop` shuts the plugins
down and clears the routes. `add`, `remove`, `get` and `list` manage plugins
by name, and the `config`, `logger` and `router` properties expose the
engine's parts.

## Routing

```python
from corekernel.router import Handler, Request, Response, Router


class Echo(Handler):
    async def handle(self, request):
        return Response(status=200, body=request.body)


router = Router()
await router.register("/echo", Echo())
response = await router.route(Request(path="/echo", method="POST", body=b"hi"))
# response.status == 200, response.body == b"hi"
# an unknown path yields status 404 with body b"Not Found"
```

Routes match the exact path; the method is not considered.

## Configuration

```python
from corekernel.config import Config

config = Config()
config.set("region", "eu")
config.save("kernel.json")
loaded = Config.load("kernel.json")
assert loaded.get("region") == "eu"
```

`merge` takes another config's sections and adds its custom keys to your own.
`to_dict` and `from_dict` convert to and from plain data; loading checks every
field and raises `JsonError` on missing or mistyped values.

## Serialization

```python
from dataclasses import dataclass

from corekernel.serializer import System


@dataclass
class Data:
    name: str
    value: int


system = System()
assert system.parse(system.json(Data("test", 42)), Data) == Data("test", 42)
assert system.decode(system.encode(Data("test", 42)), Data) == Data("test", 42)
```

JSON decoding without a target type returns the plain decoded value; binary
decoding always needs the target type. Failures raise `JsonError` or
`FormatError`.

## Metrics

```python
from corekernel.metric import Registry

metrics = Registry()
metrics.record("insert", failed=False)
print(metrics.stats())   # insert: Tổng: 1 lần (1 thành công, 0 thất bại), ...
```

`Metric.rate()` gives failures per success, `0.0` when nothing has succeeded.

## Demo

The package ships demonstrations of the engine, builder, plugins, router,
serializer and logger. Name the ones to run:

```
corekernel-demo router
corekernel-demo engine serializer
```

The same demonstrations are available from Python through
`corekernel.demo.run(name)`.

## What it does not do

The router dispatches requests in-process only; there is no network server.
There is no storage backend: the `Database` configuration section and errors
such as `StoreError`, `PoolError` and `CacheError` are defined but nothing in
the package stores data.