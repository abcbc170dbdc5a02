"""The engine: lifecycle, plugins, configuration, logging and routing."""

from __future__ import annotations

import asyncio
import enum
from typing import Optional

from corekernel.config import Config
from corekernel.logger import Logger
from corekernel.plugin import Plugin
from corekernel.router import Router


class State(enum.Enum):
    """Lifecycle states of an :class:`Engine`."""

    INIT = "Init"
    READY = "Ready"
    RUNNING = "Running"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    ERROR = "Error"


class Engine:
    """Coordinates plugins, the router and the logger through start and stop."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self._config = config if config is not None else Config()
        self._logger = Logger(self._config)
        self._router = Router()
        self._plugins: dict[str, Plugin] = {}
        self._state = State.INIT
        self._lock = asyncio.Lock()

    async def start(self) -> None:
        """Initialise every plugin and the router, then mark the engine running."""
        self._state = State.READY
        self._logger.info("Engine đang khởi động...")
        await self._setup()
        await self._router.init()
        self._state = State.RUNNING
        self._logger.info("Engine đã khởi động thành công")

    async def stop(self) -> None:
        """Shut down every plugin and the router, then mark the engine stopped."""
        self._state = State.STOPPING
        self._logger.info("Engine đang dừng...")
        await self._shutdown()
        await self._router.shutdown()
        self._state = State.STOPPED
        self._logger.info("Engine đã dừng thành công")

    async def state(self) -> State:
        """The current lifecycle state."""
        return self._state

    async def add(self, name: str, plugin: Plugin) -> None:
        """Register ``plugin`` under ``name``, replacing any earlier one."""
        async with self._lock:
            self._plugins[name] = plugin
        self._logger.info(f"Đã thêm plugin: {name}")

    async def remove(self, name: str) -> None:
        """Drop the plugin called ``name`` if it is registered."""
        async with self._lock:
            removed = self._plugins.pop(name, None)
        if removed is not None:
            self._logger.info(f"Đã xóa plugin: {name}")

    async def get(self, name: str) -> Optional[Plugin]:
        """The plugin registered under ``name``, if any."""
        return self._plugins.get(name)

    async def list(self) -> list[str]:
        """Names of every registered plugin."""
        return list(self._plugins)

    async def _setup(self) -> None:
        async with self._lock:
            plugins = list(self._plugins.items())
        for name, plugin in plugins:
            await plugin.init(self._config)
            self._logger.info(f"Đã khởi tạo plugin: {name}")

    async def _shutdown(self) -> None:
        async with self._lock:
            plugins = list(self._plugins.items())
        for name, plugin in plugins:
            await plugin.shutdown()
            self._logger.info(f"Đã dừng plugin: {name}")

    @property
    def config(self) -> Config:
        """The engine's configuration."""
        return self._config

    @property
    def logger(self) -> Logger:
        """The engine's logger."""
        return self._logger

    @property
    def router(self) -> Router:
        """The engine's router."""
        return self._router