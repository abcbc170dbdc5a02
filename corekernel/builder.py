"""Fluent construction of an :class:`Engine`."""

from __future__ import annotations

from typing import Optional

from corekernel.config import Config
from corekernel.engine import Engine
from corekernel.plugin import Plugin


class Builder:
    """Collects a configuration and plugins, then builds an engine."""

    def __init__(self) -> None:
        self._config: Optional[Config] = None
        self._plugins: list[tuple[str, Plugin]] = []

    def config(self, config: Config) -> "Builder":
        """Use ``config`` for the engine."""
        self._config = config
        return self

    def plugin(self, name: str, plugin: Plugin) -> "Builder":
        """Register ``plugin`` under ``name`` when building."""
        self._plugins.append((name, plugin))
        return self

    async def build(self) -> Engine:
        """Create the engine and add every collected plugin."""
        engine = Engine(self._config if self._config is not None else Config())
        for name, plugin in self._plugins:
            await engine.add(name, plugin)
        return engine