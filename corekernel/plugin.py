"""Plugin interface and a registry of plugins by name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from corekernel.config import Config


class Plugin(ABC):
    """An extension with an async lifecycle and descriptive metadata."""

    @abstractmethod
    async def init(self, config: Config) -> None:
        """Start the plugin."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Stop the plugin."""

    @abstractmethod
    def name(self) -> str:
        """The plugin's name."""

    @abstractmethod
    def version(self) -> str:
        """The plugin's version."""

    @abstractmethod
    def description(self) -> str:
        """A short description of the plugin."""


class Registry:
    """Plugins keyed by their own name."""

    def __init__(self) -> None:
        self._plugins: dict[str, Plugin] = {}

    def register(self, plugin: Plugin) -> None:
        """Add ``plugin``, replacing any plugin with the same name."""
        self._plugins[plugin.name()] = plugin

    def unregister(self, name: str) -> Optional[Plugin]:
        """Remove and return the plugin called ``name``, if any."""
        return self._plugins.pop(name, None)

    def get(self, name: str) -> Optional[Plugin]:
        """Return the plugin called ``name``, if any."""
        return self._plugins.get(name)

    def list(self) -> list[Plugin]:
        """All registered plugins."""
        return list(self._plugins.values())

    def count(self) -> int:
        """Number of registered plugins."""
        return len(self._plugins)