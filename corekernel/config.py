"""Framework configuration with JSON persistence."""

import dataclasses
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from corekernel.errors import JsonError


@dataclass
class Database:
    """Database settings."""

    path: str = "./db"
    pool: int = 10
    cache: int = 1000
    metrics: bool = True


@dataclass
class Log:
    """Logging settings."""

    level: str = "info"
    file: Optional[str] = None
    console: bool = True
    structured: bool = True


@dataclass
class Addon:
    """Plugin settings."""

    dir: str = "./plugins"
    auto: bool = False
    timeout: int = 30


def _cpu_count() -> int:
    return os.cpu_count() or 1


@dataclass
class Performance:
    """Performance settings."""

    worker: int = field(default_factory=_cpu_count)
    buffer: int = 1024
    profiling: bool = False


_SECTIONS = {
    "database": Database,
    "log": Log,
    "addon": Addon,
    "performance": Performance,
}


def _matches(value: Any, hint: Any) -> bool:
    if hint is bool:
        return isinstance(value, bool)
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    if hint is str:
        return isinstance(value, str)
    if hint == Optional[str]:
        return value is None or isinstance(value, str)
    return True


def _section(cls: type, data: Any, name: str) -> Any:
    if not isinstance(data, Mapping):
        raise JsonError(f"`{name}` must be an object")
    values = {}
    for item in dataclasses.fields(cls):
        hint = item.type
        if item.name not in data:
            if hint == Optional[str]:
                values[item.name] = None
                continue
            raise JsonError(f"missing field `{item.name}` in `{name}`")
        value = data[item.name]
        if not _matches(value, hint):
            raise JsonError(f"invalid value for `{name}.{item.name}`: {value!r}")
        values[item.name] = value
    return cls(**values)


@dataclass
class Config:
    """All framework settings plus free-form custom entries."""

    database: Database = field(default_factory=Database)
    log: Log = field(default_factory=Log)
    addon: Addon = field(default_factory=Addon)
    performance: Performance = field(default_factory=Performance)
    custom: dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: "str | os.PathLike[str]") -> "Config":
        """Read a configuration from a JSON file."""
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise JsonError(exc) from exc
        return cls.from_dict(data)

    def save(self, path: "str | os.PathLike[str]") -> None:
        """Write the configuration to a file as indented JSON."""
        text = json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)

    def get(self, key: str) -> Optional[str]:
        """Return a custom setting, or None when it is absent."""
        return self.custom.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a custom setting."""
        self.custom[key] = value

    def merge(self, other: "Config") -> None:
        """Take every section from ``other`` and add its custom entries."""
        self.database = other.database
        self.log = other.log
        self.addon = other.addon
        self.performance = other.performance
        self.custom.update(other.custom)

    def to_dict(self) -> "dict[str, Any]":
        """Return the configuration as plain JSON-ready data."""
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a configuration from plain data, checking every field."""
        if not isinstance(data, Mapping):
            raise JsonError("configuration must be an object")
        sections = {}
        for name, section in _SECTIONS.items():
            if name not in data:
                raise JsonError(f"missing field `{name}`")
            sections[name] = _section(section, data[name], name)
        if "custom" not in data:
            raise JsonError("missing field `custom`")
        custom = data["custom"]
        if not isinstance(custom, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in custom.items()
        ):
            raise JsonError("`custom` must map strings to strings")
        return cls(custom=dict(custom), **sections)