"""An asynchronous application kernel: engine, builder, plugins, router, configuration, logging, metrics, serialization and errors."""

__version__ = "0.1.0"