[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corekernel"
version = "0.1.0"
description = "A small asynchronous application kernel: engine lifecycle, plugins, routing, configuration, metrics and serialization."
requires-python = ">=3.10"
dependencies = []
keywords = ["framework", "plugins", "router", "engine", "metrics", "asyncio", "serialization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
corekernel-demo = "corekernel.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["corekernel"]

[tool.pytest.ini_options]
addopts = "-ra"
