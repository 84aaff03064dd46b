[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tckit"
version = "0.1.0"
description = "Byte buffers, microsecond time utilities and a small pluggable logging framework with encoders, writers and registries"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "buffer", "timestamp", "encoder", "writer", "registry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tckit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
