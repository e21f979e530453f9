[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zmtpy"
version = "0.1.0"
description = "ZMTP messaging primitives: multipart messages, endpoints, socket types, command frames, fair queueing and proxying"
requires-python = ">=3.10"
dependencies = []
keywords = ["zmq", "zeromq", "zmtp", "messaging", "asyncio", "networking"]
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
    "Framework :: AsyncIO",
    "Topic :: System :: Networking",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["zmtpy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
