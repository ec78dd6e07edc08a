[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asyncipc"
version = "0.7.3"
description = "Asyncio interprocess communication over Unix domain sockets"
requires-python = ">=3.10"
dependencies = []
keywords = ["ipc", "asyncio", "unix-socket", "interprocess", "transport"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
asyncipc-server = "asyncipc.server:main"
asyncipc-client = "asyncipc.client:main"

[tool.hatch.build.targets.wheel]
packages = ["asyncipc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
