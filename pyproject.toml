[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xdscache"
version = "0.1.0"
description = "Thread-safe route and secret caches with change notification for xDS-style configuration servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["xds", "rds", "sds", "cache", "envoy", "proxy", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xdscache"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
