[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stoutcall"
version = "0.1.0"
description = "Resilience building blocks for calls: lifecycle hooks, ordered middleware, hedged requests, policy health reporting and a per-entry TTL cache"
requires-python = ">=3.10"
dependencies = [
    "cachetools",
]
keywords = [
    "resilience",
    "middleware",
    "hedging",
    "health-check",
    "asyncio",
    "ttl-cache",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Framework :: AsyncIO",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["stoutcall"]

[tool.hatch.build.targets.sdist]
include = [
    "stoutcall",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
