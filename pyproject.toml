[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "obtrader"
version = "1.0.0"
description = "Order block and market structure analysis for OHLC price data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "trading",
    "order-blocks",
    "market-structure",
    "break-of-structure",
    "change-of-character",
    "technical-analysis",
    "ohlc",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
obtrader = "obtrader.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["obtrader"]

[tool.hatch.build.targets.sdist]
include = ["obtrader", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["obtrader"]
