[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swaprouter"
version = "0.1.0"
description = "Candidate route search, route validation and split quoting for liquidity-pool token swaps"
requires-python = ">=3.10"
dependencies = []
keywords = ["dex", "amm", "routing", "swap", "liquidity", "quote", "transmuter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["swaprouter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
