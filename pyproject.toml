[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ripplecore"
version = "0.1.0"
description = "Ledger amount arithmetic and wire encoding, transaction result codes, ledger time and websocket message types"
requires-python = ">=3.10"
dependencies = []
keywords = ["ledger", "amount", "decimal", "binary", "websocket", "transaction"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
packages = ["ripplecore"]

[tool.pytest.ini_options]
addopts = "-ra"
