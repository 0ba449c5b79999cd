[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bridgecfg"
version = "0.1.0"
description = "Configuration loading and built-in network presets for a zkEVM bridge service"
requires-python = ">=3.11"
dependencies = []
keywords = ["configuration", "toml", "json", "bridge", "zkevm", "network"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bridgecfg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
