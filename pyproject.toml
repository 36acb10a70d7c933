[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swallow"
version = "0.0.1"
description = "Source locations, diagnostic codes and colourful terminal error reports for the Swallow compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "diagnostics", "error-reporting", "source-locations", "terminal-colors"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["swallow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
