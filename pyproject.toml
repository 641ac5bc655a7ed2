[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dxdemos"
version = "0.1.0"
description = "State and data logic for small interactive apps: calculators, a stopwatch display, themes, a store client, a file browser, a Hacker News reader and SQLite-backed sessions"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["calculator", "hackernews", "file-browser", "sessions", "state"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["dxdemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
