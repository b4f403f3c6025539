[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quickgrep"
version = "1.0.0"
description = "A multi-threaded grep-like tool for searching files by literal text or regular expression"
requires-python = ">=3.10"
dependencies = []
keywords = ["grep", "search", "regex", "text", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quickgrep = "quickgrep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quickgrep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
