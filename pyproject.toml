[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warpish"
version = "0.1.0"
description = "Terminal helpers: ANSI rendering of Markdown document trees, shell command translation, YAML rules and keybindings, quizzes and input classification"
requires-python = ">=3.10"
keywords = ["terminal", "markdown", "ansi", "shell", "keybindings", "quiz"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["warpish"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
