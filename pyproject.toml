[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katabox"
version = "0.1.0"
description = "A collection of small puzzle solutions: ciphers, string games, number tricks and grid simulations."
requires-python = ">=3.10"
dependencies = []
keywords = ["kata", "puzzles", "ciphers", "exercises", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
katabox-random = "katabox.randomized:main"

[tool.hatch.build.targets.wheel]
packages = ["katabox"]

[tool.pytest.ini_options]
addopts = "-ra"
