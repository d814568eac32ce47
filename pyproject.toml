[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xploader"
version = "0.1.0"
description = "Read, write and inspect REXPaint .xp image files"
requires-python = ">=3.10"
dependencies = []
keywords = ["rexpaint", "xp", "ascii-art", "roguelike", "ansi"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xpinfo = "xploader.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xploader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
