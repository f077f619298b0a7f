[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbasnake"
version = "0.1.0"
description = "A small snake arcade game on a simulated 240x160 handheld screen"
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame", "retro", "bitmap-font"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gbasnake = "gbasnake.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gbasnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
