[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacefighter"
version = "0.1.0"
description = "Game logic for a small top-down arcade space shooter: vectors, collision masks, ships, weapons, projectiles, explosions and particles."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "shooter", "collision", "particles", "2d"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spacefighter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
