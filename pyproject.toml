[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spriteengine"
version = "0.1.0"
description = "A small 2D sprite engine with TMX tile maps, sprite-sheet animations and a side-scrolling demo game"
requires-python = ">=3.10"
keywords = ["game", "sprite", "tilemap", "tmx", "platformer", "animation", "pygame"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spriteengine = "spriteengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spriteengine"]

[tool.pytest.ini_options]
addopts = "-ra"
