[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapewars"
version = "0.1.0"
description = "A small arcade shooter: steer a polygon, shoot enemies and break them into fragments"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "entity-component-system", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shapewars = "shapewars.game:main"

[tool.hatch.build.targets.wheel]
packages = ["shapewars"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
