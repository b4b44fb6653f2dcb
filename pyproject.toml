[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "openempires"
version = "0.1.0"
description = "A small real-time strategy game engine: subsystems, an entity registry, a tick loop and a pygame renderer."
requires-python = ">=3.10"
keywords = ["game", "rts", "entity-component-system", "pygame", "engine"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
openempires = "openempires.main:main"

[tool.hatch.build.targets.wheel]
packages = ["openempires"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
