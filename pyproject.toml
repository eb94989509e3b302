[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "escterminal"
version = "0.1.0"
description = "A fullscreen escape-room terminal that unlocks when the right file appears on a USB stick"
requires-python = ">=3.10"
keywords = ["escape-room", "terminal", "puzzle", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
escterminal = "escterminal.app:main"

[tool.hatch.build.targets.wheel]
packages = ["escterminal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
