[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marioterm"
version = "0.1.0"
description = "A small side-scrolling platform game drawn with characters in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "terminal", "console", "side-scroller"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
marioterm = "marioterm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["marioterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
