[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minimopoly"
version = "1.0.0"
description = "A two-player terminal board game of buying properties, collecting rent and avoiding bankruptcy."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "board-game", "terminal", "console", "monopoly"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minimopoly = "minimopoly.main:main"

[tool.hatch.build.targets.wheel]
packages = ["minimopoly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
