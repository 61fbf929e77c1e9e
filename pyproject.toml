[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zoopark"
version = "0.1.0"
description = "A turn-based zoo management simulation played from the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["zoo", "simulation", "game", "management", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zoopark = "zoopark.app:main"

[tool.hatch.build.targets.wheel]
packages = ["zoopark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
