[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceshoot"
version = "0.1.0"
description = "A small vertical space shooter with a data-driven menu engine, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "shooter", "arcade", "pygame", "scenes", "space"]
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
spaceshoot = "spaceshoot.engine:main"
spaceshoot-arcade = "spaceshoot.arcade_scenes:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceshoot"]

[tool.pytest.ini_options]
addopts = "-ra"
