[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmud"
version = "0.1.0"
description = "Pieces of a multi-user dungeon server: streaming hashes, a digest command, network helpers and user controllers"
requires-python = ">=3.10"
keywords = ["mud", "game", "hashing", "crc32", "md5", "keccak", "digest"]
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
    "Topic :: Games/Entertainment :: Multi-User Dungeons (MUD)",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pmud-digest = "pmud.digest:main"

[tool.hatch.build.targets.wheel]
packages = ["pmud"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
