[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "darkframe"
version = "0.1.0"
description = "Small core object framework: strings, arrays, maps, streams, bit vectors, a Mersenne Twister, UUIDs and a fixed-timestep game loop"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "framework",
    "collections",
    "streams",
    "mersenne-twister",
    "uuid",
    "bitvector",
    "game-loop",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["darkframe"]

[tool.pytest.ini_options]
addopts = "-ra"
