[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridinventory"
version = "0.1.0"
description = "Grid-based spatial inventory model: item manifests, fragments, stacking and slot placement"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "grid", "game", "stacking", "items"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridinventory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
