[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rabbik"
version = "0.1.0"
description = "A small game engine core: vector maths, transforms, a node tree, frame timing and a protocol-based file system."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "scene-graph", "node-tree", "vector", "quaternion", "game-loop"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rabbik"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
