[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spriteforge"
version = "0.1.0"
description = "A small component-based 2D game engine core: transforms, scenes, colliders, sprite animation and input state."
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "sprite", "animation", "component", "scene"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spriteforge"]

[tool.pytest.ini_options]
addopts = "-ra"
