[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mengine"
version = "0.1.0"
description = "File-backed asset database, importer settings, scene hierarchy and headless editor model for a small game engine"
requires-python = ">=3.10"
keywords = ["game engine", "assets", "asset database", "importer", "editor", "scene hierarchy"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mengine-editor = "mengine.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["mengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
