[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sceneforge"
version = "0.1.0"
description = "Colors, 2D and 3D primitives, input state, timing and terrain generation for simple scene rendering"
requires-python = ">=3.10"
keywords = ["graphics", "3d", "color", "terrain", "heightmap", "primitives", "scene"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sceneforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
