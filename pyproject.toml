[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapekit"
version = "0.1.0"
description = "2D shape tessellation into recorded draw calls, plus shape collision checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["2d", "shapes", "geometry", "collision", "tessellation", "bezier", "spline"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shapekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
