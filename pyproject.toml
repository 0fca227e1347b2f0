[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireframe"
version = "0.1.0"
description = "Height-map loading, XPM decoding, in-memory images and an event loop for wireframe rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "fdf", "xpm", "height map", "image", "events"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wireframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
