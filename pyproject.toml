[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "midilights"
version = "0.1.0"
description = "Colour arithmetic, processing blocks, chains and patches for turning MIDI data into RGB LED strip colours"
requires-python = ">=3.10"
keywords = ["midi", "led", "rgb", "lighting", "strip", "colour"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["midilights"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
