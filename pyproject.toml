[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sf2reader"
version = "0.1.0"
description = "Reader for SoundFont 2 (sf2) files"
requires-python = ">=3.10"
keywords = ["soundfont", "sf2", "riff", "audio", "synthesizer"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sf2reader = "sf2reader.soundfont:main"

[tool.hatch.build.targets.wheel]
packages = ["sf2reader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
