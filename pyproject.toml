[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qdsp"
version = "0.1.0"
description = "Audio DSP building blocks: decibels, ring buffers, differentiators, moving averages, envelope followers, envelope generators and basic oscillators"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "envelope", "decibel", "moving-average", "oscillator", "pitch"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qdsp"]

[tool.pytest.ini_options]
addopts = "-ra"
