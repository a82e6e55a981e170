[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "openscribe"
version = "0.1.0"
description = "Speech-transcription helpers: microphone selection, PCM recording, WAV files, feedback sounds and a small command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["speech", "transcription", "microphone", "wav", "audio", "pcm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: MacOS",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
openscribe = "openscribe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["openscribe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
