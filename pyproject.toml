[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gritwit"
version = "0.1.0"
description = "Workout-of-the-day helpers: week calendar dates, labels, form input parsing, video upload validation and storage, JSON logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["wod", "workout", "fitness", "calendar", "upload", "logging"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gritwit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
