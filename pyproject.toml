[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fitmetrics"
version = "0.1.0"
description = "Fitness metrics: heart-rate zones, activity durations, pulse points, calorie estimates and step counting from GPS or accelerometer data"
requires-python = ">=3.10"
dependencies = []
keywords = ["fitness", "heart rate", "calories", "steps", "pedometer", "gps", "accelerometer", "met"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fitmetrics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
