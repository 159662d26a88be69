[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moviebooking"
version = "1.0.0"
description = "Thread-safe in-memory movie seat booking with an all-or-nothing reservation service"
requires-python = ">=3.10"
dependencies = []
keywords = ["booking", "cinema", "movies", "seats", "reservation"]
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
    "Topic :: Office/Business :: Scheduling",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["moviebooking"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
