[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "conctools"
version = "0.1.0"
description = "Thread-based concurrency building blocks: atomics, semaphores, barriers, queues, workers, throttles, timers, pipelines and a toy scheduler."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threading",
    "semaphore",
    "barrier",
    "queue",
    "pipeline",
    "throttle",
    "scheduler",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["conctools"]

[tool.hatch.build.targets.sdist]
include = ["conctools", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
