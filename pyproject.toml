[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iocstats"
version = "1.0.0"
description = "Process and host statistics for long-running services: CPU load, memory, file descriptors and host information."
requires-python = ">=3.10"
dependencies = []
keywords = ["monitoring", "statistics", "cpu", "memory", "procfs", "file-descriptors"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iocstats = "iocstats.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iocstats"]

[tool.hatch.build.targets.sdist]
include = ["iocstats", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
