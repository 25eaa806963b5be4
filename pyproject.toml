[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psinfo"
version = "0.1.0"
description = "Show status information for Linux processes from /proc and optionally save it to a report file"
requires-python = ">=3.10"
dependencies = []
keywords = ["proc", "process", "status", "monitoring", "linux"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Natural Language :: Spanish",
    "Operating System :: POSIX :: Linux",
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
psinfo = "psinfo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["psinfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
