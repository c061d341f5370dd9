[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "possiblecpus"
version = "0.1.0"
description = "Determine how many CPU ids a process may ever see, for sizing per-CPU arrays"
requires-python = ">=3.10"
dependencies = []
keywords = ["cpu", "smp", "sysfs", "per-cpu", "linux"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Symmetric Multi-processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
possiblecpus = "possiblecpus.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["possiblecpus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
