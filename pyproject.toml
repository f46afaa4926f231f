[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utools"
version = "0.1.0"
description = "Small command-line tools for memory, battery, temperature and a countdown timer"
requires-python = ">=3.10"
dependencies = []
keywords = ["memory", "battery", "temperature", "timer", "sysfs", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mem = "utools.mem:main"
power = "utools.power:main"
temp = "utools.temp:main"
timer = "utools.timer:main"

[tool.hatch.build.targets.wheel]
packages = ["utools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
