[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trashbin"
version = "0.1.0"
description = "Browse, sort, restore and empty a freedesktop-style trash bin, with a fuzzy substring matcher"
requires-python = ">=3.10"
dependencies = []
keywords = ["trash", "freedesktop", "trashinfo", "fuzzy", "bitap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trashbin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
