[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dlclist"
version = "0.1.0"
description = "Interactive manager for doubly linked circular lists of integers"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "circular list", "data structures", "education", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dlclist = "dlclist.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["dlclist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
