[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regsort"
version = "0.1.0"
description = "Watch a directory and move new files into target directories chosen by regular expressions."
requires-python = ">=3.11"
dependencies = [
    "watchdog",
]
keywords = ["files", "sort", "regex", "watch", "organize", "downloads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["regsort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
