[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tidyviewer"
version = "0.1.7"
description = "Pretty printer for tables of strings with type-aware number formatting"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["table", "pretty-print", "terminal", "significant-figures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tidyviewer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
