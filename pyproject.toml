[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kilotext"
version = "0.1.0"
description = "A small terminal text editor with incremental search, tab rendering and a status bar"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "text", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kilotext = "kilotext.main:main"

[tool.hatch.build.targets.wheel]
packages = ["kilotext"]

[tool.pytest.ini_options]
addopts = "-ra"
