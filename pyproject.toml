[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsworkbench"
version = "0.1.0"
description = "Console workbench of classic data structures: a heap-based task scheduler, polynomial arithmetic, a hashed vocabulary and Huffman weight compression"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "heap", "huffman", "polynomial", "hash table", "education"]
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
dsworkbench = "dsworkbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsworkbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
