[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algos"
version = "0.1.0"
description = "Classic algorithms: sorting, searching, number theory, combinatorics and string matching"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "primes",
    "permutations",
    "aho-corasick",
    "kmp",
    "levenshtein",
]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
