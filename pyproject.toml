[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortconst"
version = "1.0.1"
description = "Sort mutable sequences in place with a bounded-stack quicksort or a gap-sequence shellsort."
requires-python = ">=3.10"
keywords = ["sort", "sorting", "quicksort", "shellsort", "comparator"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["sortconst"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
