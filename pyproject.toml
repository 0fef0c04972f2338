[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arrayalgos"
version = "0.1.0"
description = "Classic array algorithms: searching, rearranging and subarray problems."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "arrays",
    "kadane",
    "dutch-national-flag",
    "two-pointers",
    "rotation",
    "permutation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arrayalgos = "arrayalgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arrayalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
