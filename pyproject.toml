[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estruturas"
version = "0.1.0"
description = "Small data structures: a doubly linked list, an integer vector and a typed vector, with an interactive list shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "vector", "education"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estruturas-list = "estruturas.cli:main"
estruturas-vector-demo = "estruturas.generic_vector:main"

[tool.hatch.build.targets.wheel]
packages = ["estruturas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
