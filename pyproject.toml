[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsaprimer"
version = "0.1.0"
description = "Classic data structures and algorithms: sorting, recursion, linked lists, stacks and binary trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "recursion",
    "linked-list",
    "stack",
    "binary-tree",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsaprimer-sort = "dsaprimer.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["dsaprimer"]

[tool.pytest.ini_options]
addopts = "-ra"
