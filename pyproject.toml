[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic data structures, sorting routines and small algorithmic puzzles with command-line runners"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-search-tree",
    "sorting",
    "heap",
    "graph",
    "kruskal",
    "dijkstra",
    "hash-table",
    "linked-list",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-tree = "algokit.tree_report:main"
algokit-tree-levels = "algokit.tree_report:challenge_main"
algokit-kruskal = "algokit.kruskal:main"
algokit-subset = "algokit.subset:main"
algokit-crystals = "algokit.crystals:main"
algokit-tunnels = "algokit.tunnels:main"
algokit-repeats = "algokit.repeats:main"
algokit-superstring = "algokit.superstring:main"
algokit-cipher = "algokit.cipher:main"
algokit-production = "algokit.production:main"
algokit-calculator = "algokit.calculator:main"
algokit-fibonacci = "algokit.fibonacci:main"
algokit-sort-strings = "algokit.string_order:main"
algokit-people = "algokit.people:main"
algokit-grades = "algokit.grades:main"
algokit-stack = "algokit.stack:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
