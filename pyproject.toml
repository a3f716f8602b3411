[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puhpkit"
version = "0.1.0"
description = "Classic data structures and small timing and process helpers: linked list, queue, stack, chained hash table, stopwatch, complexity checks and a program runner."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "hash-table",
    "queue",
    "stack",
    "timer",
    "complexity",
    "subprocess",
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
    "Topic :: Software Development :: Testing",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puhpkit-leak-check = "puhpkit.leak_check:main"

[tool.hatch.build.targets.wheel]
packages = ["puhpkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
