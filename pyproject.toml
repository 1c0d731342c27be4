[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfsolve"
version = "0.1.0"
description = "Small solvers for classic short programming exercises: number puzzles, word puzzles and checks over lists and grids."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "puzzles", "exercises", "algorithms", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
cfsolve = "cfsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cfsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
