[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "verveling"
version = "0.1.0"
description = "Classic algorithms and Project Euler solutions: primes, big numbers, matrices, combinatorics and digit puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "project-euler", "primes", "combinatorics", "number-theory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
verveling-modpow = "verveling.modpow:main"

[tool.hatch.build.targets.wheel]
packages = ["verveling"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
