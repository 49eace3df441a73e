[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopractice"
version = "0.1.0"
description = "Classic algorithm exercises: number theory, bit tricks, block storage and sorting puzzles"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "algorithms",
    "sorting",
    "sieve",
    "prime factorization",
    "two pointers",
    "greedy",
    "binary search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
algopractice = "algopractice.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algopractice"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
