[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numdrills"
version = "0.1.0"
description = "Classic programming drills: printed text patterns, array exercises, number puzzles and base conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "patterns", "number theory", "arrays", "base conversion", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
numdrills-patterns = "numdrills.patterns:main"

[tool.hatch.build.targets.wheel]
packages = ["numdrills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
