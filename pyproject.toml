[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basicprograms"
version = "0.1.0"
description = "Classic beginner exercises: number checks, string helpers and text patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["gcd", "lcm", "prime", "fibonacci", "palindrome", "patterns", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
basicprograms = "basicprograms.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["basicprograms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
