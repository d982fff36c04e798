[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordlestats"
version = "0.1.0"
description = "Letter, bigram and vowel/consonant statistics for five-letter word lists, with charts and text reports"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["wordle", "bigram", "letter frequency", "word list", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wordlestats = "wordlestats.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordlestats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
