[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nusort"
version = "0.1.0"
description = "Japanese text tools: hiragana to katakana conversion, kana statistics tables, Unihan radical/stroke sort keys, a wrapped dictionary guide and a keystroke input engine"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "japanese",
    "kana",
    "kanji",
    "hiragana",
    "katakana",
    "input method",
    "radical",
    "unihan",
    "osc52",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nusort-h2k = "nusort.h2k:main"

[tool.hatch.build.targets.wheel]
packages = ["nusort"]

[tool.hatch.build.targets.sdist]
include = ["nusort", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
