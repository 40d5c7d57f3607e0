[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gallows"
version = "0.1.0"
description = "A terminal hangman game, plus small pygame demos of a text input box and a word-wrapping text container"
requires-python = ">=3.10"
keywords = ["hangman", "game", "word game", "pygame", "text layout"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gallows = "gallows.game:main"
gallows-input-box = "gallows.input_box:main"
gallows-text-box = "gallows.text_layout:main"

[tool.hatch.build.targets.wheel]
packages = ["gallows"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
