[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goodmorning"
version = "0.1.0"
description = "A small WSGI web app that serves random writing-prompt words by category from a SQLite store"
requires-python = ">=3.10"
dependencies = []
keywords = ["writing prompts", "words", "wsgi", "sqlite", "random"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
goodmorning = "goodmorning.server:main"

[tool.hatch.build.targets.wheel]
packages = ["goodmorning"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
