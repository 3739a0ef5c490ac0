[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchengine"
version = "1.0.0"
description = "A small local full-text search engine driven by JSON config, request and answer files"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "inverted-index", "full-text", "ranking", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchengine = "searchengine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["searchengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
