[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "invindex"
version = "0.1.0"
description = "Inverted index of a text collection in a hash table and a Patricia tree, with TF-IDF ranked search"
requires-python = ">=3.10"
dependencies = []
keywords = ["inverted index", "patricia tree", "hash table", "tf-idf", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
invindex = "invindex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["invindex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
