[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmplkit"
version = "0.1.0"
description = "Building blocks of a small Jinja-style template engine: tokenizer, map keys, escaping and test functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["template", "jinja", "lexer", "tokenizer", "escaping"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tmplkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
