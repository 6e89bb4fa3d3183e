[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blaze"
version = "0.1.0"
description = "Parser, semantic passes and runtime library for the Blaze systems language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "parser", "type-checker", "borrow-checker", "language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
