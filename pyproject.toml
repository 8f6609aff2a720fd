[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enumkit"
version = "0.1.0"
description = "Describe enums as data, then derive string conversion, parsing, iteration, messages, properties, counts and discriminant enums from them."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "enum",
    "enumeration",
    "variants",
    "serialization",
    "parsing",
    "case-conversion",
    "derive",
    "discriminants",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enumkit"]

[tool.hatch.build.targets.sdist]
include = ["enumkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
