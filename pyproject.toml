[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oaspec"
version = "0.1.0"
description = "Strictly typed parser for OpenAPI specification documents"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["openapi", "swagger", "schema", "parser", "yaml"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oaspec = "oaspec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oaspec"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
