[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "verconstraint"
version = "1.0.0"
description = "Parse, compare and sort version strings and check them against constraints such as '>= 1.0, < 2.0' or '~> 1.2'."
requires-python = ">=3.10"
dependencies = []
keywords = ["version", "semver", "constraint", "comparison", "pessimistic"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
packages = ["verconstraint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
