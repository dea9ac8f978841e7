[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cliconf"
version = "0.1.0"
description = "Alternate input sources (mappings, JSON, YAML, TOML) for command-line flag values, plus argument and command-category helpers."
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = ["cli", "flags", "configuration", "yaml", "toml", "json", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cliconf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
