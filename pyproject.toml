[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfcommand"
version = "0.1.0"
description = "Build Terraform CLI command lines, check version compatibility and parse Terraform's output"
requires-python = ">=3.10"
dependencies = []
keywords = ["terraform", "cli", "infrastructure", "command-line", "automation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tfcommand"]

[tool.pytest.ini_options]
addopts = "-ra"
