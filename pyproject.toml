[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agentctl"
version = "0.1.0"
description = "Control plane command-line tool for managing agents and tasks"
requires-python = ">=3.11"
keywords = ["agents", "cli", "control-plane", "tasks", "configuration"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "tomli-w>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
agentctl = "agentctl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["agentctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
