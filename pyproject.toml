[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynmig"
version = "0.1.0"
description = "Terminal UI components for comparing and mapping entity fields between two CRM environments"
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "terminal", "migration", "field-mapping", "crm", "widgets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dynmig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
