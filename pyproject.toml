[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adocgraph"
version = "0.1.0"
description = "AsciiDoc semantic graph node types, diagnostics, and attribute entry and header line parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["asciidoc", "asg", "markup", "attributes", "header"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adocgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
