[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonnetstd"
version = "0.5.0"
description = "Jsonnet standard library functions and manifest formats that work on plain Python values"
requires-python = ">=3.10"
dependencies = ["pyyaml"]
keywords = ["jsonnet", "stdlib", "yaml", "toml", "ini", "xml", "manifest", "configuration"]
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
packages = ["jsonnetstd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
