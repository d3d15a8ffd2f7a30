[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mockos"
version = "0.1.0"
description = "An in-memory mock file system with text files, password-protected files, a file factory and shell-style commands."
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "in-memory", "mock", "commands", "visitor", "proxy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mockos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
