[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weightgov"
version = "0.1.0"
description = "Weighted membership groups with height snapshots, voting thresholds, proposal deposits and multisig settings, modelled in memory"
requires-python = ">=3.10"
dependencies = []
keywords = ["governance", "voting", "threshold", "quorum", "membership", "snapshot", "multisig"]
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
    "Topic :: Office/Business :: Groupware",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["weightgov"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
