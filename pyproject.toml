[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotes"
version = "0.1.0"
description = "A collection of classic algorithms, data structures and small console games"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "dynamic-programming",
    "matrices",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algonotes-games = "algonotes.games:main"

[tool.hatch.build.targets.wheel]
packages = ["algonotes"]

[tool.pytest.ini_options]
addopts = "-ra"
