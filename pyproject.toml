[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpnotebook"
version = "0.1.0"
description = "Competitive-programming algorithms and data structures: number theory, trees, geometry, strings, graphs and flows."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "segment-tree",
    "fft",
    "max-flow",
    "geometry",
    "suffix-array",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
cpnotebook-pathtree = "cpnotebook.persistent_hld:main"

[tool.hatch.build.targets.wheel]
packages = ["cpnotebook"]

[tool.pytest.ini_options]
addopts = "-ra"
