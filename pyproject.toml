[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rescuekit"
version = "0.1.0"
description = "Recursive search for disaster supply placement, with shift modelling and helpers to lay out and display results"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "backtracking",
    "dominating-set",
    "recursion",
    "graph",
    "scheduling",
    "disaster-planning",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rescuekit-disaster = "rescuekit.disaster_view:main"

[tool.hatch.build.targets.wheel]
packages = ["rescuekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["rescuekit"]
