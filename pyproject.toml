[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microui"
version = "0.1.0"
description = "Immediate-mode UI toolkit core with a terminal cell renderer and metaball effects"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ui",
    "immediate-mode",
    "tui",
    "terminal",
    "layout",
    "metaballs",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
microui-serve = "microui.serve:main"

[tool.hatch.build.targets.wheel]
packages = ["microui"]

[tool.hatch.build.targets.sdist]
include = ["microui", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
