[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "akui"
version = "0.1.0"
description = "A small retained-mode widget toolkit: windows, forms, buttons, spin boxes, signals and input tracking for a two-screen handheld menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "widgets", "signals", "slots", "window-manager", "handheld"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["akui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
