[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "themer"
version = "0.1.0"
description = "Load colour palettes and render them into application config text through Jinja templates"
requires-python = ">=3.11"
keywords = ["theme", "palette", "base16", "colors", "templates", "dotfiles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "jinja2",
    "tomli-w",
    "platformdirs",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["themer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
