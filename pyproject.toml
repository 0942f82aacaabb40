[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nyx"
version = "0.1.0"
description = "Core of a modal text editor: text buffer with grouped undo, jump list and git diff gutter markers."
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "vim", "text-buffer", "undo", "jump-list", "git"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nyx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
