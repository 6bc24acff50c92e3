[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radbuilder"
version = "0.1.10"
description = "Lay out egui-style user interfaces from a widget palette and generate the matching UI code"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "rad", "layout", "designer", "code-generation", "egui"]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
radbuilder = "radbuilder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["radbuilder"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
