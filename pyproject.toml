[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "giallo"
version = "0.1.0"
description = "TextMate-style scopes, theme selectors, theme compilation and CSS generation for code highlighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["syntax-highlighting", "textmate", "themes", "scopes", "css"]
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
    "Topic :: Text Processing :: Markup",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["giallo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
