[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recipebook"
version = "0.1.0"
description = "A personal recipe book: in-memory recipe, ingredient and user models with a step-by-step terminal entry form"
requires-python = ">=3.10"
dependencies = []
keywords = ["recipes", "cooking", "recipe-book", "kitchen", "forms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
recipe-book = "recipebook.app:main"

[tool.hatch.build.targets.wheel]
packages = ["recipebook"]

[tool.pytest.ini_options]
addopts = "-ra"
