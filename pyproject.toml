[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rocketlab"
version = "0.1.0"
description = "Model-rocket vehicle description, input validation, weather lookup and design presets"
requires-python = ">=3.10"
dependencies = []
keywords = ["rocket", "model rocket", "vehicle", "validation", "weather", "presets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rocketlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
