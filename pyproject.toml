[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nerdrules"
version = "0.1.0"
description = "Weighted implication rules over literals, with promotion, demotion and Prudens JS output"
requires-python = ">=3.10"
dependencies = []
keywords = ["rules", "knowledge representation", "machine learning", "prudens", "logic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nerdrules"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
