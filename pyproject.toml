[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ridgelinalg"
version = "0.1.0"
description = "Small dense linear algebra toolkit with Gaussian elimination, conjugate gradient and ridge regression"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear algebra",
    "matrix",
    "vector",
    "gaussian elimination",
    "conjugate gradient",
    "pseudo-inverse",
    "ridge regression",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
ridgelinalg-predict = "ridgelinalg.regression:main"
ridgelinalg-demo = "ridgelinalg.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["ridgelinalg"]

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
