[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pallas_poseidon"
version = "0.1.0"
description = "Pallas base-field arithmetic and the constants of the Poseidon P128Pow5T3 instance over it"
requires-python = ">=3.10"
dependencies = []
keywords = ["poseidon", "pallas", "pasta", "finite-field", "round-constants", "mds"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["pallas_poseidon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
