[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galaxysim"
version = "0.1.0"
description = "Plummer and Hernquist density models, enclosed-mass integration and star sampling for spherical stellar systems"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "galaxy", "plummer", "hernquist", "rejection-sampling", "simpson"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["galaxysim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
