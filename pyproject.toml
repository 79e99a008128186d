[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "citygen"
version = "0.1.0"
description = "Procedural city road networks from stochastic L-systems and turtle graphics"
requires-python = ">=3.10"
keywords = ["l-system", "procedural-generation", "city", "road-network", "turtle-graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
citygen = "citygen.app:main"

[tool.hatch.build.targets.wheel]
packages = ["citygen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
