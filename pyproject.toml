[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "h3ijk"
version = "0.1.0"
description = "Hexagonal IJK coordinate systems and icosahedral face projections for H3-style geospatial indexing"
requires-python = ">=3.10"
dependencies = []
keywords = ["h3", "hexagon", "geospatial", "gis", "icosahedron", "coordinates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["h3ijk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
