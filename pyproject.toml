[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numpatterns"
version = "0.1.0"
description = "Small integer exercises and printable text patterns: primes, base conversion, factorials, triangles, pyramids and diamonds."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "patterns", "primes", "binary", "factorial", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numpatterns = "numpatterns.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numpatterns"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
