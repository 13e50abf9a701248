[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primeprobe"
version = "0.1.0"
description = "An open-addressing hash table with double hashing and prime-sized buckets"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "open addressing", "double hashing", "primes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
primeprobe = "primeprobe.table:main"

[tool.hatch.build.targets.wheel]
packages = ["primeprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
