[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bikekit"
version = "0.1.0"
description = "Hashing, pseudorandom functions and sampling primitives of the BIKE key encapsulation mechanism"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["bike", "kem", "post-quantum", "shake256", "sha3", "sha384", "aes", "prf", "sampling"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bikekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
