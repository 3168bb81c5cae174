[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashkit"
version = "0.1.0"
description = "Pure-Python SHA-256, SHA-512, RIPEMD-160 and Keccak-256 hashing helpers, with fixed-size and four-input batch variants"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["hash", "sha256", "sha512", "ripemd160", "keccak", "hmac", "pbkdf2"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hashkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
